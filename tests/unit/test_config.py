"""Unit tests for `kaddem.config`."""

from pathlib import Path

import pytest

from kaddem import config


def test_get_db_url_reads_environment(monkeypatch):
    """The URL comes from KADDEM_DB_URL."""
    monkeypatch.setenv(config.DB_URL_ENV_VAR, "sqlite:///kaddem.db")
    assert config.get_db_url() == "sqlite:///kaddem.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_unset(monkeypatch, value):
    """An unset or empty variable raises DatabaseUrlNotSetError."""
    if value is None:
        monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(config.DB_URL_ENV_VAR, value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_alembic_config_points_at_packaged_scripts():
    """script_location is the packaged migrations directory."""
    cfg = config.build_alembic_config("sqlite:///kaddem.db")
    location = Path(cfg.get_main_option("script_location"))
    assert (location / "env.py").is_file()
    assert (location / "versions").is_dir()
    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///kaddem.db"


def test_alembic_config_without_url():
    """No URL is set when none is given."""
    cfg = config.build_alembic_config()
    assert cfg.get_main_option("sqlalchemy.url") is None
