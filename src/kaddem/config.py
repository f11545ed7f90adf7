"""Runtime configuration for KADDEM.

The only setting is the database URL, read from ``KADDEM_DB_URL``. Alembic is
configured programmatically from it; there is no ``alembic.ini``.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "KADDEM_DB_URL"
MIGRATIONS_PACKAGE = "kaddem.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """Raised when ``KADDEM_DB_URL`` is unset or empty."""


def get_db_url() -> str:
    """Return the value of ``KADDEM_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    url = os.environ.get(DB_URL_ENV_VAR)
    if not url:
        raise DatabaseUrlNotSetError
    return url


def migrations_location() -> str:
    """Filesystem path of the packaged Alembic environment."""
    return str(files(MIGRATIONS_PACKAGE))


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build the Alembic `Config` for KADDEM's migrations.

    Args:
        db_url: Database URL. May be None for commands that only read the
            migration scripts (``heads``, ``history``).
        stdout: Stream receiving Alembic's status output.

    Returns:
        Config: ``script_location`` set to `migrations_location()` and, when
        given, ``sqlalchemy.url`` set to `db_url`.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", migrations_location())
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg
