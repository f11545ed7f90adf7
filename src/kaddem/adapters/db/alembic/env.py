"""Alembic environment for the KADDEM schema.

The database URL is taken from ``-x url=...``, then from the Alembic config
(as set by `kaddem.config.build_alembic_config`), then from ``KADDEM_DB_URL``.
Type and server-default drift are compared; SQLite runs in batch mode.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# registers the tables on `metadata`
import kaddem.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from kaddem.adapters.db.metadata import metadata

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def get_url() -> str:
    """Return the first URL found among ``-x url``, the config, and the environment."""
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option("sqlalchemy.url"),
        os.environ.get("KADDEM_DB_URL"),
    )
    for url in candidates:
        # ini placeholders such as %(here)s count as unset
        if url and "%(" not in url:  # pylint: disable=magic-value-comparison
            return url
    raise RuntimeError("Set KADDEM_DB_URL to your database URL.")


def run_migrations_offline() -> None:
    """Emit the migration SQL to Alembic's output buffer without connecting."""
    context.configure(
        url=get_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run the migrations over a fresh, unpooled connection."""
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
