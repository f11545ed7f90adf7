"""``kaddem db``: schema management over the packaged Alembic migrations.

Only forward operations are exposed (inspect revisions, upgrade to head);
there is no ``downgrade`` or ``stamp``. Alembic's own output goes to stdout
while KADDEM's notices go to stderr, so ``kaddem db upgrade --sql > ddl.sql``
captures only the DDL. Every command except ``heads`` and plain ``history``
needs ``KADDEM_DB_URL``.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from kaddem import config
from kaddem.adapters.db.engine import make_engine

from .helpers import error, resolve_db_url, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

UPGRADE_SCHEMA_WARNING = (
    "The contract and student tables are about to be migrated to the latest revision.\n"
    "Back up the database first if it holds data you care about."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Bring the schema up to date with 'kaddem db upgrade'."

UPGRADE_DONE = "Schema is at the latest revision."

_verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@_verbose_option
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=resolve_db_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@_verbose_option
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@_verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    cfg = (
        config.build_alembic_config(db_url=resolve_db_url(), stdout=sys.stdout)
        if indicate_current
        else config.build_alembic_config(stdout=sys.stdout)
    )
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = resolve_db_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success(UPGRADE_DONE)


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    return ScriptDirectory.from_config(cfg).get_current_head()


def migration_status(current_rev: str | None, head_rev: str | None) -> MigrationStatus:
    """Classify the schema given its current and head revisions."""
    if current_rev is None:
        return MigrationStatus.UNINITIALIZED
    if current_rev == head_rev:
        return MigrationStatus.UP_TO_DATE
    return MigrationStatus.OUT_OF_DATE


def schema_state(engine: Engine, url: str) -> tuple[str | None, MigrationStatus]:
    """Return the current revision of the database behind `engine` and its status."""
    rev = _get_current_revision(engine)
    head = _get_head_revision(config.build_alembic_config(db_url=url))
    return rev, migration_status(rev, head)


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        url = resolve_db_url()
    except click.ClickException as e:
        error("No database configured")
        click.echo(e.format_message())
        return

    engine = make_engine(url)
    success("Database configured")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")

    try:
        rev, schema_status = schema_state(engine, url)
    finally:
        engine.dispose()

    message = (
        f"{rev} ({schema_status.value})" if rev is not None else schema_status.value
    )
    click.echo(f"Schema  : {message}")

    if schema_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
