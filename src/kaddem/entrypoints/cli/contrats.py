"""KADDEM contract commands.

Thin wrappers over `ContratService`: parse options, call the service, and
print results. Listings go to **stdout** (optionally as JSON); status lines go
to **stderr**.

The service is built from ``KADDEM_DB_URL`` unless one is already present in
the click context object under ``"contrat_service"``. The database schema must
be at the latest revision; otherwise the command stops and points at
``kaddem db upgrade``.
"""

from __future__ import annotations

import datetime
import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx

from kaddem.adapters.db.engine import make_engine
from kaddem.bootstrap import bootstrap
from kaddem.domain import Contrat, Specialite
from kaddem.domain.errors import DomainError
from kaddem.interfaces.stores import StoreError

from .db import UPGRADE_SCHEMA_INSTRUCTIONS, MigrationStatus, schema_state
from .helpers import resolve_db_url, success, warn

if TYPE_CHECKING:
    from kaddem.service_layer import ContratService

DATE = click.DateTime(formats=["%Y-%m-%d"])
SPECIALTY = click.Choice([s.value for s in Specialite], case_sensitive=False)


def _checked_db_url() -> str:
    """Return the database URL once its schema is known to be at head."""
    url = resolve_db_url()
    engine = make_engine(url)
    try:
        _, schema_status = schema_state(engine, url)
    finally:
        engine.dispose()
    if schema_status is not MigrationStatus.UP_TO_DATE:
        raise click.ClickException(
            f"Database schema is {schema_status.value}. {UPGRADE_SCHEMA_INSTRUCTIONS}"
        )
    return url


def _service(ctx: click.Context) -> ContratService:
    obj = ctx.ensure_object(dict)
    if (service := obj.get("contrat_service")) is None:
        service = obj["contrat_service"] = bootstrap(_checked_db_url()).contrat_service
    return service


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn store and domain failures into click errors (exit code 1)."""
    try:
        yield
    except (StoreError, DomainError) as e:
        raise click.ClickException(str(e)) from e


def _as_dict(contrat: Contrat) -> dict[str, Any]:
    etudiant = contrat.etudiant
    return {
        "contrat_id": contrat.contrat_id,
        "start_date": contrat.start_date.isoformat(),
        "end_date": contrat.end_date.isoformat(),
        "specialty": contrat.specialty.value,
        "archived": contrat.archived,
        "etudiant": etudiant.full_name if etudiant is not None else None,
    }


def _as_line(contrat: Contrat) -> str:
    etudiant = contrat.etudiant
    return (
        f"{contrat.contrat_id:>5}  {contrat.start_date}..{contrat.end_date}  "
        f"{contrat.specialty.value:<8}  "
        f"{'archived' if contrat.archived else 'active':<8}  "
        f"{etudiant.full_name if etudiant is not None else '-'}"
    )


def _as_date(value: datetime.datetime | None) -> datetime.date | None:
    return value.date() if value is not None else None


@click.group(cls=clickx.ExtraGroup)
def contrats() -> None:
    """Contract management commands."""


@contrats.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Print contracts as JSON.")
@click.pass_context
def list_contrats(ctx: click.Context, as_json: bool) -> None:
    """List all contracts."""
    with _reported_errors():
        all_contrats = _service(ctx).retrieve_all_contrats()
    if as_json:
        click.echo(json.dumps([_as_dict(c) for c in all_contrats], indent=2))
        return
    for contrat in all_contrats:
        click.echo(_as_line(contrat))


@contrats.command()
@click.argument("contrat_id", type=int)
@click.pass_context
def show(ctx: click.Context, contrat_id: int) -> None:
    """Show one contract as JSON."""
    with _reported_errors():
        contrat = _service(ctx).retrieve_contrat(contrat_id)
    click.echo(json.dumps(_as_dict(contrat), indent=2))


@contrats.command()
@click.option("--start", type=DATE, required=True, help="First day (YYYY-MM-DD).")
@click.option("--end", type=DATE, required=True, help="Last day (YYYY-MM-DD).")
@click.option("--specialty", type=SPECIALTY, required=True, help="Specialty.")
@click.option("--archived", is_flag=True, help="Create the contract archived.")
@click.pass_context
def add(
    ctx: click.Context,
    start: datetime.datetime,
    end: datetime.datetime,
    specialty: str,
    archived: bool,
) -> None:
    """Create a contract."""
    with _reported_errors():
        contrat = Contrat(
            start_date=start.date(),
            end_date=end.date(),
            specialty=Specialite(specialty.upper()),
            archived=archived,
        )
        saved = _service(ctx).add_contrat(contrat)
    success(f"Contrat {saved.contrat_id} added")
    click.echo(_as_line(saved))


@contrats.command()
@click.argument("contrat_id", type=int)
@click.option("--start", type=DATE, help="New first day (YYYY-MM-DD).")
@click.option("--end", type=DATE, help="New last day (YYYY-MM-DD).")
@click.option("--specialty", type=SPECIALTY, help="New specialty.")
@click.option("--archived/--active", default=None, help="Change the archive flag.")
@click.pass_context
def update(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    contrat_id: int,
    start: datetime.datetime | None,
    end: datetime.datetime | None,
    specialty: str | None,
    archived: bool | None,
) -> None:
    """Change fields of an existing contract."""
    service = _service(ctx)
    with _reported_errors():
        current = service.retrieve_contrat(contrat_id)
        changed = Contrat(
            contrat_id=current.contrat_id,
            start_date=_as_date(start) or current.start_date,
            end_date=_as_date(end) or current.end_date,
            specialty=(
                Specialite(specialty.upper()) if specialty else current.specialty
            ),
            archived=current.archived if archived is None else archived,
            etudiant=current.etudiant,
        )
        saved = service.update_contrat(changed)
    success(f"Contrat {saved.contrat_id} updated")
    click.echo(_as_line(saved))


@contrats.command()
@click.argument("contrat_id", type=int)
@click.argument("last_name")
@click.argument("first_name")
@click.pass_context
def affect(ctx: click.Context, contrat_id: int, last_name: str, first_name: str) -> None:
    """Assign a contract to the student LAST_NAME FIRST_NAME."""
    with _reported_errors():
        saved = _service(ctx).affect_contrat_to_etudiant(
            contrat_id, last_name, first_name
        )
    success(f"Contrat {contrat_id} assigned to {last_name} {first_name}")
    click.echo(_as_line(saved))


@contrats.command()
@click.argument("contrat_id", type=int)
@click.option("--yes", "-y", "force", is_flag=True, help="Remove without confirmation.")
@click.pass_context
def remove(ctx: click.Context, contrat_id: int, force: bool) -> None:
    """Delete a contract."""
    if not force:
        click.confirm(f"Remove contrat {contrat_id}?", abort=True)
    with _reported_errors():
        _service(ctx).remove_contrat(contrat_id)
    success(f"Contrat {contrat_id} removed")


@contrats.command()
@click.option("--start", type=DATE, required=True, help="Period start (YYYY-MM-DD).")
@click.option("--end", type=DATE, required=True, help="Period end (YYYY-MM-DD).")
@click.pass_context
def count(ctx: click.Context, start: datetime.datetime, end: datetime.datetime) -> None:
    """Count active contracts valid during a period."""
    with _reported_errors():
        click.echo(_service(ctx).count_valid_contrats(start.date(), end.date()))


@contrats.command()
@click.option(
    "--today",
    type=DATE,
    help="Reference date (YYYY-MM-DD); defaults to the current date.",
)
@click.pass_context
def archive(ctx: click.Context, today: datetime.datetime | None) -> None:
    """Archive contracts that have ended."""
    with _reported_errors():
        archived = _service(ctx).archive_expired_contrats(_as_date(today))
    if not archived:
        warn("No expired contracts to archive")
        return
    for contrat in archived:
        click.echo(_as_line(contrat))
    success(f"Archived {len(archived)} contrat(s)")
