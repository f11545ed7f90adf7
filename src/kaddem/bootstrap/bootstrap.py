"""Bootstrap the contract service with its unit of work."""

from __future__ import annotations

from dataclasses import dataclass

from kaddem import config
from kaddem.adapters.db.engine import make_engine
from kaddem.adapters.unit_of_work import SqlAlchemyUnitOfWork
from kaddem.interfaces.unit_of_work import AbstractUnitOfWork
from kaddem.service_layer import ContratService


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    contrat_service: ContratService


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for the database at `url`."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_contrat_service(uow: AbstractUnitOfWork) -> ContratService:
    """Build a contract service with the injected unit of work."""
    return ContratService(uow)


def bootstrap(url: str | None = None) -> AppContainer:
    """Bootstrap the contract service against the configured database.

    Args:
        url: Database URL; defaults to `KADDEM_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and `KADDEM_DB_URL` is not set.
    """
    uow = build_uow(url or config.get_db_url())
    return AppContainer(contrat_service=build_contrat_service(uow))
