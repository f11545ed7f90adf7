"""SQLAlchemy-backed Unit of Work for KADDEM."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kaddem.adapters.stores import SqlAlchemyContratStore, SqlAlchemyEtudiantStore
from kaddem.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """Unit of work over one SQLAlchemy `Connection` per ``with`` block.

    Both stores share the connection, so a contract and the student it
    references are written in the same transaction. The connection is
    returned to the engine's pool when the block exits.
    """

    connection: Connection

    def __init__(self, engine: Engine):
        self.engine = engine

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self.connection = self.engine.connect()
        self.contrats = SqlAlchemyContratStore(self.connection)
        self.etudiants = SqlAlchemyEtudiantStore(self.connection)
        super().__enter__()
        return self

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
