"""SQLAlchemy Core implementations of the contract and student stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from kaddem.adapters.db import schema
from kaddem.interfaces.stores import ContratNotFoundError, ContratStore, EtudiantStore

from .mapping import (
    contrat_from_row,
    contrat_values,
    etudiant_from_row,
    etudiant_values,
    etudiant_with_contrats,
)

if TYPE_CHECKING:
    import datetime

    from sqlalchemy.engine import Connection, Row
    from sqlalchemy.sql import Select

    from kaddem.domain import Contrat, Etudiant


class SqlAlchemyContratStore(ContratStore):
    """ContratStore backed by the `contrat` table.

    Contracts are loaded together with the name of their student (outer join);
    the student is returned without its contracts.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- lookups ---

    def find_all(self) -> list[Contrat]:
        stmt = self._select().order_by(schema.contrat.c.contrat_id)
        return [self._load(row) for row in self.connection.execute(stmt)]

    def find_active_overlapping(
        self, start: datetime.date, end: datetime.date
    ) -> list[Contrat]:
        c = schema.contrat.c
        stmt = (
            self._select()
            .where(c.archived.is_(False), c.start_date <= end, c.end_date >= start)
            .order_by(c.contrat_id)
        )
        return [self._load(row) for row in self.connection.execute(stmt)]

    def find_by_id(self, contrat_id: int) -> Contrat | None:
        stmt = self._select().where(schema.contrat.c.contrat_id == contrat_id)
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._load(row)

    def get(self, contrat_id: int) -> Contrat:
        if (contrat := self.find_by_id(contrat_id)) is None:
            raise ContratNotFoundError(contrat_id)
        return contrat

    # --- writes ---

    def save(self, contrat: Contrat) -> Contrat:
        values = contrat_values(contrat)

        if contrat.contrat_id is None:
            result = self.connection.execute(insert(schema.contrat).values(**values))
            contrat.contrat_id = int(result.inserted_primary_key[0])
            return contrat

        result = self.connection.execute(
            update(schema.contrat)
            .where(schema.contrat.c.contrat_id == contrat.contrat_id)
            .values(**values)
        )
        if result.rowcount == 0:
            # upsert: keep the caller's id
            self.connection.execute(
                insert(schema.contrat).values(contrat_id=contrat.contrat_id, **values)
            )
        return contrat

    def delete(self, contrat: Contrat) -> None:
        self.connection.execute(
            delete(schema.contrat).where(
                schema.contrat.c.contrat_id == contrat.contrat_id
            )
        )

    # --- helpers ---

    @staticmethod
    def _select() -> Select:
        return select(
            schema.contrat,
            schema.etudiant.c.last_name,
            schema.etudiant.c.first_name,
        ).select_from(schema.contrat.outerjoin(schema.etudiant))

    @staticmethod
    def _load(row: Row) -> Contrat:
        etudiant = etudiant_from_row(row) if row.etudiant_id is not None else None
        return contrat_from_row(row, etudiant)


class SqlAlchemyEtudiantStore(EtudiantStore):
    """EtudiantStore backed by the `etudiant` table.

    A student's contracts are read from `contrat.etudiant_id`.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def find_by_name(self, last_name: str, first_name: str) -> Etudiant | None:
        stmt = (
            select(schema.etudiant)
            .where(
                schema.etudiant.c.last_name == last_name,
                schema.etudiant.c.first_name == first_name,
            )
            .order_by(schema.etudiant.c.etudiant_id)
            .limit(1)
        )
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._load(row)

    def find_by_id(self, etudiant_id: int) -> Etudiant | None:
        stmt = select(schema.etudiant).where(
            schema.etudiant.c.etudiant_id == etudiant_id
        )
        if not (row := self.connection.execute(stmt).fetchone()):
            return None
        return self._load(row)

    def save(self, etudiant: Etudiant) -> Etudiant:
        values = etudiant_values(etudiant)

        if etudiant.etudiant_id is None:
            result = self.connection.execute(insert(schema.etudiant).values(**values))
            etudiant.etudiant_id = int(result.inserted_primary_key[0])
            return etudiant

        result = self.connection.execute(
            update(schema.etudiant)
            .where(schema.etudiant.c.etudiant_id == etudiant.etudiant_id)
            .values(**values)
        )
        if result.rowcount == 0:
            self.connection.execute(
                insert(schema.etudiant).values(
                    etudiant_id=etudiant.etudiant_id, **values
                )
            )
        return etudiant

    def _load(self, row: Row) -> Etudiant:
        stmt = (
            select(schema.contrat)
            .where(schema.contrat.c.etudiant_id == row.etudiant_id)
            .order_by(schema.contrat.c.contrat_id)
        )
        return etudiant_with_contrats(row, self.connection.execute(stmt))
