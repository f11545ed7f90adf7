"""In-memory contract and student stores.

Both stores operate on a shared `InMemoryStoreData`, whose records mirror the
rows of the SQL tables: a contract record references its student by id only,
and a student's contracts are derived from those references.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from kaddem.domain import Contrat, Etudiant
from kaddem.interfaces.stores import ContratNotFoundError, ContratStore, EtudiantStore

from .mapping import (
    contrat_from_row,
    contrat_values,
    etudiant_from_row,
    etudiant_values,
    etudiant_with_contrats,
)

# pylint: disable=consider-using-assignment-expr


@dataclass(frozen=True, slots=True)
class ContratRecord:
    """Stored form of a contract."""

    contrat_id: int
    start_date: datetime.date
    end_date: datetime.date
    specialty: str
    archived: bool
    etudiant_id: int | None


@dataclass(frozen=True, slots=True)
class EtudiantRecord:
    """Stored form of a student."""

    etudiant_id: int
    last_name: str
    first_name: str


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared in-memory backing store for the in-memory store adapters.

    A single shared instance should be passed to both stores so that student
    lookups see the contracts linked to them. Each mapping is keyed by id.
    """

    contrats: dict[int, ContratRecord] = field(default_factory=dict)
    etudiants: dict[int, EtudiantRecord] = field(default_factory=dict)

    def contrats_of(self, etudiant_id: int) -> list[ContratRecord]:
        """Return the contract records referencing a student, by ascending id."""
        return [
            record
            for _, record in sorted(self.contrats.items())
            if record.etudiant_id == etudiant_id
        ]


def _next_id(bucket: dict[int, object]) -> int:
    return max(bucket, default=0) + 1


class InMemoryContratStore(ContratStore):
    """In-memory implementation of the ContratStore interface.

    Intended for testing and development; nothing is persisted.
    """

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def find_all(self) -> list[Contrat]:
        return [self._load(record) for _, record in sorted(self._data.contrats.items())]

    def find_active_overlapping(
        self, start: datetime.date, end: datetime.date
    ) -> list[Contrat]:
        active = (
            self._load(record)
            for _, record in sorted(self._data.contrats.items())
            if not record.archived
        )
        return [c for c in active if c.overlaps(start, end)]

    def find_by_id(self, contrat_id: int) -> Contrat | None:
        record = self._data.contrats.get(contrat_id)
        if record is None:
            return None
        return self._load(record)

    def get(self, contrat_id: int) -> Contrat:
        if (contrat := self.find_by_id(contrat_id)) is None:
            raise ContratNotFoundError(contrat_id)
        return contrat

    def save(self, contrat: Contrat) -> Contrat:
        values = contrat_values(contrat)
        if contrat.contrat_id is None:
            contrat.contrat_id = _next_id(self._data.contrats)
        self._data.contrats[contrat.contrat_id] = ContratRecord(
            contrat_id=contrat.contrat_id, **values
        )
        return contrat

    def delete(self, contrat: Contrat) -> None:
        if contrat.contrat_id is not None:
            self._data.contrats.pop(contrat.contrat_id, None)

    def _load(self, record: ContratRecord) -> Contrat:
        etudiant = None
        if record.etudiant_id is not None:
            if etudiant_record := self._data.etudiants.get(record.etudiant_id):
                etudiant = etudiant_from_row(etudiant_record)
        return contrat_from_row(record, etudiant)


class InMemoryEtudiantStore(EtudiantStore):
    """In-memory implementation of the EtudiantStore interface.

    Intended for testing and development; nothing is persisted.
    """

    def __init__(self, data: InMemoryStoreData) -> None:
        self._data = data

    def find_by_name(self, last_name: str, first_name: str) -> Etudiant | None:
        for _, record in sorted(self._data.etudiants.items()):
            if record.last_name == last_name and record.first_name == first_name:
                return self._load(record)
        return None

    def find_by_id(self, etudiant_id: int) -> Etudiant | None:
        record = self._data.etudiants.get(etudiant_id)
        if record is None:
            return None
        return self._load(record)

    def save(self, etudiant: Etudiant) -> Etudiant:
        if etudiant.etudiant_id is None:
            etudiant.etudiant_id = _next_id(self._data.etudiants)
        self._data.etudiants[etudiant.etudiant_id] = EtudiantRecord(
            etudiant_id=etudiant.etudiant_id, **etudiant_values(etudiant)
        )
        return etudiant

    def _load(self, record: EtudiantRecord) -> Etudiant:
        return etudiant_with_contrats(
            record, self._data.contrats_of(record.etudiant_id)
        )
