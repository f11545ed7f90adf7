"""Fake implementations for testing the contract service."""

from __future__ import annotations

from typing import Any

from kaddem.adapters.stores import (
    InMemoryContratStore,
    InMemoryEtudiantStore,
    InMemoryStoreData,
)
from kaddem.domain import Contrat, Etudiant
from kaddem.interfaces.unit_of_work import AbstractUnitOfWork


class CallRecorder:
    """Mixin recording each public store call as ``(method, args)``."""

    calls: list[tuple[str, tuple[Any, ...]]]

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        """Return the argument tuples of every call to `method`, in order."""
        return [args for name, args in self.calls if name == method]


class RecordingContratStore(CallRecorder, InMemoryContratStore):
    """In-memory contract store that records the calls made to it."""

    def __init__(self, data: InMemoryStoreData) -> None:
        super().__init__(data)
        self.calls = []

    def find_all(self):
        self._record("find_all")
        return super().find_all()

    def find_active_overlapping(self, start, end):
        self._record("find_active_overlapping", start, end)
        return super().find_active_overlapping(start, end)

    def find_by_id(self, contrat_id):
        self._record("find_by_id", contrat_id)
        return super().find_by_id(contrat_id)

    def get(self, contrat_id):
        self._record("get", contrat_id)
        return super().get(contrat_id)

    def save(self, contrat):
        self._record("save", contrat)
        return super().save(contrat)

    def delete(self, contrat):
        self._record("delete", contrat)
        super().delete(contrat)


class RecordingEtudiantStore(CallRecorder, InMemoryEtudiantStore):
    """In-memory student store that records the calls made to it."""

    def __init__(self, data: InMemoryStoreData) -> None:
        super().__init__(data)
        self.calls = []

    def find_by_name(self, last_name, first_name):
        self._record("find_by_name", last_name, first_name)
        return super().find_by_name(last_name, first_name)

    def find_by_id(self, etudiant_id):
        self._record("find_by_id", etudiant_id)
        return super().find_by_id(etudiant_id)

    def save(self, etudiant):
        self._record("save", etudiant)
        return super().save(etudiant)


class BrokenContratStore(InMemoryContratStore):
    """Contract store whose every lookup fails like a lost connection."""

    def find_all(self):
        raise ConnectionError("store unavailable")

    def find_by_id(self, contrat_id):
        raise ConnectionError("store unavailable")


class FakeUoW(AbstractUnitOfWork):
    """A fake unit of work for testing purposes."""

    def __init__(self, data: InMemoryStoreData | None = None):
        self.data = data if data is not None else InMemoryStoreData()
        self.contrats = RecordingContratStore(self.data)
        self.etudiants = RecordingEtudiantStore(self.data)
        self.committed = False
        self.rollbacks = 0

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rollbacks += 1


def seed(uow: FakeUoW, *entities: Contrat | Etudiant) -> None:
    """Store entities behind the unit of work without recording any call.

    Students must come before the contracts assigned to them.
    """
    contrats = InMemoryContratStore(uow.data)
    etudiants = InMemoryEtudiantStore(uow.data)
    for entity in entities:
        if isinstance(entity, Contrat):
            contrats.save(entity)
        else:
            etudiants.save(entity)
