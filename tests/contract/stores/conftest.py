"""Fixtures providing contract and student stores for each backend."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from kaddem.adapters.stores import (
    InMemoryContratStore,
    InMemoryEtudiantStore,
    InMemoryStoreData,
    SqlAlchemyContratStore,
    SqlAlchemyEtudiantStore,
)
from kaddem.interfaces.stores import ContratStore, EtudiantStore

# pylint: disable=redefined-outer-name


@dataclass
class StorePair:
    """Contract and student stores sharing one backend."""

    contrats: ContratStore
    etudiants: EtudiantStore


@pytest.fixture(params=["memory", "sqlalchemy"])
def stores(request: pytest.FixtureRequest) -> Iterator[StorePair]:
    """Both stores over the same in-memory data or SQLite connection."""
    match request.param:
        case "memory":
            data = InMemoryStoreData()
            yield StorePair(InMemoryContratStore(data), InMemoryEtudiantStore(data))
        case "sqlalchemy":
            engine = request.getfixturevalue("sqlite_engine_memory")
            with engine.connect() as conn:
                yield StorePair(
                    SqlAlchemyContratStore(conn), SqlAlchemyEtudiantStore(conn)
                )
        case _:
            raise ValueError(f"Unknown store backend: {request.param}")


@pytest.fixture
def contrat_store(stores: StorePair) -> ContratStore:
    """The contract store under test."""
    return stores.contrats


@pytest.fixture
def etudiant_store(stores: StorePair) -> EtudiantStore:
    """The student store under test."""
    return stores.etudiants
