"""Contract and student store adapters."""

from .memory import InMemoryContratStore, InMemoryEtudiantStore, InMemoryStoreData
from .sqlalchemy_adapters import SqlAlchemyContratStore, SqlAlchemyEtudiantStore

__all__ = [
    "InMemoryStoreData",
    "InMemoryContratStore",
    "InMemoryEtudiantStore",
    "SqlAlchemyContratStore",
    "SqlAlchemyEtudiantStore",
]
