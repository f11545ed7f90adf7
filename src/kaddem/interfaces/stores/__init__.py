"""Store interfaces for contracts and students, and related errors."""

from .contrat_store import ContratStore
from .errors import (
    ContratNotFoundError,
    EtudiantNotFoundError,
    NotFoundError,
    StoreError,
    UnsavedEtudiantError,
)
from .etudiant_store import EtudiantStore

__all__ = [
    "ContratStore",
    "EtudiantStore",
    "StoreError",
    "NotFoundError",
    "ContratNotFoundError",
    "EtudiantNotFoundError",
    "UnsavedEtudiantError",
]
