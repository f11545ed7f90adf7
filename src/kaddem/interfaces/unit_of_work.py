"""Unit of Work interface for KADDEM.

A unit of work scopes one service operation: it hands out the contract and
student stores bound to a single transaction, and discards that transaction
unless `commit()` is called before the ``with`` block ends.
"""

from __future__ import annotations

import abc

from .stores import ContratStore, EtudiantStore


class AbstractUnitOfWork(abc.ABC):
    """Transactional scope exposing `contrats` and `etudiants`.

    Usage:
        ```py
        with uow:
            contrat = uow.contrats.get(1)
            ...
            uow.commit()
        ```
    """

    contrats: ContratStore
    etudiants: EtudiantStore

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        # after commit() this is a no-op
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Make every write since entering the block durable."""

    @abc.abstractmethod
    def rollback(self):
        """Discard every uncommitted write."""
