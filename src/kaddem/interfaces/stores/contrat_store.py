"""Interface for the contract store."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import datetime

    from kaddem.domain import Contrat


class ContratStore(abc.ABC):
    """Collection-like persistence for `Contrat` entities.

    The store owns identity: it assigns `contrat_id` on first save. It is also
    the owner of the contract-student relationship, persisted as the
    contract's reference to its student.
    """

    @abc.abstractmethod
    def find_all(self) -> list[Contrat]:
        """Return every stored contract, ordered by ascending id."""

    @abc.abstractmethod
    def find_active_overlapping(
        self, start: datetime.date, end: datetime.date
    ) -> list[Contrat]:
        """Return non-archived contracts whose validity intersects [start, end].

        Both bounds are inclusive. Results are ordered by ascending id.
        """

    @abc.abstractmethod
    def find_by_id(self, contrat_id: int) -> Contrat | None:
        """Look up a contract by id.

        Args:
            contrat_id: The id of the contract.

        Returns:
            The contract if found, otherwise None.
        """

    @abc.abstractmethod
    def get(self, contrat_id: int) -> Contrat:
        """Look up a contract by id, failing if it does not exist.

        Args:
            contrat_id: The id of the contract.

        Returns:
            The contract.

        Raises:
            ContratNotFoundError: If no contract has that id.
        """

    @abc.abstractmethod
    def save(self, contrat: Contrat) -> Contrat:
        """Insert or update a contract.

        A contract without an id is inserted and receives a new id. A contract
        with an id replaces the stored record with that id, or is inserted
        under that id if there is none.

        Args:
            contrat: The contract to persist.

        Returns:
            The persisted contract, with `contrat_id` populated.

        Raises:
            InvalidPeriodError: If the contract starts after it ends. Nothing
                is written and `contrat_id` is left unchanged.
            UnsavedEtudiantError: If `contrat.etudiant` has no id yet.

        Note:
            Only the id of `contrat.etudiant` is persisted; the student itself
            must already be stored.
        """

    @abc.abstractmethod
    def delete(self, contrat: Contrat) -> None:
        """Delete a stored contract.

        Args:
            contrat: The contract to delete, as returned by a lookup.
        """
