"""Interface for the student store."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kaddem.domain import Etudiant


class EtudiantStore(abc.ABC):
    """Persistence for `Etudiant` entities.

    Students returned by this store carry their `contrats`, derived from the
    contracts that reference them.
    """

    @abc.abstractmethod
    def find_by_name(self, last_name: str, first_name: str) -> Etudiant | None:
        """Look up a student by exact (last name, first name) match.

        Args:
            last_name: The student's last name.
            first_name: The student's first name.

        Returns:
            The student if found, otherwise None. If several students share the
            name pair, the one with the lowest id is returned.
        """

    @abc.abstractmethod
    def find_by_id(self, etudiant_id: int) -> Etudiant | None:
        """Look up a student by id.

        Args:
            etudiant_id: The id of the student.

        Returns:
            The student if found, otherwise None.
        """

    @abc.abstractmethod
    def save(self, etudiant: Etudiant) -> Etudiant:
        """Insert or update a student's own fields.

        Contracts are not persisted through this method; they are linked from
        the contract side.

        Args:
            etudiant: The student to persist.

        Returns:
            The persisted student, with `etudiant_id` populated.
        """
