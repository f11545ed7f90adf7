"""Entities of the contract management domain.

`Contrat` and `Etudiant` form a bidirectional one-to-many relationship:
a contract is held by at most one student, and a student holds any number of
contracts. The contract side owns the relationship; `Contrat.assign_to()` keeps
the inverse collection on the student in step.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidPeriodError


class Specialite(Enum):
    """Enumeration of contract specialties."""

    IA = "IA"
    RESEAUX = "RESEAUX"
    CLOUD = "CLOUD"
    SECURITE = "SECURITE"


@dataclass(slots=True)
class Etudiant:
    """A student, identified by its name pair.

    Conventions:
      - `etudiant_id` is assigned by the store, None until first saved.
      - `contrats` is the inverse side of `Contrat.etudiant`. It is left out of
        equality and repr so the object graph never recurses.
    """

    last_name: str
    first_name: str
    etudiant_id: int | None = None
    contrats: list[Contrat] = field(default_factory=list, compare=False, repr=False)

    @property
    def full_name(self) -> str:
        """Return "<last_name> <first_name>"."""
        return f"{self.last_name} {self.first_name}"

    def add_contrat(self, contrat: Contrat) -> None:
        """Add a contract to this student, replacing any entry for the same contract."""
        self.discard_contrat(contrat)
        self.contrats.append(contrat)

    def discard_contrat(self, contrat: Contrat) -> None:
        """Remove a contract from this student if present."""
        self.contrats[:] = [c for c in self.contrats if not c.same_as(contrat)]


@dataclass(slots=True)
class Contrat:
    """A student contract bounded by a validity period.

    Conventions:
      - `contrat_id` is assigned by the store, None until first saved, and
        never changes afterwards.
      - `start_date` must not be after `end_date`.
      - `etudiant` is None until the contract is assigned to a student.
    """

    start_date: datetime.date
    end_date: datetime.date
    specialty: Specialite
    archived: bool = False
    etudiant: Etudiant | None = None
    contrat_id: int | None = None

    def __post_init__(self) -> None:
        self.check_period()

    def check_period(self) -> None:
        """Raise `InvalidPeriodError` if `start_date` is after `end_date`.

        Called on construction and again before every save, since the dates
        are mutable.
        """
        if self.start_date > self.end_date:
            raise InvalidPeriodError(self.start_date, self.end_date)

    def same_as(self, other: Contrat) -> bool:
        """Return True if `other` is this contract (by identity, or by id once stored)."""
        if other is self:
            return True
        return self.contrat_id is not None and self.contrat_id == other.contrat_id

    def assign_to(self, etudiant: Etudiant) -> None:
        """Assign this contract to a student, updating both sides of the link.

        If the contract was held by another student, it is removed from that
        student's contracts first.
        """
        previous = self.etudiant
        if previous is not None and previous is not etudiant:
            previous.discard_contrat(self)
        self.etudiant = etudiant
        etudiant.add_contrat(self)

    def overlaps(self, start: datetime.date, end: datetime.date) -> bool:
        """Return True if the validity period intersects [start, end] (inclusive)."""
        return self.start_date <= end and self.end_date >= start

    def is_expired(self, today: datetime.date) -> bool:
        """Return True if the contract ended before `today`."""
        return self.end_date < today

    def days_left(self, today: datetime.date) -> int:
        """Number of days from `today` until the end of the contract."""
        return (self.end_date - today).days
