"""Contract service: CRUD on contracts and their assignment to students."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from kaddem.domain.errors import DomainError, InvalidPeriodError
from kaddem.interfaces.stores import (
    ContratNotFoundError,
    EtudiantNotFoundError,
    StoreError,
)

if TYPE_CHECKING:
    from kaddem.domain import Contrat
    from kaddem.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY_WARNING_DAYS = 15


class ContratService:
    """Application service for `Contrat` entities.

    Every operation runs in its own unit of work: it fetches what it needs
    (failing with a `NotFoundError` when a lookup is empty), mutates in memory,
    and delegates persistence to the unit of work's stores. Write operations
    commit; store failures propagate unchanged to the caller.

    Args:
        uow: Unit of work exposing the `contrats` and `etudiants` stores.
        expiry_warning_days: Contracts ending within this many days are
            reported by `archive_expired_contrats()`.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        expiry_warning_days: int = DEFAULT_EXPIRY_WARNING_DAYS,
    ) -> None:
        self.uow = uow
        self.expiry_warning_days = expiry_warning_days

    # --- CRUD ---

    def retrieve_all_contrats(self) -> list[Contrat]:
        """Return every stored contract."""
        with self._transaction("retrieve_all_contrats") as uow:
            contrats = uow.contrats.find_all()
        logger.debug("Retrieved %d contrats", len(contrats))
        return contrats

    def add_contrat(self, contrat: Contrat) -> Contrat:
        """Persist a new contract and return it with its store-assigned id.

        Raises:
            InvalidPeriodError: If the contract starts after it ends; nothing
                is saved.
        """
        contrat.check_period()
        with self._transaction("add_contrat") as uow:
            saved = uow.contrats.save(contrat)
            uow.commit()
        logger.info("Added contrat %s", saved.contrat_id)
        return saved

    def update_contrat(self, contrat: Contrat) -> Contrat:
        """Persist all fields of an existing contract (upsert).

        Raises:
            InvalidPeriodError: If the dates were changed so that the contract
                starts after it ends; nothing is saved.
        """
        contrat.check_period()
        with self._transaction("update_contrat") as uow:
            saved = uow.contrats.save(contrat)
            uow.commit()
        logger.info("Updated contrat %s", saved.contrat_id)
        return saved

    def retrieve_contrat(self, contrat_id: int) -> Contrat:
        """Return the contract with the given id.

        Raises:
            ContratNotFoundError: If no contract has that id.
        """
        with self._transaction("retrieve_contrat") as uow:
            return self._find_contrat(uow, contrat_id)

    def remove_contrat(self, contrat_id: int) -> None:
        """Delete the contract with the given id.

        The contract is looked up first; nothing is deleted if it is missing.

        Raises:
            ContratNotFoundError: If no contract has that id.
        """
        with self._transaction("remove_contrat") as uow:
            contrat = self._find_contrat(uow, contrat_id)
            uow.contrats.delete(contrat)
            uow.commit()
        logger.info("Removed contrat %s", contrat_id)

    # --- association ---

    def affect_contrat_to_etudiant(
        self, contrat_id: int, last_name: str, first_name: str
    ) -> Contrat:
        """Assign a contract to the student with the given name pair.

        Both sides of the link are updated: the contract references the
        student, and the student's contracts include the contract.

        Args:
            contrat_id: Id of the contract to assign.
            last_name: Last name (nom) of the student.
            first_name: First name (prenom) of the student.

        Returns:
            The saved contract, referencing the student.

        Raises:
            EtudiantNotFoundError: If no student has that name pair.
            ContratNotFoundError: If no contract has that id.
        """
        with self._transaction("affect_contrat_to_etudiant") as uow:
            etudiant = uow.etudiants.find_by_name(last_name, first_name)
            if etudiant is None:
                logger.warning("Etudiant %s %s not found", last_name, first_name)
                raise EtudiantNotFoundError(last_name, first_name)
            contrat = uow.contrats.get(contrat_id)
            contrat.assign_to(etudiant)
            saved = uow.contrats.save(contrat)
            uow.commit()
        logger.info("Contrat %s assigned to %s", contrat_id, etudiant.full_name)
        return saved

    # --- reporting and maintenance ---

    def count_valid_contrats(self, start: datetime.date, end: datetime.date) -> int:
        """Count non-archived contracts whose validity overlaps [start, end].

        Raises:
            InvalidPeriodError: If `start` is after `end`.
        """
        if start > end:
            raise InvalidPeriodError(start, end)
        with self._transaction("count_valid_contrats") as uow:
            return len(uow.contrats.find_active_overlapping(start, end))

    def archive_expired_contrats(
        self, today: datetime.date | None = None
    ) -> list[Contrat]:
        """Archive every active contract that ended before `today`.

        Active contracts ending within `expiry_warning_days` are logged as
        warnings but left untouched.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            The contracts that were archived by this call.
        """
        today = today or datetime.date.today()
        archived: list[Contrat] = []
        with self._transaction("archive_expired_contrats") as uow:
            for contrat in uow.contrats.find_all():
                if contrat.archived:
                    continue
                if contrat.is_expired(today):
                    contrat.archived = True
                    archived.append(uow.contrats.save(contrat))
                elif contrat.days_left(today) <= self.expiry_warning_days:
                    logger.warning(
                        "Contrat %s ends in %d days (%s)",
                        contrat.contrat_id,
                        contrat.days_left(today),
                        contrat.end_date.isoformat(),
                    )
            if archived:
                uow.commit()
        logger.info("Archived %d expired contrats", len(archived))
        return archived

    # --- helpers ---

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[AbstractUnitOfWork]:
        """Run an operation inside the unit of work, logging store failures."""
        logger.debug("Running %s", operation)
        try:
            with self.uow:
                yield self.uow
        except (StoreError, DomainError):
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception("Store failure during %s", operation)
            raise

    @staticmethod
    def _find_contrat(uow: AbstractUnitOfWork, contrat_id: int) -> Contrat:
        if (contrat := uow.contrats.find_by_id(contrat_id)) is None:
            logger.warning("Contrat %s not found", contrat_id)
            raise ContratNotFoundError(contrat_id)
        return contrat
