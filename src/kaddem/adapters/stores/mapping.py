"""Mapping between stored rows and domain entities.

Rows are any objects exposing the column names of the `contrat` and `etudiant`
tables as attributes: SQLAlchemy `Row`s and the in-memory records alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kaddem.domain import Contrat, Etudiant, Specialite
from kaddem.interfaces.stores.errors import UnsavedEtudiantError

if TYPE_CHECKING:
    from collections.abc import Iterable


def etudiant_from_row(row: Any) -> Etudiant:
    """Build a student (without contracts) from a stored row."""
    return Etudiant(
        last_name=row.last_name,
        first_name=row.first_name,
        etudiant_id=row.etudiant_id,
    )


def contrat_from_row(row: Any, etudiant: Etudiant | None = None) -> Contrat:
    """Build a contract from a stored row, linked to `etudiant` if given."""
    return Contrat(
        contrat_id=row.contrat_id,
        start_date=row.start_date,
        end_date=row.end_date,
        specialty=Specialite(row.specialty),
        archived=bool(row.archived),
        etudiant=etudiant,
    )


def etudiant_with_contrats(row: Any, contrat_rows: Iterable[Any]) -> Etudiant:
    """Build a student whose contracts point back to it."""
    etudiant = etudiant_from_row(row)
    for contrat_row in contrat_rows:
        etudiant.contrats.append(contrat_from_row(contrat_row, etudiant))
    return etudiant


def contrat_values(contrat: Contrat) -> dict[str, Any]:
    """Column values for a contract, excluding its id.

    Raises:
        InvalidPeriodError: If the contract starts after it ends.
        UnsavedEtudiantError: If the contract's student has no id yet.
    """
    contrat.check_period()
    etudiant = contrat.etudiant
    if etudiant is not None and etudiant.etudiant_id is None:
        raise UnsavedEtudiantError(etudiant.full_name)
    return {
        "start_date": contrat.start_date,
        "end_date": contrat.end_date,
        "specialty": contrat.specialty.value,
        "archived": contrat.archived,
        "etudiant_id": etudiant.etudiant_id if etudiant is not None else None,
    }


def etudiant_values(etudiant: Etudiant) -> dict[str, Any]:
    """Column values for a student, excluding its id."""
    return {"last_name": etudiant.last_name, "first_name": etudiant.first_name}
