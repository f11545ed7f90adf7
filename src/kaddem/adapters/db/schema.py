"""Contract and student tables.

Constraints (enforced here):

| Constraint                          | Purpose                              |
|-------------------------------------|--------------------------------------|
| FK(contrat.etudiant_id)             | a contract references a stored student |
| ON DELETE SET NULL                  | deleting a student unlinks its contracts |
| CHECK(start_date <= end_date)       | validity period is well formed       |

The relationship is stored once, on the contract side; a student's contracts
are read back through `contrat.etudiant_id`.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    false,
)

from kaddem.domain import Specialite

from .metadata import metadata

__all__ = ["contrat", "etudiant", "SPECIALTY_VALUES"]

SPECIALTY_VALUES = tuple(s.value for s in Specialite)

etudiant = Table(
    "etudiant",
    metadata,
    Column(
        "etudiant_id",
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned student id.",
    ),
    Column("last_name", String(100), nullable=False, comment="Last name (nom)."),
    Column("first_name", String(100), nullable=False, comment="First name (prenom)."),
    Index(None, "last_name", "first_name"),
    comment="Students. Only read by the contract service.",
)

contrat = Table(
    "contrat",
    metadata,
    Column(
        "contrat_id",
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned contract id; immutable once assigned.",
    ),
    Column("start_date", Date, nullable=False, comment="First day of validity."),
    Column("end_date", Date, nullable=False, comment="Last day of validity."),
    Column(
        "specialty",
        String(20),
        nullable=False,
        comment=f"One of {', '.join(SPECIALTY_VALUES)}.",
    ),
    Column(
        "archived",
        Boolean,
        nullable=False,
        server_default=false(),
        comment="Archived contracts are no longer valid.",
    ),
    Column(
        "etudiant_id",
        Integer,
        ForeignKey("etudiant.etudiant_id", ondelete="SET NULL"),
        nullable=True,
        comment="Student holding the contract, if any.",
    ),
    CheckConstraint("start_date <= end_date", name="valid_period"),
    CheckConstraint(
        "specialty IN ({})".format(", ".join(f"'{v}'" for v in SPECIALTY_VALUES)),
        name="known_specialty",
    ),
    Index(None, "etudiant_id"),
    comment="Student contracts.",
)
