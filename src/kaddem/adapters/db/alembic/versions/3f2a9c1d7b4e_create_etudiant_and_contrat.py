"""create etudiant and contrat tables

Revision ID: 3f2a9c1d7b4e
Revises:
Create Date: 2025-11-03 14:12:09.481726

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b4e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "etudiant",
        sa.Column(
            "etudiant_id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-assigned student id.",
        ),
        sa.Column(
            "last_name",
            sa.String(length=100),
            nullable=False,
            comment="Last name (nom).",
        ),
        sa.Column(
            "first_name",
            sa.String(length=100),
            nullable=False,
            comment="First name (prenom).",
        ),
        sa.PrimaryKeyConstraint("etudiant_id", name=op.f("pk_etudiant")),
        comment="Students. Only read by the contract service.",
    )
    op.create_index(
        op.f("ix_etudiant_etudiant_last_name_etudiant_first_name"),
        "etudiant",
        ["last_name", "first_name"],
        unique=False,
    )

    op.create_table(
        "contrat",
        sa.Column(
            "contrat_id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-assigned contract id; immutable once assigned.",
        ),
        sa.Column(
            "start_date", sa.Date(), nullable=False, comment="First day of validity."
        ),
        sa.Column(
            "end_date", sa.Date(), nullable=False, comment="Last day of validity."
        ),
        sa.Column(
            "specialty",
            sa.String(length=20),
            nullable=False,
            comment="One of IA, RESEAUX, CLOUD, SECURITE.",
        ),
        sa.Column(
            "archived",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="Archived contracts are no longer valid.",
        ),
        sa.Column(
            "etudiant_id",
            sa.Integer(),
            nullable=True,
            comment="Student holding the contract, if any.",
        ),
        sa.CheckConstraint(
            "start_date <= end_date", name=op.f("ck_contrat_valid_period")
        ),
        sa.CheckConstraint(
            "specialty IN ('IA', 'RESEAUX', 'CLOUD', 'SECURITE')",
            name=op.f("ck_contrat_known_specialty"),
        ),
        sa.ForeignKeyConstraint(
            ["etudiant_id"],
            ["etudiant.etudiant_id"],
            name=op.f("fk_contrat_etudiant_id_etudiant"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("contrat_id", name=op.f("pk_contrat")),
        comment="Student contracts.",
    )
    op.create_index(
        op.f("ix_contrat_contrat_etudiant_id"),
        "contrat",
        ["etudiant_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_contrat_contrat_etudiant_id"), table_name="contrat")
    op.drop_table("contrat")
    op.drop_index(
        op.f("ix_etudiant_etudiant_last_name_etudiant_first_name"),
        table_name="etudiant",
    )
    op.drop_table("etudiant")
