"""The `MetaData` shared by the contract and student tables.

Its naming convention gives every index and constraint a deterministic name,
which the packaged migration repeats verbatim. Alembic autogenerate relies on
these names matching to produce empty diffs.
"""

from sqlalchemy import MetaData

#: ix/uq/ck/fk/pk name templates; `column_0_N_label` yields ``<table>_<col>``.
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
