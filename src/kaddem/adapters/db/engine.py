"""Engine factory for the KADDEM database.

Every Engine should come from `make_engine()`. On SQLite it installs a
``connect`` listener running `SQLITE_PRAGMAS` on each new DBAPI connection;
without ``foreign_keys=ON`` SQLite would silently ignore the
``contrat.etudiant_id`` reference. Other backends are used as configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import URL, Engine
    from sqlalchemy.pool import ConnectionPoolEntry

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

#: Applied, in order, to every SQLite connection.
SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys=ON;",
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA temp_store=MEMORY;",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if `url` (string or `URL`) points at a SQLite database."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def _apply_sqlite_pragmas(
    dbapi_conn: SQLiteConnection,
    conn_record: ConnectionPoolEntry,  # pylint: disable=unused-argument
) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for `url`.

    Args:
        url: Database URL.
        echo: Log every SQL statement through the ``sqlalchemy.engine`` logger.

    Returns:
        Engine: The engine, with SQLite PRAGMAs installed when relevant.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
