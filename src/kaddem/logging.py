"""Logging setup for the KADDEM command line.

Two handlers hang off the root logger:

- a Rich console handler on stderr, whose level follows ``-v``/``-q``;
- a "flight recorder": a `MemoryHandler` that keeps recent records at DEBUG
  and writes them to a log file once something goes wrong.

Records from libraries (SQLAlchemy, Alembic, ...) are tagged with a short
``[library]`` prefix on the console so they stand out from KADDEM's own.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "kaddem"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class LibraryPrefixFilter(logging.Filter):
    """Set `record.prefix` to ``[<top-level package>]`` for non-KADDEM records.

    KADDEM's own records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.split(".", 1)[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source locations instead
            of the library prefix.
        color: Emit ANSI colors (mirrors click-extra's ``--color/--no-color``).

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder.

    Up to `capacity` records are buffered; the buffer is written to `path`
    (truncated on first write) whenever a record at `flush_level` or above
    arrives, and on close when `flush_on_close` is set. The file is only
    created on the first flush.

    Args:
        path: Log file receiving flushed records.
        capacity: Number of records kept in memory.
        flush_level: Level that triggers a flush.
        flush_on_close: Also flush when the handler is closed.

    Returns:
        MemoryHandler: Buffering handler targeting a `FileHandler`.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def _diagnostics(
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: Mapping[str, int],
) -> Iterator[tuple[str, object]]:
    yield "Python", sys.version.split()[0]
    yield "Platform", f"{platform.system()} {platform.release()}"
    yield "PID", os.getpid()
    yield "CWD", Path.cwd()
    yield "Alembic", alembic.__version__
    yield "SQLAlchemy", sqlalchemy.__version__
    yield "Handlers", [type(h).__name__ for h in handlers]
    if flight_capacity is not None:
        yield "Flight recorder", (
            f"path={log_path if log_path else '<none>'}, "
            f"capacity={flight_capacity}, flush_on_close={force_flush_fr}"
        )
    yield "Per-logger overrides", (
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>"
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: Mapping[str, int],
) -> None:
    """Log a one-line INFO banner followed by DEBUG diagnostics.

    The banner names the version, the console level and whether the flight
    recorder is on. Diagnostics cover the interpreter, platform, process,
    library versions, handlers, flight-recorder settings and per-logger
    overrides, one DEBUG record each.
    """
    logger.info(
        "KADDEM %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    for label, value in _diagnostics(
        handlers,
        log_path,
        flight_capacity if flight_recorder else None,
        force_flush_fr,
        logger_levels,
    ):
        logger.debug("%s: %s", label, value)
