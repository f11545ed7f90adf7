"""The ``kaddem`` command.

Top-level options only configure logging; the work is done by the
subcommand groups:

- ``kaddem db``: forward-only schema management (current/heads/history/upgrade/status).
- ``kaddem contrats``: contract CRUD, assignment to students, counting and archiving.

Examples
    $ kaddem db upgrade
    $ kaddem -v contrats add --start 2025-09-01 --end 2026-06-30 --specialty IA
    $ kaddem contrats affect 1 Test Student
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from kaddem import __version__
from kaddem.logging import config_console_handler, config_flight_recorder, log_startup

from .contrats import contrats as contrats_group
from .db import db as db_group
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

HELP = """KADDEM command-line interface.

    Manage student contracts: create, update and remove contracts, assign them
    to students, and archive the ones that have ended.
    """

DEFAULT_LOG_PATH = (
    Path(user_log_dir("kaddem", appauthor=False, ensure_exists=True)) / "latest.log"
)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING, one level lower per ``-v`` and one higher per ``-q``, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def _configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug: bool,
    color: bool,
    log_path: Path,
    flight_recorder_capacity: int | None,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> list[Handler]:
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=color)
    ]
    if flight_recorder_capacity is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    # the root logger sees everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console: ERROR with -q, CRITICAL with -qq.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show every record with its timestamp, logger name and source location.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="KADDEM_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="KADDEM_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records kept by the flight recorder.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory, whatever -v/-q say, and write "
        "them to --log-path as soon as a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder to --log-path when the command ends.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level of one logger, as NAME=LEVEL (e.g. -L sqlalchemy.engine=INFO). "
        "Applies to the console and the flight recorder. Repeatable."
    ),
)
@clickx.pass_context
def kaddem(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """KADDEM command-line interface."""
    level = console_level(verbose_count, quiet_count)
    capacity = flight_recorder_capacity if flight_recorder else None

    handlers = _configure_logging(
        level=level,
        debug=debug,
        color=ctx.color is not False,  # None means "auto"
        log_path=log_path,
        flight_recorder_capacity=capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=capacity,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # flushes and closes the handlers once the subcommand returns
    ctx.call_on_close(logging.shutdown)


kaddem.add_command(db_group)
kaddem.add_command(contrats_group)
