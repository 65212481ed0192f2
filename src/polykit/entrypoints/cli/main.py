"""POLYKIT CLI entry point.

Defines the top-level ``polykit`` command (via Click-Extra) and registers
the subcommand groups exposed by the project.

Currently available groups
- ``polykit text`` — tag-aware length/pad/crop, case conversion, segments, trimming.
- ``polykit path`` — dotted-path get/set/delete/fields over JSON documents.

Notes
- The CLI version is sourced from `polykit.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Command results go to stdout; logs and notices go to stderr.

Examples
    $ polykit --version
    $ polykit text crop "<red>disk almost full</red>" 8 --marker "…"
    $ echo '{"server": {"port": 80}}' | polykit path get server.port
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from polykit import __version__
from polykit.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .path import path as path_group
from .text import text as text_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """POLYKIT command-line interface.

    Everyday text and data wrangling from the shell: measure, pad and crop
    color-tagged terminal text, convert between naming styles, split
    delimited strings, and read or update nested JSON documents by dotted
    path.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.",
    default=lambda: Path(user_log_dir("polykit", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="POLYKIT_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps recent log records at "
        "DEBUG granularity (unaffected by -v/-q) and writes them to --log-path "
        "when a WARNING/ERROR occurs, or on exit with --force-flush. Console "
        "verbosity is unchanged."
    ),
    default=False,
    envvar="POLYKIT_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Write the flight recorder buffer to --log-path on exit, even when no "
        "WARNING/ERROR occurred. Console output is unaffected."
    ),
    default=False,
    envvar="POLYKIT_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L polykit.access=DEBUG) or via POLYKIT_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("click_extra=WARNING",),
    envvar="POLYKIT_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def polykit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """POLYKIT command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler, plus the optional flight recorder
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path, flush_on_close=force_flush_flight_recorder
            )
        )

    # 2) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        logger_levels=logger_levels,
        force_flush_fr=force_flush_flight_recorder,
    )

    ctx.call_on_close(logging.shutdown)


polykit.add_command(text_group)
polykit.add_command(path_group)
