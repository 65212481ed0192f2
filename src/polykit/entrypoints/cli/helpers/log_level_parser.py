"""Helpers for parsing logger-level CLI options.

This module provides the Click callback behind ``-L/--logger-level``. The
option takes NAME=LEVEL pairs, either repeated or as one comma/space-separated
string (the form used by the ``POLYKIT_LOGGER_LEVELS`` environment variable),
and turns them into a logger name -> numeric level mapping.
"""

import logging
import re

import click

# Levels applied to third-party loggers unless overridden on the command line.
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the raw option value into individual NAME=LEVEL items.

    Args:
        value: A single string (possibly holding several items) or the
            sequence of strings produced by a repeatable Click option.

    Returns:
        list[str]: Non-empty items, in command-line order.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_pair(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    if not sep:
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name.strip(), level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones for the
    same logger. LEVEL is a standard logging level name, case-insensitive.

    Args:
        ctx (click.Context): Click context (passed by Click, not used here).
        param (click.Parameter | None): Click parameter (passed by Click, not used here).
        value (str | list[str] | tuple[str, ...]): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    levels.update(_parse_pair(item) for item in _split_items(value))
    return levels
