"""POLYKIT path CLI — dotted-path access to JSON documents.

Reads a JSON document (stdin by default, or ``--input FILE``), applies one
dotted-path operation from ``polykit.access`` and prints JSON to stdout.

Commands
- ``get PATH``          print the value at PATH (``null`` if absent).
- ``set PATH VALUE``    store VALUE at PATH, creating intermediate objects.
- ``delete PATH``       remove the field at PATH.
- ``fields KEY...``     print an object with only the given top-level keys.

Failure modes
- Input that is not valid JSON → ``ClickException``.
- A path crossing a scalar (e.g. ``name.first`` when ``name`` is a string)
  → ``ClickException`` carrying the `NotAContainerError` message.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx

from polykit.access import extract_fields, get_at, has_field, set_at, unset_at
from polykit.errors import NotAContainerError

from .helpers import parse_json_value, read_json_document, warn

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

logger = logging.getLogger(__name__)

INPUT_OPTION = click.option(
    "--input",
    "-i",
    "stream",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default="stdin",
    help="JSON document to read.",
)

RAW_OPTION = click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Print string results without JSON quoting.",
)


def _emit(value: Any, raw: bool = False) -> None:
    if raw and isinstance(value, str):
        click.echo(value)
    else:
        click.echo(json.dumps(value, indent=2, ensure_ascii=False))


def _apply(operation: Callable[[], Any]) -> Any:
    try:
        return operation()
    except NotAContainerError as e:
        raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def path() -> None:
    """Dotted-path commands over JSON documents."""


@path.command()
@click.argument("dotted_path", metavar="PATH")
@INPUT_OPTION
@RAW_OPTION
@click.option(
    "--default",
    "default",
    default=None,
    help="Value (JSON, or a plain string) printed when PATH is absent.",
)
def get(dotted_path: str, stream: TextIO, raw: bool, default: str | None) -> None:
    """Print the value found at PATH ("" for the whole document)."""
    document = read_json_document(stream)
    value = _apply(lambda: get_at(document, dotted_path))
    if value is None:
        if default is None:
            warn(f"No value at path {dotted_path!r}.")
        else:
            value = parse_json_value(default)
    _emit(value, raw)


@path.command(name="set")
@click.argument("dotted_path", metavar="PATH")
@click.argument("raw_value", metavar="VALUE")
@INPUT_OPTION
def set_(dotted_path: str, raw_value: str, stream: TextIO) -> None:
    """Store VALUE (JSON, or a plain string) at PATH and print the document."""
    document = read_json_document(stream)
    value = parse_json_value(raw_value)
    logger.debug("Setting %r to %r", dotted_path, value)
    _emit(_apply(lambda: set_at(document, dotted_path, value)))


@path.command()
@click.argument("dotted_path", metavar="PATH")
@INPUT_OPTION
def delete(dotted_path: str, stream: TextIO) -> None:
    """Remove the field at PATH and print the document.

    A missing field leaves the document untouched: no intermediate objects
    are created on the way.
    """
    if not dotted_path:
        raise click.BadParameter("the whole document cannot be deleted", param_hint="PATH")
    document = read_json_document(stream)
    parent_path, _, leaf = dotted_path.rpartition(".")
    parent = _apply(lambda: get_at(document, parent_path))
    if parent is None or not _apply(lambda: has_field(parent, leaf)):
        warn(f"Nothing to delete at path {dotted_path!r}.")
    else:
        _apply(lambda: unset_at(document, dotted_path))
    _emit(document)


@path.command()
@click.argument("keys", nargs=-1, required=True)
@INPUT_OPTION
def fields(keys: tuple[str, ...], stream: TextIO) -> None:
    """Print an object holding only the top-level KEYS present in the document."""
    document = read_json_document(stream)
    _emit(_apply(lambda: extract_fields(document, keys)))
