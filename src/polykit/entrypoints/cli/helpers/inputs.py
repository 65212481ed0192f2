"""Input decoding helpers for POLYKIT commands.

Commands accept their text either as an argument or, when the argument is
``-``, from stdin. Structured commands read a JSON document.
"""

import json
from typing import Any, TextIO

import click

STDIN_MARKER = "-"


def read_text(value: str) -> str:
    """Return `value`, or the contents of stdin when `value` is ``-``.

    A single trailing newline read from stdin is dropped, since shells and
    ``echo`` add one that is not part of the text.
    """
    if value != STDIN_MARKER:
        return value
    data = click.get_text_stream("stdin").read()
    return data.removesuffix("\n")


def read_json_document(stream: TextIO) -> Any:
    """Decode the JSON document read from `stream`.

    Raises:
        click.ClickException: If the input is not valid JSON.
    """
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Input is not valid JSON: {e}") from e


def parse_json_value(raw: str) -> Any:
    """Parse a command-line value as JSON, falling back to the plain string.

    ``42`` becomes an int, ``{"a": 1}`` a dict, and ``hello`` (not valid JSON)
    stays the string ``"hello"``.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw
