"""POLYKIT text CLI — string helpers from the shell.

Every command takes the text as its first argument; pass ``-`` to read it
from stdin. Results are printed to stdout, one per line.

Commands
- ``length``   visible length of tagged text.
- ``pad``      pad tagged text to a visible width.
- ``crop``     crop tagged text to a visible width, re-closing open tags.
- ``case``     camelize / dehyphenate / decamelize.
- ``segments`` keep or strip delimiter-separated segments.
- ``trim``     word-boundary truncation of plain or HTML text.
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx

from polykit import config
from polykit.text.case import camelize, decamelize, dehyphenate
from polykit.text.padding import Align
from polykit.text.segments import (
    segments_first,
    segments_last,
    segments_strip_first,
    segments_strip_last,
)
from polykit.text.tagged import tagged_crop, tagged_len, tagged_pad
from polykit.text.trim import trim_html_text, trim_text

from .helpers import read_text

logger = logging.getLogger(__name__)

TEXT_ARGUMENT = click.argument("value", metavar="TEXT")


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """Text manipulation commands."""


@text.command()
@TEXT_ARGUMENT
def length(value: str) -> None:
    """Print the visible length of TEXT, ignoring <tag> markup."""
    click.echo(tagged_len(read_text(value)))


@text.command()
@TEXT_ARGUMENT
@click.argument("width", type=click.IntRange(min=0))
@click.option(
    "--align",
    type=click.Choice([a.value for a in Align], case_sensitive=False),
    default=Align.END.value,
    show_default=True,
    help="Side(s) receiving the padding.",
)
@click.option(
    "--pad-char",
    "pad_with",
    default=config.DEFAULT_PAD,
    show_default=True,
    help="Padding character(s).",
)
def pad(value: str, width: int, align: str, pad_with: str) -> None:
    """Pad TEXT to a visible WIDTH, ignoring <tag> markup."""
    click.echo(tagged_pad(read_text(value), width, Align(align.lower()), pad_with))


@text.command()
@TEXT_ARGUMENT
@click.argument("width", type=click.IntRange(min=0))
@click.option(
    "--marker",
    default=config.get_crop_marker,
    help=(
        "Overflow marker appended where the text is cut. "
        f"Defaults to ${config.CROP_MARKER_ENVVAR}, or nothing."
    ),
)
def crop(value: str, width: int, marker: str) -> None:
    """Crop TEXT to a visible WIDTH, closing any tag left open."""
    source = read_text(value)
    result = tagged_crop(source, width, marker)
    if result != source:
        logger.info("Cropped %d visible characters to %d", tagged_len(source), width)
    click.echo(result)


CASE_STYLES = ("camel", "pascal", "dehyphenate", "words")


@text.command(name="case")
@TEXT_ARGUMENT
@click.option(
    "--to",
    "style",
    type=click.Choice(CASE_STYLES, case_sensitive=False),
    required=True,
    help=(
        "camel: 'my name' -> myName; pascal: 'my name' -> MyName; "
        "dehyphenate: my-long-name -> myLongName; "
        "words: myLongName -> 'my long name'."
    ),
)
@click.option(
    "--delimiter",
    default=None,
    help="Hyphen for 'dehyphenate' (default '-'), word joiner for 'words' (default ' ').",
)
@click.option(
    "--ucfirst/--no-ucfirst",
    default=False,
    help="Capitalize the first letter (dehyphenate) or every word (words).",
)
def convert_case(value: str, style: str, delimiter: str | None, ucfirst: bool) -> None:
    """Convert the naming style of TEXT."""
    source = read_text(value)
    match style.lower():
        case "camel":
            result = camelize(source, ucfirst)
        case "pascal":
            result = camelize(source, True)
        case "dehyphenate":
            result = dehyphenate(source, ucfirst, delimiter or "-")
        case _:
            result = decamelize(source, ucfirst, " " if delimiter is None else delimiter)
    click.echo(result)


@text.command()
@TEXT_ARGUMENT
@click.argument("delimiter")
@click.option(
    "--first/--last",
    "from_start",
    default=False,
    help="Count segments from the start or from the end (default).",
)
@click.option(
    "--strip",
    is_flag=True,
    default=False,
    help="Remove the counted segments instead of keeping them.",
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many segments to keep or strip.",
)
def segments(
    value: str, delimiter: str, from_start: bool, strip: bool, count: int
) -> None:
    """Keep or strip the first/last segments of TEXT split on DELIMITER.

    \b
    Examples:
      polykit text segments a/b/c /            -> c
      polykit text segments a/b/c / --strip    -> a/b
      polykit text segments a/b/c / --first -n 2 -> a/b
    """
    if not delimiter:
        raise click.BadParameter("must not be empty", param_hint="DELIMITER")
    operations = {
        (True, False): segments_first,
        (False, False): segments_last,
        (True, True): segments_strip_first,
        (False, True): segments_strip_last,
    }
    click.echo(operations[from_start, strip](read_text(value), delimiter, count))


@text.command()
@TEXT_ARGUMENT
@click.argument("max_size", type=click.IntRange(min=0))
@click.option(
    "--html",
    is_flag=True,
    default=False,
    help="Treat TEXT as HTML: drop cut tags and close open ones.",
)
@click.option(
    "--marker",
    default=None,
    help=f"Appended to trimmed text (default {config.DEFAULT_TRIM_MARKER!r}, none with --html).",
)
def trim(value: str, max_size: int, html: bool, marker: str | None) -> None:
    """Trim TEXT to MAX_SIZE characters at a word boundary."""
    source = read_text(value)
    if html:
        click.echo(trim_html_text(source, max_size, marker or ""))
    else:
        click.echo(
            trim_text(
                source,
                max_size,
                config.DEFAULT_TRIM_MARKER if marker is None else marker,
            )
        )
