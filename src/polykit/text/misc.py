"""Assorted small text helpers."""

import html
import re


def str_join(first: str, second: str, delimiter: str) -> str:
    """Join two strings with `delimiter`, skipping the delimiter if either is empty."""
    if first and second:
        return first + delimiter + second
    return first or second


def indent(text: str, level: int = 1, indent_with: str = "  ") -> str:
    """Indent every line of `text` (blank ones included) by `level` units.

    A trailing newline does not start a new line: ``"a\\n"`` becomes
    ``"  a\\n"``.
    """
    return re.sub(r"^(?!\Z)", indent_with * level, text, flags=re.MULTILINE)


def simple_pluralize(num: float, thing: str) -> str:
    """Append an English plural ``s`` to `thing` unless `num` is exactly 1."""
    return thing if num == 1 else f"{thing}s"


def encode_js_string(text: str, delim: str = '"') -> str:
    """Encode `text` as a delimited JavaScript string literal for an HTML page.

    Newlines and delimiter characters are backslash-escaped, then the result
    is HTML-escaped so it can sit inside an attribute value.

    Ex: ``'<div onclick="alert(' + encode_js_string(text, "'") + ')">'``
    """
    escaped = text.replace("\n", "\\n").replace(delim, "\\" + delim)
    return delim + html.escape(escaped) + delim
