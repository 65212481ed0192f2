"""Regex-driven matching and extraction helpers.

Patterns may be given as strings or precompiled `re.Pattern` objects. Invalid
patterns are not validated here; `re.error` propagates to the caller.
"""

import re

type PatternLike = str | re.Pattern[str]


def str_match(
    source: str,
    pattern: PatternLike,
    groups: int = 0,
    none_on_no_match: bool = False,
    empty_value: str = "",
) -> list[str] | None:
    """Search `source` and return the match followed by its capture groups.

    The result always holds at least ``groups + 1`` entries, padded with
    `empty_value`; groups that did not participate in the match are also
    reported as `empty_value`.

    Args:
        source: The string to search.
        pattern: The regular expression.
        groups: How many capture groups to report even if absent.
        none_on_no_match: Return None instead of a padded list when nothing
            matches.
        empty_value: Filler for missing entries.

    Returns:
        list[str] | None: ``[match, group1, group2, ...]``.
    """
    match = re.search(pattern, source)
    if match is None:
        return None if none_on_no_match else [empty_value] * (groups + 1)
    found = [match.group(0)]
    found.extend(empty_value if g is None else g for g in match.groups())
    found.extend([empty_value] * (groups + 1 - len(found)))
    return found


def str_extract(source: str, pattern: PatternLike) -> tuple[str, str]:
    """Remove every match of `pattern` from `source`.

    Returns:
        tuple[str, str]: The extracted text (the first capture group when the
        pattern defines one, else the whole match; the last match wins) and
        the remaining string. The extracted text is ``""`` when nothing
        matched.
    """
    extracted = ""

    def take(match: re.Match[str]) -> str:
        nonlocal extracted
        group = match.group(1) if match.re.groups else None
        extracted = match.group(0) if group is None else group
        return ""

    remaining = re.sub(pattern, take, source)
    return extracted, remaining


def str_search(
    text: str, pattern: PatternLike, start: int = 0
) -> tuple[int, str] | None:
    """Find the first match of `pattern` in `text` at or after `start`.

    Returns:
        tuple[int, str] | None: The offset and the matched substring, or None.
    """
    match = re.compile(pattern).search(text, start)
    if match is None:
        return None
    return match.start(), match.group(0)


def extract_segment(source: str, delimiter_pattern: PatternLike) -> tuple[str, str]:
    """Split off the leading segment of `source`.

    Splits on the first non-empty match of `delimiter_pattern` that follows a
    non-empty segment: empty matches and leading delimiters are skipped. The
    delimiter itself is dropped from both parts.

    Args:
        source: The string to split.
        delimiter_pattern: Regular expression matching the delimiter.

    Returns:
        tuple[str, str]: ``(segment, remainder)``. Without a usable delimiter
        the remainder is ``""``.

    Examples:
        >>> extract_segment("cmd  arg1 arg2", r"\\s+")
        ('cmd', 'arg1 arg2')
        >>> extract_segment("  cmd", r"\\s+")
        ('cmd', '')
    """
    pos = 0
    for match in re.compile(delimiter_pattern).finditer(source):
        if match.start() == match.end():
            continue
        segment = source[pos : match.start()]
        pos = match.end()
        if segment:
            return segment, source[pos:]
    return source[pos:], ""
