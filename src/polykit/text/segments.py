"""Delimiter-based segment helpers.

Treat a string as a list of segments separated by a delimiter (``/`` for
paths, ``.`` for extensions or dotted names...) and keep or drop a number of
segments from either end.

The ``segments_*`` functions return a string and leave the input unchanged
when it has fewer delimiters than requested. The ``split_*`` functions do the
same work on the list of segments and return a list.

Examples:
    >>> segments_last("a/b/c", "/")
    'c'
    >>> segments_strip_last("a/b/c", "/")
    'a/b'
    >>> split_get_first("a/b/c", "/", 2)
    ['a', 'b']
"""


def _check(delimiter: str, count: int) -> None:
    if not delimiter:
        raise ValueError("Delimiter must not be empty")
    if count < 1:
        raise ValueError(f"Segment count must be at least 1, got {count}")


def _nth_index(text: str, delimiter: str, count: int) -> int:
    """Return the offset of the `count`-th delimiter from the start, or -1."""
    pos = -len(delimiter)
    for _ in range(count):
        pos = text.find(delimiter, pos + len(delimiter))
        if pos < 0:
            return -1
    return pos


def _nth_rindex(text: str, delimiter: str, count: int) -> int:
    """Return the offset of the `count`-th delimiter from the end, or -1."""
    end = len(text)
    pos = -1
    for _ in range(count):
        pos = text.rfind(delimiter, 0, end)
        if pos < 0:
            return -1
        end = pos
    return pos


def segments_first(text: str, delimiter: str, count: int = 1) -> str:
    """Return the first `count` segments of `text`.

    Args:
        text: The string to segment.
        delimiter: The segment delimiter (e.g. ``"/"``).
        count: How many segments to keep.

    Returns:
        str: The leading segments, or `text` itself if it has fewer than
        `count` delimiters.

    Raises:
        ValueError: If `delimiter` is empty or `count` is less than 1.
    """
    _check(delimiter, count)
    pos = _nth_index(text, delimiter, count)
    return text if pos < 0 else text[:pos]


def segments_last(text: str, delimiter: str, count: int = 1) -> str:
    """Return the last `count` segments of `text`.

    Handy for file names (``"/"``) or extensions (``"."``).

    Raises:
        ValueError: If `delimiter` is empty or `count` is less than 1.
    """
    _check(delimiter, count)
    pos = _nth_rindex(text, delimiter, count)
    return text if pos < 0 else text[pos + len(delimiter) :]


def segments_strip_first(text: str, delimiter: str, count: int = 1) -> str:
    """Remove the first `count` segments of `text`.

    Raises:
        ValueError: If `delimiter` is empty or `count` is less than 1.
    """
    _check(delimiter, count)
    pos = _nth_index(text, delimiter, count)
    return text if pos < 0 else text[pos + len(delimiter) :]


def segments_strip_last(text: str, delimiter: str, count: int = 1) -> str:
    """Remove the last `count` segments of `text` (e.g. drop an extension).

    Raises:
        ValueError: If `delimiter` is empty or `count` is less than 1.
    """
    _check(delimiter, count)
    pos = _nth_rindex(text, delimiter, count)
    return text if pos < 0 else text[:pos]


def split_get_first(text: str, delimiter: str, count: int = 1) -> list[str]:
    """Return the first `count` segments of `text` as a list."""
    _check(delimiter, count)
    return text.split(delimiter, count)[:count]


def split_get_last(text: str, delimiter: str, count: int = 1) -> list[str]:
    """Return the last `count` segments of `text` as a list."""
    _check(delimiter, count)
    return text.split(delimiter)[-count:]


def split_strip_first(text: str, delimiter: str, count: int = 1) -> list[str]:
    """Return the segments of `text` without the first `count` ones."""
    _check(delimiter, count)
    return text.split(delimiter)[count:]


def split_strip_last(text: str, delimiter: str, count: int = 1) -> list[str]:
    """Return the segments of `text` without the last `count` ones."""
    _check(delimiter, count)
    return text.split(delimiter)[:-count]
