"""Truncation of plain and HTML text at word boundaries.

- `trim_text`: cut plain text at the last word that fits.
- `trim_html_text`: same for HTML, dropping a dangling partial tag and
  re-closing the tags left open by the cut.
- `truncate`: strip tags, cut, and append an ellipsis.
- `cut`: elide the middle of a string, keeping both ends.
"""

from polykit.config import DEFAULT_ELLIPSIS, DEFAULT_TRIM_MARKER

from .tagged import TAG_PATTERN, close_tags, strip_tags, track_tag


def _drop_last_word(text: str) -> str:
    words = text.split(" ")
    words.pop()
    return " ".join(words)


def trim_text(text: str, max_size: int, marker: str = DEFAULT_TRIM_MARKER) -> str:
    """Trim `text` to at most `max_size` characters at a word boundary.

    The (possibly partial) word straddling the limit is dropped and `marker`
    is appended; the marker is not counted toward `max_size`.

    Returns:
        str: `text` unchanged if it fits, else the trimmed text.
    """
    if len(text) <= max_size:
        return text
    return _drop_last_word(text[:max_size]) + marker


def trim_html_text(text: str, max_size: int, marker: str = "") -> str:
    """Trim HTML `text` to at most `max_size` characters at a word boundary.

    Markup counts toward `max_size`. A tag cut in half by the limit is
    removed, then the last (possibly partial) word is dropped, `marker` is
    appended, and closing tags are added for every tag still open.

    Args:
        text: The HTML fragment.
        max_size: Maximum length of the fragment before closing tags.
        marker: Appended after the trimmed text, before the closing tags.

    Returns:
        str: `text` unchanged if it fits, else the trimmed, well-formed text.
    """
    if len(text) <= max_size:
        return text
    text = text[:max_size]
    lt, gt = text.rfind("<"), text.rfind(">")
    if lt >= 0 and gt < lt:
        text = text[:lt]
    text = _drop_last_word(text) + marker

    open_tags: list[str] = []
    for match in TAG_PATTERN.finditer(text):
        track_tag(open_tags, match.group(1))
    return text + close_tags(open_tags)


def truncate(text: str, limit: int, ending: str = DEFAULT_ELLIPSIS) -> str:
    """Truncate `text` to `limit` characters and append `ending`.

    Tags are stripped from text that needs truncating, which is then cut at
    the last space before the limit (or at the limit itself when there is no
    space).
    """
    if len(text) <= limit:
        return text
    text = strip_tags(text)[:limit]
    if (space := text.rfind(" ")) >= 0:
        text = text[:space]
    return text + ending


def cut(text: str, limit: int, more: str = DEFAULT_ELLIPSIS) -> str:
    """Limit `text` to about `limit` characters by removing its middle part.

    The head extends to the end of the word at the cut point and the tail is
    shortened by the same amount, so the result keeps the same length.

    Args:
        text: The string to shorten.
        limit: Target length, `more` included.
        more: Symbol standing for the removed part.

    Returns:
        str: `text` unchanged if it fits, else ``head + more + tail``.
    """
    if len(text) <= limit:
        return text
    chars = max(0, (limit - len(more)) // 2)
    space = text.find(" ", chars)
    shift = space + 1 - chars if space >= 0 else 0
    return text[: chars + shift] + more + text[len(text) - chars + shift :]
