"""Width, padding and cropping for tagged text.

Tagged text carries inline markup of the form ``<name>...</name>``, typically
color tags meant for terminal output (``"<warning>disk full</warning>"``).
Markup is zero-width: only the text between tags counts toward the visible
length, so columns line up once the tags are rendered as styles.

Tags are not validated. When cropping, closing tags are regenerated from the
stack of tags open at the cut point, so well-formed input stays well-formed.
Self-closing tags (``<br/>``) never open anything.
"""

import re

from polykit.config import DEFAULT_CROP_MARKER, DEFAULT_PAD

from .padding import Align, str_pad

TAG_PATTERN = re.compile(r"<([^>]*)>")


def strip_tags(text: str) -> str:
    """Remove all tag markup from `text`."""
    return TAG_PATTERN.sub("", text)


def tagged_len(text: str) -> int:
    """Return the visible length of `text`, in characters, ignoring markup."""
    return len(strip_tags(text))


def track_tag(open_tags: list[str], body: str) -> None:
    """Update the stack of open tag names with one tag.

    Args:
        open_tags: Names of the currently open tags, innermost last.
        body: The tag text between ``<`` and ``>``.

    A closing tag pops the innermost name (a stray one is ignored); a
    self-closing or empty tag is ignored; any other tag pushes its name,
    i.e. the body up to the first whitespace (attributes are dropped).
    """
    body = body.strip()
    if body.startswith("/"):
        if open_tags:
            open_tags.pop()
    elif body and not body.endswith("/"):
        open_tags.append(body.split(maxsplit=1)[0])


def close_tags(open_tags: list[str]) -> str:
    """Return the closing tags for `open_tags`, innermost first."""
    return "".join(f"</{name}>" for name in reversed(open_tags))


def tagged_pad(
    text: str, width: int, align: Align = Align.END, pad: str = DEFAULT_PAD
) -> str:
    """Pad tagged text to a visible `width`.

    Args:
        text: The tagged string.
        width: The desired minimum visible width, in characters.
        align: Side(s) to pad.
        pad: The padding character(s).

    Returns:
        str: `text` padded so that its visible length is at least `width`.

    Examples:
        >>> tagged_pad("<b>x</b>", 3)
        '<b>x</b>  '
    """
    markup = len(text) - tagged_len(text)
    return str_pad(text, width + markup, pad, align)


def _fit(segment: str, room: int, marker: str) -> str:
    return segment[: max(0, room - len(marker))] + marker


def tagged_crop(text: str, width: int, marker: str = DEFAULT_CROP_MARKER) -> str:
    """Crop tagged text to a visible `width`.

    Text is copied segment by segment; tags are copied as they come and
    tracked on a stack. The segment that would overflow is cut so that it,
    plus `marker`, ends exactly at `width`. Tags still open at that point are
    then closed, innermost first.

    Args:
        text: The tagged string.
        width: The maximum visible width, in characters.
        marker: Overflow marker appended at the cut (counts toward `width`).

    Returns:
        str: `text` unchanged if it already fits, else the cropped text.
        If `width` is smaller than the marker, only the marker remains
        visible.
    """
    if tagged_len(text) <= width:
        return text

    budget = width - len(marker)
    out: list[str] = []
    open_tags: list[str] = []
    visible = 0
    pos = 0
    for match in TAG_PATTERN.finditer(text):
        segment = text[pos : match.start()]
        pos = match.end()
        if visible + len(segment) >= budget:
            out.append(_fit(segment, width - visible, marker))
            break
        visible += len(segment)
        out.append(segment)
        out.append(match.group(0))
        track_tag(open_tags, match.group(1))
    else:
        out.append(_fit(text[pos:], width - visible, marker))

    out.append(close_tags(open_tags))
    return "".join(out)
