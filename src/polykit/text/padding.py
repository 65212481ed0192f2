"""Codepoint-aware string padding.

`str.ljust` and friends only accept a single fill character; `str_pad`
accepts pad strings of any length and an `Align` value naming the side(s) to
pad.
"""

from enum import Enum

from polykit.config import DEFAULT_PAD


class Align(Enum):
    """Which side(s) of the text receive the padding.

    - START: pad on the left, text is right-aligned.
    - END: pad on the right, text is left-aligned.
    - BOTH: split the padding, the extra character (if any) going right.
    """

    START = "start"
    END = "end"
    BOTH = "both"


def _fill(pad: str, length: int) -> str:
    return (pad * (length // len(pad) + 1))[:length]


def str_pad(
    text: str, length: int, pad: str = DEFAULT_PAD, align: Align = Align.END
) -> str:
    """Pad `text` to `length` characters.

    The pad string is repeated and truncated as needed, always starting from
    its first character.

    Args:
        text: The string to pad.
        length: The desired minimum length, in characters.
        pad: The padding character(s).
        align: Side(s) to pad.

    Returns:
        str: The padded string; `text` itself when it is already long enough
        or `pad` is empty.
    """
    missing = length - len(text)
    if missing <= 0 or not pad:
        return text
    match align:
        case Align.START:
            return _fill(pad, missing) + text
        case Align.BOTH:
            left = missing // 2
            return _fill(pad, left) + text + _fill(pad, missing - left)
        case _:
            return text + _fill(pad, missing)
