"""Unit tests for polykit.text.tagged (tag-aware width, pad and crop)."""

import pytest

from polykit.text.padding import Align
from polykit.text.tagged import (
    close_tags,
    strip_tags,
    tagged_crop,
    tagged_len,
    tagged_pad,
    track_tag,
)

# pylint: disable=magic-value-comparison


# ============================================================================
#                               Visible length
# ============================================================================


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("plain", 5),
        ("<b>x</b>", 1),
        ("<info>disk</info> <warning>full</warning>", 9),
        ("<br/>", 0),
        ("naïve <i>café</i>", 10),
        ("a < b", 5),
    ],
)
def test_tagged_len(text, expected):
    """Markup does not count toward the visible length."""
    assert tagged_len(text) == expected


def test_strip_tags_keeps_text():
    """strip_tags removes markup only."""
    assert strip_tags('<a href="#">link</a> text') == "link text"


# ============================================================================
#                               Tag tracking
# ============================================================================


@pytest.mark.parametrize(
    "stack, body, expected",
    [
        ([], "b", ["b"]),
        ([], 'a href="x"', ["a"]),
        (["b"], "/b", []),
        (["b", "i"], "/i", ["b"]),
        ([], "/b", []),
        (["b"], "br/", ["b"]),
        (["b"], "br /", ["b"]),
        (["b"], "", ["b"]),
    ],
)
def test_track_tag(stack, body, expected):
    """Opening tags push, closing tags pop, others are ignored."""
    track_tag(stack, body)
    assert stack == expected


def test_close_tags_innermost_first():
    """Closing tags are emitted innermost first."""
    assert close_tags(["a", "b", "c"]) == "</c></b></a>"
    assert close_tags([]) == ""


# ============================================================================
#                                  Padding
# ============================================================================


def test_tagged_pad_counts_visible_width():
    """Padding is computed from the visible width, markup excluded."""
    assert tagged_pad("<b>x</b>", 3, Align.END, " ") == "<b>x</b>  "


def test_tagged_pad_start_and_both():
    """Other alignments pad on the left or on both sides."""
    assert tagged_pad("<b>x</b>", 3, Align.START) == "  <b>x</b>"
    assert tagged_pad("<b>x</b>", 4, Align.BOTH, ".") == ".<b>x</b>.."


def test_tagged_pad_wide_enough_is_unchanged():
    """Text at least `width` visible characters wide is untouched."""
    assert tagged_pad("<b>wide</b>", 3) == "<b>wide</b>"


# ============================================================================
#                                  Cropping
# ============================================================================


@pytest.mark.parametrize(
    "text, width, marker, expected",
    [
        # Fits: unchanged.
        ("<b>hello</b>", 5, "", "<b>hello</b>"),
        ("<b>hello</b>", 10, "...", "<b>hello</b>"),
        # Cut inside a tag: the tag is closed.
        ("<b>hello</b> world", 3, "", "<b>hel</b>"),
        ("<b>hello</b> world", 3, "…", "<b>he…</b>"),
        # Cut after a tag closed, or exactly at its end.
        ("<b>hello</b> world", 7, "", "<b>hello</b> w"),
        ("<b>hello</b> world", 7, "..", "<b>hello..</b>"),
        # Nested tags are closed innermost first.
        ("<a><b>abcdef</b></a>", 2, "", "<a><b>ab</b></a>"),
        # Attributes are dropped from generated closing tags.
        ('<fg color="red">abcdef</fg>', 3, "", '<fg color="red">abc</fg>'),
        # Self-closing tags never open anything.
        ("ab<br/>cdef", 3, "", "ab<br/>c"),
        # Plain text.
        ("abcdef", 4, "", "abcd"),
        ("abcdef", 4, "~", "abc~"),
        ("abcdef", 0, "", ""),
    ],
)
def test_tagged_crop(text, width, marker, expected):
    """Crops at the visible width and rebalances tags."""
    assert tagged_crop(text, width, marker) == expected


def test_tagged_crop_marker_wider_than_width():
    """When the marker does not fit, only the marker is left."""
    assert tagged_crop("abcdef", 1, "...") == "..."


def test_tagged_crop_uses_default_marker():
    """Without a marker argument the text is cut bare."""
    assert tagged_crop("<i>abcdef</i>", 2) == "<i>ab</i>"
