"""Unit tests for polykit.text.case."""

import pytest

from polykit.text.case import camelize, decamelize, dehyphenate, lcwords

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "name, ucfirst, expected",
    [
        ("my name", True, "MyName"),
        ("my name", False, "myName"),
        ("My name is", False, "myNameIs"),
        ("keep iNNer case", False, "keepINNerCase"),
        ("single", True, "Single"),
        ("", False, ""),
    ],
)
def test_camelize(name, ucfirst, expected):
    """Words are capitalized and joined; inner letters are untouched."""
    assert camelize(name, ucfirst) == expected


@pytest.mark.parametrize(
    "name, kwargs, expected",
    [
        ("my-long-name", {}, "myLongName"),
        ("my-long-name", {"ucfirst": True}, "MyLongName"),
        ("my_long_name", {"delimiter": "_"}, "myLongName"),
        ("Already", {}, "already"),
        ("", {}, ""),
    ],
)
def test_dehyphenate(name, kwargs, expected):
    """Hyphenated compound words become camel case."""
    assert dehyphenate(name, **kwargs) == expected


@pytest.mark.parametrize(
    "name, kwargs, expected",
    [
        ("fooBar", {}, "foo bar"),
        ("fooBar", {"ucwords": True}, "Foo Bar"),
        ("fooBar", {"delimiter": "_"}, "foo_bar"),
        ("FooBar", {}, "foo bar"),
        ("item42Count", {}, "item 42 count"),
        ("myHTTPServer2Go", {}, "my h t t p server 2 go"),
        ("plain", {}, "plain"),
    ],
)
def test_decamelize(name, kwargs, expected):
    """Words start at capitals and at digit runs."""
    assert decamelize(name, **kwargs) == expected


def test_decamelize_reverses_camelize():
    """Lower-case words survive a camelize/decamelize round trip."""
    assert decamelize(camelize("make it so")) == "make it so"


def test_lcwords():
    """Only the first letter of each word is lower cased."""
    assert lcwords("Hello World HTTP") == "hello world hTTP"
    assert lcwords("A-B", delimiter="-") == "a-b"
