"""Unit tests for polykit.access.paths (dotted-path traversal)."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from polykit.access import get_at, get_ref_at, has_field, set_at, split_path, unset_at
from polykit.errors import NotAContainerError

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("path", "expected"),
    [("", []), ("a", ["a"]), ("a.b.c", ["a", "b", "c"]), ("a..b", ["a", "", "b"])],
)
def test_split_path(path, expected):
    """The empty path has no segments; others split on every dot."""
    assert split_path(path) == expected


# ============================================================================
#                               get_at
# ============================================================================


def test_get_at_empty_path_returns_root(nested_document):
    """The empty path designates the root itself."""
    assert get_at(nested_document, "") is nested_document


def test_get_at_crosses_dicts_and_records(nested_document):
    """Segments resolve through dicts and attribute records alike."""
    assert get_at(nested_document, "server.port") == 8080
    assert get_at(nested_document, "owner.name") == "ada"
    assert get_at(nested_document, "owner.contact.email") == "ada@example.org"


def test_get_at_stops_at_none(nested_document):
    """A None or missing intermediate short-circuits to None."""
    assert get_at(nested_document, "empty.anything.deeper") is None
    assert get_at(nested_document, "missing.anything") is None


def test_get_at_on_scalar_intermediate_raises(nested_document):
    """Traversing into a scalar is a type error, not a silent None."""
    with pytest.raises(NotAContainerError):
        get_at(nested_document, "server.port.number")


# ============================================================================
#                               set_at
# ============================================================================


def test_set_at_creates_dict_intermediates():
    """Missing intermediates are created as dicts by default."""
    target: dict = {}
    result = set_at(target, "a.b.c", 1)
    assert result is target
    assert target == {"a": {"b": {"c": 1}}}


def test_set_at_creates_record_intermediates_on_request():
    """With create_records=True intermediates are SimpleNamespace records."""
    target: dict = {}
    set_at(target, "a.b", 1, create_records=True)
    assert isinstance(target["a"], SimpleNamespace)
    assert target["a"].b == 1


def test_set_at_keeps_existing_intermediates(nested_document):
    """Existing intermediates (of either kind) are reused, not replaced."""
    owner = nested_document["owner"]
    set_at(nested_document, "owner.contact.phone", "555")
    assert nested_document["owner"] is owner
    assert owner.contact == {"email": "ada@example.org", "phone": "555"}


def test_set_at_on_record_root():
    """A record root works like a mapping root."""
    root = SimpleNamespace()
    set_at(root, "config.debug", True)
    assert root.config == {"debug": True}


def test_set_at_empty_path_returns_value():
    """An empty path replaces the root: the new value is returned."""
    assert set_at({"a": 1}, "", "new root") == "new root"


def test_set_at_through_none_intermediate_raises():
    """An existing None intermediate is not silently replaced."""
    with pytest.raises(NotAContainerError):
        set_at({"a": None}, "a.b", 1)


def test_set_at_logs_created_intermediates(caplog):
    """Creating intermediates is reported at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="polykit.access.paths"):
        set_at({}, "a.b", 1)
    assert "Creating intermediate dict for path segment 'a'" in caplog.text


# ============================================================================
#                               get_ref_at
# ============================================================================


def test_get_ref_at_returns_live_reference():
    """Writes through the reference land in the nested structure."""
    target: dict = {"a": {"b": 1}}
    ref = get_ref_at(target, "a.b")
    ref.set(2)
    assert target == {"a": {"b": 2}}


def test_get_ref_at_synthesizes_missing_slots():
    """Missing intermediates become dicts; the final slot is created as None."""
    target: dict = {}
    ref = get_ref_at(target, "a.b")
    assert target == {"a": {"b": None}}
    assert ref.get() is None


def test_get_ref_at_empty_path_is_root():
    """The empty path yields a root reference."""
    target = {"a": 1}
    ref = get_ref_at(target, "")
    assert ref.is_root
    assert ref.get() is target


# ============================================================================
#                               unset_at
# ============================================================================


def test_unset_at_removes_leaf(nested_document):
    """The final segment is removed from its parent container or record."""
    unset_at(nested_document, "server.port")
    assert nested_document["server"] == {"host": "localhost"}

    unset_at(nested_document, "owner.name")
    assert not has_field(nested_document["owner"], "name")


def test_unset_at_missing_leaf_is_noop():
    """Removing an absent field leaves the target unchanged."""
    target = {"a": {"b": 1}}
    unset_at(target, "a.c")
    assert target == {"a": {"b": 1}}


def test_unset_at_scalar_parent_raises():
    """A scalar parent cannot have fields removed."""
    with pytest.raises(NotAContainerError, match="unset field"):
        unset_at({"a": 5}, "a.b")


def test_unset_at_empty_path_raises():
    """The root cannot be unset."""
    with pytest.raises(ValueError):
        unset_at({}, "")
