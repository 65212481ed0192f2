"""Dotted-path traversal over nested mappings and records.

A path is a string of field names joined by ``.``; the empty string designates
the root value itself. Each segment is resolved with the uniform accessors in
``polykit.access.api``, so a path may freely cross dicts and attribute records
(``"config.server.port"`` works on a dict holding a dataclass holding a dict).

Reads stop at the first missing or None segment and return None. Writes
create the missing intermediate fields: empty dicts by default, or empty
`types.SimpleNamespace` records when ``create_records=True``.
"""

import logging
from collections.abc import Sequence
from typing import Any

from polykit.config import PATH_SEPARATOR

from .api import FieldRef, accessor_for, get_field, get_field_ref, set_field

__all__ = ["split_path", "get_at", "get_ref_at", "set_at", "unset_at"]

logger = logging.getLogger(__name__)


def split_path(path: str) -> list[str]:
    """Split a dotted path into its segments (``""`` gives no segments)."""
    return path.split(PATH_SEPARATOR) if path else []


def _walk(target: Any, segments: Sequence[str], create_records: bool) -> Any:
    """Resolve `segments` from `target`, creating missing fields on the way."""
    current = target
    for segment in segments:
        access = accessor_for(current, "traverse path")
        if not access.has(segment):
            logger.debug(
                "Creating intermediate %s for path segment %r",
                "record" if create_records else "dict",
                segment,
            )
        current = get_field_ref(
            current, segment, default={}, create_record=create_records
        ).get()
    return current


def get_at(target: Any, path: str) -> Any:
    """Return the value found at `path`, or None if any segment is missing.

    Args:
        target: Root mapping or record.
        path: Dotted path; ``""`` returns `target` itself.

    Returns:
        The value at `path`, or None as soon as an intermediate value is None
        or absent.

    Raises:
        NotAContainerError: If an intermediate value is a scalar.
    """
    current = target
    for segment in split_path(path):
        current = get_field(current, segment)
        if current is None:
            break
    return current


def get_ref_at(target: Any, path: str, *, create_records: bool = False) -> FieldRef:
    """Return a live reference to the slot at `path`, creating it if needed.

    Missing intermediate fields are created as empty dicts (or records when
    `create_records` is set); a missing final field is created holding None.

    Args:
        target: Root mapping or record.
        path: Dotted path; ``""`` returns a root reference.
        create_records: Create intermediates as `types.SimpleNamespace`.

    Returns:
        FieldRef: Reference to the final slot.

    Raises:
        NotAContainerError: If an existing intermediate value is neither a
            mapping nor a record (including None).
    """
    segments = split_path(path)
    if not segments:
        return FieldRef(target)
    parent = _walk(target, segments[:-1], create_records)
    return get_field_ref(parent, segments[-1])


def set_at(
    target: Any, path: str, value: Any, *, create_records: bool = False
) -> Any:
    """Store `value` at `path`, creating intermediate fields as needed.

    Args:
        target: Root mapping or record; mutated in place.
        path: Dotted path.
        value: Value to store.
        create_records: Create intermediates as `types.SimpleNamespace`
            instead of dicts.

    Returns:
        The root: `target` itself, or `value` when `path` is empty (the value
        replaces the root).

    Raises:
        NotAContainerError: If an existing intermediate value is neither a
            mapping nor a record.
    """
    segments = split_path(path)
    if not segments:
        return value
    parent = _walk(target, segments[:-1], create_records)
    set_field(parent, segments[-1], value)
    return target


def unset_at(target: Any, path: str) -> None:
    """Remove the field at `path`.

    The parent of the final segment is resolved like `get_ref_at` does, so
    missing intermediates are created as empty dicts. Removing a field that
    does not exist is a no-op.

    Raises:
        ValueError: If `path` is empty (the root cannot be removed).
        NotAContainerError: If the parent value is neither a mapping nor a
            record.
    """
    segments = split_path(path)
    if not segments:
        raise ValueError("Cannot unset the root value")
    parent = _walk(target, segments[:-1], create_records=False)
    accessor_for(parent, "unset field").delete(segments[-1])

