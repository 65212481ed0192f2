"""Uniform field access over mappings and attribute records.

Every function here works the same whether the target is a dict-like container
or an object with attributes, so calling code does not need to care which
representation it was handed (e.g. a decoded JSON document vs. a dataclass).

Exports
-------
- accessor_for:   Pick the `FieldAccess` adapter for a value.
- has_field:      Check that a field exists.
- get_field:      Read a field, with a default for absent fields.
- set_field:      Write a field in place.
- get_field_ref:  Ensure a field exists and return a live `FieldRef` to it.
- extract_fields: Copy a subset of fields into a new dict.
- FieldRef:       Handle on a single slot (target + key).

Absent fields are never errors. Values that are neither containers nor records
raise `NotAContainerError`.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

from polykit.errors import NotAContainerError

from .interface import FieldAccess
from .mapping import MappingAccess
from .record import RecordAccess, is_record


def accessor_for(target: Any, operation: str | None = None) -> FieldAccess:
    """Return the `FieldAccess` adapter suited to `target`.

    Args:
        target: A mapping or an attribute record.
        operation: Short description of the caller's intent, used in the
            error message (e.g. ``"get field"``).

    Returns:
        FieldAccess: `MappingAccess` for mappings, `RecordAccess` for records.

    Raises:
        NotAContainerError: If `target` is neither.
    """
    if isinstance(target, Mapping):
        return MappingAccess(target)
    if is_record(target):
        return RecordAccess(target)
    raise NotAContainerError(target, operation)


def has_field(target: Any, key: str) -> bool:
    """Return True if `target` has a field named `key`."""
    return accessor_for(target, "check field").has(key)


def get_field(target: Any, key: str, default: Any = None) -> Any:
    """Return field `key` of `target`, or `default` if it is absent."""
    return accessor_for(target, "get field").get(key, default)


def set_field(target: Any, key: str, value: Any) -> None:
    """Set field `key` of `target` to `value`, mutating `target` in place."""
    accessor_for(target, "set field").set(key, value)


@dataclass(frozen=True, eq=False)
class FieldRef:
    """Live handle on one field slot.

    A reference is the pair (`target`, `key`); reads and writes go through to
    the target every time, so changes made elsewhere are visible and changes
    made here are observed by every other holder of `target`.

    A reference with ``key=None`` designates the root value itself. It can be
    read but not rebound, since Python cannot rebind the caller's variable.

    References compare and hash by identity, so they can be used as set
    members or dict keys whatever the target is.

    Attributes:
        target: The container or record holding the slot.
        key: Field name, or None for the root.
    """

    target: Any
    key: str | None = None

    @property
    def is_root(self) -> bool:
        """Return True if this reference designates the root value."""
        return self.key is None

    def get(self) -> Any:
        """Return the current value of the slot."""
        if self.key is None:
            return self.target
        return get_field(self.target, self.key)

    def set(self, value: Any) -> None:
        """Store `value` in the slot.

        Raises:
            ValueError: If this is a root reference.
        """
        if self.key is None:
            raise ValueError("Cannot rebind the root value through a reference")
        set_field(self.target, self.key, value)

    def delete(self) -> None:
        """Remove the slot from its target (no-op if already absent).

        Raises:
            ValueError: If this is a root reference.
        """
        if self.key is None:
            raise ValueError("Cannot delete the root value through a reference")
        accessor_for(self.target, "delete field").delete(self.key)


def get_field_ref(
    target: Any, key: str, default: Any = None, create_record: bool = False
) -> FieldRef:
    """Return a reference to field `key`, creating the field if it is absent.

    Args:
        target: A mapping or an attribute record.
        key: Field name.
        default: Value stored in the field when it has to be created.
        create_record: When True, `default` is ignored and a new, empty
            `types.SimpleNamespace` is stored instead.

    Returns:
        FieldRef: Reference to the (possibly new) slot.

    Raises:
        NotAContainerError: If `target` is neither a mapping nor a record.
    """
    access = accessor_for(target, "get field reference")
    if not access.has(key):
        access.setdefault(key, SimpleNamespace() if create_record else default)
    return FieldRef(target, key)


def extract_fields(target: Any, keys: Iterable[str]) -> dict[str, Any]:
    """Copy the requested fields of `target` into a new dict.

    Keys that `target` does not have are omitted rather than defaulted. The
    result follows the order of `keys`.

    Args:
        target: A mapping, an attribute record, or None.
        keys: Names of the fields to extract.

    Returns:
        dict[str, Any]: The extracted fields; empty when `target` is None.

    Raises:
        NotAContainerError: If `target` is not None, a mapping or a record.
    """
    if target is None:
        return {}
    access = accessor_for(target, "extract fields")
    return {key: access.get(key) for key in keys if access.has(key)}
