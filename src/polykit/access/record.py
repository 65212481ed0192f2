"""`FieldAccess` adapter for attribute records.

A *record* is any object exposing its fields as attributes, stored either in
an instance ``__dict__`` or in ``__slots__``: plain class instances, dataclass
instances (including ``slots=True``) and `types.SimpleNamespace`.

Fields declared on the class count too: plain class attributes (defaults
shared by every instance) and properties. Methods and dunder names never do.

Records that also implement the index protocol (``__contains__`` plus
``__getitem__``) are consulted through it when no attribute matches; an
indexed entry only counts as present when its value is not None.
"""

import inspect
from collections.abc import Mapping, Set
from functools import cache
from typing import Any

from .interface import FieldAccess

__all__ = ["RecordAccess", "is_record"]

_MISSING = object()

# Values of these types carry no named fields, even though they are objects.
_NON_RECORD_TYPES = (
    str,
    bytes,
    bytearray,
    int,
    float,
    complex,
    bool,
    list,
    tuple,
    Set,
    Mapping,
)


@cache
def _slot_names(cls: type) -> frozenset[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slots)
    return frozenset(names - {"__dict__", "__weakref__"})


def is_record(value: Any) -> bool:
    """Return True if `value` should be treated as an attribute record.

    Args:
        value: Any Python value.

    Returns:
        bool: True for objects with an instance ``__dict__`` or declared
        ``__slots__``; False for None, scalars, sequences, sets and mappings.
    """
    if value is None or isinstance(value, _NON_RECORD_TYPES):
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


class RecordAccess(FieldAccess):
    """Field access over an attribute record."""

    def has(self, key: str) -> bool:
        return self._has_attribute(key) or self._index_get(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        if self._has_attribute(key):
            return getattr(self._target, key)
        if (value := self._index_get(key)) is not None:
            return value
        return default

    def set(self, key: str, value: Any) -> None:
        setattr(self._target, key, value)

    def delete(self, key: str) -> None:
        # Class-level fields are shared; only the instance value is removed.
        if self._has_instance_attribute(key):
            delattr(self._target, key)

    def setdefault(self, key: str, default: Any = None) -> Any:
        # Index entries do not count here: the returned value must be the one
        # that `set` writes to.
        if not self._has_attribute(key):
            self.set(key, default)
        return getattr(self._target, key)

    def _has_attribute(self, key: str) -> bool:
        return self._has_instance_attribute(key) or self._has_class_field(key)

    def _has_instance_attribute(self, key: str) -> bool:
        if key in getattr(self._target, "__dict__", {}):
            return True
        return key in _slot_names(type(self._target)) and hasattr(self._target, key)

    def _has_class_field(self, key: str) -> bool:
        cls = type(self._target)
        if key.startswith("__") or key in _slot_names(cls):
            return False
        declared = inspect.getattr_static(cls, key, _MISSING)
        if declared is _MISSING or isinstance(declared, (classmethod, staticmethod)):
            return False
        return isinstance(declared, property) or not callable(declared)

    def _index_get(self, key: str) -> Any:
        target = self._target
        if not (hasattr(target, "__contains__") and hasattr(target, "__getitem__")):
            return None
        if key not in target:
            return None
        return target[key]
