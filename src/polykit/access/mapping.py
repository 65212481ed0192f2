"""`FieldAccess` adapter for mapping containers."""

from collections.abc import Mapping, MutableMapping
from typing import Any

from polykit.errors import NotAContainerError

from .interface import FieldAccess

__all__ = ["MappingAccess"]


class MappingAccess(FieldAccess):
    """Field access over a `collections.abc.Mapping`.

    Reads work on any mapping. Writes require a `MutableMapping`; a read-only
    mapping (e.g. `types.MappingProxyType`) raises `NotAContainerError`.
    """

    _target: Mapping[str, Any]

    def has(self, key: str) -> bool:
        return key in self._target

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._target:
            return self._target[key]
        return default

    def set(self, key: str, value: Any) -> None:
        self._writable("set field")[key] = value

    def delete(self, key: str) -> None:
        self._writable("delete field").pop(key, None)

    def _writable(self, operation: str) -> MutableMapping[str, Any]:
        if not isinstance(self._target, MutableMapping):
            raise NotAContainerError(self._target, operation)
        return self._target
