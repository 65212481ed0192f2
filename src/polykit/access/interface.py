"""Field access interface.

Defines `FieldAccess`, the capability abstraction used to read and write named
fields uniformly, whatever the underlying value is. Two adapters implement it:

- `MappingAccess` (``polykit.access.mapping``) for dict-like containers.
- `RecordAccess` (``polykit.access.record``) for attribute records such as
  dataclass instances or `types.SimpleNamespace`.

Callers normally go through the functions in ``polykit.access.api`` which pick
the right adapter via `accessor_for`.
"""

import abc
from typing import Any


class FieldAccess(abc.ABC):
    """Uniform view over the named fields of a single value.

    Adapters wrap the target without copying it; every mutating call is
    applied to the caller's object in place.
    """

    def __init__(self, target: Any) -> None:
        self._target = target

    @property
    def target(self) -> Any:
        """Return the wrapped value."""
        return self._target

    @abc.abstractmethod
    def has(self, key: str) -> bool:
        """Return True if the target exposes a field named `key`."""

    @abc.abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of field `key`, or `default` if it is absent."""

    @abc.abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Assign `value` to field `key`, creating the field if needed."""

    @abc.abstractmethod
    def delete(self, key: str) -> None:
        """Remove field `key`.

        Removing a field that does not exist is a no-op.
        """

    def setdefault(self, key: str, default: Any = None) -> Any:
        """Ensure field `key` exists, storing `default` if it does not.

        Returns:
            The value held by the field after the call.
        """
        if not self.has(key):
            self.set(key, default)
        return self.get(key)
