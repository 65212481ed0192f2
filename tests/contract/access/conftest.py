"""Pytest fixtures for FieldAccess contract tests.

Provided fixtures
-----------------
- **access**: Parametrized adapter factory returning a **fresh** `FieldAccess`
  over a target that holds exactly one field, ``present = 1``. Extend by
  adding an identifier to `params` and a branch below.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from polykit.access import FieldAccess, accessor_for


@dataclass
class _Record:
    present: int


@pytest.fixture(params=["dict", "ordered-dict", "namespace", "dataclass"])
def access(request: pytest.FixtureRequest) -> FieldAccess:
    """Return a fresh adapter for the requested backing value.

    Current params:
      - `"dict"`         → `MappingAccess` over a plain dict
      - `"ordered-dict"` → `MappingAccess` over an `OrderedDict`
      - `"namespace"`    → `RecordAccess` over a `SimpleNamespace`
      - `"dataclass"`    → `RecordAccess` over a dataclass instance
    """
    match request.param:
        case "dict":
            target = {"present": 1}
        case "ordered-dict":
            target = OrderedDict(present=1)
        case "namespace":
            target = SimpleNamespace(present=1)
        case "dataclass":
            target = _Record(present=1)
        case _:
            raise ValueError(f"unknown target type: {request.param}")
    return accessor_for(target)
