"""Uniform field access over mappings and attribute records.

Re-exports the functional API from ``api`` and ``paths`` so callers can write
``from polykit.access import get_at, set_at``.
"""

from .api import (
    FieldRef,
    accessor_for,
    extract_fields,
    get_field,
    get_field_ref,
    has_field,
    set_field,
)
from .interface import FieldAccess
from .paths import get_at, get_ref_at, set_at, split_path, unset_at

__all__ = [
    "FieldAccess",
    "FieldRef",
    "accessor_for",
    "extract_fields",
    "get_at",
    "get_field",
    "get_field_ref",
    "get_ref_at",
    "has_field",
    "set_at",
    "set_field",
    "split_path",
    "unset_at",
]
