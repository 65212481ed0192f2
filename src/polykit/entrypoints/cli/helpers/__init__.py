"""CLI helpers for POLYKIT.

Utilities used by the command-line interface: logger-level option parsing,
input decoding, and message emitters that write to stderr with emoji→ASCII
fallbacks.
"""

from .inputs import parse_json_value, read_json_document, read_text
from .log_level_parser import parse_log_level
from .messages import warn

__all__ = [
    "parse_json_value",
    "parse_log_level",
    "read_json_document",
    "read_text",
    "warn",
]
