"""Prefix and suffix predicates."""


def begins_with(text: str, prefix: str) -> bool:
    """Return True if `text` starts with `prefix` (an empty prefix always matches)."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if `text` ends with `suffix` (an empty suffix always matches)."""
    return text.endswith(suffix)
