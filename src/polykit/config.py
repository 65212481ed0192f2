"""Configuration utilities for POLYKIT.

This module centralizes the defaults shared by the library and the CLI, and
the few environment variables that can override them.
"""

import os

PATH_SEPARATOR = "."  # pragma: no mutate

DEFAULT_PAD = " "  # pragma: no mutate
DEFAULT_CROP_MARKER = ""  # pragma: no mutate
DEFAULT_TRIM_MARKER = " (...)"  # pragma: no mutate
DEFAULT_ELLIPSIS = "..."  # pragma: no mutate

CROP_MARKER_ENVVAR = "POLYKIT_CROP_MARKER"  # pragma: no mutate


def get_crop_marker() -> str:
    """Get the overflow marker used when cropping tagged text.

    Returns:
        The value of the `POLYKIT_CROP_MARKER` environment variable when it is
        set (an empty value is honored), otherwise `DEFAULT_CROP_MARKER`.
    """
    return os.environ.get(CROP_MARKER_ENVVAR, DEFAULT_CROP_MARKER)
