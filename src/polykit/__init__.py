"""POLYKIT

Small, independent helpers for everyday data wrangling: callable adapters,
uniform field access over mappings and attribute records (with dotted-path
traversal), and a set of string utilities including tag-aware width, pad and
crop for color-tagged terminal text.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
