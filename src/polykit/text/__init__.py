"""String helpers.

Single-purpose modules grouped by concern:

- ``predicates``: prefix/suffix checks.
- ``segments``: delimiter-based segment extraction and removal.
- ``patterns``: regex-driven matching and extraction.
- ``case``: camelCase / hyphenated / delimited conversions.
- ``padding``: codepoint-aware padding with multi-character pad strings.
- ``tagged``: width, pad and crop for text carrying inline ``<tag>`` markup.
- ``trim``: word-boundary truncation of plain and HTML text.
- ``misc``: joining, indentation, pluralization, JS string encoding.

Nothing is re-exported at the package level; import helpers from their
defining modules.
"""
