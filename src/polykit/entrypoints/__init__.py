"""Entrypoints (inbound adapters) for POLYKIT.

Expose the library to the outside world, currently as a command-line
interface. Parse and validate inputs, call library functions, and present
results.

Dependency rule: may import any `polykit` module; library modules must not
import from here.
"""
