"""POLYKIT command-line interface."""
