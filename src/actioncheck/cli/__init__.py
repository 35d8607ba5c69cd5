"""Command line interface for actioncheck."""
