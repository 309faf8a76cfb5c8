"""Command constants, redirection operators and quote tracking for a small shell."""

__version__ = "0.1.0"
__all__ = ["constants", "quoting"]