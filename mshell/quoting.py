"""Helpers for tracking quotes and whitespace while validating command lines."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("\"'")


@dataclass
class QuoteInfo:
    """State of an open quote while scanning a command line."""

    in_quotes: bool = False
    quote_char: str = ""
    start_pos: int = -1

    def reset(self) -> None:
        """Return to the state outside any quote."""
        self.in_quotes = False
        self.quote_char = ""
        self.start_pos = -1

    def process_quote(self, c: str, pos: int) -> None:
        """Open a quote at ``pos`` or close the current one if ``c`` matches it."""
        if not self.in_quotes:
            self.in_quotes = True
            self.quote_char = c
            self.start_pos = pos
        elif c == self.quote_char:
            self.in_quotes = False
            self.quote_char = ""

    def process_space_quote(self, c: str) -> None:
        """Like process_quote, but without recording where the quote opened."""
        if not self.in_quotes:
            self.in_quotes = True
            self.quote_char = c
        elif c == self.quote_char:
            self.in_quotes = False
            self.quote_char = ""


def skip_whitespace(command: str) -> int:
    """Return the index of the first non-whitespace character of ``command``."""
    for index, char in enumerate(command):
        if char not in _WHITESPACE:
            return index
    return len(command)


def is_quote(c: str) -> bool:
    """Tell whether ``c`` is a single or double quote."""
    return c in _QUOTES and len(c) == 1


def init_space_check(command: str | None, pos: int) -> bool:
    """Tell whether ``command`` and ``pos`` are usable for a space check."""
    return command is not None and pos >= 0