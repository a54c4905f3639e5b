"""
Exception types raised by the style registry and its services.

Each error also derives from the closest built-in exception so callers
that already catch KeyError/ValueError/OSError keep working.
"""

from __future__ import annotations


class LexerStyleError(Exception):
    """Base class for style registry errors."""


class NotFoundError(LexerStyleError, KeyError):
    """Unknown semantic name, external name or slot index."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ''


class CardinalityMismatchError(LexerStyleError, ValueError):
    """A bulk replacement did not match the table's slot count."""

    def __init__(self, language_name: str, expected: int, actual: int):
        super().__init__(
            f"{language_name} holds {expected} color slots, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class IOFailureError(LexerStyleError, OSError):
    """A color or style file is missing, unreadable or unwritable."""


class ParseFailureError(LexerStyleError, ValueError):
    """A document or color value could not be parsed."""


class UnsupportedLanguageError(LexerStyleError):
    """The language has no dispatch entry."""
