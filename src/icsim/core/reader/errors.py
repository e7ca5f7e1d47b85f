"""Reader error kinds.

All errors are raised synchronously by the failing call and leave the
session state unchanged.
"""

from __future__ import annotations


class ReaderError(Exception):
    """Base class for reader errors."""


class InvalidState(ReaderError):
    """Operation is not legal in the current reader state."""

    def __init__(self, message: str, state=None) -> None:
        super().__init__(message)
        self.state = state


class NotFound(ReaderError, KeyError):
    """Requested card identifier is not in the catalog."""

    def __init__(self, card_id: str) -> None:
        super().__init__(f"card '{card_id}' not found")
        self.card_id = card_id

    def __str__(self) -> str:
        return self.args[0]


class TypeMismatch(ReaderError):
    """Operation requires a card type other than the inserted one."""

    def __init__(self, expected, actual) -> None:
        super().__init__(f"expected a {expected} card, got {actual}")
        self.expected = expected
        self.actual = actual


class CardDataError(ReaderError, ValueError):
    """Stored card data cannot be decoded."""
