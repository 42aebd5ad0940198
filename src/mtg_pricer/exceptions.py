"""Custom exceptions for the deck pricer."""

from __future__ import annotations


class PricerError(Exception):
    """Base exception for deck pricer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DecklistValidationError(PricerError):
    """Raised when a decklist line cannot be turned into an entry.

    Validation is all-or-nothing: the first bad line aborts the run before
    any request is sent.
    """

    reason = "invalid entry"

    def __init__(self, line: str, line_number: int | None = None):
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{self.reason}: {line!r}")
        self.line = line
        self.line_number = line_number


class InvalidFormatError(DecklistValidationError):
    """Raised when a line is not `<quantity> <card name>`."""

    reason = "invalid card entry format"


class InvalidQuantityError(DecklistValidationError):
    """Raised when the leading quantity does not fit an unsigned 32-bit integer."""

    reason = "invalid quantity"


class NoPriceFoundError(PricerError):
    """Raised when no eligible printing exists for a card name."""

    def __init__(self, card_name: str):
        super().__init__(f"No price found for {card_name}")
        self.card_name = card_name


class ScryfallError(PricerError):
    """Raised when a Scryfall request fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
