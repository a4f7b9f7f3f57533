"""Structured error taxonomy for pricing, catalog and input failures."""

from __future__ import annotations


class TheaterError(Exception):
    """Base class for all theater domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class UnknownGenreError(TheaterError):
    """Raised when a play carries a genre tag the pricing rules do not know."""

    def __init__(self, genre: str):
        self.genre = genre
        super().__init__("UNKNOWN_GENRE", "PRICING", f"unknown type: {genre}")


class PlayNotFoundError(TheaterError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__("PLAY_NOT_FOUND", "CATALOG", f"play not found: {play_id}")


class InvoiceFormatError(TheaterError):
    def __init__(self, explanation: str):
        super().__init__("INVOICE_FORMAT", "INPUT", explanation)


class ConfigError(TheaterError):
    def __init__(self, explanation: str):
        super().__init__("CONFIG", "CONFIG", explanation)


class CustomerNotFoundError(TheaterError):
    def __init__(self, customer: str):
        self.customer = customer
        super().__init__("CUSTOMER_NOT_FOUND", "INPUT", f"No invoice found for customer {customer!r}")
