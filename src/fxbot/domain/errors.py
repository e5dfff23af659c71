# src/fxbot/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised while resolving
a user's instruction against a rate table.
"""

from typing import Iterable


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class QuoteError(DomainError):
    """Raised when an instruction cannot be turned into a quote."""
    pass


class ServiceUnreachableError(QuoteError):
    """Raised when the rate table could not be fetched or decoded."""
    pass


class UnknownCurrencyError(QuoteError):
    """Raised when a requested code is absent from the rate table or priced at zero."""

    def __init__(self, codes: Iterable[str]):
        self.codes = tuple(codes)
        super().__init__(f"Unknown currency code(s): {', '.join(self.codes)}")
