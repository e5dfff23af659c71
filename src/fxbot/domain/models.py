# src/fxbot/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Rate table snapshots fetched from the pricing provider
- Parsed user instructions (currency pair or single code)
- Resolved quotes

Files that USE this module:
- fxbot.application.* (parser and quote service build and consume these models)
- fxbot.adapters.* (providers create RateTable, formatter renders Quote)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # isfinite check on looked-up rates
from dataclasses import dataclass, field  # Decorator for creating data classes
from types import MappingProxyType  # Read-only view over the quotes dict
from typing import Mapping, Union  # Type hints for mappings and unions


@dataclass(frozen=True)
class RateTable:
    """
    One fetched snapshot of base-relative exchange rates.
    
    Attributes:
        success: Whether the upstream fetch and decode succeeded
        timestamp: Provider-reported epoch seconds (informational only)
        base_currency: Reference currency every quote is expressed against
        quotes: Rates keyed by base + target code (e.g. "USDEUR")
    """
    success: bool
    timestamp: int
    base_currency: str
    quotes: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Quotes are read-only once built
        object.__setattr__(self, "quotes", MappingProxyType(dict(self.quotes)))

    @classmethod
    def failed(cls, base_currency: str) -> "RateTable":
        """Build the table returned when the provider could not be reached or decoded."""
        return cls(success=False, timestamp=0, base_currency=base_currency, quotes={})

    def rate_for(self, code: str) -> float:
        """
        Look up the base-relative rate for a currency code.
        
        The base currency itself is worth exactly 1.0 when the provider does
        not list base+base, so "/USD" on a USD table quotes USD/USD at 1.0
        instead of reporting an unknown code. A NaN or infinite rate counts
        as unknown.
        
        Returns:
            The rate, or 0.0 when the code is unknown
        """
        key = self.base_currency + code
        if key not in self.quotes and code == self.base_currency:
            return 1.0
        rate = self.quotes.get(key, 0.0)
        return rate if math.isfinite(rate) else 0.0


@dataclass(frozen=True)
class PairInstruction:
    """Quote one unit of source in target (e.g. "EUR/GBP")."""
    source: str
    target: str


@dataclass(frozen=True)
class SingleCodeInstruction:
    """
    Quote one unit of the base currency in code (e.g. "/EUR").
    
    The base code itself (e.g. "/USD" on a USD table) always resolves, to
    1.0 when the provider omits the base+base entry.
    """
    code: str


Instruction = Union[PairInstruction, SingleCodeInstruction]


@dataclass(frozen=True)
class Quote:
    """
    A resolved exchange rate.
    
    Attributes:
        source: Currency being priced
        target: Currency the price is expressed in
        rate: Units of target bought by one unit of source
    """
    source: str
    target: str
    rate: float
