# src/fxbot/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for rate table providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- fxbot.adapters.providers.currencylayer (CurrencyLayerProvider implements RateTableProvider)
- fxbot.application.quote_service (QuoteService depends on the interface)

Files that this module USES:
- fxbot.domain.models (RateTable)
"""
from abc import ABC, abstractmethod

from fxbot.domain.models import RateTable


class RateTableProvider(ABC):
    @abstractmethod
    def fetch_table(self) -> RateTable:
        """Return a fresh rate table; failures are reported via RateTable.success, never raised."""
        raise NotImplementedError
