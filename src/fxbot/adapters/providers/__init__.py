# src/fxbot/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the RateTableProvider interface.
"""

from fxbot.adapters.providers.base import RateTableProvider
from fxbot.adapters.providers.currencylayer import CurrencyLayerProvider

__all__ = [
    "RateTableProvider",
    "CurrencyLayerProvider",
]
