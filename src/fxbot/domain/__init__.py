# src/fxbot/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from fxbot.domain.models import (
    Instruction,
    PairInstruction,
    Quote,
    RateTable,
    SingleCodeInstruction,
)
from fxbot.domain.errors import (
    DomainError,
    QuoteError,
    ServiceUnreachableError,
    UnknownCurrencyError,
)

__all__ = [
    "RateTable",
    "Instruction",
    "PairInstruction",
    "SingleCodeInstruction",
    "Quote",
    "DomainError",
    "QuoteError",
    "ServiceUnreachableError",
    "UnknownCurrencyError",
]
