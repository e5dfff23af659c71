# src/fxbot/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from fxbot.application.instruction_parser import InstructionParser
from fxbot.application.quote_service import QuoteService, resolve_quote

__all__ = [
    "InstructionParser",
    "QuoteService",
    "resolve_quote",
]
