# src/fxbot/adapters/formatting/__init__.py
"""
Formatting Adapters - Message Formatting

This package contains the reply formatter for chat output.
"""

from fxbot.adapters.formatting.formatter import (
    format_no_match,
    format_quote,
    format_rate,
    format_reply,
)

__all__ = [
    "format_rate",
    "format_quote",
    "format_reply",
    "format_no_match",
]
