# src/fxbot/adapters/formatting/formatter.py
"""
Message Formatter - Reply Text Formatting

This module renders the outcome of a quote request as the text sent back
to the user: "<SRC>/<DST>  <value>" for a resolved quote, or one of the
fixed localized error strings.

Files that USE this module:
- fxbot.application.quote_service (formats every reply)
- tests.test_formatter (unit tests)

Files that this module USES:
- fxbot.domain (Quote and quote errors)
- fxbot.shared.language (translate for localized error strings)
"""
from __future__ import annotations

import logging
from typing import Union

from fxbot.domain.errors import QuoteError, ServiceUnreachableError, UnknownCurrencyError
from fxbot.domain.models import Quote
from fxbot.shared.language import LANG_CHINESE, translate

logger = logging.getLogger(__name__)


def format_rate(rate: float, decimals: int = 3) -> str:
    """
    Format a rate as fixed-point decimal.
    
    Args:
        rate: Exchange rate
        decimals: Number of fractional digits (default: 3)
        
    Returns:
        Rate string, e.g. '0.889'
    """
    return f"{rate:.{decimals}f}"


def format_quote(quote: Quote, decimals: int = 3) -> str:
    """
    Format a resolved quote.
    
    Returns:
        String like 'EUR/GBP  0.889' (two spaces before the value)
    """
    return f"{quote.source}/{quote.target}  {format_rate(quote.rate, decimals)}"


def format_reply(result: Union[Quote, QuoteError], decimals: int = 3, lang: str = LANG_CHINESE) -> str:
    """
    Format the outcome of resolving an instruction.
    
    Args:
        result: A Quote, or the QuoteError raised while resolving
        decimals: Fractional digits for quotes
        lang: Language of the error strings
        
    Returns:
        Reply text
    """
    if isinstance(result, Quote):
        return format_quote(result, decimals)
    if isinstance(result, UnknownCurrencyError):
        return translate("unknown_currency", lang)
    if isinstance(result, ServiceUnreachableError):
        return translate("service_unreachable", lang)
    logger.warning("No dedicated reply for %s, using service-unreachable text", type(result).__name__)
    return translate("service_unreachable", lang)


def format_no_match(lang: str = LANG_CHINESE) -> str:
    """Reply for text that matches no supported instruction grammar."""
    return translate("invalid_format", lang)
