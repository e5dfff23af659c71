# src/fxbot/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Language management
- Logging configuration
"""

from fxbot.shared.validators import (
    validate_api_key,
    validate_bot_token,
    validate_currency_code,
    validate_webhook_secret,
    validate_webhook_url,
)
from fxbot.shared.language import (
    translate,
    LANG_CHINESE,
    LANG_ENGLISH,
    SUPPORTED_LANGUAGES,
)

__all__ = [
    "validate_bot_token",
    "validate_webhook_secret",
    "validate_webhook_url",
    "validate_api_key",
    "validate_currency_code",
    "translate",
    "LANG_CHINESE",
    "LANG_ENGLISH",
    "SUPPORTED_LANGUAGES",
]
