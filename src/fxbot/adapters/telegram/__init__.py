# src/fxbot/adapters/telegram/__init__.py
"""
Telegram Adapters - Bot Interface

This package contains Telegram bot adapters:
- Application builder (webhook mode)
- Update handlers
"""

from fxbot.adapters.telegram.bot import build_application
from fxbot.adapters.telegram.handlers import build_handlers, register_handlers

__all__ = [
    "build_application",
    "build_handlers",
    "register_handlers",
]
