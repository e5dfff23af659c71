# src/fxbot/adapters/telegram/bot.py
"""
Telegram Bot - Application Builder

This module builds the python-telegram-bot Application used in webhook
mode: updates arrive through the HTTP server instead of polling, so the
application is built without an Updater.
"""

from __future__ import annotations

from telegram.ext import Application

from fxbot.adapters.telegram.handlers import register_handlers
from fxbot.application.quote_service import QuoteService


def build_application(bot_token: str, quote_service: QuoteService, timeout: int = 15) -> Application:
    """
    Build Telegram bot application with handlers registered.
    
    Args:
        bot_token: Telegram bot token
        quote_service: Service answering incoming text messages
        timeout: Connect/read timeout in seconds for Bot API calls
        
    Returns:
        Configured Application instance (not yet initialized)
    """
    application = (
        Application.builder()
        .token(bot_token)
        .updater(None)
        .connect_timeout(timeout)
        .read_timeout(timeout)
        .build()
    )
    register_handlers(application, quote_service)
    return application
