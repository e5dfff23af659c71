# src/fxbot/adapters/telegram/handlers.py
"""
Telegram Handlers - Update Dispatch and Replies

This module contains the Telegram handlers for incoming updates. Updates
fall into a closed set of cases:

- text message: answered by the QuoteService, at most one reply
- any other message (sticker, photo, ...): logged and ignored
- any other update (edited message, callback query, ...): logged and ignored

Files that USE this module:
- fxbot.adapters.telegram.bot (register_handlers wires the application)
- tests.test_handlers (unit tests)

Files that this module USES:
- fxbot.application.quote_service (QuoteService answers text messages)
"""
from __future__ import annotations

import asyncio
import logging

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import Application, ContextTypes, MessageHandler, TypeHandler, filters

from fxbot.application.quote_service import QuoteService

logger = logging.getLogger(__name__)

# bot_data key holding the QuoteService instance
QUOTE_SERVICE_KEY = "quote_service"


async def quote_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle a text message: run the quote pipeline and reply once.
    
    The pricing fetch is blocking, so the pipeline runs in a worker thread.
    Send failures are logged and never propagate.
    """
    message = update.message
    user = update.effective_user
    logger.info("User ID is %s", user.id if user else "unknown")
    
    service: QuoteService = context.bot_data[QUOTE_SERVICE_KEY]
    reply = await asyncio.to_thread(service.answer, message.text)
    if reply is None:
        return
    
    try:
        await message.reply_text(reply)
    except TelegramError as e:
        logger.error("Failed to send reply to chat %s: %s", message.chat_id, e)


async def ignore_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log and ignore non-text messages."""
    attachment = update.message.effective_attachment
    logger.info(
        "Unknown message in chat %s: %s",
        update.message.chat_id,
        type(attachment).__name__ if attachment is not None else "no attachment",
    )


async def ignore_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log and ignore updates that are not new messages."""
    logger.info("Unknown event: update %s", update.update_id)


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised by handlers so one bad update never affects the next."""
    update_id = update.update_id if isinstance(update, Update) else None
    logger.error("Exception while handling update %s", update_id, exc_info=context.error)


def build_handlers():
    """
    Build and return list of Telegram bot handlers.
    
    Handlers are tried in order and only the first match runs, so the
    catch-all TypeHandler only sees updates the message handlers declined.
    
    Returns:
        List of handler instances for registration with bot
    """
    return [
        MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT, quote_message),
        MessageHandler(filters.UpdateType.MESSAGE, ignore_message),
        TypeHandler(Update, ignore_update),
    ]


def register_handlers(application: Application, quote_service: QuoteService) -> None:
    """
    Register handlers and the quote service on an application.
    
    Args:
        application: Telegram Application
        quote_service: Service answering text messages (stored in bot_data)
    """
    application.bot_data[QUOTE_SERVICE_KEY] = quote_service
    for h in build_handlers():
        application.add_handler(h)
    application.add_error_handler(on_error)
