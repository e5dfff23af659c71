# src/fxbot/app.py
"""
Application Entry Point - Bot Initialization and Startup

This module serves as the composition root for the fxbot webhook bot.
It loads settings once, wires every component explicitly and starts the
HTTP server.

Files that USE this module:
- python -m fxbot (module entry point)
- fxbot console script

Files that this module USES:
- fxbot.shared.logging_conf (setup_logging for logging configuration)
- fxbot.config (load_settings for configuration management)
- fxbot.adapters.providers.currencylayer (rate table fetcher)
- fxbot.application (InstructionParser, QuoteService)
- fxbot.adapters.telegram.bot (build_application)
- fxbot.adapters.web.server (create_app)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes

import uvicorn  # ASGI server running the webhook app
from fastapi import FastAPI
from pydantic import ValidationError  # Raised when required settings are missing or invalid

from fxbot.adapters.providers.currencylayer import CurrencyLayerProvider
from fxbot.adapters.telegram.bot import build_application
from fxbot.adapters.web.server import create_app
from fxbot.application.instruction_parser import InstructionParser
from fxbot.application.quote_service import QuoteService
from fxbot.config import Settings, load_settings
from fxbot.shared.logging_conf import setup_logging


def build_quote_service(settings: Settings) -> QuoteService:
    """
    Build the message-to-quote pipeline from settings.
    
    Args:
        settings: Loaded settings
        
    Returns:
        QuoteService wired with the currencylayer provider and the configured parser
    """
    provider = CurrencyLayerProvider(
        api_key=settings.currencylayer_key,
        base_url=settings.currencylayer_url,
        base_currency=settings.base_currency,
        timeout=settings.http_timeout_seconds,
        cache_seconds=settings.rate_cache_seconds,
    )
    parser = InstructionParser(
        grammars=settings.grammars,
        relaxed_pair=settings.relaxed_pair_grammar,
    )
    return QuoteService(
        provider=provider,
        parser=parser,
        decimals=settings.quote_decimals,
        lang=settings.default_language,
        reply_on_no_match=settings.reply_on_no_match,
    )


def build_web_app(settings: Settings) -> FastAPI:
    """
    Wire the full application: quote pipeline, Telegram application and HTTP server.
    
    Args:
        settings: Loaded settings
        
    Returns:
        FastAPI app ready to be served
    """
    service = build_quote_service(settings)
    application = build_application(
        settings.bot_token,
        service,
        timeout=settings.http_timeout_seconds,
    )
    return create_app(settings, application)


def main() -> None:
    """
    Initialize and start the webhook bot.
    
    This function:
    1. Loads and validates configuration (exits with status 1 if invalid, e.g. PORT unset)
    2. Sets up logging
    3. Builds the quote pipeline, Telegram application and webhook server
    4. Serves HTTP on HOST:PORT until stopped
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        setup_logging()
        logging.getLogger(__name__).error("Invalid configuration: %s", e)
        sys.exit(1)

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_to_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)

    app = build_web_app(settings)

    logger.info(
        "Starting webhook server on %s:%d (base=%s, grammars=%s, decimals=%d, cache=%ds)",
        settings.host,
        settings.port,
        settings.base_currency,
        ",".join(settings.grammars),
        settings.quote_decimals,
        settings.rate_cache_seconds,
    )
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None, access_log=False)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (KeyboardInterrupt)")


if __name__ == "__main__":
    main()
