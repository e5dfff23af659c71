# src/fxbot/adapters/web/server.py
"""
Webhook Server - HTTP Entry Points

FastAPI application exposing:

- POST /callback: Telegram webhook. The secret token header must match
  WEBHOOK_SECRET (400 otherwise); a body that does not decode into a
  telegram.Update yields 500. Valid updates are dispatched to the
  python-telegram-bot Application.
- GET /ping: liveness check, answers "PONG".

Files that USE this module:
- fxbot.app (create_app builds the ASGI app served by uvicorn)
- tests.test_server (unit tests)

Files that this module USES:
- fxbot.config (Settings for the webhook secret and URL)
- fxbot.shared.logging_conf (access_log_middleware)
"""
from __future__ import annotations

import hmac
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette import status
from telegram import Update
from telegram.ext import Application

from fxbot import __version__
from fxbot.config import Settings
from fxbot.shared.logging_conf import access_log_middleware

logger = logging.getLogger(__name__)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def _secret_matches(received: str, expected: str) -> bool:
    """Constant-time comparison of the webhook secret token."""
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal_error", "detail": "An unexpected error occurred."},
    )


def create_app(settings: Settings, application: Application) -> FastAPI:
    """
    Application factory.
    
    Args:
        settings: Loaded settings (webhook secret, optional webhook URL)
        application: Telegram Application with handlers registered
        
    Returns:
        FastAPI app whose lifespan initializes and shuts down the Telegram application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with application:
            if settings.webhook_endpoint:
                await application.bot.set_webhook(
                    url=settings.webhook_endpoint,
                    secret_token=settings.webhook_secret,
                    allowed_updates=Update.ALL_TYPES,
                )
                logger.info("Webhook registered at %s", settings.webhook_endpoint)
            yield
        logger.info("Telegram application shut down")

    app = FastAPI(title="fxbot", version=__version__, lifespan=lifespan)
    app.middleware("http")(access_log_middleware)
    app.add_exception_handler(Exception, server_error_handler)

    @app.get("/ping", response_class=PlainTextResponse)
    async def ping() -> str:
        return "PONG"

    @app.post("/callback", response_class=PlainTextResponse)
    async def callback(request: Request) -> str:
        received = request.headers.get(SECRET_TOKEN_HEADER, "")
        if not _secret_matches(received, settings.webhook_secret):
            logger.warning("Rejected webhook delivery: invalid secret token")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid signature")

        try:
            payload = await request.json()
            update = Update.de_json(payload, application.bot)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.error("Failed to parse webhook payload: %s", e)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="invalid payload")
        if update is None:
            logger.error("Failed to parse webhook payload: empty update")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="invalid payload")

        await application.process_update(update)
        return "OK"

    return app
