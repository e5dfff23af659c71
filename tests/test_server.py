# tests/test_server.py
"""
Webhook Server Tests - Unit Tests for the HTTP Surface

This module tests the FastAPI app: /ping, secret token verification on
/callback (400), payload parse failures (500), dispatch of valid updates,
webhook registration during startup and the per-request access log.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxbot.adapters.web.server (create_app under test)
- fxbot.config (Settings built from explicit values)
- fxbot.shared.logging_conf (access log middleware)
- fastapi.testclient (TestClient for HTTP requests)
- unittest.mock (MagicMock, AsyncMock for the Telegram application)
- pytest (testing framework)
"""
import asyncio
import logging

import pytest  # Testing framework for writing and running tests

from unittest.mock import AsyncMock, MagicMock, Mock  # Mock Telegram application without network access

from fastapi.testclient import TestClient
from telegram import Bot, Update

from fxbot.adapters.web.server import SECRET_TOKEN_HEADER, create_app
from fxbot.config import Settings
from fxbot.shared.logging_conf import access_log_middleware

BOT_TOKEN = "123456789:" + "A" * 35
SECRET = "s3cret-token_1"

UPDATE_PAYLOAD = {
    "update_id": 10,
    "message": {
        "message_id": 5,
        "date": 1700000000,
        "chat": {"id": 42, "type": "private"},
        "from": {"id": 42, "is_bot": False, "first_name": "Ada"},
        "text": "EUR/GBP",
    },
}


def _settings(**overrides):
    values = {
        "BOT_TOKEN": BOT_TOKEN,
        "WEBHOOK_SECRET": SECRET,
        "CURRENCYLAYER_API_KEY": "0123456789abcdef",
        "PORT": 8080,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _application():
    application = MagicMock()
    application.bot = Bot(BOT_TOKEN)
    application.process_update = AsyncMock()
    return application


class TestPing:
    def test_ping(self):
        client = TestClient(create_app(_settings(), _application()))

        response = client.get("/ping")

        assert response.status_code == 200
        assert response.text == "PONG"


class TestCallback:
    def test_valid_update_is_dispatched(self):
        application = _application()
        client = TestClient(create_app(_settings(), application))

        response = client.post("/callback", json=UPDATE_PAYLOAD, headers={SECRET_TOKEN_HEADER: SECRET})

        assert response.status_code == 200
        application.process_update.assert_awaited_once()
        update = application.process_update.await_args.args[0]
        assert isinstance(update, Update)
        assert update.message.text == "EUR/GBP"

    @pytest.mark.parametrize("headers", [{}, {SECRET_TOKEN_HEADER: "wrong"}, {SECRET_TOKEN_HEADER: ""}])
    def test_bad_secret_is_rejected(self, headers):
        application = _application()
        client = TestClient(create_app(_settings(), application))

        response = client.post("/callback", json=UPDATE_PAYLOAD, headers=headers)

        assert response.status_code == 400
        application.process_update.assert_not_awaited()

    def test_non_json_body(self):
        application = _application()
        client = TestClient(create_app(_settings(), application))

        response = client.post("/callback", content=b"not json", headers={SECRET_TOKEN_HEADER: SECRET})

        assert response.status_code == 500
        application.process_update.assert_not_awaited()

    @pytest.mark.parametrize("payload", [{}, {"message": {"text": "EUR/GBP"}}, "just a string"])
    def test_undecodable_update(self, payload):
        application = _application()
        client = TestClient(create_app(_settings(), application))

        response = client.post("/callback", json=payload, headers={SECRET_TOKEN_HEADER: SECRET})

        assert response.status_code == 500
        application.process_update.assert_not_awaited()


class TestAccessLog:
    def test_ping_is_logged(self, caplog):
        client = TestClient(create_app(_settings(), _application()))

        with caplog.at_level(logging.INFO, logger="fxbot.access"):
            client.get("/ping")

        records = [r for r in caplog.records if r.name == "fxbot.access"]
        assert len(records) == 1
        assert "GET /ping -> 200" in records[0].getMessage()
        assert records[0].getMessage().endswith("ms)")

    def test_rejected_callback_is_logged(self, caplog):
        client = TestClient(create_app(_settings(), _application()))

        with caplog.at_level(logging.INFO, logger="fxbot.access"):
            client.post("/callback", json=UPDATE_PAYLOAD, headers={SECRET_TOKEN_HEADER: "wrong"})

        assert "POST /callback -> 400" in caplog.text

    def test_failing_request_is_logged_as_500(self, caplog):
        request = Mock(method="POST")
        request.url.path = "/callback"
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with caplog.at_level(logging.INFO, logger="fxbot.access"):
            with pytest.raises(RuntimeError):
                asyncio.run(access_log_middleware(request, call_next))

        assert "POST /callback -> 500" in caplog.text


class TestLifespan:
    def test_registers_webhook_when_url_set(self):
        application = _application()
        application.bot = MagicMock()
        application.bot.set_webhook = AsyncMock()
        app = create_app(_settings(WEBHOOK_URL="https://bot.example.com/"), application)

        with TestClient(app) as client:
            assert client.get("/ping").status_code == 200

        application.bot.set_webhook.assert_awaited_once_with(
            url="https://bot.example.com/callback",
            secret_token=SECRET,
            allowed_updates=Update.ALL_TYPES,
        )
        application.__aenter__.assert_awaited_once()
        application.__aexit__.assert_awaited_once()

    def test_no_registration_without_url(self):
        application = _application()
        application.bot = MagicMock()
        application.bot.set_webhook = AsyncMock()

        with TestClient(create_app(_settings(), application)):
            pass

        application.bot.set_webhook.assert_not_awaited()
