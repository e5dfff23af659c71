# tests/test_app.py
"""
Application Wiring Tests - Unit Tests for the Composition Root

This module tests that settings flow into the provider, parser and quote
service, and that startup fails cleanly when configuration is incomplete.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxbot.app (build_quote_service, build_web_app, main)
- fxbot.config (Settings)
- unittest.mock (patch for uvicorn and logging setup)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patch server startup and logging configuration

from fastapi import FastAPI

from fxbot.app import build_quote_service, build_web_app, main
from fxbot.config import Settings

REQUIRED = {
    "BOT_TOKEN": "123456789:" + "A" * 35,
    "WEBHOOK_SECRET": "secret_token-1",
    "CURRENCYLAYER_API_KEY": "0123456789abcdef",
    "PORT": "8080",
}


def _settings(**overrides):
    values = dict(REQUIRED)
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestBuildQuoteService:
    def test_settings_are_passed_through(self):
        settings = _settings(
            BASE_CURRENCY="eur",
            HTTP_TIMEOUT_SECONDS=5,
            RATE_CACHE_SECONDS=30,
            QUOTE_DECIMALS=5,
            DEFAULT_LANGUAGE="en",
            REPLY_ON_NO_MATCH="false",
            INSTRUCTION_GRAMMARS="code",
            RELAXED_PAIR_GRAMMAR="true",
        )

        service = build_quote_service(settings)

        assert service.provider.base_currency == "EUR"
        assert service.provider.timeout == 5
        assert service.provider.ttl.total_seconds() == 30
        assert service.decimals == 5
        assert service.lang == "en"
        assert service.reply_on_no_match is False
        assert service.parser.code_enabled and not service.parser.pair_enabled

    def test_build_web_app(self):
        assert isinstance(build_web_app(_settings()), FastAPI)


class TestMain:
    @patch('fxbot.app.setup_logging')
    def test_missing_port_exits(self, mock_setup_logging, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for key in REQUIRED:
            monkeypatch.delenv(key, raising=False)
        for key in ("BOT_TOKEN", "WEBHOOK_SECRET", "CURRENCYLAYER_API_KEY"):
            monkeypatch.setenv(key, REQUIRED[key])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    @patch('fxbot.app.uvicorn.run')
    @patch('fxbot.app.setup_logging')
    def test_serves_on_configured_port(self, mock_setup_logging, mock_run, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for key, value in REQUIRED.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setenv("HOST", "127.0.0.1")

        main()

        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 8080
