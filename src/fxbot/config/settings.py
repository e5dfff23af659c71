# src/fxbot/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Settings are loaded once at startup from environment variables (and an
optional .env file), validated, and then passed explicitly to the
components that need them.

Files that USE this module:
- fxbot.app (loads settings and wires every component from them)
- fxbot.adapters.web.server (webhook secret and URL)
- tests.test_settings (unit tests)

Files that this module USES:
- fxbot.shared.validators (validation functions for settings)
- fxbot.shared.language (supported reply languages)
- fxbot.application.instruction_parser (grammar names and their order)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional, Tuple  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxbot.application.instruction_parser import GRAMMARS
from fxbot.shared.language import SUPPORTED_LANGUAGES
from fxbot.shared.validators import (
    validate_api_key,  # Validate API key format
    validate_bot_token,  # Validate Telegram bot token format
    validate_currency_code,  # Validate three-letter currency code
    validate_webhook_secret,  # Validate webhook secret token charset
    validate_webhook_url,  # Validate public HTTPS webhook URL
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )
    
    # --- Telegram ---
    bot_token: str = Field(..., alias="BOT_TOKEN")
    webhook_secret: str = Field(..., alias="WEBHOOK_SECRET")
    webhook_url: Optional[str] = Field(default=None, alias="WEBHOOK_URL")
    
    # --- Pricing provider (currencylayer) ---
    currencylayer_key: str = Field(..., alias="CURRENCYLAYER_API_KEY")
    currencylayer_url: str = Field(default="http://apilayer.net/api/live", alias="CURRENCYLAYER_URL")
    base_currency: str = Field(default="USD", alias="BASE_CURRENCY")
    
    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=15, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    
    # --- Cache Settings (0 disables caching: every message fetches fresh rates) ---
    rate_cache_seconds: int = Field(default=0, alias="RATE_CACHE_SECONDS", ge=0, le=3600)
    
    # --- Message parsing and replies ---
    instruction_grammars: str = Field(default="pair,code", alias="INSTRUCTION_GRAMMARS")
    relaxed_pair_grammar: bool = Field(default=False, alias="RELAXED_PAIR_GRAMMAR")
    reply_on_no_match: bool = Field(default=True, alias="REPLY_ON_NO_MATCH")
    quote_decimals: int = Field(default=3, alias="QUOTE_DECIMALS", ge=0, le=10)
    default_language: str = Field(default="zh", alias="DEFAULT_LANGUAGE")
    
    # --- Web server ---
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(..., alias="PORT", ge=1, le=65535)
    
    # --- Logging (for server deployment) ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    @property
    def grammars(self) -> Tuple[str, ...]:
        """Enabled instruction grammars, in the order the parser tries them."""
        enabled = {g.strip().lower() for g in self.instruction_grammars.split(",") if g.strip()}
        return tuple(g for g in GRAMMARS if g in enabled)
    
    @property
    def webhook_endpoint(self) -> Optional[str]:
        """Full URL Telegram should deliver updates to, or None when registration is disabled."""
        if not self.webhook_url:
            return None
        return self.webhook_url.rstrip("/") + "/callback"
    
    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str) -> str:
        """Validate bot token format."""
        if not validate_bot_token(v):
            raise ValueError("Invalid BOT_TOKEN format")
        return v
    
    @field_validator("webhook_secret")
    @classmethod
    def validate_webhook_secret(cls, v: str) -> str:
        """Validate webhook secret token."""
        if not validate_webhook_secret(v):
            raise ValueError("WEBHOOK_SECRET must be 1-256 characters of A-Z, a-z, 0-9, _ or -")
        return v
    
    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate webhook URL (optional)."""
        if v and not validate_webhook_url(v):
            raise ValueError("WEBHOOK_URL must be an https:// URL")
        return v or None
    
    @field_validator("currencylayer_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format."""
        if not validate_api_key(v):
            raise ValueError("Invalid CURRENCYLAYER_API_KEY format")
        return v
    
    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Validate and normalize the base currency code."""
        if not validate_currency_code(v):
            raise ValueError("BASE_CURRENCY must be a three-letter currency code")
        return v.upper()
    
    @field_validator("instruction_grammars")
    @classmethod
    def validate_grammars(cls, v: str) -> str:
        """Validate the comma-separated list of enabled grammars."""
        names = [g.strip().lower() for g in v.split(",") if g.strip()]
        if not names:
            raise ValueError("INSTRUCTION_GRAMMARS must enable at least one grammar")
        unknown = [g for g in names if g not in GRAMMARS]
        if unknown:
            raise ValueError(f"Unknown INSTRUCTION_GRAMMARS entries: {unknown}; allowed: {list(GRAMMARS)}")
        return v
    
    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError("DEFAULT_LANGUAGE must be 'zh' or 'en'")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load settings once at process start.
    
    Args:
        env_file: Optional .env path overriding the default ./.env
        
    Returns:
        Validated, immutable Settings instance
        
    Raises:
        pydantic.ValidationError: If a required variable (e.g. PORT) is unset or invalid
    """
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


# ============================================================================
# Deployment Instructions
# ============================================================================
#
# 1. Provide BOT_TOKEN, WEBHOOK_SECRET, CURRENCYLAYER_API_KEY and PORT
#    (environment or .env). Set WEBHOOK_URL to the public https:// base URL
#    to have the bot register <WEBHOOK_URL>/callback with Telegram on startup.
#
# 2. Run the bot:
#    python -m fxbot
#
# 3. Check it is up:
#    curl http://localhost:$PORT/ping
#
# ============================================================================
