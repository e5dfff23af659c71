# src/fxbot/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for the bot's configuration.
It validates bot tokens, webhook secrets, API keys, webhook URLs and
currency codes so that invalid configuration fails fast at startup.

Files that USE this module:
- fxbot.config.settings (uses validation functions in Settings field validators)
- tests.test_settings (unit tests)

Files that this module USES:
- None (pure utility functions)
"""
import re


def validate_bot_token(token: str) -> bool:
    """
    Validate Telegram bot token format.
    
    Args:
        token: Bot token to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not token:
        return False
    
    # Bot tokens should be in format: 123456789:ABCDEFghijklmnopQRSTUVwxyz
    pattern = r'^\d{8,10}:[A-Za-z0-9_-]{35}$'
    return bool(re.match(pattern, token))


def validate_webhook_secret(secret: str) -> bool:
    """
    Validate the webhook secret token.
    
    Telegram echoes this value in the X-Telegram-Bot-Api-Secret-Token header
    and only accepts 1-256 characters from A-Z, a-z, 0-9, _ and -.
    
    Args:
        secret: Secret token to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not secret:
        return False
    return bool(re.match(r'^[A-Za-z0-9_-]{1,256}$', secret))


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.
    
    Args:
        api_key: API key to validate
        min_length: Minimum length requirement
        
    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False
    
    return len(api_key) >= min_length and not api_key.isspace()


def validate_currency_code(code: str) -> bool:
    """
    Validate a three-letter currency code (case-insensitive).
    
    Args:
        code: Currency code to validate (e.g. 'USD', 'eur')
        
    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(re.match(r'^[A-Za-z]{3}$', code))


def validate_webhook_url(url: str) -> bool:
    """
    Validate a public webhook base URL.
    
    Telegram only delivers webhooks over HTTPS.
    
    Args:
        url: URL to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False
    return bool(re.match(r'^https://[^\s/$.?#][^\s]*$', url))
