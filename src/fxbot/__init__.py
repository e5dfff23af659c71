# src/fxbot/__init__.py
"""
fxbot - Telegram Exchange Rate Quote Bot

A webhook-driven Telegram bot that answers "EUR/GBP" or "/EUR" messages
with live cross-rates fetched from currencylayer.
"""

__version__ = "1.0.0"
