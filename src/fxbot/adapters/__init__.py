# src/fxbot/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (pricing APIs)
- Telegram (bot interface)
- Web (webhook HTTP server)
- Formatting (output)
"""

__all__ = []
