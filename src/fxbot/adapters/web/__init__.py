# src/fxbot/adapters/web/__init__.py
"""
Web Adapters - HTTP Interface

This package contains the FastAPI webhook server.
"""

from fxbot.adapters.web.server import create_app

__all__ = ["create_app"]
