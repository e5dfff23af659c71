# src/fxbot/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Settings are loaded once by load_settings() and passed explicitly.
"""

from fxbot.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
