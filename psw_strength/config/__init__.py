"""
Configuration management for psw_strength.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for word-list and server configuration.
"""

from psw_strength.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
