"""
Configuration Management.

This module provides centralized configuration using Pydantic Settings:

- settings: Settings class with provider identity, origin-country label
  and logging options

Configuration sources (in order of precedence):
1. Environment variables (``KINOMETA_`` prefix)
2. .env file
3. Default values

Example:
    from kinometa.config import Settings, get_settings

    settings = get_settings()
    custom = Settings(origin_country="Россия", metadata_language="ru")
"""

from kinometa.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
