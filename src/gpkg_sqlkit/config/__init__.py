"""Configuration management for gpkg-sqlkit.

Usage:
    >>> from gpkg_sqlkit.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.DATABASE_URL)
"""

from gpkg_sqlkit.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
