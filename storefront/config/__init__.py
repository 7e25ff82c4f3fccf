"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from storefront.config import get_settings, Settings

    settings = get_settings()
    print(settings.page_size)
    print(settings.products_file)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
