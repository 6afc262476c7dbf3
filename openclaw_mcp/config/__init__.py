"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, DEFAULT_REGISTRY_URL, get_registry_url
from .categories import CATEGORIES, CATEGORY_DESCRIPTIONS, describe_category

__all__ = [
    "ConfigManager",
    "Config",
    "DEFAULT_REGISTRY_URL",
    "get_registry_url",
    # Categories
    "CATEGORIES",
    "CATEGORY_DESCRIPTIONS",
    "describe_category",
]
