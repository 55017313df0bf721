"""API configuration adapter.

Bridges the centralized tillbook_config settings with the API layer.
"""

from functools import lru_cache

from tillbook_config.settings import Settings, get_settings


@lru_cache
def get_api_settings() -> Settings:
    return get_settings()
