"""Configuration loading for flatvec.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from flatvec.config import get_settings

    settings = get_settings()
    top_k = settings.search.default_top_k
"""

from functools import lru_cache

from flatvec.config.loader import load_config
from flatvec.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance.

    Call `get_settings.cache_clear()` or `reload_settings()` to reload.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
