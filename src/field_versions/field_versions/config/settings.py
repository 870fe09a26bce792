# ABOUTME: Main configuration composition for the library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseVersionSettings
from .resolver import ResolverSettings


class VersionSettings(BaseVersionSettings, ResolverSettings):
    """Represents the complete, composed configuration for the library.

    This class aggregates the foundational settings from `BaseVersionSettings`
    with the resolver defaults from `ResolverSettings`. Each configuration
    module stays self-contained while callers get a single, unified object.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> VersionSettings:
    """Provides a singleton instance of the library settings.

    Uses `lru_cache` so environment variables and `.env` are read once.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        A single, cached instance of the VersionSettings class.
    """
    return VersionSettings()
