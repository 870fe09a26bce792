# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the library

from field_versions.config.settings import VersionSettings, get_settings
from field_versions.config.resolver import ResolverSettings
from field_versions.config.logging import (
    LoggerConfig,
    RESOLVER_MODULE,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "VersionSettings",
    "ResolverSettings",
    "get_settings",
    "LoggerConfig",
    "RESOLVER_MODULE",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
