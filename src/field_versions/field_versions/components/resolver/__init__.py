# ABOUTME: Resolver components package exports
# ABOUTME: Exports the version resolver, its registration entry, builder and run-time registry

from .registration import VersionRegistration
from .version_resolver import ConversionErrorPolicy, VersionResolver
from .builder import Versions
from .registry import VersionRegistry, default_registry

__all__ = [
    "VersionRegistration",
    "ConversionErrorPolicy",
    "VersionResolver",
    "Versions",
    "VersionRegistry",
    "default_registry",
]
