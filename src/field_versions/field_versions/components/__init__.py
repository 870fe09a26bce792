# ABOUTME: Components package exports
# ABOUTME: Exports the resolver machinery and the pydantic field integration

from .resolver import (
    VersionRegistration,
    ConversionErrorPolicy,
    VersionResolver,
    Versions,
    VersionRegistry,
    default_registry,
)
from .field import Versioned

__all__ = [
    "VersionRegistration",
    "ConversionErrorPolicy",
    "VersionResolver",
    "Versions",
    "VersionRegistry",
    "default_registry",
    "Versioned",
]
