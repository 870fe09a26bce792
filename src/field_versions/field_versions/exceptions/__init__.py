# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base exception and the version resolution error taxonomy

from field_versions.exceptions.base import (
    FieldVersionsException,
    ConfigurationException,
)

from field_versions.exceptions.resolution import (
    ParseError,
    StructuralMismatch,
    ConversionError,
    ResolutionError,
    NoMatchingVersionError,
    RegistrationError,
    RegistrationNotFoundError,
)

__all__ = [
    "FieldVersionsException",
    "ConfigurationException",
    # Resolution exceptions
    "ParseError",
    "StructuralMismatch",
    "ConversionError",
    "ResolutionError",
    "NoMatchingVersionError",
    "RegistrationError",
    "RegistrationNotFoundError",
]
