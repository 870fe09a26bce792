# ABOUTME: Field versioning package initialization
# ABOUTME: Resolves old serialized encodings of a single field into its current type

"""
Field versioning package.

A field's serialized representation changes over the life of a program while
old payloads must still load. This package captures a serialized value once
into a reusable content buffer, then tries the current representation and
each registered legacy representation in order, converting the first match
into the current type. Payloads never need to carry a version marker.
"""

from field_versions.components import (
    ConversionErrorPolicy,
    VersionRegistration,
    VersionRegistry,
    VersionResolver,
    Versioned,
    Versions,
    default_registry,
)
from field_versions.exceptions import (
    ConversionError,
    FieldVersionsException,
    NoMatchingVersionError,
    ParseError,
    RegistrationError,
    RegistrationNotFoundError,
    ResolutionError,
    StructuralMismatch,
)
from field_versions.implementations import ContentBuffer, JsonContentCodec, PythonContentCodec
from field_versions.models import CURRENT, U32, U64, U128, Current, Num, Sem, Uuid, Ver, VersionTag

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "VersionResolver",
    "VersionRegistration",
    "ConversionErrorPolicy",
    "Versions",
    "VersionRegistry",
    "default_registry",
    "Versioned",
    # Content
    "ContentBuffer",
    "JsonContentCodec",
    "PythonContentCodec",
    # Tags and types
    "VersionTag",
    "Uuid",
    "Num",
    "Sem",
    "Ver",
    "Current",
    "CURRENT",
    "U32",
    "U64",
    "U128",
    # Errors
    "FieldVersionsException",
    "ParseError",
    "StructuralMismatch",
    "ConversionError",
    "ResolutionError",
    "NoMatchingVersionError",
    "RegistrationError",
    "RegistrationNotFoundError",
]
