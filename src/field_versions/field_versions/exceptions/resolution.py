# ABOUTME: Version resolution exception classes
# ABOUTME: Covers content capture, per-attempt decode and conversion failures, and terminal resolution errors

from typing import Any, Dict, Sequence, TYPE_CHECKING

from field_versions.exceptions.base import FieldVersionsException

if TYPE_CHECKING:
    from field_versions.models.attempt import ResolutionAttempt
    from field_versions.models.version_tag import VersionTag


class ParseError(FieldVersionsException):
    """Exception raised when raw input cannot be captured into a content buffer.

    Used when the serialized input is unusable before any version is tried, such as:
    - Malformed JSON text
    - Bytes that are not valid UTF-8
    - Non-finite numeric constants (NaN, Infinity)
    - Python values that have no structural representation

    Fatal: resolution never starts.
    """

    pass


class StructuralMismatch(FieldVersionsException):
    """Exception raised when a content buffer does not fit a target type.

    Only tells the resolver "not this version". It is recovered locally
    and never surfaced to the caller on its own.
    """

    pass


class ConversionError(FieldVersionsException):
    """Exception raised when a converter rejects a structurally valid legacy value.

    The original converter exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: Dict[str, Any] | None = None,
        tag: "VersionTag | None" = None,
    ):
        super().__init__(message, code, details)
        self.tag = tag


class ResolutionError(FieldVersionsException):
    """Base exception class for terminal resolution failures."""

    pass


class NoMatchingVersionError(ResolutionError):
    """Exception raised when every registration, including current, failed.

    Attributes:
        attempts: Per-registration attempt records in trial order. Empty when
            attempt recording is disabled.
    """

    def __init__(
        self,
        message: str = "data did not match any version type",
        code: str | None = "NO_MATCHING_VERSION",
        details: Dict[str, Any] | None = None,
        attempts: "Sequence[ResolutionAttempt]" = (),
    ):
        super().__init__(message, code, details)
        self.attempts = tuple(attempts)


class RegistrationError(FieldVersionsException):
    """Exception raised for invalid version registrations.

    Used when a registration list or registry is inconsistent, such as:
    - More than one registration claiming the current tag
    - The same (tag, label) registered twice for one type
    - A current registration whose wire type differs from the current type
    - More legacy registrations than the configured cap
    """

    pass


class RegistrationNotFoundError(RegistrationError):
    """Exception raised when a registry lookup finds no registration."""

    pass
