# ABOUTME: Version resolver performing ordered, short-circuiting trial decodes over a content buffer
# ABOUTME: Tries the current representation first, then legacy registrations in declared order

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Tuple, TypeVar

from loguru import logger
from pydantic import ValidationError

from field_versions.components.resolver.registration import VersionRegistration
from field_versions.config.settings import get_settings
from field_versions.exceptions.base import ConfigurationException
from field_versions.exceptions.resolution import (
    ConversionError,
    NoMatchingVersionError,
    RegistrationError,
    StructuralMismatch,
)
from field_versions.implementations.content.content_buffer import adapter_for
from field_versions.implementations.content.json_codec import JsonContentCodec
from field_versions.implementations.content.python_codec import PythonContentCodec
from field_versions.interfaces.content.content_buffer import AbstractContentBuffer, AbstractContentCodec
from field_versions.models.attempt import AttemptStage, ResolutionAttempt
from field_versions.models.types import type_name
from field_versions.models.version_tag import VersionTag

CurrentT = TypeVar("CurrentT")

_JSON_CODEC = JsonContentCodec()
_PYTHON_CODEC = PythonContentCodec()


class ConversionErrorPolicy(str, Enum):
    """
    How a resolver treats a converter that rejects a structurally valid value.

    Attributes:
        FALLTHROUGH (str): Absorb the failure like a structural mismatch and keep scanning.
        RAISE (str): Stop and surface the ConversionError to the caller.
    """

    FALLTHROUGH = "fallthrough"
    RAISE = "raise"

    def __str__(self) -> str:
        return self.value


class VersionResolver(Generic[CurrentT]):
    """
    Resolves one captured value into the current type by trial decoding.

    The current registration is always evaluated first, whatever its position
    in the supplied list. Legacy registrations follow in the order given; that
    order is the tie-break when a payload fits more than one legacy shape.
    The first registration whose decode and conversion both succeed wins;
    a converter result must itself validate as the current type.

    A resolver is immutable after construction and holds no per-call state,
    so one instance can be shared across threads.
    """

    def __init__(
        self,
        current_type: Any,
        registrations: Iterable[VersionRegistration | Tuple[Any, ...]] = (),
        *,
        conversion_errors: ConversionErrorPolicy | str | None = None,
        strict: bool | None = None,
        max_versions: int | None = None,
        record_attempts: bool | None = None,
        name: str | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            current_type: The present-day type every resolution produces
            registrations: Ordered registrations, or (tag, wire_type, converter[, name]) tuples
            conversion_errors: Converter failure policy, defaults to settings
            strict: Reinterpret in pydantic strict mode, defaults to settings
            max_versions: Cap on legacy registrations, defaults to settings (unbounded)
            record_attempts: Keep per-attempt detail on NoMatchingVersionError, defaults to settings
            name: Name used in logs, defaults to the current type's name

        Raises:
            RegistrationError: If the registrations are inconsistent
            ConfigurationException: If an option value is invalid
        """
        settings = get_settings()

        self._current_type = current_type
        self._name = name or type_name(current_type)
        self._conversion_errors = self._coerce_policy(
            conversion_errors if conversion_errors is not None else settings.RESOLVER_CONVERSION_ERRORS
        )
        self._strict = settings.RESOLVER_STRICT if strict is None else strict
        self._max_versions = settings.RESOLVER_MAX_VERSIONS if max_versions is None else max_versions
        self._record_attempts = settings.RESOLVER_RECORD_ATTEMPTS if record_attempts is None else record_attempts

        if self._max_versions is not None and self._max_versions < 1:
            raise ConfigurationException(
                f"max_versions must be at least 1, got {self._max_versions}",
                code="INVALID_MAX_VERSIONS",
                details={"max_versions": self._max_versions},
            )

        self._registrations = self._arrange(registrations)
        self._current_adapter = adapter_for(current_type)
        self._logger = logger.bind(name=f"{__name__}.{self._name}")
        self._logger.debug(
            f"Resolver '{self._name}' ready with {len(self._registrations)} registrations: "
            f"{', '.join(str(tag) for tag in self.tags)}"
        )

    @staticmethod
    def _coerce_policy(value: ConversionErrorPolicy | str) -> ConversionErrorPolicy:
        try:
            return ConversionErrorPolicy(value)
        except ValueError as e:
            raise ConfigurationException(
                f"Unknown conversion error policy: {value}",
                code="INVALID_CONVERSION_POLICY",
                details={"value": str(value), "allowed": [p.value for p in ConversionErrorPolicy]},
            ) from e

    @staticmethod
    def _coerce_registration(item: VersionRegistration | Tuple[Any, ...]) -> VersionRegistration:
        if isinstance(item, VersionRegistration):
            return item
        if isinstance(item, tuple) and len(item) in (3, 4):
            return VersionRegistration(*item)
        raise RegistrationError(
            f"Expected a VersionRegistration or (tag, wire_type, converter) tuple, got {item!r}",
            code="INVALID_REGISTRATION",
        )

    def _arrange(
        self, registrations: Iterable[VersionRegistration | Tuple[Any, ...]]
    ) -> Tuple[VersionRegistration, ...]:
        current: VersionRegistration | None = None
        legacy: list[VersionRegistration] = []
        seen: set[VersionTag] = set()

        for item in registrations:
            registration = self._coerce_registration(item)

            if registration.is_current:
                if current is not None:
                    raise RegistrationError(
                        f"Resolver '{self._name}' has more than one current registration",
                        code="DUPLICATE_CURRENT",
                        details={"resolver": self._name},
                    )
                if registration.wire_type != self._current_type:
                    raise RegistrationError(
                        f"Current registration decodes into {registration.wire_type_name}, "
                        f"expected {type_name(self._current_type)}",
                        code="CURRENT_TYPE_MISMATCH",
                        details={
                            "resolver": self._name,
                            "wire_type": registration.wire_type_name,
                            "current_type": type_name(self._current_type),
                        },
                    )
                current = registration
                continue

            if registration.tag in seen:
                raise RegistrationError(
                    f"Tag {registration.tag} is registered twice in resolver '{self._name}'",
                    code="DUPLICATE_TAG",
                    details={"resolver": self._name, "tag": str(registration.tag)},
                )
            seen.add(registration.tag)
            legacy.append(registration)

        if self._max_versions is not None and len(legacy) > self._max_versions:
            raise RegistrationError(
                f"Resolver '{self._name}' has {len(legacy)} legacy registrations, limit is {self._max_versions}",
                code="TOO_MANY_VERSIONS",
                details={"resolver": self._name, "count": len(legacy), "limit": self._max_versions},
            )

        if current is None:
            current = VersionRegistration.current(self._current_type)

        return (current, *legacy)

    @property
    def current_type(self) -> Any:
        return self._current_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def registrations(self) -> Tuple[VersionRegistration, ...]:
        """Effective trial order, current registration first."""
        return self._registrations

    @property
    def tags(self) -> Tuple[VersionTag, ...]:
        return tuple(registration.tag for registration in self._registrations)

    @property
    def conversion_errors(self) -> ConversionErrorPolicy:
        return self._conversion_errors

    @property
    def strict(self) -> bool:
        return self._strict

    def resolve(
        self,
        buffer: AbstractContentBuffer,
        accept: Callable[[Any], Any] | None = None,
    ) -> CurrentT:
        """
        Resolve a captured value into the current type.

        Args:
            buffer: Content captured once from the raw input
            accept: Extra validation every candidate result must pass, such as
                the constraints of an annotated field. It returns the value to
                use and raises ValidationError to reject it.

        Returns:
            The value produced by the first registration that decodes and converts

        Raises:
            NoMatchingVersionError: If every registration failed
            ConversionError: If a converter failed and the policy is RAISE
        """
        attempts: list[ResolutionAttempt] = []

        for registration in self._registrations:
            try:
                decoded = registration.decode(buffer, strict=self._strict)
                if registration.is_current and accept is not None:
                    decoded = self._accept_current(decoded, accept)
            except StructuralMismatch as e:
                self._logger.debug(f"{registration.tag}: content does not fit {registration.wire_type_name}")
                self._record(attempts, registration, AttemptStage.STRUCTURAL, e)
                continue

            try:
                result = registration.convert(decoded)
                if not registration.is_current:
                    result = self._check_converted(registration, result, accept)
            except ConversionError as e:
                if self._conversion_errors is ConversionErrorPolicy.RAISE:
                    self._logger.error(f"{registration.tag}: {e.message}")
                    raise
                self._logger.warning(f"{registration.tag}: {e.message}; trying next registration")
                self._record(attempts, registration, AttemptStage.CONVERSION, e)
                continue

            self._logger.debug(f"Resolved '{self._name}' using {registration.tag}")
            return result

        self._logger.debug(f"No registration of '{self._name}' matched content of kind '{buffer.kind}'")
        raise NoMatchingVersionError(
            details={
                "resolver": self._name,
                "current_type": type_name(self._current_type),
                "content_kind": str(buffer.kind),
                "tags_tried": [str(tag) for tag in self.tags],
            },
            attempts=attempts,
        )

    def _accept_current(self, value: Any, accept: Callable[[Any], Any]) -> Any:
        try:
            return accept(value)
        except ValidationError as e:
            raise StructuralMismatch(
                f"Content does not satisfy the constraints of {self._name}: {e.errors()[0]['msg']}",
                code="STRUCTURAL_MISMATCH",
                details={
                    "target_type": type_name(self._current_type),
                    "error_count": e.error_count(),
                    "errors": [error["msg"] for error in e.errors()[:5]],
                },
            ) from e

    def _check_converted(
        self,
        registration: VersionRegistration,
        value: Any,
        accept: Callable[[Any], Any] | None,
    ) -> Any:
        returned_type = type(value).__name__
        try:
            value = self._current_adapter.validate_python(value, strict=self._strict)
            if accept is not None:
                value = accept(value)
        except ValidationError as e:
            raise ConversionError(
                f"Converter '{registration.name}' returned an invalid {self._name}: {e.errors()[0]['msg']}",
                code="INVALID_CONVERTED_VALUE",
                details={
                    "tag": str(registration.tag),
                    "wire_type": registration.wire_type_name,
                    "returned_type": returned_type,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                tag=registration.tag,
            ) from e
        return value

    def _record(
        self,
        attempts: list[ResolutionAttempt],
        registration: VersionRegistration,
        stage: AttemptStage,
        error: Exception,
    ) -> None:
        if not self._record_attempts:
            return
        cause = error.__cause__ if stage is AttemptStage.CONVERSION and error.__cause__ else error
        attempts.append(
            ResolutionAttempt(
                tag=registration.tag,
                wire_type=registration.wire_type_name,
                stage=stage,
                error=str(error),
                error_type=type(cause).__name__,
            )
        )

    def resolve_raw(self, raw: Any, codec: AbstractContentCodec | None = None) -> CurrentT:
        """
        Capture raw serialized input, then resolve it.

        Args:
            raw: Serialized input, JSON text by default
            codec: Codec used to capture the input, defaults to JSON

        Raises:
            ParseError: If the input cannot be captured; resolution does not start
            NoMatchingVersionError: If every registration failed
        """
        buffer = (codec or _JSON_CODEC).capture(raw)
        return self.resolve(buffer)

    def resolve_value(self, value: Any) -> CurrentT:
        """Capture an already-decoded Python value, then resolve it."""
        return self.resolve(_PYTHON_CODEC.capture(value))

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return (
            f"VersionResolver(name='{self._name}', tags=[{', '.join(str(tag) for tag in self.tags)}], "
            f"conversion_errors={self._conversion_errors})"
        )
