# ABOUTME: Version registration entry pairing a tag with a legacy wire type and converter
# ABOUTME: Knows how to try itself against a content buffer and report structural or conversion failure

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from pydantic.errors import PydanticSchemaGenerationError, PydanticUndefinedAnnotation

from field_versions.exceptions.resolution import ConversionError, RegistrationError
from field_versions.implementations.content.content_buffer import adapter_for
from field_versions.interfaces.content.content_buffer import AbstractContentBuffer
from field_versions.models.types import type_name
from field_versions.models.version_tag import CURRENT, VersionTag

CurrentT = TypeVar("CurrentT")

Converter = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


class VersionRegistration(Generic[CurrentT]):
    """
    One known representation of a field: (tag, wire type, converter).

    The wire type is the shape a content buffer must decode into for this
    registration to be a candidate. The converter upgrades the decoded
    legacy value into the current type and signals rejection by raising.
    """

    __slots__ = ("tag", "wire_type", "converter", "name")

    def __init__(
        self,
        tag: VersionTag,
        wire_type: Any,
        converter: Converter,
        name: str | None = None,
    ):
        """
        Initialize a version registration.

        Args:
            tag: Version tag identifying this representation
            wire_type: Type the captured content must decode into
            converter: Callable mapping a wire value to the current type
            name: Optional name for logs, defaults to the converter's name

        Raises:
            RegistrationError: If the tag is not a VersionTag, the converter is not
                callable, or pydantic cannot build a schema for the wire type
        """
        if not isinstance(tag, VersionTag):
            raise RegistrationError(
                f"Expected a VersionTag, got {type(tag).__name__}",
                code="INVALID_TAG",
                details={"tag_type": type(tag).__name__},
            )
        if not callable(converter):
            raise RegistrationError(
                f"Converter for {tag} is not callable",
                code="INVALID_CONVERTER",
                details={"tag": str(tag)},
            )
        try:
            adapter_for(wire_type)
        except (PydanticSchemaGenerationError, PydanticUndefinedAnnotation) as e:
            raise RegistrationError(
                f"Cannot decode into wire type {type_name(wire_type)} for {tag}: {e}",
                code="INVALID_WIRE_TYPE",
                details={"tag": str(tag), "wire_type": type_name(wire_type)},
            ) from e

        self.tag = tag
        self.wire_type = wire_type
        self.converter = converter
        self.name = name or getattr(converter, "__name__", str(tag))

    @classmethod
    def current(cls, current_type: Any) -> VersionRegistration[CurrentT]:
        """Build the identity registration for the current representation."""
        return cls(CURRENT, current_type, _identity, name="current")

    @property
    def is_current(self) -> bool:
        return self.tag.is_current

    @property
    def wire_type_name(self) -> str:
        return type_name(self.wire_type)

    def decode(self, buffer: AbstractContentBuffer, strict: bool = True) -> Any:
        """
        Decode the buffer into this registration's wire type.

        Raises:
            StructuralMismatch: If the content does not fit the wire type
        """
        return buffer.reinterpret(self.wire_type, strict=strict)

    def convert(self, value: Any) -> CurrentT:
        """
        Run the converter on a decoded wire value.

        Raises:
            ConversionError: If the converter raises, chained to the original error
        """
        try:
            return self.converter(value)
        except Exception as e:
            raise ConversionError(
                f"Converter '{self.name}' rejected value for {self.tag}: {e}",
                code="CONVERSION_FAILED",
                details={
                    "tag": str(self.tag),
                    "wire_type": self.wire_type_name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                tag=self.tag,
            ) from e

    def apply(self, buffer: AbstractContentBuffer, strict: bool = True) -> CurrentT:
        """Decode then convert; the two failure kinds stay distinguishable."""
        return self.convert(self.decode(buffer, strict=strict))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VersionRegistration):
            return False
        return self.tag == other.tag and self.wire_type == other.wire_type and self.converter == other.converter

    def __hash__(self) -> int:
        return hash(self.tag)

    def __repr__(self) -> str:
        return f"VersionRegistration(tag={self.tag}, wire_type={self.wire_type_name}, name='{self.name}')"
