# ABOUTME: Pydantic field annotation that resolves legacy encodings during model validation
# ABOUTME: Captures the raw field input, runs a VersionResolver and substitutes the current-type value

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from field_versions.components.resolver.registry import VersionRegistry, default_registry
from field_versions.components.resolver.version_resolver import VersionResolver
from field_versions.exceptions.base import ConfigurationException
from field_versions.exceptions.resolution import ConversionError, NoMatchingVersionError, ParseError
from field_versions.implementations.content.python_codec import PythonContentCodec
from field_versions.models.version_tag import VersionTag

_CODEC = PythonContentCodec()


class Versioned:
    """
    Marks a model field as versioned.

    Usage:
        class Record(BaseModel):
            value: Annotated[int, Versioned(Ver("OldString"), Sem(0, 0, 1))]

    The resolver is assembled from the registry when the model class is
    built, so converters must be registered before the model is defined.
    A failed resolution fails validation of the whole record.
    """

    def __init__(
        self,
        *tags: VersionTag,
        registry: VersionRegistry | None = None,
        resolver: VersionResolver | None = None,
        **options: Any,
    ):
        """
        Initialize the annotation.

        Args:
            *tags: Legacy tags to try in order; all registered tags when empty
            registry: Registry to read registrations from, defaults to `default_registry`
            resolver: Explicit resolver; excludes tags, registry and options
            **options: Forwarded to VersionResolver

        Raises:
            ConfigurationException: If an explicit resolver is combined with other arguments
        """
        if resolver is not None and (tags or registry is not None or options):
            raise ConfigurationException(
                "An explicit resolver cannot be combined with tags, registry or resolver options",
                code="CONFLICTING_FIELD_OPTIONS",
            )
        self._tags = tags
        self._registry = registry
        self._resolver = resolver
        self._options = options

    def build_resolver(self, current_type: Any) -> VersionResolver:
        if self._resolver is not None:
            return self._resolver
        registry = self._registry if self._registry is not None else default_registry
        return registry.resolver(current_type, *self._tags, **self._options)

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        """
        Wrap the field's own validation in version resolution.

        The resolver works on the bare type, while every candidate value is
        also run through the field's full schema, so constraints declared
        alongside the type (e.g. the bounds of `U32`) hold on the current and
        the legacy paths alike. Serialization keeps using that schema.
        """
        resolver = self.build_resolver(source_type)
        current_schema = handler(source_type)

        def validate_versioned(value: Any, validate_current: core_schema.ValidatorFunctionWrapHandler) -> Any:
            try:
                return resolver.resolve(_CODEC.capture(value), accept=validate_current)
            except ParseError as e:
                raise PydanticCustomError(
                    "content_capture_failed",
                    "Field content could not be captured: {error}",
                    {"error": e.message},
                ) from e
            except NoMatchingVersionError as e:
                raise PydanticCustomError(
                    "no_matching_version",
                    "{error} (tried: {tags})",
                    {"error": e.message, "tags": ", ".join(e.details.get("tags_tried", []))},
                ) from e
            except ConversionError as e:
                raise PydanticCustomError(
                    "version_conversion_failed",
                    "{error}",
                    {"error": e.message, "tag": str(e.tag)},
                ) from e

        return core_schema.no_info_wrap_validator_function(
            validate_versioned,
            current_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value,
                return_schema=current_schema,
            ),
        )

    def __repr__(self) -> str:
        if self._resolver is not None:
            return f"Versioned(resolver={self._resolver!r})"
        return f"Versioned({', '.join(str(tag) for tag in self._tags)})"
