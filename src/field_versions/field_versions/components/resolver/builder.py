# ABOUTME: Fluent builder for VersionResolver instances
# ABOUTME: Declares a field's versions in trial order, by call or by decorator

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from field_versions.components.resolver.registration import Converter, VersionRegistration
from field_versions.components.resolver.version_resolver import VersionResolver
from field_versions.models.version_tag import VersionTag

CurrentT = TypeVar("CurrentT")
F = TypeVar("F", bound=Callable[..., Any])


class Versions(Generic[CurrentT]):
    """
    Builder collecting the versions of one field in trial order.

    Example:
        resolver = (
            Versions(int)
            .version(Ver("OldString"), str, lambda v: int(v) + 100)
            .version(Num(2), list[int], sum)
            .build()
        )

    The order of `version` calls is the order legacy registrations are tried.
    The current representation is always tried first; `current()` only makes
    that explicit.
    """

    def __init__(self, current_type: Any, **options: Any):
        """
        Initialize the builder.

        Args:
            current_type: The present-day type of the field
            **options: Forwarded to VersionResolver (conversion_errors, strict, max_versions, ...)
        """
        self._current_type = current_type
        self._options = options
        self._registrations: list[VersionRegistration] = []

    def current(self) -> Versions[CurrentT]:
        """Add the identity registration for the current type."""
        self._registrations.append(VersionRegistration.current(self._current_type))
        return self

    def version(
        self,
        tag: VersionTag,
        wire_type: Any,
        converter: Converter,
        name: str | None = None,
    ) -> Versions[CurrentT]:
        """
        Add a legacy representation.

        Args:
            tag: Tag identifying the representation
            wire_type: Shape the payload had in that version
            converter: Upgrades a decoded wire value to the current type
            name: Optional name for logs
        """
        self._registrations.append(VersionRegistration(tag, wire_type, converter, name))
        return self

    def register(self, tag: VersionTag, wire_type: Any, name: str | None = None) -> Callable[[F], F]:
        """Decorator form of `version`; returns the converter unchanged."""

        def decorator(converter: F) -> F:
            self.version(tag, wire_type, converter, name)
            return converter

        return decorator

    def build(self) -> VersionResolver[CurrentT]:
        """
        Build the resolver.

        Raises:
            RegistrationError: If the collected registrations are inconsistent
        """
        return VersionResolver(self._current_type, self._registrations, **self._options)

    def __len__(self) -> int:
        return len(self._registrations)
