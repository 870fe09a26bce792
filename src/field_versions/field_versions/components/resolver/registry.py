# ABOUTME: Run-time registry mapping (current type, version tag) to a legacy wire type and converter
# ABOUTME: Built once at definition time and used to assemble resolvers for annotated fields

from __future__ import annotations

from typing import Any, Callable, Dict, List, TypeVar

from loguru import logger

from field_versions.components.resolver.registration import Converter, VersionRegistration
from field_versions.components.resolver.version_resolver import VersionResolver
from field_versions.exceptions.resolution import RegistrationError, RegistrationNotFoundError
from field_versions.models.types import type_name
from field_versions.models.version_tag import VersionTag

F = TypeVar("F", bound=Callable[..., Any])


def _type_key(current_type: Any) -> Any:
    try:
        hash(current_type)
    except TypeError:
        return repr(current_type)
    return current_type


class VersionRegistry:
    """
    Registry of legacy representations, keyed by current type and tag.

    This is the run-time counterpart of declaring "type T can be upgraded from
    version V": each entry binds one (current type, tag) pair to the wire type
    the old payload had and a converter into T. Entries keep their
    registration order per current type.
    """

    def __init__(self, name: str = "default") -> None:
        """Initialize an empty registry."""
        self.name = name
        self._registrations: Dict[Any, Dict[VersionTag, VersionRegistration]] = {}
        self._logger = logger.bind(name=f"{__name__}.{name}")

    def add(
        self,
        current_type: Any,
        tag: VersionTag,
        wire_type: Any,
        converter: Converter,
        name: str | None = None,
    ) -> VersionRegistration:
        """
        Register a legacy representation of `current_type`.

        Args:
            current_type: The type the converter produces
            tag: Tag identifying the legacy representation
            wire_type: Shape of the legacy payload
            converter: Upgrades a decoded wire value to `current_type`
            name: Optional name for logs

        Returns:
            The created VersionRegistration

        Raises:
            RegistrationError: If the tag is the current sentinel or already registered for the type
        """
        if isinstance(tag, VersionTag) and tag.is_current:
            raise RegistrationError(
                "The current representation is implicit and cannot be registered",
                code="CURRENT_NOT_REGISTRABLE",
                details={"current_type": type_name(current_type)},
            )

        registration = VersionRegistration(tag, wire_type, converter, name)
        key = _type_key(current_type)
        entries = self._registrations.setdefault(key, {})

        if tag in entries:
            raise RegistrationError(
                f"{tag} is already registered for {type_name(current_type)}",
                code="DUPLICATE_TAG",
                details={"current_type": type_name(current_type), "tag": str(tag)},
            )

        entries[tag] = registration
        self._logger.debug(f"Registered {tag} ({registration.wire_type_name}) for {type_name(current_type)}")
        return registration

    def register(
        self,
        current_type: Any,
        tag: VersionTag,
        wire_type: Any,
        name: str | None = None,
    ) -> Callable[[F], F]:
        """Decorator form of `add`; returns the converter unchanged."""

        def decorator(converter: F) -> F:
            self.add(current_type, tag, wire_type, converter, name)
            return converter

        return decorator

    def get(self, current_type: Any, tag: VersionTag) -> VersionRegistration:
        """
        Look up a registration.

        Raises:
            RegistrationNotFoundError: If nothing is registered for the pair
        """
        registration = self._registrations.get(_type_key(current_type), {}).get(tag)
        if registration is None:
            raise RegistrationNotFoundError(
                f"No registration of {tag} for {type_name(current_type)}",
                code="REGISTRATION_NOT_FOUND",
                details={"current_type": type_name(current_type), "tag": str(tag)},
            )
        return registration

    def contains(self, current_type: Any, tag: VersionTag) -> bool:
        return tag in self._registrations.get(_type_key(current_type), {})

    def tags_for(self, current_type: Any) -> List[VersionTag]:
        """Tags registered for a type, in registration order."""
        return list(self._registrations.get(_type_key(current_type), {}).keys())

    def unregister(self, current_type: Any, tag: VersionTag) -> bool:
        """
        Remove a registration.

        Returns:
            True if a registration was found and removed, False otherwise
        """
        entries = self._registrations.get(_type_key(current_type))
        if not entries or tag not in entries:
            return False
        del entries[tag]
        if not entries:
            del self._registrations[_type_key(current_type)]
        return True

    def clear(self, current_type: Any = None) -> None:
        """
        Clear registrations for one type, or all registrations.

        Args:
            current_type: Specific type to clear, or None to clear everything
        """
        if current_type is None:
            self._registrations.clear()
        else:
            self._registrations.pop(_type_key(current_type), None)

    def count(self, current_type: Any = None) -> int:
        """Number of registrations for one type, or in total."""
        if current_type is None:
            return sum(len(entries) for entries in self._registrations.values())
        return len(self._registrations.get(_type_key(current_type), {}))

    def resolver(self, current_type: Any, *tags: VersionTag, **options: Any) -> VersionResolver:
        """
        Build a resolver for `current_type`.

        Args:
            current_type: The type to resolve into
            *tags: Legacy tags to try, in this order. With none given, every tag
                   registered for the type is used in registration order.
            **options: Forwarded to VersionResolver

        Raises:
            RegistrationNotFoundError: If a named tag is not registered for the type
        """
        selected = tags or tuple(self.tags_for(current_type))
        registrations = [self.get(current_type, tag) for tag in selected if not tag.is_current]
        return VersionResolver(current_type, registrations, **options)

    def __repr__(self) -> str:
        return f"VersionRegistry(name='{self.name}', registrations={self.count()})"


default_registry = VersionRegistry()
