# ABOUTME: Version tag models identifying historical encodings of a field
# ABOUTME: Provides UUID-keyed, sequence-numbered, semantic-triple and named tags plus the current sentinel

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

UUID_MAX = 2**128 - 1
NUM_MAX = 2**32 - 1
SEM_COMPONENT_MAX = 2**64 - 1


class VersionTag(BaseModel):
    """
    Opaque key distinguishing one representation of a value from another.

    Tags never appear in serialized payloads. They only index registrations,
    so two tags are equal exactly when they belong to the same family, carry
    the same payload, and share the same label.

    Attributes:
        label: Optional namespace chosen by a library so that two subsystems
            reusing the same version shape still get distinct keys.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str | None = Field(default=None, min_length=1, description="Optional namespace for the tag")

    @property
    def is_current(self) -> bool:
        return False

    def _payload(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        text = self._payload()
        if self.label is not None:
            return f"{text}@{self.label}"
        return text


class Uuid(VersionTag):
    """A version id backed by an unsigned 128-bit integer, large enough to embed a UUID."""

    value: int = Field(ge=0, le=UUID_MAX)

    def __init__(self, value: int | UUID, **data: Any):
        super().__init__(value=value, **data)

    @field_validator("value", mode="before")
    @classmethod
    def validate_uuid_instance(cls, v: Any) -> Any:
        if isinstance(v, UUID):
            return v.int
        return v

    def as_uuid(self) -> UUID:
        return UUID(int=self.value)

    def _payload(self) -> str:
        return f"uuid:{self.as_uuid()}"


class Num(VersionTag):
    """A 32-bit version sequence number."""

    value: int = Field(ge=0, le=NUM_MAX)

    def __init__(self, value: int, **data: Any):
        super().__init__(value=value, **data)

    def _payload(self) -> str:
        return f"num:{self.value}"


class Sem(VersionTag):
    """A semantic (major, minor, patch) version triple."""

    major: int = Field(ge=0, le=SEM_COMPONENT_MAX)
    minor: int = Field(ge=0, le=SEM_COMPONENT_MAX)
    patch: int = Field(ge=0, le=SEM_COMPONENT_MAX)

    def __init__(self, major: int, minor: int, patch: int, **data: Any):
        super().__init__(major=major, minor=minor, patch=patch, **data)

    @classmethod
    def parse(cls, text: str, label: str | None = None) -> Sem:
        """
        Build a tag from dotted text such as ``"1.2.3"``.

        Raises:
            ValueError: If the text is not three dot-separated integers.
        """
        parts = text.strip().split(".")
        if len(parts) != 3:
            raise ValueError(f"Expected 'major.minor.patch', got {text!r}")
        major, minor, patch = (int(part) for part in parts)
        return cls(major, minor, patch, label=label)

    def _payload(self) -> str:
        return f"sem:{self.major}.{self.minor}.{self.patch}"


class Ver(VersionTag):
    """A named version, typically the name of the legacy type it stands for."""

    name: str = Field(min_length=1)

    def __init__(self, name: str, **data: Any):
        super().__init__(name=name, **data)

    @classmethod
    def of(cls, marker: type, label: str | None = None) -> Ver:
        """Build a tag named after a marker class."""
        return cls(f"{marker.__module__}.{marker.__qualname__}", label=label)

    def _payload(self) -> str:
        return f"ver:{self.name}"


class Current(VersionTag):
    """Sentinel tag for the present-day representation; always tried first."""

    @field_validator("label")
    @classmethod
    def validate_no_label(cls, v: str | None) -> str | None:
        if v is not None:
            raise ValueError("The current tag cannot carry a label")
        return v

    @property
    def is_current(self) -> bool:
        return True

    def _payload(self) -> str:
        return "current"


CURRENT = Current()
