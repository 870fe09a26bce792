# ABOUTME: Resolver configuration settings
# ABOUTME: Defaults applied to every VersionResolver unless overridden at construction time

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):
    """Default behavior of version resolvers.

    Attributes:
        RESOLVER_CONVERSION_ERRORS: What to do when a converter rejects a
            structurally valid legacy value. ``fallthrough`` keeps scanning
            later registrations, ``raise`` stops and surfaces the error.
        RESOLVER_STRICT: Reinterpret content in pydantic strict mode, so a
            JSON string never coerces into a number.
        RESOLVER_MAX_VERSIONS: Optional cap on legacy registrations per resolver.
        RESOLVER_RECORD_ATTEMPTS: Keep per-attempt detail on
            ``NoMatchingVersionError`` for diagnostics.
    """

    RESOLVER_CONVERSION_ERRORS: Literal["fallthrough", "raise"] = Field(
        default="fallthrough",
        description="Policy for converter failures on structurally valid legacy values.",
    )
    RESOLVER_STRICT: bool = Field(
        default=True,
        description="Use pydantic strict mode when reinterpreting captured content.",
    )
    RESOLVER_MAX_VERSIONS: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of legacy registrations per resolver. Unset means unbounded.",
    )
    RESOLVER_RECORD_ATTEMPTS: bool = Field(
        default=True,
        description="Record every failed attempt on the terminal no-match error.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FIELD_VERSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("RESOLVER_CONVERSION_ERRORS", mode="before")
    @classmethod
    def validate_conversion_errors_case_insensitive(cls, v: str) -> str:
        """Normalize the conversion error policy, accepting a few aliases."""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            policy_mapping = {
                "fallthrough": "fallthrough",
                "skip": "fallthrough",
                "continue": "fallthrough",
                "raise": "raise",
                "fail": "raise",
                "strict": "raise",
            }
            return policy_mapping.get(v_lower, v_lower)
        return v
