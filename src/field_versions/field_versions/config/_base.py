# ABOUTME: Base configuration classes for the field versioning library
# ABOUTME: Identity, environment and logging options read by setup_logging

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_ALIASES = {
    "dev": "development",
    "develop": "development",
    "stage": "staging",
    "prod": "production",
}


class BaseVersionSettings(BaseSettings):
    """Non-resolver settings, loaded from ``FIELD_VERSIONS_*`` variables or a `.env` file.

    These only shape the sinks `setup_logging` installs; resolution itself
    never reads them.

    Attributes:
        APP_NAME: Bound as ``extra["app"]`` on every record and shown by the console and file sinks.
        ENV: Picks the default sink set: console only in development, plus a
            rotating file in staging, plus JSON lines for warnings in production.
        DEBUG: Turns on per-attempt resolution traces.
        LOG_LEVEL: Minimum level for the console and file sinks.
        LOG_FORMAT: ``json`` serializes console records, ``txt`` keeps them human-readable.
    """

    APP_NAME: str = Field(
        default="FieldVersions",
        description="Application name bound to every log record.",
    )
    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Runtime environment selecting the default log sinks.",
    )
    DEBUG: bool = Field(
        default=False,
        description="Log every trial decode made by a resolver.",
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level for console and file sinks.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="Console record format.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FIELD_VERSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def validate_env_case_insensitive(cls, v: str) -> str:
        """Normalize case and expand dev, prod and stage aliases."""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            return _ENV_ALIASES.get(v_lower, v_lower)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level_case_insensitive(cls, v: str) -> str:
        """Validate LOG_LEVEL field with case-insensitive normalization."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def validate_log_format_case_insensitive(cls, v: str) -> str:
        """Validate LOG_FORMAT field with case-insensitive normalization."""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            format_mapping = {
                "json": "json",
                "structured": "json",
                "txt": "txt",
                "text": "txt",
            }
            return format_mapping.get(v_lower, v_lower)
        return v
