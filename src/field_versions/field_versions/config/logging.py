# ABOUTME: Loguru configuration for the field versioning library
# ABOUTME: Opt-in sinks for applications, with a switch for per-attempt resolution traces

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import BaseModel

from field_versions.config.settings import VersionSettings, get_settings

# Module whose DEBUG records describe every trial decode
RESOLVER_MODULE = "field_versions.components.resolver"


class LoggerConfig(BaseModel):
    """Configuration for loguru sinks installed by `setup_logging`."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<magenta>{extra[app]}</magenta> | "
        "<cyan>{extra[name]}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/field-versions.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[app]} | {extra[name]} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"

    # Structured JSON-lines output
    structured_enabled: bool = False
    structured_level: str = "WARNING"
    structured_path: Union[str, Path] = "logs/field-versions-structured.jsonl"

    # Per-attempt resolver records are DEBUG; below this level they are dropped
    resolution_trace: bool = False

    # Bound as extra["app"] on every record
    app_name: str = "FieldVersions"

    enqueue: bool = False
    catch: bool = True

    @classmethod
    def from_settings(cls, settings: Optional[VersionSettings] = None) -> "LoggerConfig":
        """
        Derive a sink configuration from library settings.

        LOG_LEVEL sets the console and file levels, LOG_FORMAT=json serializes
        the console sink, DEBUG turns on resolution traces and APP_NAME is
        bound to every record. ENV adds a rotating file outside development
        and JSON lines for warnings in production.
        """
        settings = settings or get_settings()
        return cls(
            app_name=settings.APP_NAME,
            console_level=settings.LOG_LEVEL,
            console_serialize=settings.LOG_FORMAT == "json",
            console_colorize=settings.LOG_FORMAT != "json" and settings.ENV == "development",
            file_enabled=settings.ENV != "development",
            file_level=settings.LOG_LEVEL,
            structured_enabled=settings.ENV == "production",
            resolution_trace=settings.DEBUG,
        )

    def level_filter(self) -> Dict[str, Any]:
        """Loguru filter dict muting resolver traces unless enabled."""
        if self.resolution_trace:
            return {}
        return {RESOLVER_MODULE: "INFO"}


def _patch_name(record: Dict[str, Any]) -> None:
    record["extra"].setdefault("name", record["name"])


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Install loguru sinks for the library.

    The library never calls this on import; applications opt in. Existing
    sinks are removed first.

    Args:
        config: Sink configuration. If None, derived from `get_settings()`.
    """
    config = config or LoggerConfig.from_settings()
    level_filter = config.level_filter()

    logger.remove()
    logger.configure(patcher=_patch_name, extra={"app": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            filter=level_filter,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            filter=level_filter,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.structured_enabled:
        Path(config.structured_path).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.structured_path,
            level=config.structured_level,
            format="{message}",
            serialize=True,
            rotation=config.file_rotation,
            retention=config.file_retention,
            enqueue=config.enqueue,
            catch=config.catch,
        )


def get_logger(name: str):
    """
    Get a logger bound to a component name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Console-only DEBUG output including resolution traces."""
    setup_logging(
        LoggerConfig(
            console_level="DEBUG",
            console_format="<level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | {message}",
            resolution_trace=True,
            catch=False,
        )
    )


def configure_for_production() -> None:
    """Plain console at INFO, rotating file, and JSON lines for warnings."""
    setup_logging(
        LoggerConfig(
            console_level="INFO",
            console_colorize=False,
            file_enabled=True,
            file_level="INFO",
            structured_enabled=True,
        )
    )


def configure_for_development() -> None:
    """Colorized DEBUG console including resolution traces."""
    setup_logging(LoggerConfig(console_level="DEBUG", resolution_trace=True))
