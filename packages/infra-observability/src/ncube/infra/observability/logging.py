"""Structured logging configuration using structlog.

This module provides environment-aware structured logging with:
- JSON output for production environments
- Console output with colors for development
- stdlib ``logging`` records (e.g. from the domain package) rendered
  through the same processor chain

Usage:
    # During application startup
    from ncube.infra.observability.logging import configure_logging
    configure_logging()

    # In application code
    from ncube.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.info("cube_loaded", cache_key="acme/pricing/1.0.0/rates")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Type alias for structlog processor
Processor = structlog.types.Processor

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoggingSettings(BaseSettings):
    """Logging configuration settings from environment variables.

    Loads configuration from environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment name (development, staging, production, test)

    Attributes:
        log_level: Minimum log level to output. Default: INFO
        environment: Environment name for format selection. Default: development

    Example:
        >>> settings = LoggingSettings(log_level="DEBUG", environment="production")
        >>> settings.use_json_logs
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name for format selection",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level.

        Raises:
            ValueError: If log level is not a valid Python logging level.
        """
        if v not in VALID_LOG_LEVELS:
            msg = f"log_level must be one of {sorted(VALID_LOG_LEVELS)}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        """True for the production environment, False otherwise."""
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """Integer log level constant from the logging module."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(settings: LoggingSettings) -> Processor:
    if settings.use_json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Configures structlog with:
    - Context variable merging
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Environment-aware rendering (JSON for production, console for development)

    The root stdlib logger gets a single handler whose
    ``structlog.stdlib.ProcessorFormatter`` renders foreign records with the
    same processors. Calling this again replaces that handler.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.

    Example:
        >>> settings = LoggingSettings(log_level="DEBUG", environment="production")
        >>> configure_logging(settings)
    """
    if settings is None:
        settings = get_logging_settings()

    renderer = _renderer(settings)
    processors: list[Processor] = [
        *_shared_processors(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.log_level_int)


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Returns:
        Bound structlog logger with name context.
    """
    logger = structlog.get_logger()
    if name is not None:
        logger = logger.bind(logger=name)
    return logger
