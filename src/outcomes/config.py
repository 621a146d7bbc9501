"""Configuration for outcome observers and the demo CLI.

The outcome types never read configuration; these settings only decide
how observer effects log and how the CLI sets up logging.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Log levels accepted in configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def numeric(self) -> int:
        return getattr(logging, self.value)


class OutcomesConfig(BaseSettings):
    """Observer and CLI configuration.

    All settings can be overridden via environment variables with the OUTCOMES_ prefix.
    Example: OUTCOMES_LOG_LEVEL=DEBUG, OUTCOMES_LOG_VALUES=true
    """

    model_config = {"env_prefix": "OUTCOMES_"}

    # Root logging
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Root log level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Format string passed to logging.basicConfig",
    )

    # Observer effects
    logger_name: str = Field(
        default="outcomes", description="Logger used by observers when none is given"
    )
    success_log_level: LogLevel = Field(
        default=LogLevel.DEBUG, description="Level for successful outcomes"
    )
    failure_log_level: LogLevel = Field(
        default=LogLevel.WARNING, description="Level for failed outcomes"
    )
    log_values: bool = Field(
        default=False, description="Include carried values in success log records"
    )


class ConfigPresets:
    """Ready-made configurations."""

    @staticmethod
    def default() -> OutcomesConfig:
        return OutcomesConfig()

    @staticmethod
    def verbose() -> OutcomesConfig:
        """Log everything, carried values included."""
        return OutcomesConfig(
            log_level=LogLevel.DEBUG,
            success_log_level=LogLevel.INFO,
            log_values=True,
        )

    @staticmethod
    def with_overrides(**kwargs: object) -> OutcomesConfig:
        return OutcomesConfig(**kwargs)  # type: ignore[arg-type]
