"""structlog configuration and the logging config model."""

import logging
from typing import Any, Literal

import structlog
from pydantic import BaseModel, ValidationError

from creational.core.errors import ConfigValidationError

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingConfig(BaseModel, frozen=True):
    log_format: Literal["console", "json"] = "console"
    level: Literal["debug", "info", "warning", "error"] = "info"


def load_logging_config(raw: dict[str, Any]) -> LoggingConfig:
    """Validate a raw mapping into a LoggingConfig.

    Raises:
        ConfigValidationError: if the mapping violates the LoggingConfig schema.
    """
    try:
        return LoggingConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def configure_logging(config: LoggingConfig) -> None:
    """Configure structlog based on the requested format and level."""
    if config.log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS[config.level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
