"""structlog configuration shared by the API server and the CLI."""

import logging
import logging.config
from typing import Any

import structlog

from career_details.settings import settings

shared_processors: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _renderer() -> structlog.types.Processor:
    if settings.app.ENV_MODE == "LOCAL":
        return structlog.dev.ConsoleRenderer(colors=settings.app.LOG_VERBOSITY == "verbose")
    return structlog.processors.JSONRenderer()


def get_logging_config() -> dict[str, Any]:
    """Return a ``logging.config.dictConfig`` mapping routed through structlog.

    Console output in LOCAL mode, one JSON object per line otherwise. Also
    used as the uvicorn ``log_config`` so server logs share the format.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": _renderer(),
                "foreign_pre_chain": shared_processors,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "": {"handlers": ["default"], "level": settings.app.LOG_LEVEL},
            "uvicorn.error": {"handlers": ["default"], "level": settings.app.LOG_LEVEL, "propagate": False},
            "uvicorn.access": {"handlers": ["default"], "level": settings.app.LOG_LEVEL, "propagate": False},
        },
    }


def setup_logging() -> None:
    logging.config.dictConfig(get_logging_config())
    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
