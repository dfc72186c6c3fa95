"""
Structured logging for the ledger.

Events are snake_case names with key/value context. Development gets the
colored console renderer, every other environment one JSON object per line.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from aqualedger.config.settings import get_settings

# Keys whose float values are money and are logged at cent precision
MONEY_KEY_SUFFIXES = ("amount", "amount_received", "balance", "cash", "bank", "total")

# Third-party loggers kept at WARNING
QUIET_LOGGERS = ("aiosqlite", "uvicorn.access")


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp events with the app name, version, environment and ledger currency."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    event_dict.setdefault("currency", settings.ledger.currency)
    return event_dict


def round_money(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Round float money values to two decimals."""
    for key, value in event_dict.items():
        if isinstance(value, float) and key.endswith(MONEY_KEY_SUFFIXES):
            event_dict[key] = round(value, 2)
    return event_dict


def configure_logging(json_logs: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    ``json_logs`` overrides the environment-based choice of renderer.
    """
    settings = get_settings()
    if json_logs is None:
        json_logs = settings.environment != "development"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        round_money,
    ]

    if json_logs:
        renderer: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
