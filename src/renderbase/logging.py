"""
Logging helpers for the Renderbase SDK.

The library only emits records under the "renderbase" logger. Applications
(and the CLI) opt into output with setup_logging().
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "renderbase"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the SDK namespace.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Logger whose records propagate to the "renderbase" logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> logging.Logger:
    """
    Attach a single output handler to the SDK logger.

    Args:
        level: Log level name (defaults to settings.log_level)
        json_output: Emit JSON lines (defaults to settings.log_json)

    Returns:
        The configured "renderbase" logger
    """
    from renderbase.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    if json_output is None:
        json_output = settings.log_json

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    if json_output:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["get_logger", "setup_logging", "JSONFormatter", "ROOT_LOGGER_NAME"]
