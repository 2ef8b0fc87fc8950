"""Logging configuration."""

import logging.config
from typing import Any


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Install a console handler on the root logger.

    ``fmt="json"`` emits one JSON object per record for log shippers.
    """
    formatters: dict[str, Any] = {
        "text": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }
    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {fmt: formatters[fmt]},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": fmt,
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }

    logging.config.dictConfig(log_config)
