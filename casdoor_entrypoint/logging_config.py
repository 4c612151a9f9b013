"""Logging setup for the entrypoint.

Modules use ``logging.getLogger(__name__)``; ``setup_logging`` is called once
by the CLI before anything is logged. Output goes to stdout as
``YYYY-mm-dd HH:MM:SS - message`` so it reads like the rest of the container log.
"""

from __future__ import annotations

import logging.config
import sys

LOG_FORMAT = "%(asctime)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    level = level.upper()
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }
    logging.config.dictConfig(config)


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "setup_logging"]
