"""Logging setup shared by the API and the attach step."""

from __future__ import annotations

import logging.config
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "root": {"handlers": ["console"], "level": (level or "INFO").upper()},
        }
    )
