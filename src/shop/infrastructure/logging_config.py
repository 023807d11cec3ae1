from __future__ import annotations

import logging.config
from typing import Any


def configure_logging(level: str = "WARNING") -> None:
    """Send ``shop`` log records to stderr at *level*."""
    logging.config.dictConfig(_dict_config(level.upper()))


def _dict_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "std": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"}
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "std",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "shop": {"handlers": ["console"], "level": level, "propagate": False}
        },
    }
