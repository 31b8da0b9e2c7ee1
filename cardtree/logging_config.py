"""Central logging configuration for cardtree.

Call :func:`setup_logging` once at application start-up. Library modules only
create module loggers.
"""

from __future__ import annotations

import logging
import logging.config
import os

LOG_LEVEL_ENV = "CARDTREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

__all__ = ["setup_logging"]


def _resolve_level(level: str | None) -> str:
    candidate = (os.environ.get(LOG_LEVEL_ENV) or level or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(candidate), int):
        return DEFAULT_LOG_LEVEL
    return candidate


def setup_logging(level: str | None = None) -> str:
    """Configure console logging on stderr and return the effective level name.

    ``CARDTREE_LOG_LEVEL`` takes precedence over ``level``.
    """
    effective = _resolve_level(level)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "simple": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "simple",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "cardtree": {
                    "handlers": ["console"],
                    "level": effective,
                    "propagate": False,
                },
            },
        }
    )
    return effective
