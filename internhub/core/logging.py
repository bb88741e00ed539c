"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module only
installs the root handler and level once at startup.
"""

import logging
import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
        "loggers": {
            # SQL echo is controlled by the engine, keep the logger quiet otherwise
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    })
