"""Logging configuration.

Modules log through ``logging.getLogger(__name__)``; entry points call
``configure_logging`` once at startup.
"""

from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send taskboard logs to stdout at ``level``."""
    level = level.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"std": {"format": LOG_FORMAT}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "std",
                    "level": level,
                }
            },
            "loggers": {
                "taskboard": {"level": level, "handlers": ["stdout"], "propagate": False},
            },
        }
    )
