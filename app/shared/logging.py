"""
Logging configuration for the application.

Error translation reports business and unexpected errors through the
``app`` logger tree; uvicorn's own loggers are kept to warnings so those
reports are not buried under access lines.
"""

import logging
import logging.config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def resolve_level(level: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def build_logging_config(level: str = "INFO") -> dict:
    """Return the dictConfig schema for the given root level."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {"level": resolve_level(level), "handlers": ["stdout"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout handler and set the root level.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
    """
    logging.config.dictConfig(build_logging_config(level))
