"""
Logging configuration for the application.

One format for every logger: store errors logged by the request
handlers, SQLAlchemy, and uvicorn all end up on stdout together.
Logging must not change program behavior.
Never logs request bodies.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Raised to WARNING unless the application itself runs at DEBUG
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "sqlalchemy.pool")


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown values fall back to INFO.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    noisy_level = logging.DEBUG if resolved == logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
