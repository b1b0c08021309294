"""Centralized logging configuration for the document database.

The log level is controlled via the LOG_LEVEL environment variable or .env file.

Usage:
    from src.docdb.observability.logging_setup import setup_logging

    # Call once at application startup (CLI entry point or FastAPI app)
    setup_logging()

Configuration:
    LOG_LEVEL=INFO    # One line per stored/rejected file (default)
    LOG_LEVEL=DEBUG   # Adds logger names and per-step details
    LOG_LEVEL=WARNING # Only warnings and errors
"""

from __future__ import annotations

import logging
import sys


# Logger names used throughout the application
KNOWN_LOGGERS = [
    "docdb",                # Domain event logger
    "src.docdb.services",   # Services
    "src.docdb.cli",        # Command line
]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level_from_settings() -> int:
    """Get the log level from application settings.

    Returns:
        The logging level constant (e.g., logging.DEBUG, logging.INFO)
    """
    # Import here to avoid circular imports
    from ..config import settings

    return _LEVELS.get(settings.log_level.upper(), logging.INFO)


def setup_logging(level: str | None = None) -> None:
    """Configure logging for the entire application.

    Args:
        level: Optional level name overriding ``settings.log_level``
    """
    from ..config import settings

    log_level = _LEVELS.get(level.upper(), logging.INFO) if level else get_log_level_from_settings()
    level_name = logging.getLevelName(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if log_level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for logger_name in KNOWN_LOGGERS:
        logging.getLogger(logger_name).setLevel(log_level)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

    startup_logger = logging.getLogger("docdb.startup")
    startup_logger.debug("Logging configured: level=%s (from LOG_LEVEL=%s)", level_name, settings.log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the application's configured level.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(get_log_level_from_settings())
    return logger
