"""
Logging configuration for the hero sprite services.

Provides structured logging with different levels for development, testing, and production.
Configures formatters, handlers, and loggers for the service components.
"""

import logging
import logging.config
import os
import sys
from typing import Dict, Any


def get_log_level() -> str:
    """Get the log level from environment variables."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_logging_config() -> Dict[str, Any]:
    """
    Get the logging configuration dictionary.

    Returns a logging configuration that can be used with logging.config.dictConfig().
    Production output is JSON (python-json-logger); development and testing
    use a human-readable line format.
    """
    log_level = get_log_level()
    environment = os.getenv("ENVIRONMENT", "development").lower()

    if environment == "production":
        formatter_class = "pythonjsonlogger.json.JsonFormatter"
        formatter_format = "%(asctime)s %(name)s %(levelname)s %(message)s"
    else:
        formatter_class = "logging.Formatter"
        formatter_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "class": formatter_class,
                "format": formatter_format,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "class": formatter_class,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "default",
                "stream": sys.stdout,
            },
            "error_console": {
                "class": "logging.StreamHandler",
                "level": "ERROR",
                "formatter": "detailed",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            # Service and core loggers (tavern.services, tavern.core) inherit from here
            "tavern": {
                "level": log_level,
                "handlers": ["console", "error_console"],
                "propagate": False,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console", "error_console"],
        },
    }

    return config


def setup_logging() -> None:
    """
    Configure logging for the application.

    This should be called once at startup, before any other
    logging occurs. It sets up all loggers, handlers, and formatters
    according to the current environment.
    """
    config = get_logging_config()
    logging.config.dictConfig(config)

    # Log the configuration that was applied
    logger = logging.getLogger("tavern.logging")
    logger.info(
        "Logging configured",
        extra={
            "log_level": get_log_level(),
            "environment": os.getenv("ENVIRONMENT", "development"),
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: The logger name, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    # Ensure the logger name starts with 'tavern.' for proper hierarchy
    if not name.startswith("tavern."):
        if name.startswith("server.src."):
            # Convert server.src.services.filter_registry -> tavern.services
            parts = name.split(".")
            name = f"tavern.{parts[2]}" if len(parts) >= 3 else "tavern"
        else:
            name = f"tavern.{name}"

    return logging.getLogger(name)
