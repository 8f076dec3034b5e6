"""Logging configuration for the meteogram fetcher."""

import logging.config
import sys
from pathlib import Path
from typing import Any, Dict, Optional


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure logging for the application.

    Console output goes to stderr so stdout stays free for the city prompt.

    Args:
        verbose: If True, sets the package logger to DEBUG level
        log_file: Optional path to log file. If provided, adds a file handler.
    """
    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {"format": "%(levelname)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG" if verbose else "INFO",
                "formatter": "standard" if verbose else "simple",
                "stream": sys.stderr,
            }
        },
        "loggers": {
            "meteograma": {
                "level": "DEBUG" if verbose else "INFO",
                "handlers": ["console"],
                "propagate": False,
            }
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "standard",
            "filename": str(log_file),
            "mode": "a",
        }
        config["loggers"]["meteograma"]["handlers"].append("file")

    logging.config.dictConfig(config)
