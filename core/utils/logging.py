"""Centralized logging configuration."""

import logging
import sys
from typing import Optional

# SDK log level names -> stdlib levels ("log" sits between debug and info)
LEVELS = {
    "debug": logging.DEBUG,
    "log": 15,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

logging.addLevelName(LEVELS["log"], "LOG")

FORMATS = {
    "standard": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
}


def to_logging_level(level: str) -> int:
    """Translate an SDK or stdlib level name to a logging level number."""
    name = level.lower()
    if name in LEVELS:
        return LEVELS[name]
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(
    level: str = "info", format_style: str = "standard", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: SDK log level (debug, log, info, warn, error)
        format_style: 'standard' for dev, 'json' for production
        log_file: Optional file path to write logs

    Returns:
        Root logger
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=to_logging_level(level),
        format=FORMATS.get(format_style, FORMATS["standard"]),
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )

    return logging.getLogger()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Usage:
        from core.utils.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Something happened")
    """
    return logging.getLogger(name)
