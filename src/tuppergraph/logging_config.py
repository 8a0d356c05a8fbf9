"""
Logging Configuration
Sets up the package logger for the application.

The level comes from the caller or, when omitted, from the
TUPPERGRAPH_LOG_LEVEL environment variable (a level name or number).
"""
import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "TUPPERGRAPH_LOG_LEVEL"
PACKAGE_LOGGER = "tuppergraph"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(value: Union[int, str], default: int) -> int:
    if isinstance(value, int):
        return value
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def level_from_env(default: int = logging.INFO) -> int:
    """Resolve the log level from TUPPERGRAPH_LOG_LEVEL."""
    raw = os.environ.get(LOG_LEVEL_ENV, "")
    return _resolve_level(raw, default) if raw.strip() else default


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Route the 'tuppergraph' loggers to stdout and, optionally, a file.

    Calling it again replaces the handlers instead of stacking them, so the
    level can be changed at runtime.

    Args:
        level: Level number or name ("DEBUG"); None reads the environment.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    resolved = level_from_env() if level is None else _resolve_level(level, logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(resolved)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(resolved)}.")
    return logger
