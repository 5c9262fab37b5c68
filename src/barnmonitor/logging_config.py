"""
Logging Configuration
Sets up the 'barnmonitor' package logger from arguments or environment variables.
"""
import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "barnmonitor"
LOG_LEVEL_ENV = "BARNMONITOR_LOG_LEVEL"
LOG_FILE_ENV = "BARNMONITOR_LOG_FILE"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name such as "debug" into its number. Unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'barnmonitor' package logger. The root logger is left untouched.

    Args:
        level: Level number or name. Defaults to $BARNMONITOR_LOG_LEVEL, then INFO.
        log_file: Optional path to save logs to. Defaults to $BARNMONITOR_LOG_FILE.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV)
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV) or None
    level = resolve_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
