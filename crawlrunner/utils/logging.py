"""
Logging setup for the crawl runner.

Log records go to stderr so version and help output on stdout stay
clean. The level comes from ``CRAWLRUNNER_LOG_LEVEL`` unless given.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "crawlrunner"
LOG_LEVEL_ENV_VAR = "CRAWLRUNNER_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Calling this again replaces the handler instead of adding a second one.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        logging.Logger: The configured ``crawlrunner`` logger
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LEVEL).upper()
    numeric_level = getattr(logging, level_name, None)
    unknown_level = not isinstance(numeric_level, int)
    if unknown_level:
        numeric_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if unknown_level:
        logger.warning(f"Unknown log level '{level_name}', using WARNING")
    return logger
