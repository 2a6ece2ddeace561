"""Logging configuration for api-spec-tools.

Modules log through ``logging.getLogger(__name__)``; the CLI calls
``configure_logging`` once to attach a handler to the package logger.
"""

import logging
import sys

DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """Send package logs to stderr at the given level."""
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("api_spec_tools")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # Keep stdout clean for JSON output
    logger.propagate = False
