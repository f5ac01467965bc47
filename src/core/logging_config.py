# core/logging_config.py
"""Logging configuration for the renderer."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"


def setup_logging(level: Optional[str] = None, name: Optional[str] = None) -> logging.Logger:
    """
    Set up console logging.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        name: Logger to configure; the root logger when omitted so that
            every module-level logger inherits the handler.

    Returns:
        The configured logger.
    """
    if level is None:
        level = DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Re-running setup (e.g. from tests) must not stack handlers.
    for handler in list(logger.handlers):
        if getattr(handler, "_renderer_handler", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._renderer_handler = True
    logger.addHandler(console_handler)

    return logger
