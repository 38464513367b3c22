"""Package logger configuration."""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

LOGGER_NAME = "cgorithm"


def setup_logger(
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the package logger and return it.

    The library is silent until this is called.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to
            ``CGORITHM_LOG_LEVEL`` or WARNING
        format_string: Custom format string

    Returns:
        Configured package logger
    """
    level = level or os.getenv("CGORITHM_LOG_LEVEL", "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    configured = logging.getLogger(LOGGER_NAME)

    # Only configure once
    if not any(isinstance(h, logging.StreamHandler) for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        configured.addHandler(handler)
    configured.setLevel(getattr(logging, level.upper()))

    return configured


logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
