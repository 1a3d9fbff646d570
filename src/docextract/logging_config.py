"""Logging setup for docextract."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Set up logging for the docextract package logger.

    Console output goes to stderr, stdout carries extracted text.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging output
        format_string: Optional custom format string for log messages
        force: If True, reconfigure even if handlers exist

    Returns:
        The configured "docextract" logger
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("docextract")
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        logger.handlers.clear()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

        for handler in handlers:
            handler.setLevel(numeric_level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    # Prevent duplicate records through the root logger
    logger.propagate = False

    return logger
