"""Verbose logging configuration for the command line."""

from __future__ import annotations

import logging
import sys


def setup_logger(verbose: bool = False, logger_name: str = "deep_equals") -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        verbose: If True, also log DEBUG and above to stderr.
        logger_name: Name of the logger to configure

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Repeated CLI invocations in one process must not stack handlers
    logger.handlers.clear()

    if verbose:
        logger.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            fmt="[%(asctime)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
