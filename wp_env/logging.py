"""
Logging Configuration for wp-env

The library logs through module loggers under the ``wp_env`` namespace, at
DEBUG level only: which source satisfied a key, cache hits and clears, and
detection results. Only key names are logged, never values.

Example Usage:
    from wp_env.logging import init_logging

    init_logging(level="DEBUG")
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init_logging(level: Optional[str] = None, rich: bool = True) -> logging.Logger:
    """Initialize logging for the wp_env package.

    Args:
        level: Optional logging level (default: WARNING)
        rich: Use rich console formatting instead of plain text

    Returns:
        The package logger
    """
    if level is None:
        level = "WARNING"

    logger = logging.getLogger("wp_env")
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers = []

    if rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True), show_time=True, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    return logger
