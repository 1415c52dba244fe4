"""
Logging Configuration for Inventory Search

This module provides logging configuration for the Inventory Search package.
Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by the application (or the CLI) through
``init_logging``.

Example Usage:
    from inventory_search.logging import init_logging

    init_logging(level="INFO")

    logger = logging.getLogger(__name__)
    logger.info("Catalog loaded")
"""

import logging
import sys
from typing import Optional

from .config import config


def init_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Handler:
    """Initialize logging configuration.

    Args:
        level: Optional logging level (default: LOG_LEVEL from config)
        fmt: Optional log format (default: LOG_FORMAT from config)

    Returns:
        The installed console handler
    """
    level = level or config.log_level

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(fmt or config.log_format, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(console_handler)

    # Set library log levels
    logging.getLogger("prometheus_client").setLevel(logging.WARNING)

    return console_handler
