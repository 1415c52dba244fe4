"""
Configuration Management for Inventory Search

This module provides configuration management for the Inventory Search package.
It implements a singleton so every component sees the same settings, loaded
from environment variables (and a ``.env`` file when one exists).

Example Usage:
    from inventory_search.config import config

    options = config.search_options()
    print(config.fuzzy_threshold, config.max_results)

Environment Variables:
    ENVIRONMENT: Environment name (development/staging/production)
    DEBUG: Enable debug mode (true/false)
    LOG_LEVEL: Logging level
    LOG_FORMAT: Logging format string
    FUZZY_THRESHOLD: Default similarity cutoff for fuzzy matches (0-1)
    MIN_SCORE: Default normalized score floor (0-1)
    MAX_RESULTS: Default result cap
    INCLUDE_INACTIVE: Include non-active items by default (true/false)
    SORT_BY: Default sort key (relevance/name/price/quantity)
    SORT_ORDER: Default sort direction (asc/desc)
    ENABLE_TELEMETRY: Enable metrics collection (true/false)
"""

import logging
import os
from enum import Enum
from typing import Any, Dict

from .models import SearchOptions, SortBy, SortOrder

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Environment enumeration."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Config:
    """Configuration settings."""

    _instance = None

    def __new__(cls):
        """Create singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize configuration."""
        if self._initialized:
            return
        self._initialized = True
        self._set_defaults()
        self._load_from_env()

    def _set_defaults(self) -> None:
        # Environment
        self.environment = Environment.DEVELOPMENT.value
        self.debug = False

        # Search
        self.fuzzy_threshold = 0.7
        self.min_score = 0.3
        self.max_results = 100
        self.include_inactive = True
        self.sort_by = SortBy.RELEVANCE.value
        self.sort_order = SortOrder.DESC.value

        # Monitoring
        self.enable_telemetry = True

        # Logging
        self.log_level = "INFO"
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        # Load environment from .env file if it exists
        if os.path.exists(".env"):
            from dotenv import load_dotenv

            load_dotenv()

        # Environment
        self.environment = os.getenv("ENVIRONMENT", self.environment)
        self.debug = os.getenv("DEBUG", str(self.debug)).lower() == "true"

        # Search
        self.fuzzy_threshold = _env_float("FUZZY_THRESHOLD", self.fuzzy_threshold)
        self.min_score = _env_float("MIN_SCORE", self.min_score)
        self.max_results = _env_int("MAX_RESULTS", self.max_results)
        self.include_inactive = (
            os.getenv("INCLUDE_INACTIVE", str(self.include_inactive)).lower()
            == "true"
        )
        self.sort_by = os.getenv("SORT_BY", self.sort_by).lower()
        self.sort_order = os.getenv("SORT_ORDER", self.sort_order).lower()

        # Monitoring
        self.enable_telemetry = (
            os.getenv("ENABLE_TELEMETRY", str(self.enable_telemetry)).lower() == "true"
        )

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()
        self.log_format = os.getenv("LOG_FORMAT", self.log_format)

        # Validate environment
        if self.environment not in [e.value for e in Environment]:
            self.environment = Environment.DEVELOPMENT.value

        # Validate log level
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_levels:
            self.log_level = "INFO"

        # Validate search defaults
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            logger.warning(f"Ignoring FUZZY_THRESHOLD={self.fuzzy_threshold}")
            self.fuzzy_threshold = 0.7
        if not 0.0 <= self.min_score <= 1.0:
            logger.warning(f"Ignoring MIN_SCORE={self.min_score}")
            self.min_score = 0.3
        if self.max_results < 1:
            logger.warning(f"Ignoring MAX_RESULTS={self.max_results}")
            self.max_results = 100
        if self.sort_by not in [s.value for s in SortBy]:
            self.sort_by = SortBy.RELEVANCE.value
        if self.sort_order not in [o.value for o in SortOrder]:
            self.sort_order = SortOrder.DESC.value

    def reload(self) -> None:
        """Reset to defaults and re-read the environment."""
        self._set_defaults()
        self._load_from_env()

    def search_options(self) -> SearchOptions:
        """Build the default search options from configuration."""
        return SearchOptions(
            fuzzy_threshold=self.fuzzy_threshold,
            include_inactive=self.include_inactive,
            min_score=self.min_score,
            max_results=self.max_results,
            sort_by=self.sort_by,
            sort_order=self.sort_order,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "fuzzy_threshold": self.fuzzy_threshold,
            "min_score": self.min_score,
            "max_results": self.max_results,
            "include_inactive": self.include_inactive,
            "sort_by": self.sort_by,
            "sort_order": self.sort_order,
            "enable_telemetry": self.enable_telemetry,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}")
        return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}")
        return default


# Create global instance
config = Config()

__all__ = ["config", "Config", "Environment"]
