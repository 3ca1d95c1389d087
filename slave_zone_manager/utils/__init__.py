"""
Utility functions and helpers.

This package contains configuration, logging and locking helpers.
"""

from .config import ConfigError, dump_config, get_default_config, load_config, override
from .logging_setup import setup_logging
from .rwlock import ReadWriteLock

__all__ = [
    "ConfigError",
    "ReadWriteLock",
    "dump_config",
    "get_default_config",
    "load_config",
    "override",
    "setup_logging",
]
