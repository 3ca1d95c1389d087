"""
Command-line interface components.

This package contains the entry point that boots the zone registry and
serves the HTTP API.
"""

from .main import main

__all__ = ["main"]
