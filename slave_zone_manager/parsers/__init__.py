"""
Parsers for BIND configuration.

This package reads the zones BIND already serves so the registry can be
rebuilt at startup.
"""

from .bind_config import parse_line, parse_zone_dump

__all__ = ["parse_line", "parse_zone_dump"]
