"""
HTTP API for the slave zone manager.
"""

from .server import create_app, zone_api_bp

__all__ = ["create_app", "zone_api_bp"]
