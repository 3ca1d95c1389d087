"""
Zone hook implementations.

This package contains the side-effect hooks that apply zone registry changes
to a BIND daemon, plus hooks that only log or do nothing at all.
"""

from .base_hook import ZoneHook, zone_db_path, zone_snippet
from .mock_hook import LoadingZoneHook, LogZoneHook, NullZoneHook
from .rndc_hook import RndcZoneHook
from .zone_hook import get_hook

__all__ = [
    "ZoneHook",
    "RndcZoneHook",
    "NullZoneHook",
    "LogZoneHook",
    "LoadingZoneHook",
    "get_hook",
    "zone_snippet",
    "zone_db_path",
]
