"""
Core zone management functionality.

This package contains the zone registry and the errors it raises.
"""

from .errors import (
    DuplicateZoneError,
    HookExecutionError,
    MasterNotFoundError,
    ZoneNotFoundError,
    ZoneNotOwnedByMasterError,
    ZoneParseError,
    ZoneRegistryError,
)
from .zone_registry import RegistrySettings, ZoneRegistry
from .context import AppContext

__all__ = [
    "AppContext",
    "RegistrySettings",
    "ZoneRegistry",
    "ZoneRegistryError",
    "DuplicateZoneError",
    "ZoneNotFoundError",
    "MasterNotFoundError",
    "ZoneNotOwnedByMasterError",
    "HookExecutionError",
    "ZoneParseError",
]
