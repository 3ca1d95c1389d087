"""
Slave Zone Manager - Delegate BIND slave zones over HTTP

Keeps track of which slave zones are delegated to which master servers,
and keeps a running BIND daemon in sync through rndc.
"""

__version__ = "1.0.0"
__author__ = "Slave Zone Manager Team"
__description__ = "Delegated slave zone management for BIND"

from .core.zone_registry import RegistrySettings, ZoneRegistry
from .core.context import AppContext
from .hooks.base_hook import ZoneHook

__all__ = [
    "AppContext",
    "RegistrySettings",
    "ZoneRegistry",
    "ZoneHook",
]
