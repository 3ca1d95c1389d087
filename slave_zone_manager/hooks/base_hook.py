"""
Base zone hook interface.

This module defines the abstract base class that all zone hooks must implement.
A hook applies a registry change to the BIND daemon; it signals failure by
raising HookExecutionError.
"""

import os
from abc import ABC, abstractmethod


class ZoneHook(ABC):
    """Abstract base class for zone side-effect hooks."""

    @abstractmethod
    def on_add(self, settings, master: str, zone: str) -> None:
        """Apply the assignment of a zone to a master."""
        pass

    @abstractmethod
    def on_remove(self, settings, master: str, zone: str) -> None:
        """Revert the assignment of a zone to a master."""
        pass


def zone_snippet(master: str, zone: str) -> str:
    """Zone configuration handed to ``rndc addzone``."""
    return f'{{type slave; file "slave/{zone}.db"; masters {{ {master}; }};}};'


def zone_db_path(settings, zone: str) -> str:
    """Location of the slave zone database inside BIND's data directory."""
    return os.path.join(settings.data_path, "slave", f"{zone}.db")
