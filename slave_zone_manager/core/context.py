"""
Application context shared by the CLI and the HTTP API.
"""

import logging
import os
from typing import Dict

from ..hooks.zone_hook import get_hook
from .zone_registry import RegistrySettings, ZoneRegistry

logger = logging.getLogger(__name__)


class AppContext:
    """Configuration and zone registry, built once at startup."""

    def __init__(self, config: Dict, registry: ZoneRegistry):
        self.config = config
        self.registry = registry

    @classmethod
    def from_config(cls, config: Dict) -> "AppContext":
        """Build an empty registry wired to the hook selected in ``config``."""
        settings = RegistrySettings(
            rndc_path=config.get("rndc", "./rndc"),
            data_path=config.get("path", "./"),
        )
        registry = ZoneRegistry(hook=get_hook(config), settings=settings)
        return cls(config, registry)

    @property
    def zone_file_path(self) -> str:
        return os.path.join(self.config.get("path", "./"), self.config["zone_file"])

    def load_zones(self) -> int:
        """Restore the registry from BIND's zone file."""
        logger.info(f"Loading zones from {self.zone_file_path}")
        loaded = self.registry.load_zones_file(self.zone_file_path)
        logger.info("Done loading zones")
        return loaded
