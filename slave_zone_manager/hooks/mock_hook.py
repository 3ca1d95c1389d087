"""
Zone hooks that do not touch the BIND daemon.

These are used for disabled-sync deployments, dry runs, isolated testing of
the registry and for restoring state from the daemon's own zone file.
"""

import logging

from .base_hook import ZoneHook, zone_snippet

logger = logging.getLogger(__name__)


class NullZoneHook(ZoneHook):
    """Zone hook that does nothing."""

    def on_add(self, settings, master: str, zone: str) -> None:
        pass

    def on_remove(self, settings, master: str, zone: str) -> None:
        pass


class LogZoneHook(ZoneHook):
    """Dry-run zone hook that logs the rndc command it would execute."""

    def on_add(self, settings, master: str, zone: str) -> None:
        data = zone_snippet(master, zone)
        logger.info(
            f"[Skipped execution] {settings.rndc_path} addzone {zone} '{data}'"
        )

    def on_remove(self, settings, master: str, zone: str) -> None:
        logger.info(f"[Skipped execution] {settings.rndc_path} delzone {zone}")


class LoadingZoneHook(ZoneHook):
    """Zone hook used while restoring zones from BIND's zone file."""

    def on_add(self, settings, master: str, zone: str) -> None:
        logger.info(f"Loaded zone {zone} with master {master}")

    def on_remove(self, settings, master: str, zone: str) -> None:
        pass
