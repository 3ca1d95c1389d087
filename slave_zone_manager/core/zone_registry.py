"""
Zone Registry - Authoritative mapping of slave zones to their masters

This module keeps track of which master every slave zone is delegated from,
and applies every change to BIND through a pluggable zone hook.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from ..hooks.base_hook import ZoneHook
from ..hooks.mock_hook import LoadingZoneHook, NullZoneHook
from ..parsers.bind_config import parse_zone_dump
from ..utils.rwlock import ReadWriteLock
from .errors import (
    DuplicateZoneError,
    MasterNotFoundError,
    ZoneNotFoundError,
    ZoneNotOwnedByMasterError,
)

logger = logging.getLogger(__name__)

Zone = str
Master = str
ZoneMap = Dict[Zone, Master]
ZoneSet = Set[Zone]


class RegistrySettings:
    """Static settings handed to zone hooks."""

    def __init__(self, rndc_path: str = "./rndc", data_path: str = "./"):
        self._rndc_path = rndc_path
        self._data_path = data_path

    @property
    def rndc_path(self) -> str:
        return self._rndc_path

    @property
    def data_path(self) -> str:
        return self._data_path

    def __repr__(self) -> str:
        return (
            f"RegistrySettings(rndc_path={self._rndc_path!r}, "
            f"data_path={self._data_path!r})"
        )


class ZoneRegistry:
    """
    Thread-safe registry of slave zones and the masters they belong to.

    Two mirrored structures are kept: ``zone -> master`` and
    ``master -> set of zones``. A master is present only while it owns at
    least one zone, and a zone belongs to at most one master.

    Reads share a readers-writer lock. Mutations hold it exclusively for
    their whole duration, hook execution included, so every change to BIND
    is serialized.
    """

    def __init__(
        self,
        hook: Optional[ZoneHook] = None,
        settings: Optional[RegistrySettings] = None,
    ):
        """Initialize an empty registry."""
        self._zones: ZoneMap = {}
        self._masters: Dict[Master, ZoneSet] = {}
        self._lock = ReadWriteLock()
        self._hook = hook if hook is not None else NullZoneHook()
        self._settings = settings if settings is not None else RegistrySettings()

    @property
    def hook(self) -> ZoneHook:
        return self._hook

    @property
    def settings(self) -> RegistrySettings:
        return self._settings

    def add_zone(self, master: Master, zone: Zone, hook: Optional[ZoneHook] = None):
        """
        Assign a zone to a master.

        The hook runs before the registry is touched, so a failing hook
        leaves the registry unchanged.

        Args:
            master: Master the zone is delegated from
            zone: Zone to add
            hook: Hook to use instead of the configured one

        Raises:
            DuplicateZoneError: If the zone is already assigned to any master
            HookExecutionError: If the hook failed to apply the change
        """
        hook = hook if hook is not None else self._hook

        with self._lock.write_locked():
            current_master = self._zones.get(zone)
            if current_master is not None:
                raise DuplicateZoneError(zone, current_master)

            hook.on_add(self._settings, master, zone)

            self._masters.setdefault(master, set()).add(zone)
            self._zones[zone] = master

        logger.debug(f"Added zone {zone} to master {master}")

    def remove_zone(
        self, master: Master, zone: Zone, hook: Optional[ZoneHook] = None
    ):
        """
        Remove a zone from a master.

        The registry is updated before the hook runs. If the hook fails the
        error is raised, but the zone stays removed from the registry.

        Raises:
            ZoneNotFoundError: If the zone is not assigned to any master
            MasterNotFoundError: If the master owns no zones
            ZoneNotOwnedByMasterError: If the zone belongs to another master
            HookExecutionError: If the hook failed to apply the change
        """
        hook = hook if hook is not None else self._hook

        with self._lock.write_locked():
            if zone not in self._zones:
                raise ZoneNotFoundError(zone)

            master_zones = self._masters.get(master)
            if master_zones is None:
                raise MasterNotFoundError(master)

            if zone not in master_zones:
                raise ZoneNotOwnedByMasterError(zone, master)

            del self._zones[zone]
            master_zones.discard(zone)
            if not master_zones:
                del self._masters[master]
            logger.debug(f"Removed zone {zone} from master {master}")

            hook.on_remove(self._settings, master, zone)

    def get_masters(self) -> List[Master]:
        """Get every master that owns at least one zone."""
        with self._lock.read_locked():
            return list(self._masters)

    def get_zones(self, master: Master) -> ZoneSet:
        """Get the zones owned by a master (empty if the master is unknown)."""
        with self._lock.read_locked():
            return set(self._masters.get(master, ()))

    def get_zone_map(self) -> ZoneMap:
        """Get a copy of the full zone to master mapping."""
        with self._lock.read_locked():
            return dict(self._zones)

    def load_zones(self, reader: Iterable[str]) -> int:
        """
        Restore zones from BIND's zone file.

        BIND already serves these zones, so they are added with a loading
        hook that only logs. Parsing stops at the first invalid line.

        Args:
            reader: Text stream (or iterable of lines) of the zone file

        Returns:
            Number of zones loaded

        Raises:
            ZoneParseError: If a line is neither ignorable nor a zone stanza
        """
        loading_hook = LoadingZoneHook()
        loaded = 0

        for zone, master in parse_zone_dump(reader):
            try:
                self.add_zone(master, zone, hook=loading_hook)
                loaded += 1
            except DuplicateZoneError as e:
                logger.warning(f"Skipping duplicate zone file entry: {e}")

        logger.info(f"Loaded {loaded} zones from zone file")
        return loaded

    def load_zones_file(self, path: str) -> int:
        """Restore zones from the zone file at ``path``."""
        with open(path, "r", encoding="utf-8") as f:
            return self.load_zones(f)
