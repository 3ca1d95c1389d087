"""
Errors raised by the zone registry, its hooks and the bootstrap parser.
"""

from typing import Optional


class ZoneRegistryError(Exception):
    """Base class for every error raised by the zone registry."""


class DuplicateZoneError(ZoneRegistryError):
    def __init__(self, zone: str, master: str):
        self.zone = zone
        self.master = master
        super().__init__(f'Zone "{zone}" is already assigned to "{master}"')


class ZoneNotFoundError(ZoneRegistryError):
    def __init__(self, zone: str):
        self.zone = zone
        super().__init__(f'Zone "{zone}" not found in zone map')


class MasterNotFoundError(ZoneRegistryError):
    def __init__(self, master: str):
        self.master = master
        super().__init__(f'Master "{master}" not found')


class ZoneNotOwnedByMasterError(ZoneRegistryError):
    def __init__(self, zone: str, master: str):
        self.zone = zone
        self.master = master
        super().__init__(f'Zone "{zone}" is not assigned to master "{master}"')


class HookExecutionError(ZoneRegistryError):
    """A side-effect hook failed to apply a zone change."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        output: str = "",
    ):
        self.cause = cause
        self.output = output
        super().__init__(message)


class ZoneParseError(ZoneRegistryError):
    """A line of the bootstrap dump does not follow the zone grammar."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        super().__init__(f'Invalid config line "{line}"')
