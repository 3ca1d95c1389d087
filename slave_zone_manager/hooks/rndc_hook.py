"""
rndc zone hook implementation.

This module drives a running BIND daemon through its ``rndc`` control
executable, adding and deleting slave zones at runtime.
"""

import logging
import os
import subprocess
from typing import List

from .base_hook import ZoneHook, zone_db_path, zone_snippet
from ..core.errors import HookExecutionError

logger = logging.getLogger(__name__)


class RndcZoneHook(ZoneHook):
    """Zone hook that executes ``rndc addzone`` / ``rndc delzone``."""

    def on_add(self, settings, master: str, zone: str) -> None:
        """Add a slave zone to BIND."""
        data = zone_snippet(master, zone)
        output = self._run_rndc_command(settings, ["addzone", zone, data])
        logger.info(
            f"[exec] {settings.rndc_path} addzone {zone} '{data}': {output}"
        )

    def on_remove(self, settings, master: str, zone: str) -> None:
        """Delete a slave zone from BIND along with its database file."""
        output = self._run_rndc_command(settings, ["delzone", zone])
        logger.info(f"[exec] {settings.rndc_path} delzone {zone}: {output}")

        path = zone_db_path(settings, zone)
        try:
            os.remove(path)
            logger.debug(f"Removed zone database {path}")
        except FileNotFoundError:
            # It's ok if the zone was never transferred
            logger.debug(f"No zone database to remove at {path}")
        except OSError as e:
            logger.error(f"Failed to remove zone database {path}: {e}")
            raise HookExecutionError(
                f"Unable to remove zone database {path}: {e}", cause=e
            ) from e

    def _run_rndc_command(self, settings, args: List[str]) -> str:
        """Run an rndc command and return its combined output."""
        cmd = [settings.rndc_path] + args
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
            return result.stdout.strip()

        except subprocess.CalledProcessError as e:
            output = (e.stdout or "").strip()
            logger.error(
                f"RNDC command {' '.join(args[:2])} failed with exit status "
                f"{e.returncode}: {output}"
            )
            raise HookExecutionError(
                f"{settings.rndc_path} {args[0]} exited with status {e.returncode}"
                + (f": {output}" if output else ""),
                cause=e,
                output=output,
            ) from e
        except OSError as e:
            logger.error(f"Unable to execute {settings.rndc_path}: {e}")
            raise HookExecutionError(
                f"Unable to execute {settings.rndc_path}: {e}", cause=e
            ) from e
