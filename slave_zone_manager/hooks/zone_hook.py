"""
Zone hook selection.

This module maps the ``hook`` configuration setting to a zone hook instance.
"""

import logging
from typing import Dict

from .base_hook import ZoneHook
from .mock_hook import LogZoneHook, NullZoneHook
from .rndc_hook import RndcZoneHook

logger = logging.getLogger(__name__)

HOOKS = {
    "rndc": RndcZoneHook,
    "log": LogZoneHook,
    "null": NullZoneHook,
}


def get_hook(config: Dict) -> ZoneHook:
    """Get the zone hook based on configuration."""
    hook_name = config.get("hook", "rndc")

    hook_class = HOOKS.get(hook_name)
    if hook_class is None:
        logger.warning(f"Unknown hook '{hook_name}', using log hook")
        return LogZoneHook()

    logger.info(f"Using {hook_name} zone hook")
    return hook_class()
