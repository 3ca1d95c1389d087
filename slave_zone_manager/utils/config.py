"""
Configuration - YAML settings for the slave zone manager

This module loads the YAML configuration file, applies command-line
overrides on top of it and dumps the effective settings.
"""

import copy
import logging
from typing import Any, Dict, IO

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """The configuration could not be loaded or changed."""


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "zone_file": "3bf305731dd26307.nzf",
        "port": 54515,
        "rndc": "/usr/sbin/rndc",
        "path": "/var/cache/bind",
        "syslog": False,
        "ssl_enabled": False,
        "ssl_cert": "",
        "ssl_key": "",
        "hook": "rndc",
        "realm": "bdns",
        "clients": [],
        "logging": {"level": "INFO", "file": ""},
    }


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = load_config_stream(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file '{config_path}' not found") from e
    except OSError as e:
        raise ConfigError(f"Unable to read configuration file '{config_path}' ({e})") from e

    logger.info(f"Configuration loaded from {config_path}")
    return config


def load_config_stream(stream: IO) -> Dict:
    """Load configuration from a YAML stream, merged over the defaults."""
    try:
        loaded = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError("Configuration must be a mapping of settings")

    config = get_default_config()
    for key, value in loaded.items():
        if key == "logging" and isinstance(value, dict):
            config["logging"].update(value)
        else:
            config[key] = value
    return config


def override(config: Dict, name: str, value: Any) -> None:
    """Override a top-level setting, e.g. from a command-line flag."""
    if name not in get_default_config():
        raise ConfigError(f'Variable "{name}" is invalid.')
    config[name] = value


def dump_config(config: Dict, stream: IO) -> None:
    """Write the effective configuration as YAML."""
    yaml.safe_dump(copy.deepcopy(config), stream, default_flow_style=False, sort_keys=True)
