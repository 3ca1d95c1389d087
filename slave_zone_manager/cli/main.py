#!/usr/bin/env python3
"""
Slave Zone Manager - Command Line Interface

Main entry point: loads the configuration, restores the zone registry from
BIND's zone file and serves the HTTP API.
"""

import argparse
import logging
import sys
import threading
from typing import Dict, Optional

from rich.console import Console
from rich.table import Table
from werkzeug.serving import make_server

from ..api.server import create_app
from ..core.context import AppContext
from ..core.errors import ZoneParseError
from ..utils.config import ConfigError, dump_config, load_config, override
from ..utils.logging_setup import setup_logging

console = Console()
logger = logging.getLogger(__name__)

# Command-line flags that override configuration settings of the same name
OVERRIDES = (
    "zone_file",
    "port",
    "rndc",
    "path",
    "syslog",
    "ssl_enabled",
    "ssl_cert",
    "ssl_key",
    "hook",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Slave Zone Manager - Delegate BIND slave zones over HTTP"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="/etc/bdns/bdns.yaml",
        help="Configuration file path (default: /etc/bdns/bdns.yaml)",
    )
    parser.add_argument("--zone-file", dest="zone_file", help="BIND's zone file to read")
    parser.add_argument("--port", type=int, help="Port where to listen")
    parser.add_argument("--rndc", help="Path to the rndc executable")
    parser.add_argument("--path", help="Path to BIND's data directory")
    parser.add_argument(
        "--syslog", action="store_true", default=None, help="Send logs to syslog"
    )
    parser.add_argument(
        "--ssl-enabled",
        dest="ssl_enabled",
        action="store_true",
        default=None,
        help="Enables https",
    )
    parser.add_argument("--ssl-cert", dest="ssl_cert", help="Path to the certificate (bundle)")
    parser.add_argument("--ssl-key", dest="ssl_key", help="Path to the certificate key")
    parser.add_argument(
        "--hook",
        choices=["rndc", "log", "null"],
        help="How zone changes are applied to BIND",
    )
    parser.add_argument(
        "--dump-config",
        dest="dump_config",
        action="store_true",
        help="Dumps the effective configuration settings and terminates",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def load_configuration(args: argparse.Namespace) -> Dict:
    """Load the configuration file and apply command-line overrides."""
    config = load_config(args.config)
    for name in OVERRIDES:
        value = getattr(args, name)
        if value is not None:
            override(config, name, value)
    return config


def display_zone_summary(context: AppContext):
    """Display the zones restored from BIND's zone file."""
    registry = context.registry
    table = Table(title="Slave Zones")
    table.add_column("Master", style="cyan")
    table.add_column("Zones", style="magenta")

    total = 0
    for master in sorted(registry.get_masters()):
        zones = registry.get_zones(master)
        total += len(zones)
        table.add_row(master, str(len(zones)))

    console.print(table)
    console.print(f"\n[bold]Total zones: {total}[/bold]")


def serve(context: AppContext):
    """Serve the API over http on port - 1, and over https on port if enabled."""
    config = context.config
    app = create_app(context)
    port = int(config["port"])

    if config.get("ssl_enabled"):
        ssl_server = make_server(
            "0.0.0.0",
            port,
            app,
            threaded=True,
            ssl_context=(config["ssl_cert"], config["ssl_key"]),
        )
        thread = threading.Thread(target=ssl_server.serve_forever, daemon=True)
        thread.start()
        logger.info(f"Serving https on port {port}")

    server = make_server("0.0.0.0", port - 1, app, threaded=True)
    logger.info(f"Serving http on port {port - 1}")
    server.serve_forever()


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_configuration(args)
    except ConfigError as e:
        print(f"Unable to load configuration: {e}")
        sys.exit(1)

    if args.dump_config:
        dump_config(config, sys.stderr)
        sys.exit(0)

    try:
        setup_logging(config, verbose=args.verbose)
    except (RuntimeError, ValueError, OSError) as e:
        print(f"Unable to load configuration: {e}")
        sys.exit(1)

    context = AppContext.from_config(config)
    try:
        context.load_zones()
    except OSError as e:
        logger.error(f"Unable to open the zones file ({e})")
        sys.exit(1)
    except ZoneParseError as e:
        logger.error(f"Unable to load zones: {e}")
        sys.exit(1)

    display_zone_summary(context)
    serve(context)


if __name__ == "__main__":
    main()
