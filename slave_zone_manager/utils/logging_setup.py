"""
Logging configuration for the slave zone manager.
"""

import logging
import logging.handlers
import sys
from typing import Dict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SYSLOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Dict, verbose: bool = False) -> None:
    """Configure logging to stdout, plus a log file and syslog when enabled."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
    log_file = logging_config.get("file", "")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    if config.get("syslog", False):
        try:
            syslog_handler = logging.handlers.SysLogHandler(
                address="/dev/log",
                facility=logging.handlers.SysLogHandler.LOG_DAEMON,
            )
        except OSError as e:
            raise RuntimeError(f"Unable to initialize syslogging ({e})") from e
        syslog_handler.ident = "bdns: "
        syslog_handler.setFormatter(logging.Formatter(SYSLOG_FORMAT))
        logging.getLogger().addHandler(syslog_handler)
