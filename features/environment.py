"""
Behave environment configuration for Slave Zone Manager integration tests.

A stand-in rndc script records every command it receives, so scenarios can
drive the real rndc hook without a running BIND daemon.
"""

import logging
import shutil
import stat
import tempfile
from pathlib import Path

import yaml

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

FAKE_RNDC = """#!/bin/sh
echo "$@" >> "{log}"
if [ -e "{fail}" ]; then
    echo "rndc: '$1' failed: failure"
    exit 1
fi
echo "rndc: '$1' ok"
"""


def before_all(context):
    """Set up test environment before all tests."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="slave_zone_manager_"))
    logger.info(f"Test data directory: {context.test_data_dir}")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.scenario_dir = context.test_data_dir / scenario.name.lower().replace(" ", "_")
    (context.scenario_dir / "slave").mkdir(parents=True)

    context.rndc_log = context.scenario_dir / "rndc.log"
    context.rndc_fail = context.scenario_dir / "rndc.fail"
    context.rndc_path = context.scenario_dir / "rndc"
    context.rndc_path.write_text(
        FAKE_RNDC.format(log=context.rndc_log, fail=context.rndc_fail)
    )
    context.rndc_path.chmod(context.rndc_path.stat().st_mode | stat.S_IEXEC)

    context.test_config = {
        "zone_file": "3bf305731dd26307.nzf",
        "path": str(context.scenario_dir),
        "rndc": str(context.rndc_path),
        "hook": "rndc",
        "clients": [{"username": "master", "password": "secret"}],
    }
    context.test_config_file = context.scenario_dir / "bdns.yaml"
    with open(context.test_config_file, "w") as f:
        yaml.dump(context.test_config, f)

    context.error = None
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    logger.info(f"Completed scenario: {scenario.name}")


def after_all(context):
    """Clean up test environment after all tests."""
    if context.test_data_dir.exists():
        shutil.rmtree(context.test_data_dir)
    logger.info("Test environment cleanup complete")

