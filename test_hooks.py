#!/usr/bin/env python3
"""
Test suite for zone hooks

Exercises the rndc hook against a mocked subprocess layer and a temporary
BIND data directory, plus the hooks that never touch BIND.
"""

import os
import shutil
import subprocess
import tempfile
import unittest
from unittest.mock import patch

from slave_zone_manager.core.errors import HookExecutionError
from slave_zone_manager.core.zone_registry import RegistrySettings
from slave_zone_manager.hooks import (
    LoadingZoneHook,
    LogZoneHook,
    NullZoneHook,
    RndcZoneHook,
    get_hook,
    zone_db_path,
    zone_snippet,
)


class TestZoneSnippet(unittest.TestCase):
    """Test the generated zone configuration."""

    def test_zone_snippet(self):
        """Test the snippet handed to rndc addzone."""
        self.assertEqual(
            zone_snippet("10.0.0.1", "domain.tld"),
            '{type slave; file "slave/domain.tld.db"; masters { 10.0.0.1; };};',
        )

    def test_zone_db_path(self):
        """Test the zone database location."""
        settings = RegistrySettings(data_path="/var/cache/bind")
        self.assertEqual(
            zone_db_path(settings, "domain.tld"),
            "/var/cache/bind/slave/domain.tld.db",
        )


class TestRndcZoneHook(unittest.TestCase):
    """Test the rndc zone hook."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        os.makedirs(os.path.join(self.temp_dir, "slave"))
        self.settings = RegistrySettings(rndc_path="/usr/sbin/rndc", data_path=self.temp_dir)
        self.hook = RndcZoneHook()

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def _completed(self, args, output=""):
        return subprocess.CompletedProcess(args, 0, stdout=output)

    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_add(self, mock_run):
        """Test adding a zone runs rndc addzone with the zone snippet."""
        mock_run.side_effect = lambda cmd, **kwargs: self._completed(cmd)

        with self.assertLogs("slave_zone_manager.hooks.rndc_hook", level="INFO") as cm:
            self.hook.on_add(self.settings, "10.0.0.1", "domain.tld")

        args, kwargs = mock_run.call_args
        self.assertEqual(
            args[0],
            [
                "/usr/sbin/rndc",
                "addzone",
                "domain.tld",
                '{type slave; file "slave/domain.tld.db"; masters { 10.0.0.1; };};',
            ],
        )
        self.assertEqual(kwargs["stderr"], subprocess.STDOUT)
        self.assertTrue(kwargs["check"])
        self.assertIn("[exec] /usr/sbin/rndc addzone domain.tld", "\n".join(cm.output))

    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_add_failure(self, mock_run):
        """Test a non-zero exit status is reported as a hook failure."""
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["/usr/sbin/rndc"], output="rndc: 'addzone' failed: already exists"
        )

        with self.assertRaises(HookExecutionError) as cm:
            self.hook.on_add(self.settings, "10.0.0.1", "domain.tld")

        self.assertIsInstance(cm.exception.cause, subprocess.CalledProcessError)
        self.assertIn("already exists", cm.exception.output)
        self.assertIn("status 1", str(cm.exception))

    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_add_launch_failure(self, mock_run):
        """Test a missing executable is reported as a hook failure."""
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

        with self.assertRaises(HookExecutionError) as cm:
            self.hook.on_add(self.settings, "10.0.0.1", "domain.tld")

        self.assertIsInstance(cm.exception.cause, FileNotFoundError)

    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_remove_deletes_zone_database(self, mock_run):
        """Test removing a zone runs rndc delzone and deletes its database."""
        mock_run.side_effect = lambda cmd, **kwargs: self._completed(cmd)
        db_path = os.path.join(self.temp_dir, "slave", "domain.tld.db")
        with open(db_path, "w") as f:
            f.write("; zone data\n")

        self.hook.on_remove(self.settings, "10.0.0.1", "domain.tld")

        self.assertEqual(
            mock_run.call_args[0][0], ["/usr/sbin/rndc", "delzone", "domain.tld"]
        )
        self.assertFalse(os.path.exists(db_path))

    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_remove_without_zone_database(self, mock_run):
        """Test a missing zone database is not an error."""
        mock_run.side_effect = lambda cmd, **kwargs: self._completed(cmd)

        self.hook.on_remove(self.settings, "10.0.0.1", "never-transferred.tld")

        mock_run.assert_called_once()

    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_remove_failure_keeps_zone_database(self, mock_run):
        """Test the database is left alone when rndc delzone fails."""
        mock_run.side_effect = subprocess.CalledProcessError(1, ["/usr/sbin/rndc"], output="")
        db_path = os.path.join(self.temp_dir, "slave", "domain.tld.db")
        with open(db_path, "w") as f:
            f.write("; zone data\n")

        with self.assertRaises(HookExecutionError):
            self.hook.on_remove(self.settings, "10.0.0.1", "domain.tld")

        self.assertTrue(os.path.exists(db_path))

    @patch("slave_zone_manager.hooks.rndc_hook.os.remove")
    @patch("slave_zone_manager.hooks.rndc_hook.subprocess.run")
    def test_on_remove_filesystem_error(self, mock_run, mock_remove):
        """Test filesystem errors other than a missing file are reported."""
        mock_run.side_effect = lambda cmd, **kwargs: self._completed(cmd)
        mock_remove.side_effect = PermissionError(13, "Permission denied")

        with self.assertRaises(HookExecutionError) as cm:
            self.hook.on_remove(self.settings, "10.0.0.1", "domain.tld")

        self.assertIsInstance(cm.exception.cause, PermissionError)


class TestMockZoneHooks(unittest.TestCase):
    """Test the hooks that never touch BIND."""

    def setUp(self):
        """Set up test fixtures."""
        self.settings = RegistrySettings(rndc_path="/usr/sbin/rndc", data_path="/var/cache/bind")

    @patch("subprocess.run")
    def test_null_hook(self, mock_run):
        """Test the null hook does nothing."""
        hook = NullZoneHook()
        self.assertIsNone(hook.on_add(self.settings, "10.0.0.1", "domain.tld"))
        self.assertIsNone(hook.on_remove(self.settings, "10.0.0.1", "domain.tld"))
        mock_run.assert_not_called()

    @patch("subprocess.run")
    def test_log_hook(self, mock_run):
        """Test the log hook logs the commands it skips."""
        hook = LogZoneHook()

        with self.assertLogs("slave_zone_manager.hooks.mock_hook", level="INFO") as cm:
            hook.on_add(self.settings, "10.0.0.1", "domain.tld")
            hook.on_remove(self.settings, "10.0.0.1", "domain.tld")

        self.assertEqual(len(cm.output), 2)
        self.assertIn(
            "[Skipped execution] /usr/sbin/rndc addzone domain.tld "
            "'{type slave; file \"slave/domain.tld.db\"; masters { 10.0.0.1; };};'",
            cm.output[0],
        )
        self.assertIn("[Skipped execution] /usr/sbin/rndc delzone domain.tld", cm.output[1])
        mock_run.assert_not_called()

    def test_loading_hook(self):
        """Test the loading hook logs restored zones."""
        hook = LoadingZoneHook()

        with self.assertLogs("slave_zone_manager.hooks.mock_hook", level="INFO") as cm:
            hook.on_add(self.settings, "10.0.0.1", "domain.tld")

        self.assertIn("Loaded zone domain.tld with master 10.0.0.1", cm.output[0])


class TestGetHook(unittest.TestCase):
    """Test hook selection from configuration."""

    def test_get_hook(self):
        """Test each hook name maps to its hook."""
        cases = [
            ({}, RndcZoneHook),
            ({"hook": "rndc"}, RndcZoneHook),
            ({"hook": "log"}, LogZoneHook),
            ({"hook": "null"}, NullZoneHook),
            ({"hook": "bogus"}, LogZoneHook),
        ]

        for config, expected in cases:
            with self.subTest(config=config):
                self.assertIsInstance(get_hook(config), expected)


if __name__ == "__main__":
    unittest.main(verbosity=2)
