"""
Tests for the ConfigOptions command-line interface.
"""

import json
import os
import shutil
import tempfile
import unittest

import yaml
from click.testing import CliRunner

from ConfigOptions.cli.commands import cli


class TestCli(unittest.TestCase):
    """Test cases for the show, validate and merge commands."""

    def setUp(self):
        """Set up two option files."""
        self.runner = CliRunner()
        self.temp_dir = tempfile.mkdtemp()
        self.defaults = self._write("defaults.yml", "mood: happy\nplugins: [spell]\ndb:\n  host: localhost\n")
        self.site = self._write("site.yml", "mood: sardonic\nplugins: [grammar]\ndb:\n  port: 5432\n")

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def _write(self, name, text):
        path = os.path.join(self.temp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_show_yaml(self):
        """show prints the merged options as YAML."""
        result = self.runner.invoke(cli, ["show", self.defaults, self.site])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(yaml.safe_load(result.output), {
            "mood": "sardonic",
            "plugins": ["spell", "grammar"],
            "db": {"host": "localhost", "port": 5432},
        })

    def test_show_json_key(self):
        """show --key prints a single option."""
        result = self.runner.invoke(cli, ["show", self.defaults, self.site, "--format", "json", "--key", "plugins"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), ["spell", "grammar"])

    def test_show_missing_key(self):
        """show --key with an unknown option fails."""
        result = self.runner.invoke(cli, ["show", self.defaults, "--key", "nope"])
        self.assertEqual(result.exit_code, 1)

    def test_show_verbose_keeps_file_option(self):
        """A verbose option set by a file survives show --verbose."""
        flagged = self._write("flagged.yml", "verbose: 2\n")
        result = self.runner.invoke(cli, ["show", self.defaults, flagged, "--verbose", "--format", "json"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output)["verbose"], 2)

    def test_show_verbose_adds_no_option(self):
        """show --verbose does not add a verbose option of its own."""
        result = self.runner.invoke(cli, ["show", self.defaults, "--verbose", "--format", "json"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("verbose", json.loads(result.output))

    def test_show_invalid_file(self):
        """show fails on a malformed file."""
        bad = self._write("bad.yml", "plugins: [unclosed\n")
        result = self.runner.invoke(cli, ["show", self.defaults, bad])
        self.assertEqual(result.exit_code, 1)

    def test_validate(self):
        """validate reports valid, invalid and missing files."""
        bad = self._write("bad.yml", "- not\n- a mapping\n")
        missing = os.path.join(self.temp_dir, "missing.yml")

        result = self.runner.invoke(cli, ["validate", self.site, missing])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(f"Valid: {self.site}", result.output)
        self.assertIn(f"Skipped (not found): {missing}", result.output)

        result = self.runner.invoke(cli, ["validate", self.site, bad])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid", result.output)
        self.assertIn(bad, result.output)

    def test_merge(self):
        """merge writes the merged options to the output file."""
        output = os.path.join(self.temp_dir, "merged.yml")
        result = self.runner.invoke(cli, ["merge", self.defaults, self.site, "--output", output])

        self.assertEqual(result.exit_code, 0, result.output)
        with open(output, encoding="utf-8") as f:
            merged = yaml.safe_load(f)
        self.assertEqual(merged["plugins"], ["spell", "grammar"])
        self.assertEqual(merged["db"], {"host": "localhost", "port": 5432})


if __name__ == "__main__":
    unittest.main()
