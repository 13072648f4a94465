"""Tests for YAML settings loading.

Tests cover:
- Defaults when no settings file exists
- Loading the repository's .diffwith.yml
- Explicit settings files
- Type validation and invalid YAML
"""

import tempfile
import unittest
from pathlib import Path

from diffwith.config import (
    CONFIG_FILENAME,
    DEFAULT_DIFF_TOOL,
    ConfigError,
    Settings,
    load_settings,
)
from diffwith.domain.viewer_kind import ViewerKind


class TestSettings(unittest.TestCase):
    """Tests for Settings.from_dict."""

    def test_defaults(self):
        settings = Settings()

        self.assertEqual(settings.diff_tool, DEFAULT_DIFF_TOOL)
        self.assertEqual(settings.viewer, ViewerKind.TOOL)
        self.assertEqual(settings.working_tree_label, "Working Tree")
        self.assertFalse(settings.legacy_labels)
        self.assertEqual(settings.log_level, "WARNING")

    def test_from_dict_reads_known_keys(self):
        settings = Settings.from_dict({
            "diff_tool": "meld $LOCAL $REMOTE",
            "viewer": "console",
            "legacy_labels": True,
            "log_level": "debug",
            "unrelated": 42,
        })

        self.assertEqual(settings.diff_tool, "meld $LOCAL $REMOTE")
        self.assertEqual(settings.viewer, ViewerKind.CONSOLE)
        self.assertTrue(settings.legacy_labels)
        self.assertEqual(settings.log_level, "debug")

    def test_invalid_viewer_raises(self):
        with self.assertRaises(ConfigError):
            Settings.from_dict({"viewer": "browser"})

    def test_non_boolean_legacy_labels_raises(self):
        with self.assertRaises(ConfigError):
            Settings.from_dict({"legacy_labels": "yes please"})

    def test_non_string_value_raises(self):
        with self.assertRaises(ConfigError):
            Settings.from_dict({"diff_tool": ["meld"]})


class TestLoadSettings(unittest.TestCase):
    """Tests for load_settings."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.repo = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_no_file_gives_defaults(self):
        self.assertEqual(load_settings(repo_path=str(self.repo)), Settings())

    def test_reads_repository_file(self):
        (self.repo / CONFIG_FILENAME).write_text("working_tree_label: Local Changes\n")

        settings = load_settings(repo_path=str(self.repo))

        self.assertEqual(settings.working_tree_label, "Local Changes")

    def test_explicit_file_wins(self):
        (self.repo / CONFIG_FILENAME).write_text("viewer: tool\n")
        explicit = self.repo / "other.yml"
        explicit.write_text("viewer: console\n")

        settings = load_settings(str(explicit), str(self.repo))

        self.assertEqual(settings.viewer, ViewerKind.CONSOLE)

    def test_missing_explicit_file_raises(self):
        with self.assertRaises(ConfigError) as ctx:
            load_settings(str(self.repo / "absent.yml"))

        self.assertIn("does not exist", str(ctx.exception))

    def test_empty_file_gives_defaults(self):
        (self.repo / CONFIG_FILENAME).write_text("")

        self.assertEqual(load_settings(repo_path=str(self.repo)), Settings())

    def test_invalid_yaml_raises(self):
        (self.repo / CONFIG_FILENAME).write_text("viewer: [unclosed\n")

        with self.assertRaises(ConfigError):
            load_settings(repo_path=str(self.repo))

    def test_non_mapping_raises(self):
        (self.repo / CONFIG_FILENAME).write_text("- a\n- b\n")

        with self.assertRaises(ConfigError):
            load_settings(repo_path=str(self.repo))


if __name__ == "__main__":
    unittest.main()
