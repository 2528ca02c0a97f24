"""Persisted application defaults."""

import json
import tempfile
import unittest
from pathlib import Path

from config_manager import ConfigManager
from errors import ConfigurationError
from models import AppConfig, PatternConfig


class TestConfigManager(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "config.json"
        self.manager = ConfigManager(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_gives_defaults(self):
        self.assertEqual(self.manager.load(), AppConfig())

    def test_save_and_load(self):
        config = AppConfig(cells_in_width=48, color_count=12, palette_method="kmeans",
                           patterns_dir="/tmp/patterns")
        ok, error = self.manager.save(config)
        self.assertTrue(ok)
        self.assertIsNone(error)
        self.assertEqual(self.manager.load(), config)

    def test_partial_file_keeps_defaults(self):
        self.path.write_text(json.dumps({"color_count": 8, "unknown": True}))
        config = self.manager.load()
        self.assertEqual(config.color_count, 8)
        self.assertEqual(config.cells_in_width, AppConfig().cells_in_width)
        self.assertFalse(hasattr(config, "unknown"))

    def test_wrong_type_rejected_when_building_pattern(self):
        self.path.write_text(json.dumps({"color_count": "12"}))
        config = self.manager.load()
        with self.assertRaises(ConfigurationError) as ctx:
            PatternConfig.for_image(
                (64, 64),
                cells_in_width=config.cells_in_width,
                color_count=config.color_count,
            )
        self.assertEqual(ctx.exception.field, "color_count")

    def test_corrupt_file_warns(self):
        self.path.write_text("{not json")
        with self.assertLogs("config_manager", level="WARNING"):
            config = self.manager.load()
        self.assertEqual(config, AppConfig())

    def test_save_failure_reported(self):
        manager = ConfigManager(Path(self._tmp.name) / "missing-dir" / "config.json")
        ok, error = manager.save(AppConfig())
        self.assertFalse(ok)
        self.assertTrue(error)


if __name__ == "__main__":
    unittest.main()
