"""Saving and reopening named patterns."""

import json
import tempfile
import unittest

from embroidery import PatternProcessor, load_dmc_catalog
from errors import ConfigurationError, MissingValueError, PatternExistsError
from pattern_store import PatternStore

from sample_images import gradient_image, png_bytes


class TestPatternStore(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.catalog = load_dmc_catalog()
        processor = PatternProcessor(cls.catalog)
        cls.pattern = processor.process(
            png_bytes(gradient_image(24, 18)),
            cells_in_width=8,
            color_count=4,
            filename="leaf.png",
        )

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = PatternStore(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_save_and_load(self):
        self.store.save("Autumn leaf", self.pattern)
        loaded = self.store.load("Autumn leaf", self.catalog)

        self.assertEqual(loaded.grid, self.pattern.grid)
        self.assertEqual(loaded.manifest, self.pattern.manifest)
        self.assertEqual(loaded.config, self.pattern.config)
        self.assertEqual(loaded.filename, "leaf.png")

    def test_names(self):
        self.assertEqual(self.store.names(), [])
        self.store.save("b", self.pattern)
        self.store.save("a", self.pattern)
        self.assertEqual(self.store.names(), ["a", "b"])

    def test_name_taken(self):
        self.store.save("leaf", self.pattern)
        with self.assertRaises(PatternExistsError) as ctx:
            self.store.save("leaf", self.pattern)
        self.assertEqual(str(ctx.exception), "Pattern with such name already exists")

    def test_invalid_names(self):
        with self.assertRaises(MissingValueError):
            self.store.save("   ", self.pattern)
        for name in ("../escape", "a/b", ".hidden"):
            with self.subTest(name=name):
                with self.assertRaises(ConfigurationError):
                    self.store.save(name, self.pattern)

    def test_load_unknown(self):
        with self.assertRaises(KeyError):
            self.store.load("nothing", self.catalog)

    def test_thread_missing_from_catalog(self):
        path = self.store.save("leaf", self.pattern)
        data = json.loads(path.read_text())
        data["palette"][0]["color"]["name"] = "retired"
        path.write_text(json.dumps(data))

        with self.assertLogs("pattern_store", level="WARNING"):
            loaded = self.store.load("leaf", self.catalog)
        self.assertEqual(loaded.grid, self.pattern.grid)
        self.assertIn("retired", [entry.color.name for entry in loaded.manifest])


if __name__ == "__main__":
    unittest.main()
