"""End-to-end pattern pipeline."""

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from PIL import Image

import embroidery.processor as processor_module
from embroidery import PatternProcessor, load_dmc_catalog
from errors import ConfigurationError, ImageDecodeError, MissingValueError, PatternError
from models import AppConfig

from sample_images import gradient_image, png_bytes, random_image


class TestProcess(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.processor = PatternProcessor(load_dmc_catalog())

    def test_gradient_five_colors(self):
        pattern = self.processor.process(
            png_bytes(gradient_image(50, 50)), cells_in_width=10, color_count=5
        )
        for row in pattern.grid.cells:
            self.assertEqual(len(row), 10)
        self.assertEqual(pattern.grid.rows, 10)
        self.assertEqual(len(pattern.manifest), 5)
        self.assertEqual(pattern.manifest.total_usage, 100)

    def test_color_count_bounds_threads(self):
        for method in ("median_cut", "octree", "kmeans"):
            with self.subTest(method=method):
                pattern = self.processor.process(
                    png_bytes(gradient_image(64, 48)),
                    cells_in_width=16,
                    color_count=4,
                    palette_method=method,
                )
                self.assertLessEqual(len(pattern.manifest), 4)
                self.assertEqual(pattern.manifest.total_usage, pattern.grid.size)

    def test_without_reduction(self):
        pattern = self.processor.process(
            png_bytes(random_image(12, 12)), cells_in_width=6, reduce_colors=False
        )
        self.assertIsNone(pattern.config.palette_method)
        self.assertEqual(pattern.manifest.total_usage, 36)

    def test_out_of_range_color_count_rejected_before_quantizing(self):
        data = png_bytes(gradient_image(20, 20))
        with mock.patch.object(processor_module, "quantize_grid") as quantize, \
                mock.patch.object(processor_module, "build_thread_palette") as reduce:
            for color_count in (1, 2, 201, 300):
                with self.subTest(color_count=color_count):
                    with self.assertRaises(ConfigurationError) as ctx:
                        self.processor.process(data, cells_in_width=5, color_count=color_count)
                    self.assertEqual(ctx.exception.field, "color_count")
            quantize.assert_not_called()
            reduce.assert_not_called()

    def test_bad_column_counts(self):
        data = png_bytes(gradient_image(20, 20))
        for columns in (0, -3, 21):
            with self.subTest(columns=columns):
                with self.assertRaises(ConfigurationError) as ctx:
                    self.processor.process(data, cells_in_width=columns)
                self.assertEqual(ctx.exception.field, "cells_in_width")

    def test_column_count_equal_to_width(self):
        pattern = self.processor.process(
            png_bytes(random_image(8, 5)), cells_in_width=8, color_count=3
        )
        self.assertEqual((pattern.grid.rows, pattern.grid.columns), (5, 8))

    def test_undecodable_bytes(self):
        with self.assertRaises(ImageDecodeError) as ctx:
            self.processor.process(b"definitely not an image")
        self.assertIsInstance(ctx.exception, PatternError)
        self.assertIn("Failed to load image", str(ctx.exception))

    def test_missing_input(self):
        with self.assertRaises(MissingValueError) as ctx:
            self.processor.process(b"")
        self.assertEqual(str(ctx.exception), "Missing value. Expected 'file' to be provided")

    def test_missing_file(self):
        with self.assertRaises(ImageDecodeError):
            self.processor.process("/nonexistent/photo.png")

    def test_filename_from_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "sunset.jpg"
            gradient_image(30, 20).save(path, format="JPEG")
            pattern = self.processor.process(str(path), cells_in_width=6, color_count=3)
        self.assertEqual(pattern.filename, "sunset.jpg")

    def test_app_defaults_fill_blanks(self):
        processor = PatternProcessor(
            load_dmc_catalog(),
            AppConfig(cells_in_width=4, color_count=3, palette_method="octree"),
        )
        pattern = processor.process(png_bytes(gradient_image(40, 40)))
        self.assertEqual(pattern.config.cells_in_width, 4)
        self.assertEqual(pattern.config.color_count, 3)
        self.assertEqual(pattern.config.palette_method, "octree")

    def test_to_dict(self):
        pattern = self.processor.process(
            png_bytes(gradient_image(20, 20)), cells_in_width=4, color_count=3, filename="g.png"
        )
        data = pattern.to_dict()
        self.assertEqual(data["filename"], "g.png")
        self.assertEqual((data["rows"], data["columns"]), (4, 4))
        self.assertEqual(len(data["embroidery"]), 4)
        self.assertEqual(len(data["embroidery"][0][0]), 3)
        self.assertEqual(
            set(data["palette"][0]), {"identifier", "color", "usage_count", "thread_length"}
        )


class TestExport(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.processor = PatternProcessor(load_dmc_catalog())
        cls.image = random_image(10, 10)
        cls.pattern = cls.processor.process(png_bytes(cls.image), cells_in_width=3, color_count=4)

    def test_render_keeps_size(self):
        self.assertEqual(self.processor.render(self.pattern).size, (10, 10))

    def test_export_png(self):
        data = self.processor.export_png(self.pattern)
        self.assertTrue(data.startswith(b"\x89PNG"))
        self.assertEqual(Image.open(io.BytesIO(data)).size, (10, 10))

    def test_export_requantizes_to_same_pattern(self):
        rendered = self.processor.render(self.pattern)
        again = self.processor.process_image(rendered, self.pattern.config)
        self.assertEqual(again.grid, self.pattern.grid)
        self.assertEqual(again.manifest, self.pattern.manifest)

    def test_save_export_keeps_name(self):
        pattern = self.processor.process(
            png_bytes(self.image), cells_in_width=3, color_count=4, filename="holiday.jpeg"
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = self.processor.save_export(pattern, tmp)
            self.assertEqual(path.name, "holiday.png")
            self.assertTrue(path.exists())
            with Image.open(path) as written:
                self.assertEqual(written.size, (10, 10))


class TestEditing(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.catalog = load_dmc_catalog()
        cls.processor = PatternProcessor(cls.catalog)
        cls.pattern = cls.processor.process(
            png_bytes(gradient_image(30, 30)), cells_in_width=6, color_count=3
        )

    def test_recolor_cell(self):
        thread = self.catalog.get("B5200")
        edited = self.processor.recolor_cell(self.pattern, 2, 3, thread)

        self.assertEqual(edited.grid.cell(2, 3), thread.rgb)
        self.assertEqual(edited.manifest.find(thread.rgb).usage_count, 1)
        self.assertEqual(edited.manifest.total_usage, edited.grid.size)
        # The original pattern is untouched
        self.assertNotEqual(self.pattern.grid.cell(2, 3), thread.rgb)

    def test_recolor_with_thread_sharing_rgb(self):
        # DMC 809 and 160 have the same RGB; the thread picked last names it
        first = self.catalog.get("809")
        second = self.catalog.get("160")
        self.assertEqual(first.rgb, second.rgb)

        edited = self.processor.recolor_cell(self.pattern, 0, 0, first)
        self.assertEqual(edited.manifest.find(first.rgb).color.name, "809")

        edited = self.processor.recolor_cell(edited, 0, 1, second)
        entry = edited.manifest.find(second.rgb)
        self.assertEqual(entry.color.name, "160")
        self.assertEqual(entry.usage_count, sum(1 for c in edited.grid if c == second.rgb))
        self.assertEqual(edited.manifest.total_usage, edited.grid.size)

    def test_recolor_outside_grid(self):
        with self.assertRaises(IndexError):
            self.processor.recolor_cell(self.pattern, 6, 0, self.catalog.get("310"))

    def test_replace_thread(self):
        old = self.pattern.manifest.entries[0].color
        new = self.catalog.get("B5200")
        edited = self.processor.replace_thread(self.pattern, old, new)

        self.assertIsNone(edited.manifest.find(old.rgb))
        self.assertEqual(
            edited.manifest.find(new.rgb).usage_count,
            self.pattern.manifest.entries[0].usage_count,
        )
        self.assertEqual(edited.manifest.total_usage, edited.grid.size)
        identifiers = [entry.identifier for entry in edited.manifest]
        self.assertEqual(identifiers[0], "01")


if __name__ == "__main__":
    unittest.main()
