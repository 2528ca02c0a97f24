"""Palette reduction ahead of thread matching."""

import unittest

import numpy as np
from PIL import Image

from embroidery.catalog import load_dmc_catalog
from embroidery.quantization import (
    assign_to_representatives,
    build_thread_palette,
    extract_palette,
)

from sample_images import gradient_image


def three_color_image() -> Image.Image:
    pixels = np.zeros((10, 10, 3), dtype=np.uint8)
    pixels[:, :] = (200, 10, 10)
    pixels[:5, :3] = (10, 200, 10)
    pixels[9, 9] = (10, 10, 200)
    return Image.fromarray(pixels)


class TestExtractPalette(unittest.TestCase):
    def test_few_colors_returned_exactly(self):
        palette = extract_palette(three_color_image(), 5)
        self.assertEqual(palette, [(200, 10, 10), (10, 200, 10), (10, 10, 200)])

    def test_methods_respect_bound(self):
        image = gradient_image(40, 40)
        for method in ("median_cut", "octree", "kmeans"):
            with self.subTest(method=method):
                palette = extract_palette(image, 8, method)
                self.assertGreater(len(palette), 0)
                self.assertLessEqual(len(palette), 8)
                self.assertEqual(len(set(palette)), len(palette))
                for color in palette:
                    self.assertEqual(len(color), 3)

    def test_deterministic(self):
        image = gradient_image(40, 40)
        for method in ("median_cut", "octree", "kmeans"):
            with self.subTest(method=method):
                self.assertEqual(
                    extract_palette(image, 6, method), extract_palette(image, 6, method)
                )

    def test_unknown_method(self):
        with self.assertRaises(ValueError):
            extract_palette(gradient_image(20, 20), 4, "popularity")


class TestAssignToRepresentatives(unittest.TestCase):
    def test_nearest_representative(self):
        pixels = np.array([[[250, 250, 250], [5, 5, 5], [240, 10, 10]]], dtype=np.uint8)
        labels = assign_to_representatives(
            pixels, [(0, 0, 0), (255, 255, 255), (255, 0, 0)]
        )
        self.assertEqual(labels.shape, (1, 3))
        self.assertEqual(labels.tolist(), [[1, 0, 2]])

    def test_requires_representatives(self):
        with self.assertRaises(ValueError):
            assign_to_representatives(np.zeros((2, 2, 3), dtype=np.uint8), [])


class TestBuildThreadPalette(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.catalog = load_dmc_catalog()

    def test_bounded_distinct_threads(self):
        image = gradient_image(50, 50)
        for count in (3, 5, 12):
            with self.subTest(count=count):
                palette = build_thread_palette(image, count, self.catalog)
                self.assertLessEqual(len(palette.threads), count)
                self.assertEqual(len(set(palette.threads)), len(palette.threads))
                for color in palette.representatives:
                    self.assertIn(self.catalog.nearest(color), palette.threads)

    def test_reaches_requested_count(self):
        palette = build_thread_palette(gradient_image(50, 50), 5, self.catalog)
        self.assertEqual(len(palette.threads), 5)

    def test_catalog_colored_image_keeps_its_threads(self):
        threads = [self.catalog.get(name) for name in ("310", "B5200", "608")]
        pixels = np.zeros((6, 6, 3), dtype=np.uint8)
        pixels[:2] = threads[0].rgb
        pixels[2:4] = threads[1].rgb
        pixels[4:] = threads[2].rgb

        palette = build_thread_palette(Image.fromarray(pixels), 10, self.catalog)
        self.assertEqual(set(palette.threads), set(threads))


if __name__ == "__main__":
    unittest.main()
