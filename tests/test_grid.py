"""Cell geometry and majority-color quantization."""

import unittest

import numpy as np
from PIL import Image

from embroidery.catalog import ThreadCatalog, load_dmc_catalog
from embroidery.color_space import rgb_to_lab
from embroidery.grid import majority_label, quantize_grid
from embroidery.utils import cell_span, cell_spans, pack_rgb, unpack_rgb
from models import PatternConfig

from sample_images import gradient_image, random_image

BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)


class TestCellSpans(unittest.TestCase):
    def assertTiles(self, spans, limit):
        self.assertEqual(spans[0][0], 0)
        self.assertEqual(spans[-1][1], limit)
        for (_, end), (start, _) in zip(spans, spans[1:]):
            self.assertEqual(end, start)
        for start, end in spans:
            self.assertLess(start, end)

    def test_even_division(self):
        spans = cell_spans(10, 5.0, 50)
        self.assertEqual(spans[0], (0, 5))
        self.assertEqual(spans[-1], (45, 50))
        self.assertTiles(spans, 50)

    def test_uneven_division(self):
        spans = cell_spans(3, 10 / 3, 10)
        self.assertEqual(spans, [(0, 3), (3, 7), (7, 10)])

    def test_halves_round_up(self):
        # 2.5 rounds to 3, not to the even 2
        self.assertEqual(cell_span(0, 4, 2.5, 10), (0, 3))
        self.assertEqual(cell_span(1, 4, 2.5, 10), (3, 5))

    def test_tiles_for_many_sizes(self):
        for width in (7, 10, 33, 50, 101):
            for columns in range(1, width + 1, 3):
                config = PatternConfig.for_image((width, width + 3), cells_in_width=columns)
                with self.subTest(width=width, columns=columns):
                    self.assertTiles(
                        cell_spans(columns, config.cell_size, width), width
                    )
                    self.assertTiles(
                        cell_spans(config.row_count, config.cell_size, width + 3),
                        width + 3,
                    )


class TestPacking(unittest.TestCase):
    def test_pack_and_unpack(self):
        pixels = np.array([[0, 0, 0], [255, 128, 1]], dtype=np.uint8)
        packed = pack_rgb(pixels)
        self.assertEqual(list(packed), [0, 0xFF8001])
        np.testing.assert_array_equal(unpack_rgb(packed), pixels)


class TestMajorityLabel(unittest.TestCase):
    def test_most_frequent_wins(self):
        palette_b = np.array([0.0, 0.0])
        self.assertEqual(majority_label(np.array([[1, 1], [1, 0]]), palette_b), 1)

    def test_tie_goes_to_smaller_b(self):
        palette_b = rgb_to_lab(np.array([YELLOW, BLUE], dtype=np.uint8))[:, 2]
        cell = np.array([[0, 1], [1, 0]])
        self.assertEqual(majority_label(cell, palette_b), 1)


class TestQuantizeGrid(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.catalog = load_dmc_catalog()

    def test_grid_shape(self):
        image = gradient_image(50, 30)
        config = PatternConfig.for_image(image.size, cells_in_width=10, palette_method=None)
        grid = quantize_grid(image, config, self.catalog)
        self.assertEqual(grid.rows, 6)
        self.assertEqual(grid.columns, 10)
        for row in grid.cells:
            self.assertEqual(len(row), 10)

    def test_cells_hold_catalog_colors(self):
        image = random_image(20, 20)
        config = PatternConfig.for_image(image.size, cells_in_width=7, palette_method=None)
        grid = quantize_grid(image, config, self.catalog)
        catalog_colors = {thread.rgb for thread in self.catalog}
        for color in grid:
            self.assertIn(color, catalog_colors)

    def test_tie_between_blue_and_yellow(self):
        pixels = np.array([[BLUE, YELLOW], [YELLOW, BLUE]], dtype=np.uint8)
        image = Image.fromarray(pixels)
        config = PatternConfig.for_image(image.size, cells_in_width=1, palette_method=None)
        grid = quantize_grid(image, config, self.catalog)
        self.assertEqual(grid.cell(0, 0), self.catalog.nearest(BLUE).rgb)

    def test_majority_color_per_cell(self):
        catalog = ThreadCatalog.from_rgb([("red", (255, 0, 0)), ("green", (0, 255, 0))])
        pixels = np.zeros((2, 4, 3), dtype=np.uint8)
        pixels[:, :2] = (255, 0, 0)
        pixels[0, 1] = (0, 255, 0)
        pixels[:, 2:] = (0, 255, 0)
        image = Image.fromarray(pixels)
        config = PatternConfig.for_image(image.size, cells_in_width=2, palette_method=None)

        grid = quantize_grid(image, config, catalog)
        self.assertEqual(grid.cells, (((255, 0, 0), (0, 255, 0)),))

    def test_representatives_replace_raw_colors(self):
        catalog = ThreadCatalog.from_rgb([("dark", (10, 10, 10)), ("light", (240, 240, 240))])
        pixels = np.full((4, 4, 3), 30, dtype=np.uint8)
        pixels[0, 0] = (250, 250, 250)
        image = Image.fromarray(pixels)
        config = PatternConfig.for_image(image.size, cells_in_width=1)

        grid = quantize_grid(image, config, catalog, representatives=[(20, 20, 20), (250, 250, 250)])
        self.assertEqual(grid.cell(0, 0), (10, 10, 10))

    def test_size_mismatch(self):
        image = gradient_image(20, 20)
        config = PatternConfig.for_image((30, 20), cells_in_width=5)
        with self.assertRaises(ValueError):
            quantize_grid(image, config, self.catalog)


if __name__ == "__main__":
    unittest.main()
