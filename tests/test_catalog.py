"""DMC thread catalog and nearest-thread lookup."""

import unittest

from embroidery.catalog import ThreadCatalog, load_dmc_catalog
from embroidery.dmc_colors import DMC_COLORS
from errors import CatalogError


class TestDmcCatalog(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.catalog = load_dmc_catalog()

    def test_loads_every_thread(self):
        self.assertEqual(len(self.catalog), len(DMC_COLORS))
        self.assertGreater(len(self.catalog), 450)

    def test_shared_instance(self):
        self.assertIs(load_dmc_catalog(), self.catalog)

    def test_every_thread_matches_itself(self):
        first_by_rgb = {}
        for thread in self.catalog:
            first_by_rgb.setdefault(thread.rgb, thread)

        for thread in self.catalog:
            with self.subTest(name=thread.name):
                match = self.catalog.nearest(thread.rgb)
                self.assertEqual(match.rgb, thread.rgb)
                # Threads sharing an RGB value resolve to the first of them
                self.assertEqual(match, first_by_rgb[thread.rgb])

    def test_red_matches_608(self):
        match = self.catalog.nearest((255, 29, 30))
        self.assertEqual(match.rgb, (204, 63, 24))
        self.assertEqual(match.name, "608")

    def test_white_matches_b5200(self):
        match = self.catalog.nearest((255, 255, 255))
        self.assertEqual(match.name, "B5200")
        self.assertEqual(match.rgb, (255, 255, 255))

    def test_nearest_many(self):
        matches = self.catalog.nearest_many([(255, 255, 255), (0, 0, 0)])
        self.assertEqual([m.name for m in matches], ["B5200", "310"])

    def test_get_by_name(self):
        self.assertEqual(self.catalog.get("310").rgb, (0, 0, 0))
        with self.assertRaises(KeyError):
            self.catalog.get("no-such-thread")

    def test_lab_precomputed(self):
        white = self.catalog.get("B5200")
        self.assertAlmostEqual(white.lab[0], 100.0, delta=0.01)


class TestThreadCatalog(unittest.TestCase):
    def test_empty_catalog_is_fatal(self):
        with self.assertRaises(CatalogError):
            ThreadCatalog([])
        with self.assertRaises(CatalogError):
            ThreadCatalog.from_rgb([])

    def test_equal_distance_goes_to_first_entry(self):
        # Both threads are equally close to any color
        catalog = ThreadCatalog.from_rgb([("a", (100, 100, 100)), ("b", (100, 100, 100))])
        self.assertEqual(catalog.nearest((128, 128, 128)).name, "a")

    def test_custom_catalog(self):
        catalog = ThreadCatalog.from_rgb(
            [("black", (0, 0, 0)), ("white", (255, 255, 255)), ("red", (255, 0, 0))]
        )
        self.assertEqual(catalog.nearest((250, 240, 245)).name, "white")
        self.assertEqual(catalog.nearest((200, 30, 20)).name, "red")
        self.assertEqual(catalog.nearest((20, 20, 30)).name, "black")


if __name__ == "__main__":
    unittest.main()
