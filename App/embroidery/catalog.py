"""Fixed thread catalog and nearest-color lookup."""

import logging
from functools import lru_cache
from typing import Iterable, Iterator

import numpy as np

from errors import CatalogError
from models import ThreadColor

from .color_space import ciede2000, rgb_to_lab
from .dmc_colors import DMC_COLORS

logger = logging.getLogger(__name__)


class ThreadCatalog:
    """Immutable, ordered set of thread colors.

    AIDEV-NOTE: Safe to share between threads; nothing is mutated after
    __init__. Pass the instance into engine calls instead of reaching for a
    global.
    """

    def __init__(self, entries: Iterable[ThreadColor]):
        self._entries: "tuple[ThreadColor, ...]" = tuple(entries)
        if not self._entries:
            raise CatalogError("Thread catalog has no entries")

        self._lab = np.array([entry.lab for entry in self._entries], dtype=np.float64)

        # First entry wins when several threads share an RGB value
        self._index_by_rgb: "dict[tuple[int, int, int], int]" = {}
        self._by_name: "dict[str, ThreadColor]" = {}
        for index, entry in enumerate(self._entries):
            self._index_by_rgb.setdefault(entry.rgb, index)
            self._by_name.setdefault(entry.name, entry)

    @classmethod
    def from_rgb(
        cls, colors: "Iterable[tuple[str, tuple[int, int, int]]]"
    ) -> "ThreadCatalog":
        """Build a catalog from (name, rgb) pairs, computing Lab values."""
        colors = list(colors)
        if not colors:
            raise CatalogError("Thread catalog has no entries")
        labs = rgb_to_lab(np.array([rgb for _, rgb in colors], dtype=np.uint8))
        return cls(
            ThreadColor(
                name=name,
                rgb=tuple(int(c) for c in rgb),
                lab=(float(lab[0]), float(lab[1]), float(lab[2])),
            )
            for (name, rgb), lab in zip(colors, labs)
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ThreadColor]:
        return iter(self._entries)

    @property
    def entries(self) -> "tuple[ThreadColor, ...]":
        return self._entries

    def get(self, name: str) -> ThreadColor:
        """Look up a thread by its code.

        Raises:
            KeyError: If no thread has this name
        """
        return self._by_name[name]

    def nearest(self, rgb: "tuple[int, int, int]") -> ThreadColor:
        """Find the perceptually closest thread to an RGB color.

        Exact RGB matches return immediately. Otherwise the thread with the
        smallest CIEDE2000 distance wins; on equal distances the earlier
        catalog entry wins.
        """
        rgb = tuple(int(c) for c in rgb)
        index = self._index_by_rgb.get(rgb)
        if index is not None:
            return self._entries[index]

        lab = rgb_to_lab(np.array(rgb, dtype=np.uint8))
        distances = ciede2000(lab, self._lab)
        # argmin returns the first minimum, which gives the catalog-order tie-break
        return self._entries[int(np.argmin(distances))]

    def nearest_many(
        self, colors: "Iterable[tuple[int, int, int]]"
    ) -> "list[ThreadColor]":
        """Map several colors to threads, one nearest() call per color."""
        return [self.nearest(color) for color in colors]


@lru_cache(maxsize=None)
def load_dmc_catalog() -> ThreadCatalog:
    """Build the DMC catalog once per process and return the shared instance."""
    catalog = ThreadCatalog.from_rgb(DMC_COLORS)
    logger.debug("Loaded DMC catalog with %d threads", len(catalog))
    return catalog
