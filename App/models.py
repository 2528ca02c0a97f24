"""Data models and constants for the Pixify embroidery designer."""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from errors import ConfigurationError

# Pattern defaults and limits
DEFAULT_CELLS_IN_WIDTH = 32
DEFAULT_COLOR_COUNT = 20
MIN_COLOR_COUNT = 3  # must be strictly greater than 2
MAX_COLOR_COUNT = 200

PALETTE_METHODS = ("median_cut", "octree", "kmeans")
DEFAULT_PALETTE_METHOD = "median_cut"

# One stitch per cell, plus 20% for starting and finishing threads
THREAD_CM_PER_STITCH = 1.2

# Configuration file path
CONFIG_FILE = Path.home() / ".pixify_config.json"
PATTERNS_DIR = Path.home() / "Pixify Patterns"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (for value >= 0).

    Python's round() uses banker's rounding, which would shift cell edges
    that land exactly on .5.
    """
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ThreadColor:
    """A catalog thread: DMC code plus its color.

    AIDEV-NOTE: lab is precomputed when the catalog loads and is not part of
    equality; two threads are equal when name and rgb match.
    """

    name: str
    rgb: "tuple[int, int, int]"
    lab: "tuple[float, float, float]" = field(
        default=(0.0, 0.0, 0.0), compare=False, repr=False
    )

    def to_dict(self) -> dict:
        return {"name": self.name, "rgb": list(self.rgb)}


@dataclass(frozen=True)
class PatternConfig:
    """Per-image quantization settings, validated on construction.

    Use for_image() to build one; it raises ConfigurationError instead of
    clamping values that are out of range.
    """

    image_width: int
    image_height: int
    cells_in_width: int = DEFAULT_CELLS_IN_WIDTH
    color_count: int = DEFAULT_COLOR_COUNT
    palette_method: Optional[str] = DEFAULT_PALETTE_METHOD

    def __post_init__(self):
        # Values may come straight from a JSON config file; bool is an int too
        for name in ("cells_in_width", "color_count"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(name, "Value should be an integer")
        if self.image_width < 1 or self.image_height < 1:
            raise ConfigurationError(
                "file", "Image should be at least 1 pixel wide and high"
            )
        if self.cells_in_width < 1:
            raise ConfigurationError(
                "cells_in_width", "Value should be a positive integer"
            )
        if self.cells_in_width > self.image_width:
            raise ConfigurationError(
                "cells_in_width",
                f"Value should not exceed the image width ({self.image_width}px)",
            )
        if not MIN_COLOR_COUNT <= self.color_count <= MAX_COLOR_COUNT:
            raise ConfigurationError(
                "color_count",
                f"Value should be within {MIN_COLOR_COUNT - 1} and {MAX_COLOR_COUNT}",
            )
        if (
            self.palette_method is not None
            and self.palette_method not in PALETTE_METHODS
        ):
            raise ConfigurationError(
                "palette_method",
                f"Value should be one of {', '.join(PALETTE_METHODS)}",
            )

    @classmethod
    def for_image(
        cls,
        image_size: "tuple[int, int]",
        cells_in_width: Optional[int] = None,
        color_count: Optional[int] = None,
        palette_method: Optional[str] = DEFAULT_PALETTE_METHOD,
    ) -> "PatternConfig":
        """Build a config for an image of (width, height), applying defaults.

        Raises:
            ConfigurationError: If any value is out of range
        """
        width, height = image_size
        return cls(
            image_width=width,
            image_height=height,
            cells_in_width=(
                DEFAULT_CELLS_IN_WIDTH if cells_in_width is None else cells_in_width
            ),
            color_count=DEFAULT_COLOR_COUNT if color_count is None else color_count,
            palette_method=palette_method,
        )

    @property
    def cell_size(self) -> float:
        """Edge length of a square cell in source pixels."""
        return self.image_width / self.cells_in_width

    @property
    def row_count(self) -> int:
        return max(1, round_half_up(self.image_height / self.cell_size))

    @property
    def image_size(self) -> "tuple[int, int]":
        return (self.image_width, self.image_height)

    def to_dict(self) -> dict:
        return {
            "image_width": self.image_width,
            "image_height": self.image_height,
            "cells_in_width": self.cells_in_width,
            "color_count": self.color_count,
            "palette_method": self.palette_method,
        }


@dataclass(frozen=True)
class EmbroideryGrid:
    """Row-major matrix of catalog colors, one per cell."""

    cells: "tuple[tuple[tuple[int, int, int], ...], ...]"

    @classmethod
    def from_rows(cls, rows) -> "EmbroideryGrid":
        grid = cls(tuple(tuple(tuple(color) for color in row) for row in rows))
        if not grid.cells or not grid.cells[0]:
            raise ValueError("Embroidery grid needs at least one cell")
        if any(len(row) != len(grid.cells[0]) for row in grid.cells):
            raise ValueError("Embroidery grid rows must all have the same length")
        return grid

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def columns(self) -> int:
        return len(self.cells[0])

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def cell(self, row: int, column: int) -> "tuple[int, int, int]":
        return self.cells[row][column]

    def __iter__(self) -> "Iterator[tuple[int, int, int]]":
        for row in self.cells:
            yield from row

    def with_cell(
        self, row: int, column: int, color: "tuple[int, int, int]"
    ) -> "EmbroideryGrid":
        """Return a copy with one cell recolored."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"Cell ({row}, {column}) is outside the grid")
        rows = [list(r) for r in self.cells]
        rows[row][column] = tuple(color)
        return EmbroideryGrid.from_rows(rows)

    def replace_color(
        self, old: "tuple[int, int, int]", new: "tuple[int, int, int]"
    ) -> "EmbroideryGrid":
        """Return a copy with every cell of one color switched to another."""
        old, new = tuple(old), tuple(new)
        return EmbroideryGrid.from_rows(
            [[new if color == old else color for color in row] for row in self.cells]
        )

    def to_list(self) -> "list[list[list[int]]]":
        return [[list(color) for color in row] for row in self.cells]


@dataclass(frozen=True)
class PaletteEntry:
    """One thread in a pattern's manifest."""

    identifier: str  # "01", "02", ... in Lab order
    color: ThreadColor
    usage_count: int  # number of cells (stitches)

    @property
    def thread_length(self) -> float:
        """Estimated thread length in centimetres."""
        return round(self.usage_count * THREAD_CM_PER_STITCH, 1)

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "color": self.color.to_dict(),
            "usage_count": self.usage_count,
            "thread_length": self.thread_length,
        }


@dataclass(frozen=True)
class PaletteManifest:
    """Threads used by a grid, sorted by lightness then a*, b*."""

    entries: "tuple[PaletteEntry, ...]"

    def __iter__(self) -> "Iterator[PaletteEntry]":
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def total_usage(self) -> int:
        return sum(entry.usage_count for entry in self.entries)

    def colors(self) -> "list[ThreadColor]":
        return [entry.color for entry in self.entries]

    def find(self, rgb: "tuple[int, int, int]") -> Optional[PaletteEntry]:
        """Get the entry for a cell color, or None if it is not used."""
        rgb = tuple(rgb)
        for entry in self.entries:
            if entry.color.rgb == rgb:
                return entry
        return None

    def to_list(self) -> "list[dict]":
        return [entry.to_dict() for entry in self.entries]


@dataclass(frozen=True)
class ThreadPalette:
    """Reduced image palette and the catalog threads it maps to."""

    representatives: "tuple[tuple[int, int, int], ...]"
    threads: "tuple[ThreadColor, ...]"


@dataclass(frozen=True)
class Pattern:
    """Result of the image-to-pattern pipeline."""

    grid: EmbroideryGrid
    manifest: PaletteManifest
    config: PatternConfig
    filename: str = "pattern.png"

    def to_dict(self) -> dict:
        """Serialize for JSON output (query mode)."""
        return {
            "filename": self.filename,
            "rows": self.grid.rows,
            "columns": self.grid.columns,
            "config": self.config.to_dict(),
            "embroidery": self.grid.to_list(),
            "palette": self.manifest.to_list(),
        }


@dataclass
class AppConfig:
    """User defaults persisted between sessions."""

    cells_in_width: int = DEFAULT_CELLS_IN_WIDTH
    color_count: int = DEFAULT_COLOR_COUNT
    palette_method: str = DEFAULT_PALETTE_METHOD
    patterns_dir: str = str(PATTERNS_DIR)
