"""Utility functions for cell geometry and pixel buffers.

AIDEV-NOTE: cell_span() is the single source of truth for where a cell
starts and ends. Quantizer and renderer must both use it, otherwise a
rendered pattern would not quantize back to itself.
"""

import numpy as np
from PIL import Image

from models import round_half_up


def cell_span(
    index: int, count: int, cell_size: float, limit: int
) -> "tuple[int, int]":
    """Pixel range [start, end) covered by one cell along an axis.

    Args:
        index: Cell index along the axis (row or column)
        count: Number of cells along the axis
        cell_size: Cell edge length in pixels (may be fractional)
        limit: Image dimension along the axis

    Returns:
        Tuple of (start, end) pixel coordinates

    AIDEV-NOTE: Start and end use the same rounding, so neighbours share an
    edge. The last cell always runs to the image edge, which absorbs the
    leftover strip when rows were rounded down.
    """
    start = min(round_half_up(index * cell_size), limit)
    if index == count - 1:
        return start, limit
    end = min(round_half_up((index + 1) * cell_size), limit)
    return start, end


def cell_spans(count: int, cell_size: float, limit: int) -> "list[tuple[int, int]]":
    """All cell spans along one axis."""
    return [cell_span(i, count, cell_size, limit) for i in range(count)]


def image_to_array(image: Image.Image) -> np.ndarray:
    """Get an (height, width, 3) uint8 array of an image's RGB pixels."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.asarray(image, dtype=np.uint8)


def pack_rgb(pixels: np.ndarray) -> np.ndarray:
    """Pack RGB triples into single 24-bit integers (0xRRGGBB)."""
    pixels = pixels.astype(np.uint32)
    return (pixels[..., 0] << 16) | (pixels[..., 1] << 8) | pixels[..., 2]


def unpack_rgb(packed: np.ndarray) -> np.ndarray:
    """Inverse of pack_rgb: (..., 3) uint8 array."""
    packed = np.asarray(packed, dtype=np.uint32)
    return np.stack(
        [(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF], axis=-1
    ).astype(np.uint8)
