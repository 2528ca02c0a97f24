"""Cell-by-cell majority color quantization."""

import logging
from typing import Optional

import numpy as np
from PIL import Image

from models import EmbroideryGrid, PatternConfig

from .catalog import ThreadCatalog
from .color_space import rgb_to_lab
from .quantization import assign_to_representatives
from .utils import cell_spans, image_to_array, pack_rgb, unpack_rgb

logger = logging.getLogger(__name__)


def _label_pixels(
    pixels: np.ndarray,
    representatives: "Optional[list[tuple[int, int, int]]]",
) -> "tuple[np.ndarray, np.ndarray]":
    """Give every pixel a color label.

    Returns:
        Tuple of (labels with the image's height x width, palette of label
        colors as an (n, 3) uint8 array)
    """
    if representatives:
        labels = assign_to_representatives(pixels, list(representatives))
        return labels, np.array(representatives, dtype=np.uint8)

    packed = pack_rgb(pixels)
    unique, inverse = np.unique(packed.ravel(), return_inverse=True)
    return inverse.reshape(packed.shape), unpack_rgb(unique)


def majority_label(cell_labels: np.ndarray, palette_b: np.ndarray) -> int:
    """Most frequent label in a cell.

    AIDEV-NOTE: Ties go to the color with the smaller Lab b* (bluer). This
    is arbitrary but must stay fixed so patterns are reproducible.
    """
    values, counts = np.unique(cell_labels, return_counts=True)
    top = values[counts == counts.max()]
    if len(top) == 1:
        return int(top[0])
    return int(top[np.argmin(palette_b[top])])


def quantize_grid(
    image: Image.Image,
    config: PatternConfig,
    catalog: ThreadCatalog,
    representatives: "Optional[list[tuple[int, int, int]]]" = None,
) -> EmbroideryGrid:
    """Split an image into cells and give each cell one thread color.

    Args:
        image: Source image; its size must match the config
        config: Validated pattern configuration
        catalog: Thread catalog for color matching
        representatives: Optional reduced palette; pixels are counted as
            their nearest representative instead of their exact color

    Returns:
        EmbroideryGrid with config.row_count rows of config.cells_in_width cells
    """
    if image.size != config.image_size:
        raise ValueError(
            f"Image is {image.size[0]}x{image.size[1]} but the pattern was "
            f"configured for {config.image_width}x{config.image_height}"
        )

    pixels = image_to_array(image)
    labels, palette = _label_pixels(pixels, representatives)
    palette_b = rgb_to_lab(palette)[:, 2]

    row_spans = cell_spans(config.row_count, config.cell_size, config.image_height)
    col_spans = cell_spans(config.cells_in_width, config.cell_size, config.image_width)

    # Many cells share a majority color; match each label against the catalog once
    threads: "dict[int, tuple[int, int, int]]" = {}
    rows = []
    for y_start, y_end in row_spans:
        row = []
        for x_start, x_end in col_spans:
            label = majority_label(labels[y_start:y_end, x_start:x_end], palette_b)
            if label not in threads:
                color = tuple(int(c) for c in palette[label])
                threads[label] = catalog.nearest(color).rgb
            row.append(threads[label])
        rows.append(row)

    logger.debug(
        "Quantized %dx%d image into %d rows x %d columns using %d labels",
        config.image_width,
        config.image_height,
        len(rows),
        config.cells_in_width,
        len(threads),
    )
    return EmbroideryGrid.from_rows(rows)
