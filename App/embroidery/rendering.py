"""Render a quantized grid back to a full-size image."""

import numpy as np
from PIL import Image

from models import EmbroideryGrid, PatternConfig

from .utils import cell_spans


def render_grid(grid: EmbroideryGrid, config: PatternConfig) -> Image.Image:
    """Paint every cell of a grid over its pixel rectangle.

    Args:
        grid: Quantized grid
        config: Config the grid was quantized with (source image size)

    Returns:
        RGB image with the source image's exact width and height

    AIDEV-NOTE: Uses the same cell spans as the quantizer, so every pixel is
    painted exactly once even when the column count does not divide the width.
    """
    if grid.rows != config.row_count or grid.columns != config.cells_in_width:
        raise ValueError(
            f"Grid is {grid.rows}x{grid.columns} cells but the config "
            f"describes {config.row_count}x{config.cells_in_width}"
        )

    canvas = np.zeros((config.image_height, config.image_width, 3), dtype=np.uint8)
    row_spans = cell_spans(grid.rows, config.cell_size, config.image_height)
    col_spans = cell_spans(grid.columns, config.cell_size, config.image_width)

    for row, (y_start, y_end) in enumerate(row_spans):
        for column, (x_start, x_end) in enumerate(col_spans):
            canvas[y_start:y_end, x_start:x_end] = grid.cell(row, column)

    return Image.fromarray(canvas)
