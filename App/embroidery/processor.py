"""Main pattern processor orchestrating the complete pipeline.

AIDEV-NOTE: This module handles the complete pipeline from photograph
to embroidery pattern. Uses modular components for palette reduction,
grid quantization, manifest compilation and rendering.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from errors import MissingValueError
from models import (
    AppConfig,
    EmbroideryGrid,
    Pattern,
    PatternConfig,
    ThreadColor,
    ThreadPalette,
)

from .catalog import ThreadCatalog, load_dmc_catalog
from .grid import quantize_grid
from .image_io import encode_png, load_image
from .palette import compile_manifest, palette_from_grid
from .quantization import build_thread_palette
from .rendering import render_grid

logger = logging.getLogger(__name__)


class PatternProcessor:
    """Turns images into embroidery patterns."""

    def __init__(
        self,
        catalog: Optional[ThreadCatalog] = None,
        app_config: Optional[AppConfig] = None,
    ):
        self.catalog = catalog or load_dmc_catalog()
        self.app_config = app_config or AppConfig()

    def load_image(self, source: "str | Path | bytes") -> Image.Image:
        """Load and validate an image file or buffer.

        Raises:
            MissingValueError: If source is empty
            ImageDecodeError: If the data cannot be decoded
        """
        if not source:
            raise MissingValueError("file")
        return load_image(source)

    def build_config(
        self,
        image: Image.Image,
        cells_in_width: Optional[int] = None,
        color_count: Optional[int] = None,
        palette_method: Optional[str] = None,
        reduce_colors: bool = True,
    ) -> PatternConfig:
        """Validate settings for an image, using app defaults for blanks.

        With reduce_colors=False the palette method is None and every pixel
        is matched to the catalog directly.

        Raises:
            ConfigurationError: If a value is out of range
        """
        return PatternConfig.for_image(
            image.size,
            cells_in_width=(
                self.app_config.cells_in_width
                if cells_in_width is None
                else cells_in_width
            ),
            color_count=(
                self.app_config.color_count if color_count is None else color_count
            ),
            palette_method=(
                (palette_method or self.app_config.palette_method)
                if reduce_colors
                else None
            ),
        )

    def reduce_palette(
        self, image: Image.Image, config: PatternConfig
    ) -> Optional[ThreadPalette]:
        """Bounded palette for the image, or None when reduction is off."""
        if config.palette_method is None:
            return None
        return build_thread_palette(
            image, config.color_count, self.catalog, config.palette_method
        )

    def quantize(
        self,
        image: Image.Image,
        config: PatternConfig,
        thread_palette: Optional[ThreadPalette] = None,
    ) -> EmbroideryGrid:
        """Quantize an image into a grid of thread colors."""
        representatives = (
            list(thread_palette.representatives) if thread_palette else None
        )
        return quantize_grid(image, config, self.catalog, representatives)

    def process_image(
        self,
        image: Image.Image,
        config: PatternConfig,
        filename: str = "pattern.png",
    ) -> Pattern:
        """Run palette reduction, quantization and manifest compilation."""
        logger.info(
            "Building %d-column pattern with up to %d colors (%s)",
            config.cells_in_width,
            config.color_count,
            config.palette_method or "no reduction",
        )

        thread_palette = self.reduce_palette(image, config)
        if thread_palette is not None:
            logger.info(
                "Reduced palette to %d threads from %d representative colors",
                len(thread_palette.threads),
                len(thread_palette.representatives),
            )

        grid = self.quantize(image, config, thread_palette)
        palette_colors = (
            list(thread_palette.threads)
            if thread_palette is not None
            else palette_from_grid(grid, self.catalog)
        )
        manifest = compile_manifest(grid, palette_colors)

        logger.info(
            "Pattern complete: %d rows x %d columns, %d threads",
            grid.rows,
            grid.columns,
            len(manifest),
        )
        return Pattern(grid=grid, manifest=manifest, config=config, filename=filename)

    def process(
        self,
        source: "str | Path | bytes",
        cells_in_width: Optional[int] = None,
        color_count: Optional[int] = None,
        palette_method: Optional[str] = None,
        filename: Optional[str] = None,
        reduce_colors: bool = True,
    ) -> Pattern:
        """Execute complete pattern pipeline.

        Args:
            source: Path to input image, or its bytes
            cells_in_width: Number of cells across, app default if None
            color_count: Maximum number of threads, app default if None
            palette_method: Palette extraction method, app default if None
            filename: Name kept for exports (defaults to the file's name)
            reduce_colors: Set False to skip palette reduction

        Returns:
            Pattern with grid, manifest and the config used

        Raises:
            PatternError: For missing or undecodable input and invalid settings
        """
        logger.info("Loading image...")
        image = self.load_image(source)
        logger.info("Loaded image with size: %dx%d pixels.", *image.size)

        # AIDEV-NOTE: Config is validated before any pixel work starts
        config = self.build_config(
            image, cells_in_width, color_count, palette_method, reduce_colors
        )

        if filename is None:
            filename = (
                Path(source).name
                if isinstance(source, (str, Path))
                else "pattern.png"
            )
        return self.process_image(image, config, filename)

    # === Export ===

    def render(self, pattern: Pattern) -> Image.Image:
        """Full-size image of a pattern."""
        return render_grid(pattern.grid, pattern.config)

    def export_png(self, pattern: Pattern) -> bytes:
        """Rendered pattern as PNG bytes."""
        return encode_png(self.render(pattern))

    def save_export(
        self, pattern: Pattern, directory: "str | Path", filename: Optional[str] = None
    ) -> Path:
        """Write the rendered pattern as PNG, keeping the original file name.

        Returns:
            Path of the written file
        """
        name = Path(filename or pattern.filename).with_suffix(".png").name
        path = Path(directory) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.export_png(pattern))
        logger.info("Exported pattern to %s", path)
        return path

    # === Editing ===

    def recolor_cell(
        self, pattern: Pattern, row: int, column: int, thread: ThreadColor
    ) -> Pattern:
        """Change one cell to another thread and recompile the manifest."""
        grid = pattern.grid.with_cell(row, column, thread.rgb)
        return self._with_grid(pattern, grid, extra=thread)

    def replace_thread(
        self, pattern: Pattern, old: ThreadColor, new: ThreadColor
    ) -> Pattern:
        """Swap every cell of one thread for another."""
        grid = pattern.grid.replace_color(old.rgb, new.rgb)
        return self._with_grid(pattern, grid, extra=new)

    def _with_grid(
        self, pattern: Pattern, grid: EmbroideryGrid, extra: ThreadColor
    ) -> Pattern:
        # The chosen thread goes first so it names its RGB in the manifest
        palette_colors = [extra] + pattern.manifest.colors()
        return Pattern(
            grid=grid,
            manifest=compile_manifest(grid, palette_colors),
            config=pattern.config,
            filename=pattern.filename,
        )
