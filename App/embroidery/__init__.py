"""Image-to-embroidery pattern pipeline.

AIDEV-NOTE: This package handles the complete pipeline from photograph
to cross-stitch pattern. Organized into modular components:
- processor: Main PatternProcessor orchestrator
- color_space: RGB to CIELAB conversion and CIEDE2000 distance
- catalog: DMC thread catalog and nearest-thread lookup
- quantization: Palette reduction (median cut, octree, k-means)
- grid: Majority-color quantization per cell
- palette: Thread manifest with identifiers and usage counts
- rendering: Full-size raster of a grid
- utils: Cell geometry and pixel buffer helpers
"""

from .catalog import ThreadCatalog, load_dmc_catalog
from .color_space import ciede2000, perceptual_distance, rgb_to_lab
from .processor import PatternProcessor

__all__ = [
    "PatternProcessor",
    "ThreadCatalog",
    "ciede2000",
    "load_dmc_catalog",
    "perceptual_distance",
    "rgb_to_lab",
]
