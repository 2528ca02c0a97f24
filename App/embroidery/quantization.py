"""Color palette reduction ahead of per-cell thread matching.

AIDEV-NOTE: The extractor is the knob behind "number of colors": it boils the
whole image down to a few representative colors, every pixel is counted as
its nearest representative, and only representatives are matched against the
thread catalog. K-means gives the best results for photographs, median cut is
the fast default.
"""

import logging
from collections import OrderedDict

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from models import ThreadColor, ThreadPalette

from .catalog import ThreadCatalog
from .color_space import ciede2000, rgb_to_lab
from .utils import image_to_array, pack_rgb, unpack_rgb

logger = logging.getLogger(__name__)

# How many extra colors to ask the extractor for when several representatives
# collapse onto the same thread
PALETTE_HEADROOM = 8

# Distinct pixel values compared against representatives per numpy batch
ASSIGN_CHUNK_SIZE = 16384

# K-means is fitted on at most this many pixels
KMEANS_MAX_SAMPLES = 50000


def extract_palette(
    image: Image.Image,
    num_colors: int,
    method: str = "median_cut",
) -> "list[tuple[int, int, int]]":
    """Reduce an image to at most num_colors representative colors.

    Args:
        image: Input image (any mode, converted to RGB)
        num_colors: Maximum number of colors to return
        method: Quantization method ('kmeans', 'median_cut', or 'octree')

    Returns:
        List of RGB tuples, most common first where the method knows counts

    AIDEV-NOTE: Images that already have few enough colors are returned
    as-is. This keeps a rendered pattern stable when it is quantized again.
    """
    rgb_image = image.convert("RGB")

    distinct = rgb_image.getcolors(maxcolors=num_colors)
    if distinct is not None:
        distinct.sort(key=lambda item: (-item[0], item[1]))
        return [tuple(int(c) for c in color) for _, color in distinct]

    if method == "kmeans":
        return quantize_kmeans(rgb_image, num_colors)
    elif method == "median_cut":
        return quantize_pillow(rgb_image, num_colors, method=Image.Quantize.MEDIANCUT)
    elif method == "octree":
        return quantize_pillow(
            rgb_image, num_colors, method=Image.Quantize.FASTOCTREE
        )
    else:
        raise ValueError(f"Unknown palette method: {method}")


def quantize_kmeans(
    image: Image.Image,
    num_colors: int,
) -> "list[tuple[int, int, int]]":
    """K-means color quantization implementation.

    AIDEV-NOTE: Fixed random_state and an evenly strided sample keep the
    result deterministic for a given image.
    """
    pixels = image_to_array(image).reshape(-1, 3).astype(np.float64)
    step = max(1, len(pixels) // KMEANS_MAX_SAMPLES)
    sample = pixels[::step]

    kmeans = KMeans(n_clusters=num_colors, random_state=42, n_init=10)
    kmeans.fit(sample)

    counts = np.bincount(kmeans.labels_, minlength=num_colors)
    centers = np.clip(np.rint(kmeans.cluster_centers_), 0, 255).astype(np.uint8)

    palette = []
    for index in np.argsort(-counts, kind="stable"):
        color = tuple(int(c) for c in centers[index])
        if color not in palette:
            palette.append(color)
    return palette


def quantize_pillow(
    image: Image.Image,
    num_colors: int,
    method: Image.Quantize,
) -> "list[tuple[int, int, int]]":
    """Pillow-based color quantization."""
    quantized = image.quantize(colors=num_colors, method=method)

    palette_data = quantized.getpalette() or []
    used = quantized.getcolors(maxcolors=256) or []
    used.sort(key=lambda item: (-item[0], item[1]))

    # Only palette slots that pixels actually use; the rest is zero padding
    palette = []
    for _, index in used:
        color = tuple(palette_data[index * 3 : index * 3 + 3])
        if len(color) == 3 and color not in palette:
            palette.append(color)
    return palette


def assign_to_representatives(
    pixels: np.ndarray,
    representatives: "list[tuple[int, int, int]]",
) -> np.ndarray:
    """Index of the perceptually nearest representative for every pixel.

    Args:
        pixels: (..., 3) uint8 RGB array
        representatives: Candidate colors

    Returns:
        Integer array with the shape of pixels minus the channel axis
    """
    if not representatives:
        raise ValueError("At least one representative color is required")

    packed = pack_rgb(pixels)
    unique, inverse = np.unique(packed.ravel(), return_inverse=True)
    unique_lab = rgb_to_lab(unpack_rgb(unique))
    rep_lab = rgb_to_lab(np.array(representatives, dtype=np.uint8))

    nearest = np.empty(len(unique), dtype=np.intp)
    for start in range(0, len(unique), ASSIGN_CHUNK_SIZE):
        chunk = unique_lab[start : start + ASSIGN_CHUNK_SIZE]
        distances = ciede2000(chunk[:, np.newaxis, :], rep_lab[np.newaxis, :, :])
        nearest[start : start + len(chunk)] = np.argmin(distances, axis=1)

    return nearest[inverse].reshape(packed.shape)


def _group_by_thread(
    representatives: "list[tuple[int, int, int]]", catalog: ThreadCatalog
) -> "OrderedDict[ThreadColor, list[int]]":
    """Group representative indices by the thread they match."""
    groups: "OrderedDict[ThreadColor, list[int]]" = OrderedDict()
    threads = catalog.nearest_many(representatives)
    for index, thread in enumerate(threads):
        groups.setdefault(thread, []).append(index)
    return groups


def build_thread_palette(
    image: Image.Image,
    color_count: int,
    catalog: ThreadCatalog,
    method: str = "median_cut",
) -> ThreadPalette:
    """Pick representative colors that map to at most color_count threads.

    Args:
        image: Source image
        color_count: Maximum number of distinct threads
        catalog: Thread catalog used for matching
        method: Extraction method passed to extract_palette()

    Returns:
        ThreadPalette with representatives and their distinct threads

    AIDEV-NOTE: Different representatives often snap to the same thread, so
    the extractor is asked for a few more colors until color_count distinct
    threads come out or the headroom is used up. If a step overshoots,
    the threads covering the fewest pixels are dropped.
    """
    num_colors = color_count
    while True:
        representatives = extract_palette(image, num_colors, method)
        groups = _group_by_thread(representatives, catalog)
        if len(groups) >= color_count or num_colors >= color_count + PALETTE_HEADROOM:
            break
        num_colors += 1

    logger.debug(
        "Extracted %d representatives (asked for %d) matching %d threads",
        len(representatives),
        num_colors,
        len(groups),
    )

    if len(groups) > color_count:
        labels = assign_to_representatives(image_to_array(image), representatives)
        coverage = np.bincount(labels.ravel(), minlength=len(representatives))
        ranked = sorted(
            enumerate(groups.items()),
            key=lambda item: (-int(coverage[item[1][1]].sum()), item[0]),
        )
        kept = {thread for _, (thread, _) in ranked[:color_count]}
        groups = OrderedDict(
            (thread, indices) for thread, indices in groups.items() if thread in kept
        )

    kept_representatives = [
        representatives[index] for indices in groups.values() for index in indices
    ]
    return ThreadPalette(
        representatives=tuple(kept_representatives),
        threads=tuple(groups.keys()),
    )
