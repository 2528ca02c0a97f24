"""Thread manifest for a quantized grid."""

from collections import Counter
from typing import Iterable

from models import EmbroideryGrid, PaletteEntry, PaletteManifest, ThreadColor


def format_identifier(position: int) -> str:
    """Manifest identifier for a 1-based position: 1 -> "01"."""
    return f"{position:02d}"


def compile_manifest(
    grid: EmbroideryGrid, palette_colors: Iterable[ThreadColor]
) -> PaletteManifest:
    """Count how often each palette thread is used and number the threads.

    Args:
        grid: Quantized pattern grid
        palette_colors: Candidate threads in a stable order

    Returns:
        PaletteManifest with used threads only, sorted by Lab (L, a, b) and
        numbered "01", "02", ... in that order

    Raises:
        ValueError: If a grid cell uses a color missing from palette_colors
    """
    usage = Counter(grid)

    seen: "set[tuple[int, int, int]]" = set()
    used: "list[tuple[ThreadColor, int]]" = []
    for thread in palette_colors:
        if thread.rgb in seen:
            continue
        seen.add(thread.rgb)
        count = usage.get(thread.rgb, 0)
        if count:
            used.append((thread, count))

    missing = set(usage) - seen
    if missing:
        raise ValueError(
            f"Grid uses {len(missing)} color(s) not in the palette, e.g. {min(missing)}"
        )

    # sorted() is stable, so equal Lab values keep palette order
    used.sort(key=lambda item: item[0].lab)

    return PaletteManifest(
        tuple(
            PaletteEntry(
                identifier=format_identifier(position),
                color=thread,
                usage_count=count,
            )
            for position, (thread, count) in enumerate(used, start=1)
        )
    )


def palette_from_grid(grid: EmbroideryGrid, catalog) -> "list[ThreadColor]":
    """Threads used by a grid in first-seen order.

    Used when no reduced palette exists (e.g. after loading or editing).
    """
    threads = []
    seen = set()
    for color in grid:
        if color not in seen:
            seen.add(color)
            threads.append(catalog.nearest(color))
    return threads
