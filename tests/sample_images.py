"""Synthetic images shared by the test modules."""

import io

import numpy as np
from PIL import Image


def gradient_image(width: int = 50, height: int = 50) -> Image.Image:
    """R = (x mod 256) + 20, G = (y mod 256) + 30, B = (x + y) mod 256."""
    y, x = np.mgrid[0:height, 0:width]
    pixels = np.stack(
        [(x % 256) + 20, (y % 256) + 30, (x + y) % 256], axis=-1
    ).astype(np.uint8)
    return Image.fromarray(pixels)


def solid_image(rgb, width: int = 10, height: int = 10) -> Image.Image:
    return Image.new("RGB", (width, height), tuple(rgb))


def random_image(width: int = 10, height: int = 10, seed: int = 7) -> Image.Image:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
    return Image.fromarray(pixels)


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
