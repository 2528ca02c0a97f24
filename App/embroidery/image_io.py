"""Image decoding and encoding at the pipeline boundary."""

import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from errors import ImageDecodeError


def load_image(source: "str | Path | bytes") -> Image.Image:
    """Decode an image file or byte buffer.

    Args:
        source: Path to an image file, or the raw file bytes

    Returns:
        PIL Image in RGB mode

    Raises:
        ImageDecodeError: If the data is not a readable image
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(source)
        # AIDEV-NOTE: load() forces a full decode so truncated files fail here
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Failed to load image: {e}") from e

    # AIDEV-NOTE: Alpha is dropped; thread colors have no transparency
    if image.mode != "RGB":
        image = image.convert("RGB")
    return image


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
