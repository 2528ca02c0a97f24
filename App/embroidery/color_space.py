"""Lab conversion and CIEDE2000 color difference.

AIDEV-NOTE: Both functions are vectorized with numpy so the same code serves
single lookups (catalog nearest match) and bulk work (mapping every distinct
pixel value to a representative color). Scalar helpers wrap them.
"""

import numpy as np

# D65 reference white
WHITE_X, WHITE_Y, WHITE_Z = 0.95047, 1.0, 1.08883

EPSILON = 0.008856
KAPPA = 903.3

_POW25_7 = 25.0**7


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert RGB array (0-255, last axis = channels) to LAB color space."""
    rgb_norm = np.asarray(rgb, dtype=np.float64) / 255.0

    # Undo sRGB gamma
    mask = rgb_norm > 0.04045
    rgb_linear = np.where(
        mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92
    )

    r, g, b = rgb_linear[..., 0], rgb_linear[..., 1], rgb_linear[..., 2]
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041

    x, y, z = x / WHITE_X, y / WHITE_Y, z / WHITE_Z

    fx = np.where(x > EPSILON, np.cbrt(x), (KAPPA * x + 16) / 116)
    fy = np.where(y > EPSILON, np.cbrt(y), (KAPPA * y + 16) / 116)
    fz = np.where(z > EPSILON, np.cbrt(z), (KAPPA * z + 16) / 116)

    lightness = 116 * fy - 16
    a = 500 * (fx - fy)
    b_val = 200 * (fy - fz)

    return np.stack([lightness, a, b_val], axis=-1)


def to_lab(rgb: "tuple[int, int, int]") -> "tuple[float, float, float]":
    """Convert a single RGB color to (L, a, b)."""
    lab = rgb_to_lab(np.asarray(rgb, dtype=np.uint8).reshape(1, 3))[0]
    return (float(lab[0]), float(lab[1]), float(lab[2]))


def _hue_angle(b: np.ndarray, a_prime: np.ndarray) -> np.ndarray:
    """Hue angle in degrees within [0, 360). atan2(0, 0) is 0."""
    hue = np.degrees(np.arctan2(b, a_prime))
    return np.where(hue < 0, hue + 360.0, hue)


def ciede2000(lab1, lab2) -> np.ndarray:
    """CIEDE2000 color difference between Lab colors.

    Args:
        lab1: Array-like with L, a, b on the last axis
        lab2: Array-like broadcastable against lab1

    Returns:
        Array of delta E values with the broadcast shape (minus last axis)

    AIDEV-NOTE: Unit weighting factors (kL = kC = kH = 1). Every step is
    written symmetrically so ciede2000(x, y) == ciede2000(y, x) exactly, and
    identical inputs give exactly 0.
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)
    l1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    l2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # Chroma and the a* compensation for neutral colors
    c1 = np.sqrt(a1 * a1 + b1 * b1)
    c2 = np.sqrt(a2 * a2 + b2 * b2)
    c_bar7 = ((c1 + c2) / 2.0) ** 7
    g = 0.5 * (1.0 - np.sqrt(c_bar7 / (c_bar7 + _POW25_7)))

    a1_prime = a1 * (1.0 + g)
    a2_prime = a2 * (1.0 + g)
    c1_prime = np.sqrt(a1_prime * a1_prime + b1 * b1)
    c2_prime = np.sqrt(a2_prime * a2_prime + b2 * b2)
    h1_prime = _hue_angle(b1, a1_prime)
    h2_prime = _hue_angle(b2, a2_prime)

    chroma_product = c1_prime * c2_prime
    achromatic = chroma_product == 0

    # Differences, hue along the shorter arc
    delta_l = l2 - l1
    delta_c = c2_prime - c1_prime
    delta_h = h2_prime - h1_prime
    delta_h = np.where(
        delta_h > 180.0,
        delta_h - 360.0,
        np.where(delta_h < -180.0, delta_h + 360.0, delta_h),
    )
    delta_h = np.where(achromatic, 0.0, delta_h)
    delta_big_h = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(delta_h) / 2.0)

    # Means
    l_bar = (l1 + l2) / 2.0
    c_bar_prime = (c1_prime + c2_prime) / 2.0
    h_sum = h1_prime + h2_prime
    h_bar = np.where(
        np.abs(h1_prime - h2_prime) > 180.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
        h_sum / 2.0,
    )
    h_bar = np.where(achromatic, h_sum, h_bar)

    t = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )

    l_offset = (l_bar - 50.0) ** 2
    s_l = 1.0 + (0.015 * l_offset) / np.sqrt(20.0 + l_offset)
    s_c = 1.0 + 0.045 * c_bar_prime
    s_h = 1.0 + 0.015 * c_bar_prime * t

    # Rotation term for blue hues around 275 degrees
    c_bar_prime7 = c_bar_prime**7
    r_c = 2.0 * np.sqrt(c_bar_prime7 / (c_bar_prime7 + _POW25_7))
    delta_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    r_t = -np.sin(np.radians(2.0 * delta_theta)) * r_c

    lightness = delta_l / s_l
    chroma = delta_c / s_c
    hue = delta_big_h / s_h

    total = lightness**2 + chroma**2 + hue**2 + r_t * chroma * hue
    return np.sqrt(np.maximum(total, 0.0))


def perceptual_distance(
    lab1: "tuple[float, float, float]", lab2: "tuple[float, float, float]"
) -> float:
    """CIEDE2000 delta E between two Lab colors."""
    return float(ciede2000(lab1, lab2))
