import numpy as np
from numpy import ndarray as NDArray
from .numbers import byte_to_unit, normalize_hue
from ..types.component_types import BYTE_MAX, HUE_MAX

def rgb_to_hsl(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """
    Convert byte RGB channels to HSL.

    Args:
        red: Red channel [0, 255]
        green: Green channel [0, 255]
        blue: Blue channel [0, 255]

    Returns:
        Tuple[float, float, float]: (h, s, l) with h in degrees [0, 360), s and l in [0, 1]
    """
    r = byte_to_unit(red)
    g = byte_to_unit(green)
    b = byte_to_unit(blue)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, l

    diff = max_c - min_c
    s = min(1.0, diff / (2 - max_c - min_c if l > 0.5 else max_c + min_c))

    if max_c == r:
        h = (g - b) / diff + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / diff + 2
    else:
        h = (r - g) / diff + 4

    h = normalize_hue(abs(h / 6) * HUE_MAX)
    return h, s, l

def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert byte RGB to HSL.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        hsl: array of shape (..., 3): h in degrees [0, 360), s and l in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=float) / BYTE_MAX
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.max(rgb, axis=-1)
    min_c = np.min(rgb, axis=-1)
    l = (max_c + min_c) / 2
    diff = max_c - min_c
    gray = diff == 0
    safe_diff = np.where(gray, 1.0, diff)

    denom = np.where(l > 0.5, 2 - max_c - min_c, max_c + min_c)
    s = np.where(gray, 0.0, np.minimum(1.0, diff / np.where(gray, 1.0, denom)))

    h = np.select(
        [max_c == r, max_c == g],
        [(g - b) / safe_diff + np.where(g < b, 6, 0), (b - r) / safe_diff + 2],
        default=(r - g) / safe_diff + 4,
    )
    h = np.where(gray, 0.0, np.abs(h / 6) * HUE_MAX) % HUE_MAX

    return np.stack([h, s, l], axis=-1)
