import numpy as np
from numpy import ndarray as NDArray
from .numbers import byte_to_unit
from ..types.component_types import BYTE_MAX, HUE_MAX

def rgb_to_hsv(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """
    Convert byte RGB channels to HSV.

    Args:
        red: Red channel [0, 255]
        green: Green channel [0, 255]
        blue: Blue channel [0, 255]

    Returns:
        Tuple[float, float, float]: (h, s, v) with h in degrees [0, 360), s and v in [0, 1]
    """
    r = byte_to_unit(red)
    g = byte_to_unit(green)
    b = byte_to_unit(blue)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    diff = max_c - min_c

    s = 0.0 if max_c == 0 else diff / max_c

    if diff == 0:
        h = 0.0
    elif max_c == r:
        h = (g - b) / diff
    elif max_c == g:
        h = (b - r) / diff + 2
    else:
        h = (r - g) / diff + 4

    h *= 60
    while h < 0:
        h += HUE_MAX
    while h >= HUE_MAX:
        h -= HUE_MAX

    return h, s, max_c

def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert byte RGB to HSV.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        hsv: array of shape (..., 3): h in degrees [0, 360), s and v in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=float) / BYTE_MAX
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.max(rgb, axis=-1)
    min_c = np.min(rgb, axis=-1)
    diff = max_c - min_c
    gray = diff == 0
    safe_diff = np.where(gray, 1.0, diff)

    s = np.where(max_c == 0, 0.0, diff / np.where(max_c == 0, 1.0, max_c))

    h = np.select(
        [max_c == r, max_c == g],
        [(g - b) / safe_diff, (b - r) / safe_diff + 2],
        default=(r - g) / safe_diff + 4,
    )
    h = np.where(gray, 0.0, h * 60) % HUE_MAX

    return np.stack([h, s, max_c], axis=-1)
