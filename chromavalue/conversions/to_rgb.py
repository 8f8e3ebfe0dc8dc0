import math
import numpy as np
from numpy import ndarray as NDArray
from .numbers import unit_to_byte, np_unit_to_byte, normalize_hue
from ..types.component_types import HUE_MAX

## HSL to RGB conversions

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """One channel of the HSL to RGB conversion; ``t`` is the shifted hue in turns."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to byte RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    if s == 0:
        gray = unit_to_byte(l)
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    hue = normalize_hue(h) / HUE_MAX

    r = hue_to_rgb(p, q, hue + 1 / 3)
    g = hue_to_rgb(p, q, hue)
    b = hue_to_rgb(p, q, hue - 1 / 3)
    return unit_to_byte(r), unit_to_byte(g), unit_to_byte(b)

def _np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )

def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to byte RGB.

    Args:
        hsl: array of shape (..., 3): h in degrees, s and l in [0, 1]

    Returns:
        rgb: integer array of shape (..., 3) in [0, 255]
    """
    hsl = np.asarray(hsl, dtype=float)
    h = (hsl[..., 0] % HUE_MAX) / HUE_MAX
    s = hsl[..., 1]
    l = hsl[..., 2]

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = _np_hue_to_rgb(p, q, h + 1 / 3)
    g = _np_hue_to_rgb(p, q, h)
    b = _np_hue_to_rgb(p, q, h - 1 / 3)

    gray = s == 0
    rgb = np.stack([
        np.where(gray, l, r),
        np.where(gray, l, g),
        np.where(gray, l, b),
    ], axis=-1)
    return np_unit_to_byte(rgb)

## HSV to RGB conversions

def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """
    Convert HSV to byte RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    chroma = s * v
    q = normalize_hue(h) / 60
    x = chroma * (1 - abs(q % 2 - 1))

    hue_section = int(math.floor(q)) % 6

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    m = v - chroma
    return unit_to_byte(r + m), unit_to_byte(g + m), unit_to_byte(b + m)

def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to byte RGB.

    Args:
        hsv: array of shape (..., 3): h in degrees, s and v in [0, 1]

    Returns:
        rgb: integer array of shape (..., 3) in [0, 255]
    """
    hsv = np.asarray(hsv, dtype=float)
    h = hsv[..., 0] % HUE_MAX
    s = hsv[..., 1]
    v = hsv[..., 2]

    chroma = s * v
    q = h / 60
    x = chroma * (1 - np.abs(q % 2 - 1))
    zero = np.zeros_like(chroma)
    section = np.floor(q).astype(np.int64) % 6

    conditions = [section == i for i in range(5)]
    r = np.select(conditions, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma], default=x)

    m = v - chroma
    return np_unit_to_byte(np.stack([r + m, g + m, b + m], axis=-1))
