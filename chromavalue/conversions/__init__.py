"""
Color space conversion functions.

Every conversion comes as a scalar function and a vectorized ``np_`` variant:

- ``rgb_to_hsl`` / ``np_rgb_to_hsl``: byte RGB to (hue degrees, saturation, lightness)
- ``rgb_to_hsv`` / ``np_rgb_to_hsv``: byte RGB to (hue degrees, saturation, value)
- ``hsl_to_rgb`` / ``np_hsl_to_rgb``: HSL to byte RGB
- ``hsv_to_rgb`` / ``np_hsv_to_rgb``: HSV to byte RGB

Alpha is never part of these functions; colors carry it across spaces themselves.

Examples:
    >>> rgb_to_hsl(255, 0, 0)
    (0.0, 1.0, 0.5)
    >>> hsv_to_rgb(120.0, 1.0, 1.0)
    (0, 255, 0)
"""
from .numbers import (
    round_half_up,
    np_round_half_up,
    unit_to_byte,
    np_unit_to_byte,
    byte_to_unit,
    normalize_hue,
)
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .to_rgb import hue_to_rgb, hsl_to_rgb, np_hsl_to_rgb, hsv_to_rgb, np_hsv_to_rgb

__all__ = [
    "round_half_up",
    "np_round_half_up",
    "unit_to_byte",
    "np_unit_to_byte",
    "byte_to_unit",
    "normalize_hue",
    "rgb_to_hsl",
    "np_rgb_to_hsl",
    "rgb_to_hsv",
    "np_rgb_to_hsv",
    "hue_to_rgb",
    "hsl_to_rgb",
    "np_hsl_to_rgb",
    "hsv_to_rgb",
    "np_hsv_to_rgb",
]
