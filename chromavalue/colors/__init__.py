"""
Color values in RGB, HSL and HSV.

Every space has an opaque class and an alpha class sharing a family base:

- ``RgbColor``: ``OpaqueRgbColor`` / ``AlphaRgbColor``, byte components,
  compared by packed ``argb`` value, supports ``mix`` and ``invert``
- ``HslColor``: ``OpaqueHslColor`` / ``AlphaHslColor``
- ``HsvColor``: ``OpaqueHsvColor`` / ``AlphaHsvColor``

Colors are immutable. ``set(component)`` returns a new color with the
component of the same kind replaced, and all spaces convert to each other
with ``to_rgb``, ``to_hsl`` and ``to_hsv``; alpha is carried along.

Examples:
    >>> red = rgb(255, 0, 0)
    >>> str(red.to_hsl())
    'hsl(0,100%,50%)'
    >>> str(rgba(0, 0, 0, 0).mix(WHITE, 0.5))
    '#80808080'
"""
from .color_base import Color, WithAlpha, HueBasedColor
from .rgb import RgbColor, OpaqueRgbColor, AlphaRgbColor, RgbColorString
from .hsl import HslColor, OpaqueHslColor, AlphaHslColor
from .hsv import HsvColor, OpaqueHsvColor, AlphaHsvColor
from .color import (
    rgb,
    rgba,
    from_rgb,
    from_argb,
    hsl,
    hsla,
    hsv,
    hsva,
    web_color,
    BLACK,
    WHITE,
)
from .mixing import check_amount, is_mix_small, is_mix_large, mix_channel

__all__ = [
    "Color",
    "WithAlpha",
    "HueBasedColor",
    "RgbColor",
    "OpaqueRgbColor",
    "AlphaRgbColor",
    "RgbColorString",
    "HslColor",
    "OpaqueHslColor",
    "AlphaHslColor",
    "HsvColor",
    "OpaqueHsvColor",
    "AlphaHsvColor",
    "rgb",
    "rgba",
    "from_rgb",
    "from_argb",
    "hsl",
    "hsla",
    "hsv",
    "hsva",
    "web_color",
    "BLACK",
    "WHITE",
    "check_amount",
    "is_mix_small",
    "is_mix_large",
    "mix_channel",
]
