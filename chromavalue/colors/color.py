"""
Color constructors shared by every space.

``rgb``/``rgba``/``from_rgb``/``from_argb`` build RGB colors, ``hsl``/``hsla``
and ``hsv``/``hsva`` build hue based colors. The ``*a`` factories return the
opaque variant when given the opaque alpha.
"""
from .rgb import RgbColor, rgb, rgba, from_rgb, from_argb
from .hsl import hsl, hsla
from .hsv import hsv, hsva
from .web_colors import web_color_to_rgb

BLACK = from_rgb(0x000000)
WHITE = from_rgb(0xFFFFFF)

def web_color(name: str) -> RgbColor:
    """Build an opaque RGB color from a CSS3 color name such as ``"darkslateblue"``."""
    return rgb(*web_color_to_rgb(name))

__all__ = [
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
]
