"""Chromavalue: RGB, HSL and HSV color values with CSS style parsing."""

from .colors import (
    Color,
    RgbColor,
    OpaqueRgbColor,
    AlphaRgbColor,
    RgbColorString,
    HslColor,
    OpaqueHslColor,
    AlphaHslColor,
    HsvColor,
    OpaqueHsvColor,
    AlphaHsvColor,
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
from .components import (
    ColorComponent,
    RedComponent,
    GreenComponent,
    BlueComponent,
    AlphaRgbComponent,
    HueHslComponent,
    SaturationHslComponent,
    LightnessHslComponent,
    AlphaHslComponent,
    HueHsvComponent,
    SaturationHsvComponent,
    ValueHsvComponent,
    AlphaHsvComponent,
)
from .conversions import (
    rgb_to_hsl,
    rgb_to_hsv,
    hsl_to_rgb,
    hsv_to_rgb,
    np_rgb_to_hsl,
    np_rgb_to_hsv,
    np_hsl_to_rgb,
    np_hsv_to_rgb,
)
from .errors import (
    ColorError,
    ComponentRangeError,
    ColorSyntaxError,
    UnknownFunctionError,
    UnsupportedSlotError,
    UnknownColorNameError,
    MixAmountError,
)
from .parser import parse, parse_rgb, parse_hsl, parse_hsv, parse_color_function
from .types import ColorSpace, ComponentKind

__all__ = [
    "Color",
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
    "ColorComponent",
    "RedComponent",
    "GreenComponent",
    "BlueComponent",
    "AlphaRgbComponent",
    "HueHslComponent",
    "SaturationHslComponent",
    "LightnessHslComponent",
    "AlphaHslComponent",
    "HueHsvComponent",
    "SaturationHsvComponent",
    "ValueHsvComponent",
    "AlphaHsvComponent",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "np_rgb_to_hsl",
    "np_rgb_to_hsv",
    "np_hsl_to_rgb",
    "np_hsv_to_rgb",
    "ColorError",
    "ComponentRangeError",
    "ColorSyntaxError",
    "UnknownFunctionError",
    "UnsupportedSlotError",
    "UnknownColorNameError",
    "MixAmountError",
    "parse",
    "parse_rgb",
    "parse_hsl",
    "parse_hsv",
    "parse_color_function",
    "ColorSpace",
    "ComponentKind",
]
