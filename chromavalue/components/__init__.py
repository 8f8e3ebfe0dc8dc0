"""
Bounded color components.

Each component has a ``kind`` and a validated value:

- RGB family (``RedComponent``, ``GreenComponent``, ``BlueComponent``,
  ``AlphaRgbComponent``): interned bytes in [0, 255], rendered as two hex digits
- Hue (``HueHslComponent``, ``HueHsvComponent``): degrees in [0, 360), wraps on ``add``
- Unit (saturation, lightness, value, alpha): floats in [0, 1], saturate on ``add``
"""
from .component_base import ColorComponent, HueComponent, UnitComponent
from .rgb import (
    RgbComponent,
    RedComponent,
    GreenComponent,
    BlueComponent,
    AlphaRgbComponent,
    rgb_component_classes,
)
from .hsl import (
    HueHslComponent,
    SaturationHslComponent,
    LightnessHslComponent,
    AlphaHslComponent,
    hsl_component_classes,
)
from .hsv import (
    HueHsvComponent,
    SaturationHsvComponent,
    ValueHsvComponent,
    AlphaHsvComponent,
    hsv_component_classes,
)

component_classes = {
    cls.kind: cls
    for cls in (*rgb_component_classes, *hsl_component_classes, *hsv_component_classes)
}

__all__ = [
    "ColorComponent",
    "HueComponent",
    "UnitComponent",
    "RgbComponent",
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
    "component_classes",
]
