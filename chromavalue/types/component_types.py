# No dependencies
from enum import Enum

class ComponentKind(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA_RGB = "alpha-rgb"
    HUE_HSL = "hue-hsl"
    SATURATION_HSL = "saturation-hsl"
    LIGHTNESS_HSL = "lightness-hsl"
    ALPHA_HSL = "alpha-hsl"
    HUE_HSV = "hue-hsv"
    SATURATION_HSV = "saturation-hsv"
    VALUE_HSV = "value-hsv"
    ALPHA_HSV = "alpha-hsv"

BYTE_MAX = 255
UNIT_MAX = 1.0
HUE_MAX = 360.0

# Mix amounts at or below this are treated as 0, at or above 1 - this as 1.
MIX_EPSILON = 1.0 / 512

BYTE_KINDS = frozenset({
    ComponentKind.RED,
    ComponentKind.GREEN,
    ComponentKind.BLUE,
    ComponentKind.ALPHA_RGB,
})

HUE_KINDS = frozenset({ComponentKind.HUE_HSL, ComponentKind.HUE_HSV})

component_bounds = {
    kind: (0, BYTE_MAX) if kind in BYTE_KINDS
    else (0.0, HUE_MAX) if kind in HUE_KINDS
    else (0.0, UNIT_MAX)
    for kind in ComponentKind
}
