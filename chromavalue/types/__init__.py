from .component_types import (
    ComponentKind,
    BYTE_MAX,
    UNIT_MAX,
    HUE_MAX,
    MIX_EPSILON,
    component_bounds,
)
from .color_types import ColorSpace, function_spaces

__all__ = [
    "ComponentKind",
    "BYTE_MAX",
    "UNIT_MAX",
    "HUE_MAX",
    "MIX_EPSILON",
    "component_bounds",
    "ColorSpace",
    "function_spaces",
]
