from __future__ import annotations
from typing import ClassVar, Tuple, Union
from .color_base import HueBasedColor, WithAlpha
from ..components import (
    ColorComponent,
    HueHsvComponent,
    SaturationHsvComponent,
    ValueHsvComponent,
    AlphaHsvComponent,
    AlphaRgbComponent,
)
from ..conversions import hsv_to_rgb, unit_to_byte
from ..types.color_types import ColorSpace


class HsvColor(HueBasedColor):
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.HSV
    function_name: ClassVar[str] = "hsv"
    component_types: ClassVar[Tuple[type, ...]] = (HueHsvComponent, SaturationHsvComponent, ValueHsvComponent)
    alpha_type: ClassVar[type] = AlphaHsvComponent

    @property
    def hue(self) -> HueHsvComponent:
        return self._components[0]

    @property
    def saturation(self) -> SaturationHsvComponent:
        return self._components[1]

    @property
    def value(self) -> ValueHsvComponent:
        return self._components[2]

    def to_rgb(self):
        from .rgb import rgb  # local import to avoid cycles

        color = rgb(*hsv_to_rgb(self.hue.value, self.saturation.value, self.value.value))
        if self.has_alpha:
            return color.set_alpha(AlphaRgbComponent.with_value(unit_to_byte(self.alpha.value)))
        return color

    def to_hsv(self) -> HsvColor:
        return self

    def to_hsl(self):
        return self.to_rgb().to_hsl()

    def to_css(self) -> str:
        """HSV has no CSS syntax; renders the RGB equivalent."""
        return self.to_rgb().to_css()


class OpaqueHsvColor(HsvColor):
    __slots__ = ()


class AlphaHsvColor(WithAlpha, HsvColor):
    __slots__ = ()


HsvColor.opaque_class = OpaqueHsvColor
HsvColor.alpha_class = AlphaHsvColor


def _component(component_type: type[ColorComponent], value: Union[float, ColorComponent]) -> ColorComponent:
    if isinstance(value, ColorComponent):
        return value
    return component_type.with_value(value)


def hsv(
    hue: Union[float, HueHsvComponent],
    saturation: Union[float, SaturationHsvComponent],
    value: Union[float, ValueHsvComponent],
) -> OpaqueHsvColor:
    return OpaqueHsvColor(
        _component(HueHsvComponent, hue),
        _component(SaturationHsvComponent, saturation),
        _component(ValueHsvComponent, value),
    )


def hsva(
    hue: Union[float, HueHsvComponent],
    saturation: Union[float, SaturationHsvComponent],
    value: Union[float, ValueHsvComponent],
    alpha: Union[float, AlphaHsvComponent],
) -> HsvColor:
    """Build an HSV color with alpha; an alpha of 1.0 gives the opaque variant."""
    return hsv(hue, saturation, value).set_alpha(_component(AlphaHsvComponent, alpha))
