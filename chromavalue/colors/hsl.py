from __future__ import annotations
from typing import ClassVar, Tuple, Union
from .color_base import HueBasedColor, WithAlpha
from ..components import (
    ColorComponent,
    HueHslComponent,
    SaturationHslComponent,
    LightnessHslComponent,
    AlphaHslComponent,
    AlphaRgbComponent,
)
from ..conversions import hsl_to_rgb, unit_to_byte
from ..types.color_types import ColorSpace


class HslColor(HueBasedColor):
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.HSL
    function_name: ClassVar[str] = "hsl"
    component_types: ClassVar[Tuple[type, ...]] = (HueHslComponent, SaturationHslComponent, LightnessHslComponent)
    alpha_type: ClassVar[type] = AlphaHslComponent

    @property
    def hue(self) -> HueHslComponent:
        return self._components[0]

    @property
    def saturation(self) -> SaturationHslComponent:
        return self._components[1]

    @property
    def lightness(self) -> LightnessHslComponent:
        return self._components[2]

    def to_rgb(self):
        from .rgb import rgb  # local import to avoid cycles

        color = rgb(*hsl_to_rgb(self.hue.value, self.saturation.value, self.lightness.value))
        if self.has_alpha:
            return color.set_alpha(AlphaRgbComponent.with_value(unit_to_byte(self.alpha.value)))
        return color

    def to_hsl(self) -> HslColor:
        return self

    def to_hsv(self):
        return self.to_rgb().to_hsv()

    def to_css(self) -> str:
        return str(self)


class OpaqueHslColor(HslColor):
    __slots__ = ()


class AlphaHslColor(WithAlpha, HslColor):
    __slots__ = ()


HslColor.opaque_class = OpaqueHslColor
HslColor.alpha_class = AlphaHslColor


def _component(component_type: type[ColorComponent], value: Union[float, ColorComponent]) -> ColorComponent:
    if isinstance(value, ColorComponent):
        return value
    return component_type.with_value(value)


def hsl(
    hue: Union[float, HueHslComponent],
    saturation: Union[float, SaturationHslComponent],
    lightness: Union[float, LightnessHslComponent],
) -> OpaqueHslColor:
    return OpaqueHslColor(
        _component(HueHslComponent, hue),
        _component(SaturationHslComponent, saturation),
        _component(LightnessHslComponent, lightness),
    )


def hsla(
    hue: Union[float, HueHslComponent],
    saturation: Union[float, SaturationHslComponent],
    lightness: Union[float, LightnessHslComponent],
    alpha: Union[float, AlphaHslComponent],
) -> HslColor:
    """Build an HSL color with alpha; an alpha of 1.0 gives the opaque variant."""
    return hsl(hue, saturation, lightness).set_alpha(_component(AlphaHslComponent, alpha))
