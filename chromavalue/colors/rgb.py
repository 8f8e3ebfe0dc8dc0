from __future__ import annotations
from enum import Enum
from typing import ClassVar, Optional, Tuple, Self, Union
from .color_base import Color, WithAlpha
from .mixing import check_amount, is_mix_small, is_mix_large, mix_channel
from ..components import (
    ColorComponent,
    RgbComponent,
    RedComponent,
    GreenComponent,
    BlueComponent,
    AlphaRgbComponent,
)
from ..conversions import rgb_to_hsl, rgb_to_hsv
from ..types.color_types import ColorSpace


class RgbColor(Color):
    """
    A color with byte red, green and blue components.

    Equality and hashing use the packed ``argb`` value, so an opaque color never
    equals an alpha one.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.RGB
    component_types: ClassVar[Tuple[type, ...]] = (RedComponent, GreenComponent, BlueComponent)
    alpha_type: ClassVar[type] = AlphaRgbComponent

    @property
    def red(self) -> RedComponent:
        return self._components[0]

    @property
    def green(self) -> GreenComponent:
        return self._components[1]

    @property
    def blue(self) -> BlueComponent:
        return self._components[2]

    @property
    def rgb(self) -> int:
        """The 24-bit ``0xRRGGBB`` value, ignoring alpha."""
        return (self.red.value << 16) | (self.green.value << 8) | self.blue.value

    @property
    def argb(self) -> int:
        """The 32-bit ``0xAARRGGBB`` value; opaque colors have alpha ``0xFF``."""
        return (self.alpha.value << 24) | self.rgb

    @property
    def value(self) -> int:
        return self.argb if self.has_alpha else self.rgb

    # ------------------ MIXING / INVERSION ------------------
    def mix(self, target: Union[ColorComponent, Color], amount: float) -> RgbColor:
        """
        Move this color toward ``target`` by ``amount`` in [0, 1].

        ``target`` is either a single RGB component, which only affects the
        channel of its kind, or a color of any space, which moves all four
        channels. Amounts within 1/512 of either end short-circuit to ``self``
        or the target.
        """
        check_amount(amount)
        if isinstance(target, ColorComponent):
            return self._mix_component(target, amount)
        if not isinstance(target, Color):
            raise TypeError(f"Cannot mix {self.__class__.__name__} with {type(target).__name__}")
        if is_mix_small(amount):
            return self

        other = target.to_rgb()
        if is_mix_large(amount):
            return other

        channels = [
            component.with_value(mix_channel(component.value, other_component.value, amount))
            for component, other_component in zip(
                (self.red, self.green, self.blue, self.alpha),
                (other.red, other.green, other.blue, other.alpha),
            )
        ]
        return rgba(*channels)

    def _mix_component(self, component: ColorComponent, amount: float) -> RgbColor:
        current = self.component(component.kind)
        if is_mix_small(amount):
            return self
        if is_mix_large(amount):
            return self.set(component)
        return self.set(current.with_value(mix_channel(current.value, component.value, amount)))

    def invert(self) -> Self:
        """Invert red, green and blue; alpha is left as is."""
        inverted = tuple(component.invert() for component in self.components)
        return self.__class__(*inverted, *self._components[3:])

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> RgbColor:
        return self

    def to_hsl(self):
        from .hsl import hsl, HslColor  # local import to avoid cycles
        from ..components import AlphaHslComponent

        color: HslColor = hsl(*rgb_to_hsl(self.red.value, self.green.value, self.blue.value))
        if self.has_alpha:
            color = color.set_alpha(AlphaHslComponent.with_value(self.alpha.unit_value))
        return color

    def to_hsv(self):
        from .hsv import hsv, HsvColor  # local import to avoid cycles
        from ..components import AlphaHsvComponent

        color: HsvColor = hsv(*rgb_to_hsv(self.red.value, self.green.value, self.blue.value))
        if self.has_alpha:
            color = color.set_alpha(AlphaHsvComponent.with_value(self.alpha.unit_value))
        return color

    # ------------------ TEXT ------------------
    def to_hex_string(self) -> str:
        return "#" + "".join(component.to_hex_string() for component in self._components)

    def to_css(self) -> str:
        return self.to_hex_string()

    def web_color_name(self) -> Optional[str]:
        """The CSS3 name of this color, or ``None`` when it has alpha or no name."""
        if self.has_alpha:
            return None
        from .web_colors import rgb_to_web_color_name  # local import to avoid cycles
        return rgb_to_web_color_name(self.red.value, self.green.value, self.blue.value)

    def __str__(self) -> str:
        return self.to_hex_string()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RgbColor):
            return NotImplemented
        return self.argb == other.argb

    def __hash__(self) -> int:
        return hash(self.argb)


class OpaqueRgbColor(RgbColor):
    __slots__ = ()


class AlphaRgbColor(WithAlpha, RgbColor):
    __slots__ = ()

    def to_css(self) -> str:
        alpha = f"{self.alpha.unit_value:.3f}".rstrip("0").rstrip(".")
        return f"rgba({self.red.value}, {self.green.value}, {self.blue.value}, {alpha})"


RgbColor.opaque_class = OpaqueRgbColor
RgbColor.alpha_class = AlphaRgbColor


class RgbColorString(str, Enum):
    """Text forms an RGB color can be written in."""
    HASH = "hash"
    RGB_DECIMAL = "rgb-decimal"
    RGB_PERCENTAGE = "rgb-percentage"

    def format(self, color: RgbColor) -> str:
        if self is RgbColorString.HASH:
            return color.to_hex_string()
        if self is RgbColorString.RGB_DECIMAL:
            values = [component.to_decimal_string() for component in color._components]
        else:
            values = [component.to_percentage_string() for component in color._components]
        name = "rgba" if color.has_alpha else "rgb"
        return f"{name}({','.join(values)})"


def _component(component_type: type[RgbComponent], value: Union[int, RgbComponent]) -> RgbComponent:
    if isinstance(value, RgbComponent):
        return value
    return component_type.with_value(value)


def rgb(red: Union[int, RedComponent], green: Union[int, GreenComponent], blue: Union[int, BlueComponent]) -> OpaqueRgbColor:
    """Build an opaque RGB color from bytes or components."""
    return OpaqueRgbColor(
        _component(RedComponent, red),
        _component(GreenComponent, green),
        _component(BlueComponent, blue),
    )


def rgba(
    red: Union[int, RedComponent],
    green: Union[int, GreenComponent],
    blue: Union[int, BlueComponent],
    alpha: Union[int, AlphaRgbComponent],
) -> RgbColor:
    """Build an RGB color with alpha; an alpha of 255 gives the opaque variant."""
    return rgb(red, green, blue).set_alpha(_component(AlphaRgbComponent, alpha))


def from_rgb(value: int) -> OpaqueRgbColor:
    """Build an opaque color from a packed ``0xRRGGBB`` int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"Invalid rgb value {value:#x}, expected between 0 and 0xffffff")
    return rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def from_argb(value: int) -> RgbColor:
    """Build a color from a packed ``0xAARRGGBB`` int; alpha ``0xFF`` gives the opaque variant."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an int, got {type(value).__name__}")
    value &= 0xFFFFFFFF
    return rgba((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)
