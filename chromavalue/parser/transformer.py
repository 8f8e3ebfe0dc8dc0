from __future__ import annotations
import math
from enum import Enum
from typing import List, Optional, Tuple
from .tokens import ColorFunctionToken, TokenKind
from ..colors import Color, rgb, rgba, hsl, hsla, hsv, hsva
from ..conversions.numbers import round_half_up
from ..errors import ColorSyntaxError, UnknownFunctionError, UnsupportedSlotError
from ..types.color_types import ColorSpace, function_spaces
from ..types.component_types import BYTE_MAX

# (value token, followed by a "deg" unit)
SlotValue = Tuple[ColorFunctionToken, bool]

slot_names = {
    ColorSpace.RGB: ("red", "green", "blue", "alpha"),
    ColorSpace.HSL: ("hue", "saturation", "lightness", "alpha"),
    ColorSpace.HSV: ("hue", "saturation", "value", "alpha"),
}


def _number(token: ColorFunctionToken, slot: str) -> float:
    if not math.isfinite(token.value):
        raise UnsupportedSlotError(token.text, slot)
    return token.value


def _byte(value: SlotValue, slot: str) -> int:
    token, degrees = value
    if degrees:
        raise UnsupportedSlotError(token.text + "deg", slot)
    number = _number(token, slot)
    if token.kind is TokenKind.PERCENTAGE:
        return round_half_up(number * BYTE_MAX / 100) & 0xFF
    # Out of range numbers keep their low 8 bits.
    return int(number) & 0xFF


def _hue(value: SlotValue, slot: str) -> float:
    token, _ = value
    if token.kind is TokenKind.PERCENTAGE:
        raise UnsupportedSlotError(token.text, slot)
    return float(_number(token, slot))


def _unit(value: SlotValue, slot: str) -> float:
    token, degrees = value
    if degrees:
        raise UnsupportedSlotError(token.text + "deg", slot)
    number = _number(token, slot)
    if token.kind is TokenKind.PERCENTAGE:
        return number / 100
    return float(number)


class ColorFunctionTransformer(Enum):
    """Builds a color of one space from the 3 or 4 values of a color function."""
    RGB = ColorSpace.RGB
    HSL = ColorSpace.HSL
    HSV = ColorSpace.HSV

    @classmethod
    def from_name(cls, name: str, text: Optional[str] = None) -> ColorFunctionTransformer:
        space = function_spaces.get(name.lower())
        if space is None:
            raise UnknownFunctionError(name, text)
        return cls(space)

    @property
    def space(self) -> ColorSpace:
        return self.value

    def build(self, values: List[SlotValue]) -> Color:
        names = slot_names[self.space]
        if self is ColorFunctionTransformer.RGB:
            channels = [_byte(value, name) for value, name in zip(values, names)]
            return rgba(*channels) if len(channels) == 4 else rgb(*channels)

        first = _hue(values[0], names[0])
        rest = [_unit(value, name) for value, name in zip(values[1:], names[1:])]
        if self is ColorFunctionTransformer.HSL:
            return hsla(first, *rest) if len(rest) == 3 else hsl(first, *rest)
        return hsva(first, *rest) if len(rest) == 3 else hsv(first, *rest)


def transform(token: ColorFunctionToken, expected: Optional[ColorSpace] = None) -> Color:
    """
    Walk the children of a function token and build its color.

    A function name selects the transformer and restarts the values; numbers
    and percentages are collected in order, a ``deg`` unit marks the value
    before it. Exactly 3 or 4 values must be collected.

    Raises:
        UnknownFunctionError: unknown name, or a name of another space than ``expected``
        UnsupportedSlotError: a percentage hue, or ``deg`` on anything but the hue
        ColorSyntaxError: no function name, or the wrong number of values
    """
    transformer: Optional[ColorFunctionTransformer] = None
    name = ""
    values: List[SlotValue] = []

    for child in token.children:
        if child.kind is TokenKind.FUNCTION_NAME:
            name = child.text
            transformer = ColorFunctionTransformer.from_name(name, token.text)
            values = []
        elif child.kind is TokenKind.NUMBER or child.kind is TokenKind.PERCENTAGE:
            values.append((child, False))
        elif child.kind is TokenKind.DEGREES_UNIT_SYMBOL and values:
            values[-1] = (values[-1][0], True)

    if transformer is None:
        raise ColorSyntaxError(token.text, 0, "missing function name")
    if expected is not None and transformer.space is not expected:
        raise UnknownFunctionError(name, token.text)
    if len(values) not in (3, 4):
        raise ColorSyntaxError(token.text, len(token.text), f"expected 3 or 4 values, got {len(values)}")
    return transformer.build(values)
