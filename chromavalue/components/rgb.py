from __future__ import annotations
from typing import ClassVar, Self, Tuple
from boundednumbers import clamp
from .component_base import ColorComponent
from ..conversions.numbers import round_half_up
from ..types.component_types import ComponentKind, BYTE_MAX


class RgbComponent(ColorComponent):
    """
    A byte channel of an RGB color.

    The 256 instances of each kind are created once when this module is
    imported; ``with_value`` always hands out the shared instance, so equal
    components of the same kind are also identical.
    """
    __slots__ = ()

    value_type: ClassVar[type] = int
    _interned: ClassVar[Tuple[RgbComponent, ...]] = ()

    @classmethod
    def with_value(cls, value: int) -> Self:
        if cls._interned:
            return cls._interned[cls.check(value)]
        return cls(value)

    def add(self, delta: int) -> Self:
        if delta == 0:
            return self
        return self.with_value(int(clamp(self._value + delta, 0, BYTE_MAX)))

    def invert(self) -> Self:
        return self.with_value(~self._value & 0xFF)

    @property
    def unit_value(self) -> float:
        return self._value / BYTE_MAX

    def to_hex_string(self) -> str:
        return f"{self._value:02x}"

    def to_decimal_string(self) -> str:
        return str(self._value)

    def to_percentage_string(self) -> str:
        return f"{round_half_up(100 * self._value / BYTE_MAX)}%"

    def __str__(self) -> str:
        return self.to_hex_string()


class RedComponent(RgbComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.RED


class GreenComponent(RgbComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.GREEN


class BlueComponent(RgbComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.BLUE


class AlphaRgbComponent(RgbComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.ALPHA_RGB
    OPAQUE: ClassVar[AlphaRgbComponent]


rgb_component_classes = (RedComponent, GreenComponent, BlueComponent, AlphaRgbComponent)

for _cls in rgb_component_classes:
    _cls._interned = tuple(_cls(value) for value in range(BYTE_MAX + 1))

AlphaRgbComponent.OPAQUE = AlphaRgbComponent.with_value(BYTE_MAX)
