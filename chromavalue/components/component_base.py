from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self
from boundednumbers import clamp
from ..errors import ComponentRangeError
from ..conversions.numbers import normalize_hue, round_half_up
from ..types.component_types import ComponentKind, component_bounds, HUE_MAX, UNIT_MAX


class ColorComponent(ABC):
    """
    A single bounded channel of a color.

    Instances are immutable; ``add``, ``invert`` and ``set_value`` return a new
    component, or ``self`` when nothing changes. Use ``with_value`` to build one.
    """
    __slots__ = ('_value', '_is_frozen')

    kind: ClassVar[ComponentKind]
    value_type: ClassVar[type]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        self._value = self.check(value)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def bounds(cls) -> tuple[Any, Any]:
        return component_bounds[cls.kind]

    @classmethod
    def check(cls, value: Any) -> Any:
        """Validate ``value`` for this kind and return it coerced to ``value_type``."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{cls.__name__} expects a number, got {type(value).__name__}")
        if cls.value_type is int and not isinstance(value, int):
            raise TypeError(f"{cls.__name__} expects an int, got {value!r}")
        minimum, maximum = cls.bounds()
        if not minimum <= value <= maximum or (cls.is_circular() and value == maximum):
            raise ComponentRangeError(cls.kind, value, minimum, maximum)
        return cls.value_type(value)

    @classmethod
    def is_circular(cls) -> bool:
        return False

    @classmethod
    def with_value(cls, value: Any) -> Self:
        return cls(value)

    @property
    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> Self:
        value = self.check(value)
        if value == self._value:
            return self
        return self.with_value(value)

    @abstractmethod
    def add(self, delta: int | float) -> Self:
        pass

    @abstractmethod
    def invert(self) -> Self:
        pass

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ColorComponent):
            return NotImplemented
        return self.kind is other.kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.kind, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class HueComponent(ColorComponent):
    """Hue in degrees; wraps around instead of saturating."""
    __slots__ = ()

    value_type: ClassVar[type] = float

    @classmethod
    def is_circular(cls) -> bool:
        return True

    def add(self, delta: int | float) -> Self:
        if delta == 0:
            return self
        return self.set_value(normalize_hue(self._value + delta))

    def invert(self) -> Self:
        return self.set_value(normalize_hue(HUE_MAX - self._value))

    def __str__(self) -> str:
        # 359.5 and up rounds onto 0, keeping the text parseable
        return str(round_half_up(self._value) % round(HUE_MAX))


class UnitComponent(ColorComponent):
    """Saturation, lightness, value or alpha in [0, 1], rendered as a percentage."""
    __slots__ = ()

    value_type: ClassVar[type] = float

    def add(self, delta: int | float) -> Self:
        if delta == 0:
            return self
        return self.set_value(float(clamp(self._value + delta, 0.0, UNIT_MAX)))

    def invert(self) -> Self:
        return self.set_value(UNIT_MAX - self._value)

    def __str__(self) -> str:
        return f"{round_half_up(100 * self._value)}%"
