from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Tuple, Self, TYPE_CHECKING
from ..components import ColorComponent
from ..types.color_types import ColorSpace
from ..types.component_types import ComponentKind

if TYPE_CHECKING:
    from .rgb import RgbColor
    from .hsl import HslColor
    from .hsv import HsvColor


class Color(ABC):
    """
    An immutable color made of three primary components and an alpha.

    Each color space has an opaque class and an alpha class. Opaque colors
    report their space's ``OPAQUE`` alpha component; alpha colors carry a real
    one. The two are never represented by the same class.
    """
    __slots__ = ('_components', '_is_frozen')

    space: ClassVar[ColorSpace]
    component_types: ClassVar[Tuple[type[ColorComponent], ...]]
    alpha_type: ClassVar[type[ColorComponent]]
    has_alpha: ClassVar[bool] = False
    opaque_class: ClassVar[type[Color]]
    alpha_class: ClassVar[type[Color]]
    _component_index: ClassVar[Dict[ComponentKind, int]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: ColorComponent) -> None:
        expected = self.component_types + ((self.alpha_type,) if self.has_alpha else ())
        if len(components) != len(expected):
            raise ValueError(f"{self.__class__.__name__} expects {len(expected)} components, got {len(components)}")
        for component, component_type in zip(components, expected):
            if not isinstance(component, component_type):
                raise TypeError(
                    f"{self.__class__.__name__} expects {component_type.__name__}, got {component!r}"
                )
        self._components = components
        super().__setattr__('_is_frozen', True)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if 'component_types' in cls.__dict__:
            cls._component_index = {
                component_type.kind: index for index, component_type in enumerate(cls.component_types)
            }

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def components(self) -> Tuple[ColorComponent, ...]:
        """The three primary components, without alpha."""
        return self._components[:3]

    @property
    def alpha(self) -> ColorComponent:
        return self.alpha_type.OPAQUE

    def component(self, kind: ComponentKind) -> ColorComponent:
        """Return the component of the given kind, alpha included."""
        if kind is self.alpha_type.kind:
            return self.alpha
        index = self._component_index.get(kind)
        if index is None:
            raise TypeError(f"{self.__class__.__name__} has no {kind.value} component")
        return self._components[index]

    # ------------------ COMPONENT REPLACEMENT ------------------
    def set(self, component: ColorComponent) -> Self:
        """
        Return a color with ``component`` replacing the component of the same kind.

        Returns ``self`` when nothing changes. Setting the opaque alpha on an
        alpha color returns the opaque variant.
        """
        if not isinstance(component, ColorComponent):
            raise TypeError(f"Expected a ColorComponent, got {type(component).__name__}")
        if component.kind is self.alpha_type.kind:
            return self.set_alpha(component)
        index = self._component_index.get(component.kind)
        if index is None:
            raise TypeError(f"{self.__class__.__name__} cannot set a {component.kind.value} component")
        if self._components[index] == component:
            return self
        components = list(self._components)
        components[index] = component
        return self.__class__(*components)

    def set_alpha(self, alpha: ColorComponent) -> Color:
        if not isinstance(alpha, self.alpha_type):
            raise TypeError(f"{self.__class__.__name__} expects {self.alpha_type.__name__}, got {alpha!r}")
        if alpha == self.alpha:
            return self
        if alpha == self.alpha_type.OPAQUE:
            return self.opaque_class(*self.components)
        return self.alpha_class(*self.components, alpha)

    # ------------------ CONVERSIONS ------------------
    @abstractmethod
    def to_rgb(self) -> RgbColor:
        pass

    @abstractmethod
    def to_hsl(self) -> HslColor:
        pass

    @abstractmethod
    def to_hsv(self) -> HsvColor:
        pass

    def convert(self, to_space: ColorSpace | str) -> Color:
        """Convert to the named color space ("rgb", "hsl" or "hsv")."""
        to_space = ColorSpace(to_space)
        if to_space is ColorSpace.RGB:
            return self.to_rgb()
        if to_space is ColorSpace.HSL:
            return self.to_hsl()
        return self.to_hsv()

    @abstractmethod
    def to_css(self) -> str:
        pass

    def __repr__(self) -> str:
        values = ", ".join(repr(component.value) for component in self._components)
        return f"{self.__class__.__name__}({values})"


class WithAlpha(ABC):
    """
    Mixin for a Color subclass that carries a real alpha component.
    Assumes alpha is the *last* component.
    """
    __slots__ = ()

    _components: Tuple[ColorComponent, ...]

    has_alpha: ClassVar[bool] = True
    alpha_index: ClassVar[int] = 3

    @property
    def alpha(self) -> ColorComponent:
        return self._components[self.alpha_index]


class HueBasedColor(Color):
    """Shared behavior of HSL and HSV colors: structural equality, inversion and ``hsl(...)`` text."""
    __slots__ = ()

    function_name: ClassVar[str]

    def invert(self) -> Self:
        """Invert the three primaries; alpha is left as is."""
        inverted = tuple(component.invert() for component in self.components)
        return self.__class__(*inverted, *self._components[3:])

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HueBasedColor):
            return NotImplemented
        return type(self) is type(other) and self._components == other._components

    def __hash__(self) -> int:
        return hash((self.__class__, self._components))

    def __str__(self) -> str:
        name = self.function_name + ("a" if self.has_alpha else "")
        return f"{name}({','.join(str(component) for component in self._components)})"

