from __future__ import annotations
from typing import ClassVar
from .component_base import HueComponent, UnitComponent
from ..types.component_types import ComponentKind, UNIT_MAX


class HueHslComponent(HueComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.HUE_HSL


class SaturationHslComponent(UnitComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.SATURATION_HSL


class LightnessHslComponent(UnitComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.LIGHTNESS_HSL


class AlphaHslComponent(UnitComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.ALPHA_HSL
    OPAQUE: ClassVar[AlphaHslComponent]


AlphaHslComponent.OPAQUE = AlphaHslComponent(UNIT_MAX)

hsl_component_classes = (HueHslComponent, SaturationHslComponent, LightnessHslComponent, AlphaHslComponent)
