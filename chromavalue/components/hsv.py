from __future__ import annotations
from typing import ClassVar
from .component_base import HueComponent, UnitComponent
from ..types.component_types import ComponentKind, UNIT_MAX


class HueHsvComponent(HueComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.HUE_HSV


class SaturationHsvComponent(UnitComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.SATURATION_HSV


class ValueHsvComponent(UnitComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.VALUE_HSV


class AlphaHsvComponent(UnitComponent):
    __slots__ = ()
    kind: ClassVar[ComponentKind] = ComponentKind.ALPHA_HSV
    OPAQUE: ClassVar[AlphaHsvComponent]


AlphaHsvComponent.OPAQUE = AlphaHsvComponent(UNIT_MAX)

hsv_component_classes = (HueHsvComponent, SaturationHsvComponent, ValueHsvComponent, AlphaHsvComponent)
