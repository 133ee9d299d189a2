"""Primitive value types: points, point lists, lengths and marker orientation."""

from __future__ import annotations

import enum

from pydantic import Field

from svgmodel.models.base import ModelListMixin, SvgModel


class Point(SvgModel):
    x: float = 0.0
    y: float = 0.0


class PointsList(ModelListMixin, SvgModel):
    """Ordered coordinate list used by polygon and polyline."""

    items: list[Point] = Field(default_factory=list)
    cursor: int = 0


class LengthUnit(str, enum.Enum):
    # Values are the attribute suffixes
    NONE = ""
    EMS = "ems"
    EXS = "exs"
    PX = "px"
    CM = "cm"
    MM = "mm"
    IN = "in"
    PC = "pc"
    PT = "pt"
    PERCENTAGE = "%"


class Length(SvgModel):
    """A number with an optional unit suffix (textLength, startOffset)."""

    value: float = 0.0
    unit: LengthUnit = LengthUnit.NONE


class OrientType(str, enum.Enum):
    AUTO = "auto"
    AUTO_START_REVERSE = "auto-start-reverse"
    DEGREES = "deg"
    RADIANS = "rad"
    GRADIANS = "grad"
    TURNS = "turn"

    @property
    def is_keyword(self) -> bool:
        return self in (OrientType.AUTO, OrientType.AUTO_START_REVERSE)


class Orient(SvgModel):
    """Marker orientation; ``value`` is ignored for the two keyword types."""

    type: OrientType = OrientType.AUTO
    value: float = 0.0
