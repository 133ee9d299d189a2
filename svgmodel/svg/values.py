"""Small attribute grammars: keywords, coordinate lists, lengths, orient.

None of these raise on bad input; malformed text degrades to defaults.
"""

from __future__ import annotations

import enum
from typing import TypeVar

from svgmodel.models.primitives import Length, LengthUnit, Orient, OrientType, Point, PointsList
from svgmodel.svg.scanner import format_number, parse_number, to_float

E = TypeVar("E", bound=enum.Enum)

_ORIENT_UNITS = {
    "deg": OrientType.DEGREES,
    "rad": OrientType.RADIANS,
    "grad": OrientType.GRADIANS,
    "turn": OrientType.TURNS,
}


# ── Keywords ─────────────────────────────────────────────────────────────


def parse_keyword(enum_cls: type[E], text: str | None, default: E | None = None) -> E | None:
    """Match ``text`` against the values of ``enum_cls``; ``default`` when nothing matches."""
    if text is None:
        return default
    try:
        return enum_cls(text.strip())
    except ValueError:
        return default


# ── Points ───────────────────────────────────────────────────────────────


def parse_points(text: str | None) -> PointsList:
    """Parse ``"x,y x,y ..."``.

    The scan stops at the first token without a comma; points read before it
    are kept, so ``"0,0 10,10 20"`` yields two points.
    """
    points = PointsList()
    if not text:
        return points
    for token in text.split():
        x, sep, y = token.partition(",")
        if not sep:
            break
        points.items.append(Point(x=to_float(x), y=to_float(y)))
    return points


def format_points(points: PointsList) -> str:
    return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in points)


# ── Lengths ──────────────────────────────────────────────────────────────


def parse_length(text: str | None) -> Length | None:
    """Parse a number with an optional unit suffix; unknown suffixes give ``LengthUnit.NONE``."""
    if text is None:
        return None
    value, consumed = parse_number(text)
    suffix = text[consumed:].strip()
    try:
        unit = LengthUnit(suffix)
    except ValueError:
        unit = LengthUnit.NONE
    return Length(value=value, unit=unit)


def format_length(length: Length) -> str:
    return f"{format_number(length.value)}{length.unit.value}"


# ── Orient ───────────────────────────────────────────────────────────────


def parse_orient(text: str | None) -> Orient | None:
    """Parse a marker ``orient`` value. A bare number is an angle in degrees."""
    if text is None:
        return None
    text = text.strip()
    if text == OrientType.AUTO.value:
        return Orient(type=OrientType.AUTO)
    if text == OrientType.AUTO_START_REVERSE.value:
        return Orient(type=OrientType.AUTO_START_REVERSE)
    value, consumed = parse_number(text)
    orient_type = _ORIENT_UNITS.get(text[consumed:].strip(), OrientType.DEGREES)
    return Orient(type=orient_type, value=value)


def format_orient(orient: Orient) -> str:
    if orient.type.is_keyword:
        return orient.type.value
    return f"{format_number(orient.value)}{orient.type.value}"
