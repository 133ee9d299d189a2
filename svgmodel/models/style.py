"""Presentation style attachable to any element or to the document root.

Every field is optional and ``None`` means "not set"; the serializer writes
only the properties that are set (see ``svgmodel.svg.style``).
"""

from __future__ import annotations

import enum

from svgmodel.models.base import SvgModel


class FillRule(str, enum.Enum):
    NONZERO = "nonzero"
    EVENODD = "evenodd"


class StrokeLinecap(str, enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class StrokeLinejoin(str, enum.Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"


class FontWeight(str, enum.Enum):
    NORMAL = "normal"
    BOLDER = "bolder"
    BOLD = "bold"
    LIGHTER = "lighter"
    W100 = "100"
    W200 = "200"
    W300 = "300"
    W400 = "400"
    W500 = "500"
    W600 = "600"
    W700 = "700"
    W800 = "800"
    W900 = "900"


class FontStretch(str, enum.Enum):
    NORMAL = "normal"
    ULTRA_CONDENSED = "ultra-condensed"
    EXTRA_CONDENSED = "extra-condensed"
    CONDENSED = "condensed"
    SEMI_CONDENSED = "semi-condensed"
    SEMI_EXPANDED = "semi-expanded"
    EXPANDED = "expanded"
    EXTRA_EXPANDED = "extra-expanded"
    ULTRA_EXPANDED = "ultra-expanded"


class FontStyle(str, enum.Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class Style(SvgModel):
    fill: str | None = None
    fill_opacity: float | None = None
    fill_rule: FillRule | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    stroke_opacity: float | None = None
    stroke_linecap: StrokeLinecap | None = None
    stroke_dasharray: str | None = None
    stroke_linejoin: StrokeLinejoin | None = None
    background_color: str | None = None
    font_family: str | None = None
    font_weight: FontWeight | None = None
    font_stretch: FontStretch | None = None
    font_style: FontStyle | None = None
    font_size: str | None = None
