"""CSS-like ``style`` attribute grammar and printer.

Declarations are ``name:value`` pairs separated by ``;``. Unknown property
names are ignored; keyword values that match nothing fall back to the
property's initial value.
"""

from __future__ import annotations

import logging
from typing import Callable

from svgmodel.models.style import (
    FillRule,
    FontStretch,
    FontStyle,
    FontWeight,
    StrokeLinecap,
    StrokeLinejoin,
    Style,
)
from svgmodel.svg.scanner import format_number, to_float
from svgmodel.svg.values import parse_keyword

logger = logging.getLogger(__name__)


def _text(value: str) -> str:
    return value


def _keyword(enum_cls, default) -> Callable[[str], object]:
    return lambda value: parse_keyword(enum_cls, value, default)


# CSS property name -> (Style field, value parser), in printing order
PROPERTIES: dict[str, tuple[str, Callable[[str], object]]] = {
    "fill": ("fill", _text),
    "fill-opacity": ("fill_opacity", to_float),
    "fill-rule": ("fill_rule", _keyword(FillRule, FillRule.NONZERO)),
    "stroke": ("stroke", _text),
    "stroke-width": ("stroke_width", to_float),
    "stroke-opacity": ("stroke_opacity", to_float),
    "stroke-linecap": ("stroke_linecap", _keyword(StrokeLinecap, StrokeLinecap.BUTT)),
    "stroke-dasharray": ("stroke_dasharray", _text),
    "stroke-linejoin": ("stroke_linejoin", _keyword(StrokeLinejoin, StrokeLinejoin.MITER)),
    "background-color": ("background_color", _text),
    "font-family": ("font_family", _text),
    "font-weight": ("font_weight", _keyword(FontWeight, FontWeight.NORMAL)),
    "font-stretch": ("font_stretch", _keyword(FontStretch, FontStretch.NORMAL)),
    "font-style": ("font_style", _keyword(FontStyle, FontStyle.NORMAL)),
    "font-size": ("font_size", _text),
}

_OPACITY_FIELDS = ("fill_opacity", "stroke_opacity")


def parse_style(text: str | None) -> Style | None:
    """Parse a ``style`` attribute value; None when the attribute is absent or blank."""
    if text is None or not text.strip():
        return None
    style = Style()
    for declaration in text.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        name = name.strip()
        prop = PROPERTIES.get(name)
        if prop is None:
            logger.debug("Ignoring unsupported style property %r", name)
            continue
        field, parse = prop
        setattr(style, field, parse(value.strip()))
    return style


def _should_emit(field: str, value) -> bool:
    if value is None:
        return False
    if field in _OPACITY_FIELDS:
        return 0 <= value <= 1
    if field == "stroke_width":
        return value != 1
    return True


def _format_value(value) -> str:
    if isinstance(value, float):
        return format_number(value)
    if hasattr(value, "value"):
        return value.value
    return str(value)


def format_style(style: Style) -> str:
    """Render every set property as ``name:value;``.

    Opacities outside [0, 1] and a stroke width of exactly 1 are treated as
    unset and left out.
    """
    parts = []
    for name, (field, _) in PROPERTIES.items():
        value = getattr(style, field)
        if _should_emit(field, value):
            parts.append(f"{name}:{_format_value(value)};")
    return "".join(parts)


def format_root_style(style: Style) -> str:
    """The document root only carries its background colour."""
    if style.background_color is None:
        return ""
    return f"background-color:{style.background_color};"
