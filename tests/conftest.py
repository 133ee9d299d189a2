"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgmodel.models import (
    Circle,
    Element,
    Ellipse,
    Group,
    Image,
    Length,
    LengthAdjust,
    LengthUnit,
    Line,
    Link,
    Marker,
    MethodType,
    Orient,
    OrientType,
    Path,
    Point,
    PointsList,
    Polygon,
    Polyline,
    Rect,
    SpacingType,
    Style,
    SvgDocument,
    Text,
    TextPath,
    Translate,
    TransformList,
)


# Sample SVGs

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" style="background-color:white;">
  <circle cx="12" cy="12" r="10" style="fill:none;stroke:currentColor;stroke-width:2;"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="100px" height="80">
  <title>ignored</title>
  <g id="layer1" class="shapes" transform="translate(10,20) scale(2)">
    <rect x="1" y="2" width="30" height="40" rx="3"/>
    <ellipse cx="50" cy="40" rx="20" ry="10"/>
    <a href="https://example.com" target="_blank">
      <polygon points="0,0 10,0 10,10"/>
    </a>
  </g>
  <marker markerWidth="6" markerHeight="4" refX="3" refY="2" orient="auto">
    <path d="M0,0 L6,2 L0,4 z"/>
  </marker>
  <image x="5" y="5" width="16" height="16" xlink:href="icon.png"/>
  <text x="10" y="70" dx="2" textLength="50px" lengthAdjust="spacingAndGlyphs">Hello</text>
</svg>'''

NOT_SVG = '''<notsvg width="10" height="10"><rect width="1" height="1"/></notsvg>'''

MALFORMED_XML = '''<svg width="10"><rect></svg>'''

# Encode with latin-1 before use; the declaration names that encoding
LATIN1_SVG = '''<?xml version="1.0" encoding="ISO-8859-1"?>
<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><text x="1" y="8">café</text></svg>'''


def make_all_kinds_document() -> SvgDocument:
    """One element of every supported kind, with distinctive field values."""
    doc = SvgDocument(width=200, height=100, style=Style(background_color="#fafafa"))

    def add(payload, **common) -> None:
        doc.add_element(Element(payload=payload, **common))

    add(
        Rect(width=30, height=20, point=Point(x=1, y=2), rx=4, ry=5),
        id="r1",
        class_name="box",
        style=Style(fill="red", stroke="blue", stroke_width=2.5, fill_opacity=0.5),
        transforms=TransformList.of(Translate(x=10, y=20)),
    )
    add(Circle(r=7, center=Point(x=3, y=4)))
    add(Ellipse(rx=8, ry=3, center=Point(x=20, y=30)))
    add(Line(p1=Point(x=0, y=0), p2=Point(x=10, y=15.5)))
    add(Polygon(points=PointsList(items=[Point(x=0, y=0), Point(x=10, y=0), Point(x=5, y=8)])))
    add(Polyline(points=PointsList(items=[Point(x=1, y=1), Point(x=2, y=3)])))
    add(Path(d="M0 0 L10 10 Z"))
    add(
        Text(
            point=Point(x=5, y=6),
            dx=1,
            rotate=45,
            text_length=Length(value=50, unit=LengthUnit.PX),
            length_adjust=LengthAdjust.SPACING_AND_GLYPHS,
            contents="Hello",
        )
    )
    add(
        TextPath(
            href="#curve",
            length_adjust=LengthAdjust.SPACING,
            method=MethodType.STRETCH,
            spacing=SpacingType.EXACT,
            start_offset=Length(value=10, unit=LengthUnit.PERCENTAGE),
            text_length=Length(value=3, unit=LengthUnit.EMS),
            contents="along",
        )
    )
    link = Link(href="https://example.com", target="_blank", download="")
    link.elements.add(Element(payload=Circle(r=1)))
    add(link)
    add(Image(width=16, height=16, href="icon.png", point=Point(x=2, y=2)))
    marker = Marker(
        marker_width=6,
        marker_height=4,
        ref=Point(x=3, y=2),
        orient=Orient(type=OrientType.RADIANS, value=1.5),
    )
    marker.elements.add(Element(payload=Path(d="M0,0 L6,2 L0,4 z")))
    add(marker)
    group = Group()
    group.elements.add(Element(payload=Rect(width=1, height=1)))
    group.elements.add(Element(payload=Line(p2=Point(x=1, y=1))))
    add(group, id="g1")
    return doc


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG


@pytest.fixture
def all_kinds_doc() -> SvgDocument:
    return make_all_kinds_document()
