"""Tests for the ElementTree → model parser."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from tests.conftest import BAR_CHART_SVG, CIRCLE_SVG, GROUPED_SVG, NOT_SVG, SMILEY_SVG

from svgmodel.models import (
    SVG_NAMESPACE,
    Circle,
    ElementType,
    Ellipse,
    Group,
    Image,
    LengthAdjust,
    LengthUnit,
    Line,
    Link,
    Marker,
    MethodType,
    OrientType,
    Path,
    Point,
    Polygon,
    Rect,
    Scale,
    SpacingType,
    Text,
    TextPath,
    Translate,
)
from svgmodel.svg.parser import parse_document


def _parse(svg_text: str):
    return parse_document(ET.fromstring(svg_text))


def test_parse_circle():
    doc = _parse(CIRCLE_SVG)
    assert doc.width == 24
    assert doc.height == 24
    assert doc.xmlns == SVG_NAMESPACE
    assert len(doc.elements) == 1
    circle = doc.elements[0].get_payload(Circle)
    assert circle.r == 10
    assert circle.center == Point(x=12, y=12)


def test_parse_smiley():
    doc = _parse(SMILEY_SVG)
    assert [el.element_type for el in doc.elements] == [
        ElementType.CIRCLE,
        ElementType.CIRCLE,
        ElementType.CIRCLE,
        ElementType.PATH,
    ]
    assert doc.style.background_color == "white"
    first = doc.elements[0].style
    assert first.fill == "none"
    assert first.stroke_width == 2
    assert doc.elements[3].get_payload(Path).d == "M8 14s1.5 2 4 2 4-2 4-2"


def test_parse_bar_chart():
    doc = _parse(BAR_CHART_SVG)
    lines = [el.get_payload(Line) for el in doc.elements]
    assert len(lines) == 3
    assert lines[0].p1 == Point(x=18, y=20)
    assert lines[0].p2 == Point(x=18, y=10)


def test_root_must_be_svg(caplog):
    with caplog.at_level(logging.WARNING):
        assert _parse(NOT_SVG) is None
    assert "notsvg" in caplog.text


# ---------------------------------------------------------------------------
# Nested document
# ---------------------------------------------------------------------------


class TestGrouped:
    def test_top_level(self):
        doc = _parse(GROUPED_SVG)
        # <title> is not a supported element
        assert [el.element_type for el in doc.elements] == [
            ElementType.GROUP,
            ElementType.MARKER,
            ElementType.IMAGE,
            ElementType.TEXT,
        ]
        assert doc.width == 100
        assert doc.height == 80

    def test_group_common_attributes(self):
        group = _parse(GROUPED_SVG).elements[0]
        assert group.id == "layer1"
        assert group.class_name == "shapes"
        assert group.transforms[0].get_function(Translate) == Translate(x=10, y=20)
        assert group.transforms[1].get_function(Scale) == Scale(x=2, y=2)

    def test_group_children(self):
        group = _parse(GROUPED_SVG).elements[0].get_payload(Group)
        rect = group.elements[0].get_payload(Rect)
        assert (rect.width, rect.height, rect.rx, rect.ry) == (30, 40, 3, 0)
        assert rect.point == Point(x=1, y=2)

        ellipse = group.elements[1].get_payload(Ellipse)
        assert (ellipse.rx, ellipse.ry) == (20, 10)

        link = group.elements[2].get_payload(Link)
        assert link.href == "https://example.com"
        assert link.target == "_blank"
        assert link.download is None
        polygon = link.elements[0].get_payload(Polygon)
        assert len(polygon.points) == 3

    def test_marker(self):
        marker = _parse(GROUPED_SVG).elements[1].get_payload(Marker)
        assert (marker.marker_width, marker.marker_height) == (6, 4)
        assert marker.ref == Point(x=3, y=2)
        assert marker.orient.type == OrientType.AUTO
        assert len(marker.elements) == 1

    def test_namespaced_href(self):
        image = _parse(GROUPED_SVG).elements[2].get_payload(Image)
        assert image.href == "icon.png"
        assert (image.width, image.height) == (16, 16)

    def test_text(self):
        text = _parse(GROUPED_SVG).elements[3].get_payload(Text)
        assert text.contents == "Hello"
        assert text.dx == 2
        assert text.text_length.value == 50
        assert text.text_length.unit == LengthUnit.PX
        assert text.length_adjust == LengthAdjust.SPACING_AND_GLYPHS

    def test_deeply_nested_groups(self):
        depth = 1200
        doc = _parse("<svg>" + '<g><rect width="1"/>' * depth + "</g>" * depth + "</svg>")
        el = doc.elements[0]
        levels = 1
        while len(el.children) > 1:
            assert el.children[0].element_type == ElementType.RECT
            el = el.children[1]
            levels += 1
        assert levels == depth

    def test_nested_siblings_keep_order(self):
        doc = _parse('<svg><g id="a"><g id="b"><rect id="c"/></g><rect id="d"/></g><rect id="e"/></svg>')
        assert [el.id for el in doc.elements] == ["a", "e"]
        outer = doc.elements[0]
        assert [el.id for el in outer.children] == ["b", "d"]
        assert outer.children[0].children[0].id == "c"


# ---------------------------------------------------------------------------
# Dispatch and defaults
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_unknown_tags_skipped(self):
        doc = _parse('<svg><foo/><rect width="1" height="1"/><defs/></svg>')
        assert len(doc.elements) == 1

    def test_tag_match_is_case_sensitive(self):
        assert len(_parse("<svg><RECT/><Circle/></svg>").elements) == 0

    def test_missing_attributes_default(self):
        doc = _parse("<svg><rect/><text/></svg>")
        assert doc.width == 0
        assert doc.elements[0].get_payload(Rect) == Rect()
        text = doc.elements[1].get_payload(Text)
        assert text.contents is None
        assert text.text_length is None
        assert text.length_adjust is None
        assert doc.elements[0].style is None
        assert doc.elements[0].transforms is None

    def test_xmlns_default_without_namespace(self):
        assert _parse("<svg/>").xmlns == SVG_NAMESPACE

    def test_xmlns_from_attribute(self):
        root = ET.Element("svg", {"xmlns": "urn:example"})
        assert parse_document(root).xmlns == "urn:example"

    def test_xmlns_from_namespaced_tag(self):
        assert _parse('<svg xmlns="urn:other"><rect/></svg>').xmlns == "urn:other"

    def test_malformed_transform_dropped(self):
        doc = _parse('<svg><rect id="r" transform="translate(1,2) bogus(3)"/></svg>')
        assert doc.elements[0].transforms is None
        assert doc.elements[0].id == "r"

    def test_text_path(self):
        doc = _parse(
            '<svg><textPath href="#p" method="bogus" spacing="exact" startOffset="20%">on a path</textPath></svg>'
        )
        text_path = doc.elements[0].get_payload(TextPath)
        assert text_path.href == "#p"
        assert text_path.method == MethodType.ALIGN
        assert text_path.spacing == SpacingType.EXACT
        assert text_path.start_offset.unit == LengthUnit.PERCENTAGE
        assert text_path.length_adjust is None
        assert text_path.contents == "on a path"

    def test_link_empty_download(self):
        link = _parse('<svg><a download=""/></svg>').elements[0].get_payload(Link)
        assert link.download == ""
        assert len(link.elements) == 0

    def test_orient_bare_number(self):
        marker = _parse('<svg><marker orient="45"/></svg>').elements[0].get_payload(Marker)
        assert marker.orient.type == OrientType.DEGREES
        assert marker.orient.value == 45
