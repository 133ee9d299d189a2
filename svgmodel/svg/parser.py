"""ElementTree → model parser.

Namespace prefixes are stripped before tags and attributes are matched, so
documents read with or without a default namespace parse the same way.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svgmodel.models.elements import (
    Circle,
    Element,
    ElementList,
    Ellipse,
    Group,
    Image,
    LengthAdjust,
    Line,
    Link,
    Marker,
    MethodType,
    Path,
    Polygon,
    Polyline,
    Rect,
    SpacingType,
    Text,
    TextPath,
)
from svgmodel.models.primitives import Point
from svgmodel.models.svg_document import SVG_NAMESPACE, SvgDocument
from svgmodel.svg.scanner import to_float, to_int
from svgmodel.svg.style import parse_style
from svgmodel.svg.transforms import parse_transforms
from svgmodel.svg.values import parse_keyword, parse_length, parse_orient, parse_points

logger = logging.getLogger(__name__)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _namespace(tag: str) -> str | None:
    if tag.startswith("{") and "}" in tag:
        return tag[1:tag.index("}")]
    return None


def _attrs(node: ET.Element) -> dict[str, str]:
    return {_strip_ns(name): value for name, value in node.attrib.items()}


def _point(attrs: dict[str, str], x: str, y: str) -> Point:
    return Point(x=to_float(attrs.get(x)), y=to_float(attrs.get(y)))


def _read_rect(node: ET.Element, attrs: dict[str, str]) -> Rect:
    return Rect(
        width=to_float(attrs.get("width")),
        height=to_float(attrs.get("height")),
        point=_point(attrs, "x", "y"),
        rx=to_float(attrs.get("rx")),
        ry=to_float(attrs.get("ry")),
    )


def _read_circle(node: ET.Element, attrs: dict[str, str]) -> Circle:
    return Circle(r=to_float(attrs.get("r")), center=_point(attrs, "cx", "cy"))


def _read_ellipse(node: ET.Element, attrs: dict[str, str]) -> Ellipse:
    return Ellipse(
        rx=to_float(attrs.get("rx")),
        ry=to_float(attrs.get("ry")),
        center=_point(attrs, "cx", "cy"),
    )


def _read_line(node: ET.Element, attrs: dict[str, str]) -> Line:
    return Line(p1=_point(attrs, "x1", "y1"), p2=_point(attrs, "x2", "y2"))


def _read_polygon(node: ET.Element, attrs: dict[str, str]) -> Polygon:
    return Polygon(points=parse_points(attrs.get("points")))


def _read_polyline(node: ET.Element, attrs: dict[str, str]) -> Polyline:
    return Polyline(points=parse_points(attrs.get("points")))


def _read_path(node: ET.Element, attrs: dict[str, str]) -> Path:
    return Path(d=attrs.get("d"))


def _read_text(node: ET.Element, attrs: dict[str, str]) -> Text:
    text = Text(
        point=_point(attrs, "x", "y"),
        dx=to_float(attrs.get("dx")),
        dy=to_float(attrs.get("dy")),
        rotate=to_float(attrs.get("rotate")),
        text_length=parse_length(attrs.get("textLength")),
        contents=node.text,
    )
    if "lengthAdjust" in attrs:
        text.length_adjust = parse_keyword(LengthAdjust, attrs["lengthAdjust"], LengthAdjust.SPACING)
    return text


def _read_textpath(node: ET.Element, attrs: dict[str, str]) -> TextPath:
    text_path = TextPath(
        href=attrs.get("href"),
        start_offset=parse_length(attrs.get("startOffset")),
        text_length=parse_length(attrs.get("textLength")),
        contents=node.text,
    )
    if "lengthAdjust" in attrs:
        text_path.length_adjust = parse_keyword(LengthAdjust, attrs["lengthAdjust"], LengthAdjust.SPACING)
    if "method" in attrs:
        text_path.method = parse_keyword(MethodType, attrs["method"], MethodType.ALIGN)
    if "spacing" in attrs:
        text_path.spacing = parse_keyword(SpacingType, attrs["spacing"], SpacingType.AUTO)
    return text_path


def _read_link(node: ET.Element, attrs: dict[str, str]) -> Link:
    return Link(
        href=attrs.get("href"),
        download=attrs.get("download"),
        hreflang=attrs.get("hreflang"),
        referrer_policy=attrs.get("referrerpolicy"),
        rel=attrs.get("rel"),
        target=attrs.get("target"),
        type=attrs.get("type"),
    )


def _read_image(node: ET.Element, attrs: dict[str, str]) -> Image:
    return Image(
        width=to_float(attrs.get("width")),
        height=to_float(attrs.get("height")),
        href=attrs.get("href"),
        point=_point(attrs, "x", "y"),
    )


def _read_marker(node: ET.Element, attrs: dict[str, str]) -> Marker:
    return Marker(
        marker_width=to_float(attrs.get("markerWidth")),
        marker_height=to_float(attrs.get("markerHeight")),
        ref=_point(attrs, "refX", "refY"),
        orient=parse_orient(attrs.get("orient")),
    )


def _read_group(node: ET.Element, attrs: dict[str, str]) -> Group:
    return Group()


# SVG tag name (case-sensitive) -> payload reader
READERS = {
    "rect": _read_rect,
    "circle": _read_circle,
    "ellipse": _read_ellipse,
    "line": _read_line,
    "polygon": _read_polygon,
    "polyline": _read_polyline,
    "path": _read_path,
    "text": _read_text,
    "textPath": _read_textpath,
    "a": _read_link,
    "image": _read_image,
    "marker": _read_marker,
    "g": _read_group,
}


def _parse_node(node: ET.Element) -> Element | None:
    tag = _strip_ns(node.tag)
    reader = READERS.get(tag)
    if reader is None:
        logger.debug("Skipping unsupported element <%s>", tag)
        return None

    attrs = _attrs(node)
    return Element(
        payload=reader(node, attrs),
        id=attrs.get("id"),
        class_name=attrs.get("class"),
        style=parse_style(attrs.get("style")),
        transforms=parse_transforms(attrs.get("transform")),
    )


def _collect(pending: list[tuple[ET.Element, ElementList]]) -> None:
    # (markup parent, list receiving its children) pairs still to parse
    while pending:
        parent, elements = pending.pop()
        for child in parent:
            if not isinstance(child.tag, str):
                # comments and processing instructions
                continue
            element = _parse_node(child)
            if element is None:
                continue
            elements.items.append(element)
            children = element.children
            if children is not None:
                pending.append((child, children))


def parse_element(node: ET.Element) -> Element | None:
    """Build an Element from one markup node; None for tags outside the supported set."""
    element = _parse_node(node)
    if element is not None and element.children is not None:
        _collect([(node, element.children)])
    return element


def parse_elements(parent: ET.Element) -> ElementList:
    """Parse the children of ``parent``, dropping unsupported ones."""
    elements = ElementList()
    _collect([(parent, elements)])
    return elements


def parse_document(root: ET.Element) -> SvgDocument | None:
    """Build a document from an ``<svg>`` root node. None if the root is anything else."""
    tag = _strip_ns(root.tag) if isinstance(root.tag, str) else ""
    if tag != "svg":
        logger.warning("Root element is <%s>, expected <svg>", tag)
        return None

    attrs = _attrs(root)
    return SvgDocument(
        width=to_int(attrs.get("width")),
        height=to_int(attrs.get("height")),
        xmlns=attrs.get("xmlns") or _namespace(root.tag) or SVG_NAMESPACE,
        style=parse_style(attrs.get("style")),
        elements=parse_elements(root),
    )
