"""Model → ElementTree serializer.

Each element kind has a fixed tag and a fixed attribute order; the common
attributes (id, class, transform, style) follow the kind-specific ones.
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
    Line,
    Link,
    Marker,
    Path,
    Polygon,
    Polyline,
    Rect,
    Text,
    TextPath,
)
from svgmodel.models.svg_document import SvgDocument
from svgmodel.svg.scanner import format_number as num
from svgmodel.svg.style import format_root_style, format_style
from svgmodel.svg.transforms import format_transforms
from svgmodel.svg.values import format_length, format_orient, format_points

logger = logging.getLogger(__name__)

# Payload kind -> SVG tag name
TAGS = {
    "rect": "rect",
    "circle": "circle",
    "ellipse": "ellipse",
    "line": "line",
    "polygon": "polygon",
    "polyline": "polyline",
    "path": "path",
    "text": "text",
    "textpath": "textPath",
    "link": "a",
    "image": "image",
    "marker": "marker",
    "group": "g",
}


def _set_optional(node: ET.Element, name: str, value: str | None) -> None:
    if value is not None:
        node.set(name, value)


def _set_nonzero(node: ET.Element, name: str, value: float) -> None:
    if value != 0:
        node.set(name, num(value))


def _write_rect(node: ET.Element, rect: Rect) -> None:
    node.set("width", num(rect.width))
    node.set("height", num(rect.height))
    node.set("x", num(rect.point.x))
    node.set("y", num(rect.point.y))
    _set_nonzero(node, "rx", rect.rx)
    _set_nonzero(node, "ry", rect.ry)


def _write_circle(node: ET.Element, circle: Circle) -> None:
    node.set("r", num(circle.r))
    node.set("cx", num(circle.center.x))
    node.set("cy", num(circle.center.y))


def _write_ellipse(node: ET.Element, ellipse: Ellipse) -> None:
    node.set("rx", num(ellipse.rx))
    node.set("ry", num(ellipse.ry))
    node.set("cx", num(ellipse.center.x))
    node.set("cy", num(ellipse.center.y))


def _write_line(node: ET.Element, line: Line) -> None:
    node.set("x1", num(line.p1.x))
    node.set("y1", num(line.p1.y))
    node.set("x2", num(line.p2.x))
    node.set("y2", num(line.p2.y))


def _write_poly(node: ET.Element, poly: Polygon | Polyline) -> None:
    node.set("points", format_points(poly.points))


def _write_path(node: ET.Element, path: Path) -> None:
    node.set("d", path.d or "")


def _write_text(node: ET.Element, text: Text) -> None:
    node.set("x", num(text.point.x))
    node.set("y", num(text.point.y))
    _set_nonzero(node, "dx", text.dx)
    _set_nonzero(node, "dy", text.dy)
    _set_nonzero(node, "rotate", text.rotate)
    if text.text_length is not None:
        node.set("textLength", format_length(text.text_length))
        if text.length_adjust is not None:
            node.set("lengthAdjust", text.length_adjust.value)
    node.text = text.contents


def _write_textpath(node: ET.Element, text_path: TextPath) -> None:
    _set_optional(node, "href", text_path.href)
    if text_path.length_adjust is not None:
        node.set("lengthAdjust", text_path.length_adjust.value)
    if text_path.method is not None:
        node.set("method", text_path.method.value)
    if text_path.spacing is not None:
        node.set("spacing", text_path.spacing.value)
    if text_path.start_offset is not None:
        node.set("startOffset", format_length(text_path.start_offset))
    if text_path.text_length is not None:
        node.set("textLength", format_length(text_path.text_length))
    node.text = text_path.contents


def _write_link(node: ET.Element, link: Link) -> None:
    _set_optional(node, "href", link.href)
    _set_optional(node, "download", link.download)
    _set_optional(node, "hreflang", link.hreflang)
    _set_optional(node, "referrerpolicy", link.referrer_policy)
    _set_optional(node, "rel", link.rel)
    _set_optional(node, "target", link.target)
    _set_optional(node, "type", link.type)


def _write_image(node: ET.Element, image: Image) -> None:
    node.set("width", num(image.width))
    node.set("height", num(image.height))
    node.set("x", num(image.point.x))
    node.set("y", num(image.point.y))
    _set_optional(node, "href", image.href)


def _write_marker(node: ET.Element, marker: Marker) -> None:
    node.set("markerWidth", num(marker.marker_width))
    node.set("markerHeight", num(marker.marker_height))
    node.set("refX", num(marker.ref.x))
    node.set("refY", num(marker.ref.y))
    if marker.orient is not None:
        node.set("orient", format_orient(marker.orient))


def _write_group(node: ET.Element, group: Group) -> None:
    pass


_WRITERS = {
    "rect": _write_rect,
    "circle": _write_circle,
    "ellipse": _write_ellipse,
    "line": _write_line,
    "polygon": _write_poly,
    "polyline": _write_poly,
    "path": _write_path,
    "text": _write_text,
    "textpath": _write_textpath,
    "link": _write_link,
    "image": _write_image,
    "marker": _write_marker,
    "group": _write_group,
}


def _element_node(element: Element) -> ET.Element | None:
    """Markup node for ``element`` without its children. None if it has no payload."""
    payload = element.payload
    if payload is None:
        logger.debug("Skipping element without payload (id=%r)", element.id)
        return None

    node = ET.Element(TAGS[payload.kind])
    _WRITERS[payload.kind](node, payload)

    _set_optional(node, "id", element.id)
    _set_optional(node, "class", element.class_name)
    if element.transforms is not None:
        transform_text = format_transforms(element.transforms)
        if transform_text:
            node.set("transform", transform_text)
    if element.style is not None:
        style_text = format_style(element.style)
        if style_text:
            node.set("style", style_text)
    return node


def _emit(pending: list[tuple[ElementList, ET.Element | list[ET.Element]]]) -> None:
    # (children, node or list to append into) pairs still to serialize
    while pending:
        elements, sink = pending.pop()
        for element in elements:
            node = _element_node(element)
            if node is None:
                continue
            sink.append(node)
            children = element.children
            if children is not None:
                pending.append((children, node))


def element_to_xml(element: Element) -> ET.Element | None:
    """Serialize one element (and, for containers, its subtree). None if it has no payload."""
    node = _element_node(element)
    if node is not None and element.children is not None:
        _emit([(element.children, node)])
    return node


def elements_to_xml(elements: ElementList) -> list[ET.Element]:
    nodes: list[ET.Element] = []
    _emit([(elements, nodes)])
    return nodes


def document_to_xml(doc: SvgDocument) -> ET.Element:
    """Build the ``<svg>`` root node for ``doc``."""
    root = ET.Element("svg")
    root.set("width", str(doc.width))
    root.set("height", str(doc.height))
    root.set("xmlns", doc.xmlns)
    if doc.style is not None:
        style_text = format_root_style(doc.style)
        if style_text:
            root.set("style", style_text)
    root.extend(elements_to_xml(doc.elements))
    return root
