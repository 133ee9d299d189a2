"""Text and file entry points around the ElementTree codec."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET

from svgmodel.config import settings
from svgmodel.models.svg_document import SvgDocument
from svgmodel.svg.parser import parse_document
from svgmodel.svg.serializer import document_to_xml

logger = logging.getLogger(__name__)


def parse_svg(svg_text: str | bytes) -> SvgDocument | None:
    """Parse SVG markup. None when the text is not well-formed XML or the root is not ``<svg>``.

    Bytes are decoded by the XML parser, honouring the encoding declaration.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        logger.warning("Failed to parse SVG markup: %s", e)
        return None
    return parse_document(root)


def _build_tree(doc: SvgDocument) -> ET.ElementTree:
    tree = ET.ElementTree(document_to_xml(doc))
    if settings.svgmodel_indent:
        ET.indent(tree, space=settings.svgmodel_indent)
    return tree


def svg_to_string(doc: SvgDocument) -> str:
    """Serialize ``doc`` to SVG markup (no XML declaration)."""
    return ET.tostring(_build_tree(doc).getroot(), encoding="unicode")


def read_svg(path: str | os.PathLike) -> SvgDocument | None:
    """Read and parse an SVG file in whatever encoding it declares. File-system errors propagate."""
    with open(path, "rb") as f:
        raw = f.read()
    doc = parse_svg(raw)
    if doc is None:
        logger.warning("No SVG document in %s", path)
    return doc


def write_svg(doc: SvgDocument, path: str | os.PathLike) -> None:
    """Write ``doc`` to ``path`` as UTF-8 with an XML declaration."""
    _build_tree(doc).write(path, encoding="utf-8", xml_declaration=True)
