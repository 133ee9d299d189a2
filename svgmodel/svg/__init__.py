"""SVG codec: ElementTree serializer/parser and the attribute grammars."""

from svgmodel.svg.io import parse_svg, read_svg, svg_to_string, write_svg
from svgmodel.svg.parser import parse_document, parse_element, parse_elements
from svgmodel.svg.serializer import document_to_xml, element_to_xml, elements_to_xml

__all__ = [
    "document_to_xml",
    "element_to_xml",
    "elements_to_xml",
    "parse_document",
    "parse_element",
    "parse_elements",
    "parse_svg",
    "read_svg",
    "svg_to_string",
    "write_svg",
]
