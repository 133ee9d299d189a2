"""In-memory SVG document model with an ElementTree codec."""

from svgmodel.models import SvgDocument
from svgmodel.svg import parse_svg, read_svg, svg_to_string, write_svg

__version__ = "0.1.0"

__all__ = ["SvgDocument", "parse_svg", "read_svg", "svg_to_string", "write_svg"]
