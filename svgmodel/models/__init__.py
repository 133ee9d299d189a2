"""SVG document data model."""

from svgmodel.models.elements import (
    Circle,
    Element,
    ElementList,
    ElementType,
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
from svgmodel.models.primitives import Length, LengthUnit, Orient, OrientType, Point, PointsList
from svgmodel.models.style import (
    FillRule,
    FontStretch,
    FontStyle,
    FontWeight,
    StrokeLinecap,
    StrokeLinejoin,
    Style,
)
from svgmodel.models.svg_document import SVG_NAMESPACE, SvgDocument
from svgmodel.models.transform import (
    Matrix,
    Rotate,
    Scale,
    SkewX,
    SkewY,
    Transform,
    TransformList,
    TransformType,
    Translate,
)

__all__ = [
    "Circle",
    "Element",
    "ElementList",
    "ElementType",
    "Ellipse",
    "FillRule",
    "FontStretch",
    "FontStyle",
    "FontWeight",
    "Group",
    "Image",
    "Length",
    "LengthAdjust",
    "LengthUnit",
    "Line",
    "Link",
    "Marker",
    "Matrix",
    "MethodType",
    "Orient",
    "OrientType",
    "Path",
    "Point",
    "PointsList",
    "Polygon",
    "Polyline",
    "Rect",
    "Rotate",
    "SVG_NAMESPACE",
    "Scale",
    "SkewX",
    "SkewY",
    "SpacingType",
    "StrokeLinecap",
    "StrokeLinejoin",
    "Style",
    "SvgDocument",
    "Text",
    "TextPath",
    "Transform",
    "TransformList",
    "TransformType",
    "Translate",
]
