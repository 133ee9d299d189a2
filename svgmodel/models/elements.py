"""Element payloads, the tagged Element wrapper and ElementList.

Each payload class carries a ``kind`` literal; ``Element.payload`` is a
discriminated union over all of them, so an element's type is whatever its
payload is. Container payloads (``Link``, ``Marker``, ``Group``) own a nested
``ElementList``.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, TypeVar, Union

from pydantic import Field

from svgmodel.models.base import ModelListMixin, SvgModel, owned
from svgmodel.models.primitives import Length, Orient, Point, PointsList
from svgmodel.models.style import Style
from svgmodel.models.transform import TransformList


class ElementType(str, enum.Enum):
    NONE = "none"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    PATH = "path"
    TEXT = "text"
    TEXTPATH = "textpath"
    LINK = "link"
    IMAGE = "image"
    MARKER = "marker"
    GROUP = "group"

    @property
    def is_container(self) -> bool:
        return self in (ElementType.LINK, ElementType.MARKER, ElementType.GROUP)


class LengthAdjust(str, enum.Enum):
    SPACING = "spacing"
    SPACING_AND_GLYPHS = "spacingAndGlyphs"


class MethodType(str, enum.Enum):
    ALIGN = "align"
    STRETCH = "stretch"


class SpacingType(str, enum.Enum):
    AUTO = "auto"
    EXACT = "exact"


# ── Shape payloads ───────────────────────────────────────────────────────


class Rect(SvgModel):
    kind: Literal["rect"] = "rect"
    width: float = 0.0
    height: float = 0.0
    point: Point = Field(default_factory=Point)
    rx: float = 0.0
    ry: float = 0.0

    def set_point(self, point: Point) -> None:
        self.point = point.model_copy()


class Circle(SvgModel):
    kind: Literal["circle"] = "circle"
    r: float = 0.0
    center: Point = Field(default_factory=Point)

    def set_center(self, center: Point) -> None:
        self.center = center.model_copy()


class Ellipse(SvgModel):
    kind: Literal["ellipse"] = "ellipse"
    rx: float = 0.0
    ry: float = 0.0
    center: Point = Field(default_factory=Point)

    def set_center(self, center: Point) -> None:
        self.center = center.model_copy()


class Line(SvgModel):
    kind: Literal["line"] = "line"
    p1: Point = Field(default_factory=Point)
    p2: Point = Field(default_factory=Point)

    def set_p1(self, p1: Point) -> None:
        self.p1 = p1.model_copy()

    def set_p2(self, p2: Point) -> None:
        self.p2 = p2.model_copy()


class Polygon(SvgModel):
    kind: Literal["polygon"] = "polygon"
    points: PointsList = Field(default_factory=PointsList)

    def set_points(self, points: PointsList) -> None:
        self.points = points.model_copy(deep=True)


class Polyline(SvgModel):
    kind: Literal["polyline"] = "polyline"
    points: PointsList = Field(default_factory=PointsList)

    def set_points(self, points: PointsList) -> None:
        self.points = points.model_copy(deep=True)


class Path(SvgModel):
    """Path data is kept verbatim; the ``d`` grammar is not interpreted."""

    kind: Literal["path"] = "path"
    d: str | None = None


class Image(SvgModel):
    kind: Literal["image"] = "image"
    width: float = 0.0
    height: float = 0.0
    href: str | None = None
    point: Point = Field(default_factory=Point)

    def set_point(self, point: Point) -> None:
        self.point = point.model_copy()


# ── Text payloads ────────────────────────────────────────────────────────


class Text(SvgModel):
    kind: Literal["text"] = "text"
    point: Point = Field(default_factory=Point)
    dx: float = 0.0
    dy: float = 0.0
    rotate: float = 0.0
    text_length: Length | None = None
    length_adjust: LengthAdjust | None = None
    contents: str | None = None

    def set_point(self, point: Point) -> None:
        self.point = point.model_copy()

    def set_text_length(self, text_length: Length | None) -> None:
        self.text_length = owned(text_length)


class TextPath(SvgModel):
    kind: Literal["textpath"] = "textpath"
    href: str | None = None
    length_adjust: LengthAdjust | None = None
    method: MethodType | None = None
    spacing: SpacingType | None = None
    start_offset: Length | None = None
    text_length: Length | None = None
    contents: str | None = None

    def set_start_offset(self, start_offset: Length | None) -> None:
        self.start_offset = owned(start_offset)

    def set_text_length(self, text_length: Length | None) -> None:
        self.text_length = owned(text_length)


# ── Container payloads ───────────────────────────────────────────────────


class Link(SvgModel):
    """An ``<a>`` hyperlink; its children define the clickable visuals."""

    kind: Literal["link"] = "link"
    href: str | None = None
    download: str | None = None  # None = attribute absent, "" = present and empty
    hreflang: str | None = None
    referrer_policy: str | None = None
    rel: str | None = None
    target: str | None = None
    type: str | None = None
    elements: ElementList = Field(default_factory=lambda: ElementList())

    def set_elements(self, elements: ElementList) -> None:
        self.elements = elements.model_copy(deep=True)


class Marker(SvgModel):
    kind: Literal["marker"] = "marker"
    marker_width: float = 0.0
    marker_height: float = 0.0
    ref: Point = Field(default_factory=Point)
    orient: Orient | None = None
    elements: ElementList = Field(default_factory=lambda: ElementList())

    def set_ref(self, ref: Point) -> None:
        self.ref = ref.model_copy()

    def set_orient(self, orient: Orient | None) -> None:
        self.orient = owned(orient)

    def set_elements(self, elements: ElementList) -> None:
        self.elements = elements.model_copy(deep=True)


class Group(SvgModel):
    kind: Literal["group"] = "group"
    elements: ElementList = Field(default_factory=lambda: ElementList())

    def set_elements(self, elements: ElementList) -> None:
        self.elements = elements.model_copy(deep=True)

    def add(self, element: Element) -> None:
        self.elements.add(element)

    def remove(self, index: int) -> None:
        self.elements.remove(index)


ElementPayload = Annotated[
    Union[Rect, Circle, Ellipse, Line, Polygon, Polyline, Path, Text, TextPath, Link, Image, Marker, Group],
    Field(discriminator="kind"),
]

P = TypeVar("P", Rect, Circle, Ellipse, Line, Polygon, Polyline, Path, Text, TextPath, Link, Image, Marker, Group)


class Element(SvgModel):
    payload: ElementPayload | None = None
    id: str | None = None
    class_name: str | None = None
    style: Style | None = None
    transforms: TransformList | None = None

    @property
    def element_type(self) -> ElementType:
        if self.payload is None:
            return ElementType.NONE
        return ElementType(self.payload.kind)

    @property
    def children(self) -> ElementList | None:
        """Nested elements of a container payload, None for every other kind."""
        if self.element_type.is_container:
            return self.payload.elements
        return None

    def get_payload(self, kind: type[P]) -> P | None:
        """Return the payload if it is a ``kind``, else None."""
        if isinstance(self.payload, kind):
            return self.payload
        return None

    def set_payload(self, payload: ElementPayload | None) -> None:
        """Store a copy of ``payload``, dropping the previous one (and its type).

        Anything other than one of the payload classes raises ``ValidationError``.
        """
        self.payload = owned(payload)

    def set_style(self, style: Style | None) -> None:
        self.style = owned(style)

    def set_transforms(self, transforms: TransformList | None) -> None:
        self.transforms = owned(transforms)


class ElementList(ModelListMixin, SvgModel):
    items: list[Element] = Field(default_factory=list)
    cursor: int = 0


Link.model_rebuild()
Marker.model_rebuild()
Group.model_rebuild()
Element.model_rebuild()
ElementList.model_rebuild()
