"""SVG document model."""

from __future__ import annotations

from pydantic import Field

from svgmodel.models.base import SvgModel, owned
from svgmodel.models.elements import Element, ElementList
from svgmodel.models.style import Style

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SvgDocument(SvgModel):
    """Represents an SVG document: root attributes plus the top-level elements."""

    width: int = 0
    height: int = 0
    xmlns: str = SVG_NAMESPACE
    style: Style | None = None
    elements: ElementList = Field(default_factory=ElementList)

    def set_style(self, style: Style | None) -> None:
        self.style = owned(style)

    def set_elements(self, elements: ElementList) -> None:
        self.elements = elements.model_copy(deep=True)

    def add_element(self, element: Element) -> None:
        self.elements.add(element)
