"""Transform functions and transform lists.

A ``Transform`` holds at most one active function (matrix, translate, scale,
rotate, skewX or skewY). The function classes form a pydantic discriminated
union on ``kind``, so the active tag is always the class of the stored
function. A ``TransformList`` applies its entries left to right, which is
SVG's post-multiplication order.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, TypeVar, Union

from pydantic import Field

from svgmodel.models.base import ModelListMixin, SvgModel, owned


class TransformType(str, enum.Enum):
    NONE = "none"
    MATRIX = "matrix"
    TRANSLATE = "translate"
    SCALE = "scale"
    ROTATE = "rotate"
    SKEW_X = "skewX"
    SKEW_Y = "skewY"


class Matrix(SvgModel):
    kind: Literal["matrix"] = "matrix"
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0
    f: float = 0.0


class Translate(SvgModel):
    kind: Literal["translate"] = "translate"
    x: float = 0.0
    y: float = 0.0


class Scale(SvgModel):
    kind: Literal["scale"] = "scale"
    x: float = 0.0
    y: float = 0.0


class Rotate(SvgModel):
    kind: Literal["rotate"] = "rotate"
    a: float = 0.0  # degrees
    x: float = 0.0
    y: float = 0.0


class SkewX(SvgModel):
    kind: Literal["skewX"] = "skewX"
    a: float = 0.0


class SkewY(SvgModel):
    kind: Literal["skewY"] = "skewY"
    a: float = 0.0


TransformFunction = Annotated[
    Union[Matrix, Translate, Scale, Rotate, SkewX, SkewY],
    Field(discriminator="kind"),
]

F = TypeVar("F", Matrix, Translate, Scale, Rotate, SkewX, SkewY)


class Transform(SvgModel):
    function: TransformFunction | None = None

    @property
    def transform_type(self) -> TransformType:
        if self.function is None:
            return TransformType.NONE
        return TransformType(self.function.kind)

    def get_function(self, kind: type[F]) -> F | None:
        """Return the stored function if it is a ``kind``, else None."""
        if isinstance(self.function, kind):
            return self.function
        return None

    def set_function(self, function: Matrix | Translate | Scale | Rotate | SkewX | SkewY | None) -> None:
        """Replace the active function (and with it the type) by a copy of ``function``."""
        self.function = owned(function)


class TransformList(ModelListMixin, SvgModel):
    items: list[Transform] = Field(default_factory=list)
    cursor: int = 0

    @classmethod
    def of(cls, *functions: Matrix | Translate | Scale | Rotate | SkewX | SkewY) -> TransformList:
        """Build a list from bare transform functions, in application order."""
        return cls(items=[Transform(function=owned(fn)) for fn in functions])
