"""Transform-list attribute grammar and printer.

Grammar (whitespace allowed between tokens)::

    list     := function (sep? function)*
    function := name "(" number (sep number)* ")"
    sep      := whitespace | whitespace? "," whitespace?

Any syntax error discards the whole list: ``parse_transforms`` returns None
rather than the functions read before the error.
"""

from __future__ import annotations

import logging

from svgmodel.models.transform import (
    Matrix,
    Rotate,
    Scale,
    SkewX,
    SkewY,
    Transform,
    TransformList,
    Translate,
)
from svgmodel.svg.scanner import Scanner, format_number

logger = logging.getLogger(__name__)

# Accepted argument counts per function name
_ARITY: dict[str, tuple[int, ...]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}


def parse_transforms(text: str | None) -> TransformList | None:
    """Parse a ``transform`` attribute value. None if empty or malformed."""
    if not text:
        return None
    scanner = Scanner(text)
    transforms = TransformList()
    scanner.skip_whitespace()
    while not scanner.at_end:
        transform = _parse_transform(scanner)
        if transform is None:
            logger.debug("Malformed transform list %r (offset %d), discarding", text, scanner.pos)
            return None
        transforms.items.append(transform)
        scanner.skip_separator()
    if not transforms.items:
        return None
    return transforms


def _parse_transform(scanner: Scanner) -> Transform | None:
    name = scanner.read_keyword()
    arity = _ARITY.get(name)
    if arity is None:
        return None
    if not scanner.expect("("):
        return None

    args: list[float] = []
    while True:
        scanner.skip_whitespace()
        if scanner.peek() == ")":
            scanner.pos += 1
            break
        if args:
            scanner.skip_separator()
        value = scanner.read_number()
        if value is None or len(args) == max(arity):
            return None
        args.append(value)

    if len(args) not in arity:
        return None
    return Transform(function=_build(name, args))


def _build(name: str, args: list[float]) -> Matrix | Translate | Scale | Rotate | SkewX | SkewY:
    if name == "matrix":
        a, b, c, d, e, f = args
        return Matrix(a=a, b=b, c=c, d=d, e=e, f=f)
    if name == "translate":
        return Translate(x=args[0], y=args[1] if len(args) == 2 else 0.0)
    if name == "scale":
        # scale(s) scales both axes
        return Scale(x=args[0], y=args[1] if len(args) == 2 else args[0])
    if name == "rotate":
        if len(args) == 3:
            return Rotate(a=args[0], x=args[1], y=args[2])
        return Rotate(a=args[0])
    if name == "skewX":
        return SkewX(a=args[0])
    return SkewY(a=args[0])


def format_transform(transform: Transform) -> str:
    """Render one transform as an SVG function call ("" if it holds no function)."""
    fn = transform.function
    if fn is None:
        return ""
    if isinstance(fn, Matrix):
        values = [fn.a, fn.b, fn.c, fn.d, fn.e, fn.f]
    elif isinstance(fn, (Translate, Scale)):
        values = [fn.x, fn.y]
    elif isinstance(fn, Rotate):
        values = [fn.a, fn.x, fn.y]
    else:
        values = [fn.a]
    return f"{fn.kind}({','.join(format_number(v) for v in values)})"


def format_transforms(transforms: TransformList) -> str:
    """Render a transform list, functions separated by single spaces."""
    parts = [format_transform(t) for t in transforms]
    return " ".join(p for p in parts if p)
