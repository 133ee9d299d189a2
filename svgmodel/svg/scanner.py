"""Cursor-owning scanner and the numeric token shared by the attribute grammars.

Numbers are a deliberate subset of SVG's: optional sign, digits, optional
fraction. Exponent notation is not recognized.
"""

from __future__ import annotations

from svgmodel.config import settings

WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"


def parse_number(text: str, start: int = 0) -> tuple[float, int]:
    """Parse one numeric token at ``text[start:]``.

    Leading whitespace is skipped. Returns ``(value, consumed)`` where
    ``consumed`` counts every character read, whitespace included. When no
    digits are found the result is ``(0.0, 0)``.
    """
    pos = start
    end = len(text)
    while pos < end and text[pos] in WHITESPACE:
        pos += 1
    begin = pos
    if pos < end and text[pos] in "+-":
        pos += 1
    int_start = pos
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    has_digits = pos > int_start
    if pos < end and text[pos] == ".":
        frac_start = pos + 1
        frac_end = frac_start
        while frac_end < end and text[frac_end] in _DIGITS:
            frac_end += 1
        if frac_end > frac_start or has_digits:
            has_digits = True
            pos = frac_end
    if not has_digits:
        return 0.0, 0
    return float(text[begin:pos]), pos - start


def to_float(text: str | None) -> float:
    """Leading-number coercion: ``"12.5px"`` → 12.5, garbage or None → 0.0."""
    if not text:
        return 0.0
    return parse_number(text)[0]


def to_int(text: str | None) -> int:
    """Leading-integer coercion: ``"640px"`` → 640, ``"12.9"`` → 12."""
    return int(to_float(text))


def format_number(value: float) -> str:
    """Compact general format: no fixed decimals, no trailing zeros, no exponent."""
    precision = settings.svgmodel_number_precision
    text = f"{value:.{precision}g}"
    if "e" in text:
        # Our own parser cannot read exponents back
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class Scanner:
    """A single attribute string plus the read position within it."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def skip_separator(self) -> None:
        """Skip whitespace, at most one comma, then whitespace again."""
        self.skip_whitespace()
        if self.peek() == ",":
            self.pos += 1
            self.skip_whitespace()

    def expect(self, char: str) -> bool:
        """Consume ``char`` after optional whitespace; False (nothing consumed) if absent."""
        self.skip_whitespace()
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def read_number(self) -> float | None:
        value, consumed = parse_number(self.text, self.pos)
        if consumed == 0:
            return None
        self.pos += consumed
        return value

    def read_keyword(self) -> str:
        """Read a run of ASCII letters (a function or unit name)."""
        self.skip_whitespace()
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos].isascii() and self.text[self.pos].isalpha():
            self.pos += 1
        return self.text[start:self.pos]
