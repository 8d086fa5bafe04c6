"""Parsing of angle expressions into exact turn fractions.

Two grammars are accepted, tried in order:

* fraction, ``"<digits> / <digits>"`` (unsigned), e.g. ``"5/99"``;
* decimal, ``"[+-]<digits>[.<digits>]"``, e.g. ``"-0.25"``.

Surrounding whitespace is ignored in both, using the whitespace set of
ECMAScript regular expressions rather than :meth:`str.isspace`. The parser
never raises; text that matches neither grammar, or a fraction with a zero
denominator, yields :meth:`AngleSpec.invalid`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import math

from ..models import AngleSpec

_DIGITS = frozenset("0123456789")
# Same set as the \s class of ECMAScript regular expressions. It differs from
# str.isspace: U+FEFF is included, U+001C..U+001F and U+0085 are not.
_SPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (``gcd(0, 0) == 0``)."""
    a = abs(a)
    b = abs(b)
    while b:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class _Fraction:
    numerator: str
    denominator: str


@dataclass(frozen=True)
class _Decimal:
    number: str  # sign and digits, whitespace removed
    fraction_digits: Optional[str]


class _Scanner:
    """Cursor over a string with the few primitives both grammars need."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.at_end() else self.text[self.pos]

    def skip_space(self) -> None:
        while not self.at_end() and self.text[self.pos] in _SPACE:
            self.pos += 1

    def accept(self, chars: str) -> str:
        ch = self.peek()
        if ch and ch in chars:
            self.pos += 1
            return ch
        return ""

    def digits(self) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in _DIGITS:
            self.pos += 1
        return self.text[start : self.pos]


def _scan_fraction(text: str) -> Optional[_Fraction]:
    s = _Scanner(text)
    s.skip_space()
    num = s.digits()
    if not num:
        return None
    s.skip_space()
    if not s.accept("/"):
        return None
    s.skip_space()
    den = s.digits()
    if not den:
        return None
    s.skip_space()
    return _Fraction(num, den) if s.at_end() else None


def _scan_decimal(text: str) -> Optional[_Decimal]:
    s = _Scanner(text)
    s.skip_space()
    sign = s.accept("+-")
    whole = s.digits()
    if not whole:
        return None
    frac: Optional[str] = None
    if s.accept("."):
        frac = s.digits()
        if not frac:
            return None
    s.skip_space()
    if not s.at_end():
        return None
    number = sign + whole + ("." + frac if frac is not None else "")
    return _Decimal(number, frac)


def _from_fraction(match: _Fraction) -> AngleSpec:
    numerator = int(match.numerator)
    denominator = int(match.denominator)
    if denominator == 0:
        return AngleSpec.invalid()
    g = gcd(numerator, denominator)
    return AngleSpec(
        is_valid=True,
        value=numerator / denominator,
        denominator=denominator // g,
    )


def _from_decimal(match: _Decimal) -> AngleSpec:
    value = float(match.number)
    digits = (match.fraction_digits or "").rstrip("0")
    if not digits:
        return AngleSpec(is_valid=True, value=value, denominator=1)
    denom0 = 10 ** len(digits)
    g = gcd(int(digits), denom0)
    return AngleSpec(is_valid=True, value=value, denominator=denom0 // g)


def parse_angle(text: str) -> AngleSpec:
    """Parse ``text`` into an :class:`AngleSpec`; never raises for a ``str``."""
    try:
        fraction = _scan_fraction(text)
        if fraction is not None:
            spec = _from_fraction(fraction)
        else:
            decimal = _scan_decimal(text)
            spec = AngleSpec.invalid() if decimal is None else _from_decimal(decimal)
    except (OverflowError, ValueError):
        # Digit strings too long for int() or a float quotient.
        return AngleSpec.invalid()
    if spec.value is not None and not math.isfinite(spec.value):
        return AngleSpec.invalid()
    return spec


def format_angle(spec: AngleSpec) -> str:
    """Reading shown next to the angle field, e.g. ``"18.18°"`` or ``"Invalid"``."""
    degrees = spec.degrees
    if degrees is None:
        return "Invalid"
    return f"{degrees:.2f}°"


__all__ = ["gcd", "parse_angle", "format_angle"]
