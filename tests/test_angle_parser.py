"""Behaviour of the fraction/decimal angle parser."""

from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from orbitals.core.angle import format_angle, gcd, parse_angle
from orbitals.models import AngleSpec


@pytest.mark.parametrize(
    ("text", "value", "denominator"),
    [
        ("5/99", 5 / 99, 99),
        ("10/20", 0.5, 2),
        ("3.00", 3.0, 1),
        ("0.25", 0.25, 4),
        ("7", 7.0, 1),
        ("-0.5", -0.5, 2),
        ("+1.2", 1.2, 5),
        ("  3 / 9  ", 1 / 3, 3),
        ("0/7", 0.0, 1),
        ("0.250", 0.25, 4),
        ("\t0.125\n", 0.125, 8),
        ("12/4", 3.0, 1),
    ],
)
def test_parse_valid(text: str, value: float, denominator: int) -> None:
    spec = parse_angle(text)
    assert spec.is_valid
    assert spec.value == pytest.approx(value)
    assert spec.denominator == denominator


@pytest.mark.parametrize(
    "text",
    [
        "",
        "  ",
        "abc",
        "3/0",
        "-5/99",
        "+5/99",
        "5/-99",
        "1.",
        ".5",
        "1.2.3",
        "--1",
        "1e3",
        "5 / 99 x",
        "½",
        "٣",  # non-ASCII digit
        "0x10",
    ],
)
def test_parse_invalid(text: str) -> None:
    assert parse_angle(text) == AngleSpec.invalid()


def test_invalid_spec_has_no_value() -> None:
    spec = parse_angle("nope")
    assert spec.value is None
    assert spec.denominator is None


@pytest.mark.parametrize(
    ("text", "valid"),
    [
        ("\ufeff5/99", True),
        ("5/99\u3000", True),
        ("\u00a05 / 99", True),
        ("\u20095/99", True),
        ("\x1c5/99", False),
        ("\x1f5/99", False),
        ("5/99\x85", False),
        ("\u200b5/99", False),  # zero width space
    ],
)
def test_whitespace_matches_ecmascript_set(text: str, valid: bool) -> None:
    assert parse_angle(text).is_valid is valid


def test_huge_inputs_do_not_raise() -> None:
    assert not parse_angle("9" * 400 + "/1").is_valid
    assert not parse_angle("1" * 5000).is_valid


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [(12, 18, 6), (0, 7, 7), (7, 0, 7), (0, 0, 0), (-12, 18, 6), (17, 5, 1)],
)
def test_gcd(a: int, b: int, expected: int) -> None:
    assert gcd(a, b) == expected


def test_format_angle() -> None:
    assert format_angle(parse_angle("5/99")) == "18.18°"
    assert format_angle(parse_angle("1.25")) == "90.00°"
    assert format_angle(parse_angle("-0.25")) == "-90.00°"
    assert format_angle(parse_angle("x")) == "Invalid"


def test_huge_angle_reading() -> None:
    assert format_angle(parse_angle("1" + "0" * 307)) == "0.00°"
    assert format_angle(parse_angle("123456789.5")) == "180.00°"


@pytest.mark.parametrize("text", ["-0", "-0.0", "-1", "-3"])
def test_negative_zero_reading_has_no_sign(text: str) -> None:
    assert format_angle(parse_angle(text)) == "0.00°"


@given(st.text(max_size=40))
@settings(max_examples=200)
def test_parse_is_total_and_idempotent(text: str) -> None:
    first = parse_angle(text)
    assert first == parse_angle(text)
    if first.is_valid:
        assert isinstance(first.denominator, int)
        assert first.denominator >= 1
        assert math.isfinite(first.value)
    else:
        assert first.value is None and first.denominator is None


@given(
    numerator=st.integers(min_value=0, max_value=10**6),
    denominator=st.integers(min_value=1, max_value=10**6),
)
def test_fraction_denominator_is_reduced(numerator: int, denominator: int) -> None:
    spec = parse_angle(f"{numerator}/{denominator}")
    assert spec.is_valid
    assert spec.value == numerator / denominator
    assert spec.denominator == denominator // math.gcd(numerator, denominator)
    assert math.gcd(round(spec.value * spec.denominator), spec.denominator) == 1


@given(
    whole=st.integers(min_value=0, max_value=1000),
    digits=st.text(alphabet="0123456789", min_size=1, max_size=6),
    negative=st.booleans(),
)
def test_decimal_denominator_is_reduced(
    whole: int, digits: str, negative: bool
) -> None:
    text = f"{'-' if negative else ''}{whole}.{digits}"
    spec = parse_angle(text)
    assert spec.is_valid
    assert spec.value == float(text)

    stripped = digits.rstrip("0")
    if not stripped:
        assert spec.denominator == 1
        return
    scale = 10 ** len(stripped)
    assert scale % spec.denominator == 0
    numerator = int(stripped) * spec.denominator // scale
    assert math.gcd(numerator, spec.denominator) == 1
