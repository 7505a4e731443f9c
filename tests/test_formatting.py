"""Tests for the currency and number formatting helpers."""
from __future__ import annotations

from decimal import Decimal

import pytest

from compcalc.core.formatting import (
    format_currency,
    format_number,
    format_percent,
    humanize_currency,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (80_000, "80.000,00 €"),
        (10_000.0, "10.000,00 €"),
        (0, "0,00 €"),
        (-0.001, "0,00 €"),
        (1234.565, "1.234,57 €"),
        (-8_833.335, "-8.833,34 €"),
        (Decimal("49250"), "49.250,00 €"),
    ],
)
def test_format_currency(value, expected: str) -> None:
    assert format_currency(value) == expected


def test_format_currency_symbol() -> None:
    assert format_currency(25, symbol="$") == "25,00 $"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (8_000_000 / 300, "26.667"),
        (162.4365, "162"),
        (2.5, "3"),
        (-2.5, "-2"),
        (-0.4, "0"),
        (1_000_000, "1.000.000"),
    ],
)
def test_format_number_rounds_half_up(value, expected: str) -> None:
    assert format_number(value) == expected


def test_format_percent() -> None:
    assert format_percent(26_000 / 106_000 * 100) == "24,5 %"
    assert format_percent(20.0, 0) == "20 %"


def test_humanize_currency() -> None:
    assert humanize_currency(10_000_000) == "€10M"
    assert humanize_currency(2_500_000, decimals=1) == "€2.5M"
    assert humanize_currency(-3_000, symbol="$") == "-$3k"
    assert humanize_currency(950) == "€950"


@pytest.mark.parametrize("value", [None, float("inf"), float("-inf"), float("nan")])
def test_missing_or_overflowed_values_render_as_not_available(value) -> None:
    assert format_currency(value) == "n/a"
    assert format_number(value) == "n/a"
    assert format_percent(value) == "n/a"
    assert humanize_currency(value) == "n/a"
