"""Helper functions for formatting numbers and currencies.

Values are rendered with German grouping (``.`` for thousands, ``,`` for
decimals). Rounding happens here and nowhere else; the engine hands over
unrounded floats. Missing or non-finite figures render as ``n/a``.
"""

from __future__ import annotations
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal, None]

NOT_AVAILABLE = "n/a"

_UNITS = [
    (Decimal("1e12"), "T"),
    (Decimal("1e9"), "B"),
    (Decimal("1e6"), "M"),
    (Decimal("1e3"), "k"),
]

_SWAP_SEPARATORS = str.maketrans({",": ".", ".": ","})


def _to_decimal(value: Number) -> Optional[Decimal]:
    if value is None:
        return None
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    return d if d.is_finite() else None


def _group(d: Decimal, decimals: int) -> str:
    if d == 0:
        d = abs(d)
    sign = "-" if d < 0 else ""
    grouped = f"{abs(d):,.{decimals}f}"
    return f"{sign}{grouped.translate(_SWAP_SEPARATORS)}"


def format_currency(value: Number, symbol: str = "€") -> str:
    """Format an amount as ``80.000,00 €``.

    Cents are rounded half away from zero.
    """
    d = _to_decimal(value)
    if d is None:
        return NOT_AVAILABLE
    return f"{_group(d.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP), 2)} {symbol}"


def format_number(value: Number) -> str:
    """Round to a whole number (halves go up) and group thousands: ``26.667``."""
    d = _to_decimal(value)
    if d is None:
        return NOT_AVAILABLE
    return _group((d + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR), 0)


def format_percent(value: Number, decimals: int = 1) -> str:
    """Format a percentage value (``16.67`` -> ``16,7 %``)."""
    d = _to_decimal(value)
    if d is None:
        return NOT_AVAILABLE
    quantum = Decimal(1).scaleb(-decimals)
    return f"{_group(d.quantize(quantum, rounding=ROUND_HALF_UP), decimals)} %"


def humanize_currency(value: Number, symbol: str = "€", decimals: int = 0) -> str:
    """Abbreviate an amount with a unit suffix, e.g. ``€10M`` for a goal target.

    Args:
        value: The currency amount to format
        symbol: Currency symbol to use (default: €)
        decimals: Number of decimal places to show before the suffix
    """
    d = _to_decimal(value)
    if d is None:
        return NOT_AVAILABLE
    sign = "-" if d < 0 else ""
    d = abs(d)

    for threshold, suffix in _UNITS:
        if d >= threshold:
            return f"{sign}{symbol}{(d / threshold):.{decimals}f}{suffix}"

    return f"{sign}{symbol}{d:.{decimals}f}"
