from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

"""Currency display formatting.

Amounts are rendered with zero fractional digits (rounded half away from
zero) and grouped either the Indian way (``12,34,567``) or the Western way
(``1,234,567``). Values that cannot be displayed as a number (NaN, infinity,
non-numeric input) render as the zero sentinel, e.g. ``"₹0"``.
"""

__all__ = [
    "DEFAULT_SYMBOL",
    "GROUPINGS",
    "CurrencyFormatter",
    "format_currency",
    "group_digits",
]

DEFAULT_SYMBOL = "₹"
GROUPINGS = ("indian", "western")


def group_digits(digits: str, grouping: str = "indian") -> str:
    """Insert thousands separators into a string of digits."""
    if grouping not in GROUPINGS:
        raise ValueError(f"unknown grouping: {grouping!r}")
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    size = 2 if grouping == "indian" else 3
    groups = []
    while head:
        groups.insert(0, head[-size:])
        head = head[:-size]
    return ",".join(groups + [tail])


def format_currency(value: Any, symbol: str = DEFAULT_SYMBOL, grouping: str = "indian") -> str:
    """Format ``value`` as a currency string without fractional digits.

    >>> format_currency(50000)
    '₹50,000'
    >>> format_currency(float("nan"))
    '₹0'
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number):
        return f"{symbol}0"

    rounded = Decimal(repr(number)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{group_digits(str(abs(int(rounded))), grouping)}"


@dataclass(frozen=True)
class CurrencyFormatter:
    """Formatter bound to configured symbol and grouping."""
    symbol: str = DEFAULT_SYMBOL
    grouping: str = "indian"

    def __call__(self, value: Any) -> str:
        return format_currency(value, symbol=self.symbol, grouping=self.grouping)

    @property
    def zero(self) -> str:
        return f"{self.symbol}0"
