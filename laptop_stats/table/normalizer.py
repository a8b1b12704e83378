from __future__ import annotations

import math
import re

"""Numeric value normalization for decorated text cells.

Cells such as ``"₹50,000"``, ``"1.37kg"`` or ``"8GB"`` are reduced to the
number they carry. The normalizer knows nothing about units: it drops every
character that is not a digit, dot or minus sign and reads the leading
numeric prefix of what remains. Failure is absorbed into 0.0.
"""

__all__ = [
    "clean_number",
    "parse_leading_float",
]

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_float(value: str | None) -> float:
    """Parse the numeric prefix of ``value`` (``"15.6\\""`` -> 15.6).

    Returns 0.0 when there is no numeric prefix or the number overflows.
    """
    if not value:
        return 0.0
    m = _LEADING_FLOAT.match(value)
    if m is None:
        return 0.0
    number = float(m.group(1))
    if not math.isfinite(number):
        return 0.0
    # -0.0 is not a useful display value
    return number if number != 0 else 0.0


def clean_number(value: str | None) -> float:
    """Strip non-numeric decoration from ``value`` and parse it.

    >>> clean_number("1.37kg")
    1.37
    >>> clean_number("₹50,000")
    50000.0
    >>> clean_number("GB")
    0.0
    """
    if not value:
        return 0.0
    return parse_leading_float(_NON_NUMERIC.sub("", value))
