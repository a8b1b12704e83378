from __future__ import annotations

import math

import pytest

from laptop_stats.services.currency import CurrencyFormatter, format_currency, group_digits


def test_format_currency_basic():
    assert format_currency(50000) == "₹50,000"


def test_format_currency_indian_grouping():
    assert format_currency(1234567) == "₹12,34,567"
    assert format_currency(100000) == "₹1,00,000"
    assert format_currency(999) == "₹999"


def test_format_currency_western_grouping():
    assert format_currency(1234567, symbol="€", grouping="western") == "€1,234,567"


def test_format_currency_no_fraction_digits():
    assert format_currency(71378.4) == "₹71,378"
    assert format_currency(2.5) == "₹3"
    assert format_currency(47003.5) == "₹47,004"


def test_format_currency_negative():
    assert format_currency(-500) == "-₹500"
    assert format_currency(-2.5) == "-₹3"


@pytest.mark.parametrize("value", [math.nan, math.inf, None, "abc"])
def test_format_currency_non_numeric_is_zero_sentinel(value):
    assert format_currency(value) == "₹0"


def test_group_digits_rejects_unknown_grouping():
    with pytest.raises(ValueError):
        group_digits("1234", "chinese")


def test_currency_formatter_binds_settings():
    fmt = CurrencyFormatter(symbol="$", grouping="western")
    assert fmt(1500000) == "$1,500,000"
    assert fmt(float("nan")) == fmt.zero == "$0"
