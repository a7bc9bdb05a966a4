# tests/utilities/test_converters_scalar.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from txf_converter.utilities.converters_scalar import (
    _to_int,
    _to_str,
    format_txf_amount,
    format_txf_date,
    to_date,
    to_decimal,
)


# ---------- to_date ----------
@pytest.mark.parametrize(
    "raw,expect_iso",
    [
        ("1/5/2026", "2026-01-05"),
        ("01/15/2026", "2026-01-15"),
        (" 12/31/2024 ", "2024-12-31"),
        ("2024-02-29", "2024-02-29"),
    ],
)
def test_to_date_formats(raw, expect_iso):
    assert to_date(raw).isoformat() == expect_iso


@pytest.mark.parametrize(
    "raw", ["02/30/2026", "2/29/2025", "00/10/2026", "2026-13-01", "12/31'24", "2024/12/31", ""]
)
def test_to_date_rejects(raw):
    with pytest.raises(ValueError):
        to_date(raw)


def test_to_date_passes_dates_through():
    d = date(2026, 1, 1)
    assert to_date(d) is d


def test_to_date_rejects_non_strings():
    with pytest.raises(ValueError):
        to_date(20260101)  # type: ignore[call-overload]


# ---------- to_decimal ----------
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("5.4567", Decimal("5.4567")),
        ("$1,234.56", Decimal("1234.56")),
        ("-$100.00", Decimal("-100.00")),
        (" -7 ", Decimal("-7")),
        (3, Decimal("3")),
        (0.1, Decimal("0.1")),
        (Decimal("2.50"), Decimal("2.50")),
    ],
)
def test_to_decimal(raw, expected):
    assert to_decimal(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "NaN", "-Infinity", True, None, [1]])
def test_to_decimal_rejects(raw):
    with pytest.raises(ValueError):
        to_decimal(raw)


# ---------- formatting ----------
def test_format_txf_date_zero_pads():
    assert format_txf_date(date(2026, 1, 5)) == "01/05/2026"


@pytest.mark.parametrize(
    "amount,expected",
    [("-100", "-100.00"), ("-0.025", "-0.02"), ("-0.015", "-0.02"), ("12.345", "12.34")],
)
def test_format_txf_amount(amount, expected):
    assert format_txf_amount(Decimal(amount)) == expected


# ---------- int / str ----------
def test_to_int():
    assert _to_int(" 40 ") == 40
    assert _to_int(Decimal("64")) == 64
    assert _to_int(8.0) == 8
    with pytest.raises(ValueError):
        _to_int("4.5")
    with pytest.raises(ValueError):
        _to_int(True)


def test_to_str():
    assert _to_str(None) == ""
    assert _to_str(123) == "123"
