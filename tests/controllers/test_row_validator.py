# tests/controllers/test_row_validator.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from txf_converter.controllers.row_validator import validate_row, validate_rows
from txf_converter.data_model import RawRow


def _row(**overrides) -> RawRow:
    base = dict(
        date="01/15/2026",
        payee="RED CROSS",
        category="Donations",
        account="Chase Checking",
        notes="Annual donation",
        amount="-100.00",
        line_number=2,
    )
    base.update(overrides)
    return RawRow(**base)


def test_valid_row_becomes_transaction():
    # Act
    result = validate_row(_row())
    # Assert
    assert result.valid
    assert result.errors == ()
    txn = result.transaction
    assert txn is not None
    assert txn.date == date(2026, 1, 15)
    assert txn.payee == "RED CROSS"
    assert txn.category == "Donations"
    assert txn.account == "Chase Checking"
    assert txn.notes == "Annual donation"
    assert txn.amount == Decimal("-100.00")
    assert txn.line_number == 2


def test_all_missing_required_fields_are_reported_together():
    # Act
    result = validate_row(_row(date="", payee="  ", amount="", line_number=7))
    # Assert
    assert not result.valid
    assert result.transaction is None
    assert result.errors == (
        "Missing required field: Date (line 7)",
        "Missing required field: Merchant (line 7)",
        "Missing required field: Amount (line 7)",
    )


def test_missing_field_stops_before_date_and_amount_parsing():
    result = validate_row(_row(payee="", date="not a date", amount="abc"))
    assert result.errors == ("Missing required field: Merchant (line 2)",)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1/5/2026", date(2026, 1, 5)),
        ("01/05/2026", date(2026, 1, 5)),
        ("12/31/2026", date(2026, 12, 31)),
        ("2026-01-15", date(2026, 1, 15)),
        ("2/29/2024", date(2024, 2, 29)),
    ],
)
def test_accepted_date_formats(raw, expected):
    result = validate_row(_row(date=raw))
    assert result.transaction is not None
    assert result.transaction.date == expected


@pytest.mark.parametrize(
    "raw",
    ["02/30/2026", "2/29/2026", "13/01/2026", "2026-1-15", "01-15-2026", "01/15/26", "2026/01/15", "yesterday"],
)
def test_rejected_dates_produce_single_invalid_date_error(raw):
    result = validate_row(_row(date=raw, amount="abc"))
    assert result.errors == (f'Invalid date format: "{raw}" (line 2)',)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("100.00", Decimal("-100.00")),
        ("-100.00", Decimal("-100.00")),
        ("$1,234.56", Decimal("-1234.56")),
        ("-$50", Decimal("-50")),
        ("0.01", Decimal("-0.01")),
    ],
)
def test_amounts_follow_expense_sign_convention(raw, expected):
    result = validate_row(_row(amount=raw))
    assert result.transaction is not None
    assert result.transaction.amount == expected
    assert result.transaction.amount < 0


@pytest.mark.parametrize("raw", ["0.00", "0", "-0", "$0.00"])
def test_zero_amount_has_its_own_error(raw):
    result = validate_row(_row(amount=raw))
    assert result.errors == ("Amount cannot be zero (line 2)",)


@pytest.mark.parametrize("raw", ["abc", "12abc", "NaN", "Infinity", "$"])
def test_non_numeric_amount_is_invalid(raw):
    result = validate_row(_row(amount=raw))
    assert result.errors == (f'Invalid amount format: "{raw}" (line 2)',)


def test_validate_rows_collects_errors_from_every_row():
    # Arrange
    rows = [
        _row(line_number=2),
        _row(amount="0.00", line_number=3),
        _row(date="02/30/2026", line_number=4),
        _row(amount="25", line_number=5),
    ]
    # Act
    out = validate_rows(rows)
    # Assert
    assert not out.valid
    assert out.errors == [
        "Amount cannot be zero (line 3)",
        'Invalid date format: "02/30/2026" (line 4)',
    ]
    assert [t.line_number for t in out.transactions] == [2, 5]


def test_validate_rows_all_valid():
    out = validate_rows([_row(line_number=2), _row(line_number=3)])
    assert out.valid
    assert len(out.transactions) == 2
