# txf_converter/controllers/row_validator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, List

from txf_converter.data_model import RawRow, RowValidationResult, ValidatedTransaction
from txf_converter.utilities.converters_scalar import to_date, to_decimal
from txf_converter.utilities.core_util import is_null_or_whitespace

log = logging.getLogger(__name__)

# (RawRow attribute, column name used in messages)
_REQUIRED_FIELDS = (
    ("date", "Date"),
    ("payee", "Merchant"),
    ("amount", "Amount"),
)


@dataclass
class RowsValidation:
    transactions: List[ValidatedTransaction] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def _to_expense(amount: Decimal) -> Decimal:
    return -amount if amount > 0 else amount


def validate_row(row: RawRow) -> RowValidationResult:
    """
    Validate the required fields of one row and build a ``ValidatedTransaction``.

    Checks run in order and the first failing stage ends validation:
      1. missing Date / Merchant / Amount (all missing fields reported together)
      2. date shape and calendar validity
      3. amount parse, then non-zero

    Positive amounts are negated; negative amounts are kept as-is.
    """
    missing = [
        f"Missing required field: {label} (line {row.line_number})"
        for attr, label in _REQUIRED_FIELDS
        if is_null_or_whitespace(getattr(row, attr))
    ]
    if missing:
        return RowValidationResult(errors=tuple(missing))

    try:
        txn_date: date = to_date(row.date)
    except ValueError:
        return RowValidationResult(
            errors=(f'Invalid date format: "{row.date}" (line {row.line_number})',)
        )

    try:
        amount = to_decimal(row.amount)
    except ValueError:
        return RowValidationResult(
            errors=(f'Invalid amount format: "{row.amount}" (line {row.line_number})',)
        )
    if amount == 0:
        return RowValidationResult(
            errors=(f"Amount cannot be zero (line {row.line_number})",)
        )

    return RowValidationResult(
        transaction=ValidatedTransaction(
            date=txn_date,
            payee=row.payee.strip(),
            category=row.category.strip(),
            account=row.account.strip(),
            notes=row.notes.strip(),
            amount=_to_expense(amount),
            line_number=row.line_number,
        )
    )


def validate_rows(rows: Iterable[RawRow]) -> RowsValidation:
    """Validate every row; errors from all rows are collected in row order."""
    out = RowsValidation()
    for row in rows:
        result = validate_row(row)
        if result.transaction is not None:
            out.transactions.append(result.transaction)
        else:
            out.errors.extend(result.errors)
    if out.errors:
        log.debug("Row validation found %d error(s)", len(out.errors))
    return out
