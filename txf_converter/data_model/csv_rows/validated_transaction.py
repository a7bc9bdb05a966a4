from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class ValidatedTransaction:
    """
    A row whose required fields parsed cleanly.

    ``amount`` is never zero and follows the expense-sign convention:
    outflows are negative.
    """

    date: date
    payee: str
    category: str
    account: str
    notes: str
    amount: Decimal
    line_number: int


@dataclass(frozen=True)
class RowValidationResult:
    transaction: Optional[ValidatedTransaction] = None
    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return self.transaction is not None and not self.errors
