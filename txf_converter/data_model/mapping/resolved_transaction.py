from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..csv_rows import ValidatedTransaction
from .organization_mapping import OrganizationMapping


@dataclass(frozen=True)
class ResolvedTransaction:
    date: date
    organization: str
    account: str
    amount: Decimal
    line_number: int
    ein: Optional[str] = None

    @classmethod
    def from_validated(
        cls, txn: ValidatedTransaction, mapping: OrganizationMapping
    ) -> ResolvedTransaction:
        return cls(
            date=txn.date,
            organization=mapping.organization,
            account=txn.account,
            amount=txn.amount,
            line_number=txn.line_number,
            ein=mapping.ein or None,
        )
