from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from txf_converter.utilities.converters_scalar import (
    format_txf_amount,
    format_txf_date,
)

from ..interfaces import HasTxfEntry, IToDict, RecursiveDictStr
from ..mapping import ORGANIZATION_NAME_LIMIT, ResolvedTransaction
from . import txf_codes as codes


def format_detail_line(
    txn: ResolvedTransaction, organization_name_limit: int = ORGANIZATION_NAME_LIMIT
) -> str:
    """
    ``MM/DD/YYYY <account> <organization>[ EIN:<ein>]``

    The organization is cut to ``organization_name_limit`` characters. An empty
    account is kept, which leaves two spaces between date and organization.
    """
    parts = [
        format_txf_date(txn.date),
        txn.account,
        txn.organization[:organization_name_limit],
    ]
    if txn.ein:
        parts.append(f"EIN:{txn.ein}")
    return " ".join(parts)


@dataclass(frozen=True)
class TxfRecord:
    """One TXF detail block."""

    amount: Decimal
    detail: str
    refnum: int = codes.REFNUM_CASH_CHARITY
    copy: int = 1
    line: int = 1

    @classmethod
    def from_resolved(
        cls,
        txn: ResolvedTransaction,
        organization_name_limit: Optional[int] = None,
    ) -> TxfRecord:
        limit = ORGANIZATION_NAME_LIMIT if organization_name_limit is None else organization_name_limit
        return cls(amount=txn.amount, detail=format_detail_line(txn, limit))

    def txf_lines(self) -> list[str]:
        return [
            codes.TAG_DETAIL_RECORD,
            f"{codes.TAG_REFNUM}{self.refnum}",
            f"{codes.TAG_COPY}{self.copy}",
            f"{codes.TAG_LINE}{self.line}",
            f"{codes.TAG_AMOUNT}{format_txf_amount(self.amount)}",
            f"{codes.TAG_DETAIL}{self.detail}",
            codes.TAG_END_OF_RECORD,
        ]

    def txf_entry(self) -> str:
        return "".join(line + codes.CRLF for line in self.txf_lines())

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "refnum": str(self.refnum),
            "copy": str(self.copy),
            "line": str(self.line),
            "amount": format_txf_amount(self.amount),
            "detail": self.detail,
        }


if TYPE_CHECKING:
    _is_has_txf_entry: type[HasTxfEntry] = TxfRecord
    _is_IToDict: type[IToDict] = TxfRecord
