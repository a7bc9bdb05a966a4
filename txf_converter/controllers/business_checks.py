# txf_converter/controllers/business_checks.py
"""
Advisory checks run after rows are validated and resolved.

None of these block a conversion: each returns warning text (or groups that
the caller turns into warnings) and leaves the transactions untouched.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from txf_converter.data_model import (
    LARGE_CONTRIBUTION_THRESHOLD,
    DuplicateGroup,
    ResolvedTransaction,
    ValidatedTransaction,
)
from txf_converter.utilities.converters_scalar import format_txf_date


def check_tax_year(txn: ValidatedTransaction, tax_year: int) -> Optional[str]:
    if txn.date.year == tax_year:
        return None
    return (
        f"Line {txn.line_number}: Date {format_txf_date(txn.date)} "
        f"is outside tax year {tax_year}"
    )


def check_large_contribution(
    txn: ValidatedTransaction,
    threshold: Decimal = LARGE_CONTRIBUTION_THRESHOLD,
) -> Optional[str]:
    """Warn when ``|amount| >= threshold``; a receipt is needed for the deduction."""
    absolute = abs(txn.amount)
    if absolute < threshold:
        return None
    return (
        f"Line {txn.line_number}: Donation of ${absolute:,.2f} meets the "
        f"${threshold:,.2f} threshold - receipt required for tax deduction"
    )


def find_non_ascii(txn: ResolvedTransaction) -> Optional[str]:
    """
    Flag text that will reach the TXF file outside 7-bit ASCII.

    The value is written unchanged; tax software may reject or mangle it.
    """
    offending = [
        label
        for label, value in (("organization", txn.organization), ("account", txn.account))
        if not value.isascii()
    ]
    if not offending:
        return None
    return (
        f"Line {txn.line_number}: non-ASCII characters in {' and '.join(offending)} "
        "are written unchanged to the TXF file"
    )


_DuplicateKey = Tuple[date, str, Decimal]


def find_duplicates(transactions: Iterable[ResolvedTransaction]) -> List[DuplicateGroup]:
    """
    Group transactions sharing the exact (date, organization, amount) triple.

    Returns one ``DuplicateGroup`` per key with two or more members, in order
    of each key's first appearance; line numbers are sorted ascending.
    """
    groups: Dict[_DuplicateKey, List[ResolvedTransaction]] = {}
    for txn in transactions:
        groups.setdefault((txn.date, txn.organization, txn.amount), []).append(txn)

    return [
        DuplicateGroup(
            date=members[0].date,
            organization=members[0].organization,
            amount=members[0].amount,
            line_numbers=tuple(sorted(t.line_number for t in members)),
        )
        for members in groups.values()
        if len(members) > 1
    ]


def describe_duplicate(group: DuplicateGroup) -> str:
    lines = ", ".join(str(n) for n in group.line_numbers)
    return (
        f"Potential duplicate: {group.organization} on {format_txf_date(group.date)} "
        f"for ${abs(group.amount):,.2f} (lines {lines})"
    )
