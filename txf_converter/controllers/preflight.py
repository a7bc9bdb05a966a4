# txf_converter/controllers/preflight.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from txf_converter.data_model import OrganizationMapping, RawRow, payee_key
from txf_converter.utilities.core_util import is_null_or_whitespace

from .merchant_resolver import build_merchant_index, lookup_merchant_fast

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayeeCheckResult:
    unmapped_payees: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.unmapped_payees


def extract_unique_payees(rows: Iterable[RawRow]) -> List[str]:
    """
    Distinct payees of the export, compared case-insensitively.

    The spelling of the first occurrence (in file order) is kept for each
    payee and the result is sorted case-insensitively. Blank payees are left
    to row validation.
    """
    seen: Dict[str, str] = {}
    for row in rows:
        if is_null_or_whitespace(row.payee):
            continue
        name = row.payee.strip()
        seen.setdefault(payee_key(name), name)
    return sorted(seen.values(), key=str.casefold)


def validate_all_payees_mapped(
    payees: Sequence[str], mappings: Iterable[OrganizationMapping]
) -> PayeeCheckResult:
    """Report every payee without a mapping, keeping the order of ``payees``."""
    index = build_merchant_index(mappings)
    unmapped = tuple(p for p in payees if lookup_merchant_fast(p, index) is None)
    if unmapped:
        log.info("%d of %d payee(s) are not mapped", len(unmapped), len(payees))
    return PayeeCheckResult(unmapped_payees=unmapped)
