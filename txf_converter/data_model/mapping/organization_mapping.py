from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..interfaces import RecursiveDictStr

LARGE_CONTRIBUTION_THRESHOLD = Decimal("250.00")
ORGANIZATION_NAME_LIMIT = 64


def payee_key(name: str) -> str:
    """Lookup key for a payee: whitespace-trimmed and case-folded."""
    return name.strip().casefold()


@dataclass(frozen=True)
class OrganizationMapping:
    """Maps a raw merchant name (as exported) to the donee organization."""

    merchant: str = ""
    organization: str = ""
    ein: Optional[str] = None

    @property
    def payee_key(self) -> str:
        return payee_key(self.merchant)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {
            "merchant": self.merchant,
            "organization": self.organization,
        }
        if self.ein:
            d["ein"] = self.ein
        return d


@dataclass(frozen=True)
class TxfConfig:
    """
    Already-loaded configuration consumed by the conversion pipeline.

    ``mappings`` keeps configuration order; earlier entries shadow later
    entries whose merchant has the same lookup key.
    """

    mappings: tuple[OrganizationMapping, ...] = ()
    large_contribution_threshold: Decimal = LARGE_CONTRIBUTION_THRESHOLD
    organization_name_limit: int = ORGANIZATION_NAME_LIMIT

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {"mappings": [m.to_dict() for m in self.mappings]}
        if self.large_contribution_threshold != LARGE_CONTRIBUTION_THRESHOLD:
            d["large_contribution_threshold"] = str(self.large_contribution_threshold)
        if self.organization_name_limit != ORGANIZATION_NAME_LIMIT:
            d["organization_name_limit"] = str(self.organization_name_limit)
        return d
