# txf_converter/controllers/merchant_resolver.py
"""
Merchant name → organization resolution.

Matching is exact after trimming surrounding whitespace and case-folding both
sides; there is no substring or fuzzy matching ("RED CROSS INC" does not match
a "RED CROSS" mapping). When several mappings share a key, the earliest one in
configuration order wins, in both the linear and the indexed lookup.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from txf_converter.data_model import OrganizationMapping, payee_key

MerchantIndex = Dict[str, OrganizationMapping]


def lookup_merchant(
    merchant_name: str, mappings: Iterable[OrganizationMapping]
) -> Optional[OrganizationMapping]:
    """Linear lookup; returns ``None`` when nothing matches."""
    key = payee_key(merchant_name)
    for mapping in mappings:
        if mapping.payee_key == key:
            return mapping
    return None


def build_merchant_index(mappings: Iterable[OrganizationMapping]) -> MerchantIndex:
    """Index mappings by lookup key; the first mapping seen for a key is kept."""
    index: MerchantIndex = {}
    for mapping in mappings:
        index.setdefault(mapping.payee_key, mapping)
    return index


def lookup_merchant_fast(
    merchant_name: str, index: Mapping[str, OrganizationMapping]
) -> Optional[OrganizationMapping]:
    """O(1) lookup against an index from ``build_merchant_index``."""
    return index.get(payee_key(merchant_name))
