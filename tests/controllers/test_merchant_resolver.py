# tests/controllers/test_merchant_resolver.py
from __future__ import annotations

import pytest

from txf_converter.controllers.merchant_resolver import (
    build_merchant_index,
    lookup_merchant,
    lookup_merchant_fast,
)
from txf_converter.data_model import OrganizationMapping

RED_CROSS = OrganizationMapping("RED CROSS", "American National Red Cross")
UNICEF = OrganizationMapping("Unicef", "U.S. Fund for UNICEF", "13-1760110")
MAPPINGS = (RED_CROSS, UNICEF)


@pytest.mark.parametrize("name", ["red cross", "RED CROSS", "Red Cross", "  Red Cross  "])
def test_lookup_is_case_insensitive_and_trimmed(name):
    assert lookup_merchant(name, MAPPINGS) is RED_CROSS
    assert lookup_merchant_fast(name, build_merchant_index(MAPPINGS)) is RED_CROSS


@pytest.mark.parametrize("name", ["RED CROSS INC", "CROSS", "RED", "", "Unknown"])
def test_no_substring_or_fuzzy_matching(name):
    assert lookup_merchant(name, MAPPINGS) is None
    assert lookup_merchant_fast(name, build_merchant_index(MAPPINGS)) is None


def test_mapping_key_is_trimmed_too():
    padded = OrganizationMapping("  Habitat  ", "Habitat for Humanity")
    assert lookup_merchant("habitat", [padded]) is padded


def test_first_match_wins_in_both_variants():
    # Arrange
    first = OrganizationMapping("Red Cross", "First Org")
    second = OrganizationMapping("RED CROSS", "Second Org")
    mappings = [first, second]
    # Act
    linear = lookup_merchant("red cross", mappings)
    indexed = lookup_merchant_fast("red cross", build_merchant_index(mappings))
    # Assert
    assert linear is first
    assert indexed is first


def test_index_has_one_entry_per_key():
    index = build_merchant_index([RED_CROSS, OrganizationMapping("red cross", "Other"), UNICEF])
    assert set(index) == {"red cross", "unicef"}
    assert index["red cross"] is RED_CROSS


def test_lookup_returns_tax_id_of_mapping():
    found = lookup_merchant("UNICEF", MAPPINGS)
    assert found is not None
    assert found.ein == "13-1760110"
