# txf_converter/controllers/config_template.py
"""
Starter configuration generation for the ``init`` command.

A template lists every distinct merchant of an export with the organization
pre-filled from the merchant name, for the user to correct before converting.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import yaml

from txf_converter.data_model import OrganizationMapping, TxfConfig, payee_key

_TEMPLATE_COMMENT = (
    "# csv-to-txf merchant mappings\n"
    "# Review each organization name and add an EIN where known:\n"
    "#   ein: \"12-3456789\"\n"
)


def _mappings_for(merchants: Iterable[str]) -> List[OrganizationMapping]:
    return [OrganizationMapping(merchant=m, organization=m) for m in merchants]


def merge_config(existing: TxfConfig, merchants: Iterable[str]) -> TxfConfig:
    """
    Append mappings for merchants not yet present in ``existing``.

    Existing mappings keep their order and values; a merchant is present when
    its lookup key matches any existing mapping.
    """
    known = {m.payee_key for m in existing.mappings}
    added: List[OrganizationMapping] = []
    for merchant in merchants:
        key = payee_key(merchant)
        if key in known:
            continue
        known.add(key)
        added.append(OrganizationMapping(merchant=merchant, organization=merchant))
    return TxfConfig(
        mappings=existing.mappings + tuple(added),
        large_contribution_threshold=existing.large_contribution_threshold,
        organization_name_limit=existing.organization_name_limit,
    )


def dump_config(config: TxfConfig) -> str:
    data: Dict[str, Any] = config.to_dict()
    return yaml.safe_dump(
        data, sort_keys=False, allow_unicode=True, default_flow_style=False
    )


def generate_config_template(merchants: Iterable[str]) -> str:
    return _TEMPLATE_COMMENT + dump_config(TxfConfig(mappings=tuple(_mappings_for(merchants))))
