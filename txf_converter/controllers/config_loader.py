# txf_converter/controllers/config_loader.py
"""
Merchant mapping configuration.

The configuration is a YAML document::

    mappings:
      - merchant: RED CROSS
        organization: American National Red Cross
        ein: "53-0196605"        # optional
    large_contribution_threshold: 250.00   # optional
    organization_name_limit: 64            # optional
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from txf_converter.data_model import (
    ConversionStatus,
    OrganizationMapping,
    TxfConfig,
    TxfConversionError,
)
from txf_converter.utilities.converters_scalar import _to_int, to_decimal
from txf_converter.utilities.core_util import (
    from_dict,
    is_null_or_whitespace,
    open_for_read,
)

log = logging.getLogger(__name__)


def _malformed(message: str) -> TxfConversionError:
    return TxfConversionError(
        ConversionStatus.CONFIG_MALFORMED,
        f"Failed to parse configuration file: {message}",
    )


def _to_mapping(entry: Any, index: int) -> OrganizationMapping:
    if not isinstance(entry, dict):
        raise _malformed(f"mapping at index {index} must be an object")
    try:
        mapping = from_dict(OrganizationMapping, entry)
    except (TypeError, ValueError) as e:
        raise _malformed(f"mapping at index {index}: {e}") from e
    if is_null_or_whitespace(mapping.ein):
        mapping = OrganizationMapping(mapping.merchant, mapping.organization, None)
    return mapping


def parse_config(data: Any) -> TxfConfig:
    """Build a ``TxfConfig`` from the object produced by ``yaml.safe_load``."""
    if not isinstance(data, dict):
        raise _malformed("config must be a YAML mapping")
    raw_mappings = data.get("mappings")
    if not isinstance(raw_mappings, list):
        raise _malformed('config must contain a "mappings" array')

    options: Dict[str, Any] = {}
    try:
        if data.get("large_contribution_threshold") is not None:
            options["large_contribution_threshold"] = to_decimal(
                data["large_contribution_threshold"]
            )
        if data.get("organization_name_limit") is not None:
            options["organization_name_limit"] = _to_int(data["organization_name_limit"])
    except ValueError as e:
        raise _malformed(str(e)) from e

    return TxfConfig(
        mappings=tuple(_to_mapping(m, i) for i, m in enumerate(raw_mappings)),
        **options,
    )


def load_config(path: Path) -> TxfConfig:
    """
    Read and parse the YAML configuration at ``path``.

    Raises
    ------
    TxfConversionError
        ``CONFIG_UNAVAILABLE`` if the file is missing or unreadable,
        ``CONFIG_MALFORMED`` if it is not valid YAML of the expected shape.
    """
    try:
        with open_for_read(path=path, binary=False, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise TxfConversionError(
            ConversionStatus.CONFIG_UNAVAILABLE,
            f"Configuration file not found: {path}",
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TxfConversionError(
            ConversionStatus.CONFIG_UNAVAILABLE,
            f"Failed to read configuration file {path}: {e}",
        ) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise _malformed(str(e)) from e

    config = parse_config(data)
    log.debug("Loaded %d mapping(s) from %s", len(config.mappings), path)
    return config


def validate_config(config: TxfConfig) -> List[str]:
    """
    Check a loaded configuration.

    Returns warnings for merchants that repeat (case-insensitively); the later
    entries are shadowed by the first one.

    Raises
    ------
    TxfConversionError
        ``CONFIG_INVALID`` for an empty mapping list, a blank merchant or
        organization, or a non-positive organization name limit.
    """
    if not config.mappings:
        raise TxfConversionError(
            ConversionStatus.CONFIG_INVALID,
            'Configuration validation error: "mappings" array cannot be empty',
        )

    for i, mapping in enumerate(config.mappings):
        for attr in ("merchant", "organization"):
            if is_null_or_whitespace(getattr(mapping, attr)):
                raise TxfConversionError(
                    ConversionStatus.CONFIG_INVALID,
                    f'Configuration validation error: mapping at index {i} '
                    f'has empty or missing "{attr}" field',
                )

    if config.organization_name_limit <= 0:
        raise TxfConversionError(
            ConversionStatus.CONFIG_INVALID,
            "Configuration validation error: organization_name_limit must be positive",
        )

    warnings: List[str] = []
    first_seen: Dict[str, str] = {}
    for mapping in config.mappings:
        key = mapping.payee_key
        if key in first_seen:
            warnings.append(
                f'Duplicate merchant: "{mapping.merchant}" (matches "{first_seen[key]}")'
            )
        else:
            first_seen[key] = mapping.merchant
    return warnings
