# txf_converter/controllers/convert_pipeline.py
"""
CSV → TXF conversion pipeline.

Stages run in a fixed order and the first failing stage ends the run:

    config check → parse → category filter → payee preflight
    → row validation → resolve + advisory checks → duplicates
    → generate → write

Failures come back as a ``ConversionOutcome`` carrying a ``ConversionStatus``;
advisory findings are collected as warnings and never stop the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

from txf_converter.data_model import (
    ConversionOutcome,
    ConversionStatus,
    RawRow,
    ResolvedTransaction,
    TxfConfig,
    TxfConversionError,
)
from txf_converter.utilities.core_util import (
    default_output_path,
    resolve_path,
    write_text_atomic,
)

from .business_checks import (
    check_large_contribution,
    check_tax_year,
    describe_duplicate,
    find_duplicates,
    find_non_ascii,
)
from .config_loader import load_config, validate_config
from .csv_parser import parse_csv_text, read_csv_file
from .merchant_resolver import build_merchant_index, lookup_merchant_fast
from .preflight import extract_unique_payees, validate_all_payees_mapped
from .row_validator import validate_rows
from .txf_generator import generate_txf

log = logging.getLogger(__name__)

UNMAPPED_HEADLINE = "The following merchants are not mapped in the config:"
UNMAPPED_HINT = 'Run "csv-to-txf init <csv-file> --merge" to add them to your config.'


@dataclass(frozen=True)
class ConvertOptions:
    tax_year: int
    output_path: Optional[Path] = None
    category: Optional[str] = None
    dry_run: bool = False
    export_date: Optional[date] = None
    app_version: Optional[str] = None


def filter_by_category(rows: List[RawRow], category: Optional[str]) -> List[RawRow]:
    """Keep rows whose category equals ``category``, ignoring case."""
    if category is None:
        return rows
    wanted = category.strip().casefold()
    return [r for r in rows if r.category.strip().casefold() == wanted]


def _unmapped_errors(unmapped: tuple[str, ...]) -> List[str]:
    return [UNMAPPED_HEADLINE, *(f"  - {name}" for name in unmapped), "", UNMAPPED_HINT]


def convert(csv_path: Path, config: TxfConfig, options: ConvertOptions) -> ConversionOutcome:
    """
    Convert the export at ``csv_path`` using an already-loaded ``config``.

    Never raises for conversion problems; inspect ``outcome.status``.
    """
    warnings: List[str] = []
    csv_path = resolve_path(csv_path)
    output_path = (
        resolve_path(options.output_path)
        if options.output_path
        else default_output_path(csv_path)
    )

    # 0) configuration
    try:
        warnings.extend(validate_config(config))
    except TxfConversionError as e:
        return ConversionOutcome.failure(e.status, [str(e)], warnings)

    # 1) parse
    try:
        rows = parse_csv_text(read_csv_file(csv_path))
    except TxfConversionError as e:
        return ConversionOutcome.failure(e.status, [str(e)], warnings)

    # 2) category filter
    rows = filter_by_category(rows, options.category)

    # 3) nothing to do
    if not rows:
        log.info("No transactions to process in %s", csv_path)
        return ConversionOutcome(
            succeeded=True, status=ConversionStatus.OK, warnings=tuple(warnings)
        )

    # 4) preflight: every payee must be mapped before any row work
    payee_check = validate_all_payees_mapped(extract_unique_payees(rows), config.mappings)
    if not payee_check.valid:
        return ConversionOutcome.failure(
            ConversionStatus.MERCHANT_UNMAPPED,
            _unmapped_errors(payee_check.unmapped_payees),
            warnings,
            unmapped_payees=payee_check.unmapped_payees,
        )

    # 5) row validation, all rows
    validation = validate_rows(rows)
    if not validation.valid:
        return ConversionOutcome.failure(
            ConversionStatus.ROW_INVALID, validation.errors, warnings
        )

    # 6) resolve + per-row advisories
    index = build_merchant_index(config.mappings)
    resolved: List[ResolvedTransaction] = []
    for txn in validation.transactions:
        mapping = lookup_merchant_fast(txn.payee, index)
        if mapping is None:  # pragma: no cover - preflight guarantees a mapping
            raise AssertionError(f"payee {txn.payee!r} passed preflight unmapped")

        for warning in (
            check_tax_year(txn, options.tax_year),
            check_large_contribution(txn, config.large_contribution_threshold),
        ):
            if warning:
                warnings.append(warning)

        resolved_txn = ResolvedTransaction.from_validated(txn, mapping)
        non_ascii = find_non_ascii(resolved_txn)
        if non_ascii:
            warnings.append(non_ascii)
        resolved.append(resolved_txn)

    # 7) duplicates
    warnings.extend(describe_duplicate(g) for g in find_duplicates(resolved))

    # 8) generate
    txf_content = generate_txf(
        resolved,
        options.export_date or date.today(),
        app_version=options.app_version,
        organization_name_limit=config.organization_name_limit,
    )

    counts = dict(
        transactions_processed=len(resolved),
        total_amount=sum((t.amount for t in resolved), Decimal("0")),
        unique_organizations=len({t.organization for t in resolved}),
    )

    # 9) write
    if not options.dry_run:
        try:
            write_text_atomic(output_path, txf_content)
        except OSError as e:
            log.error("Failed to write %s: %s", output_path, e)
            return ConversionOutcome.failure(
                ConversionStatus.OUTPUT_UNWRITABLE,
                [f"Failed to write output file: {e}"],
                warnings,
                output_path=output_path,
                txf_content=txf_content,
                **counts,
            )
        log.info("Wrote %d transaction(s) to %s", counts["transactions_processed"], output_path)

    # 10) summary
    return ConversionOutcome(
        succeeded=True,
        status=ConversionStatus.OK,
        warnings=tuple(warnings),
        output_path=None if options.dry_run else output_path,
        txf_content=txf_content,
        **counts,  # type: ignore[arg-type]
    )


def convert_file(
    csv_path: Path, config_path: Path, options: ConvertOptions
) -> ConversionOutcome:
    """Load the YAML configuration at ``config_path``, then ``convert``."""
    try:
        config = load_config(resolve_path(config_path))
    except TxfConversionError as e:
        return ConversionOutcome.failure(e.status, [str(e)])
    return convert(csv_path, config, options)
