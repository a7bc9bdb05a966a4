# txf_converter/controllers/txf_generator.py
"""
TXF text generation.

Output is a header block followed by one detail block per transaction, in the
order given. Every line, including the last, ends with CRLF. Generation is
pure formatting: inputs are expected to be validated and resolved already.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from txf_converter import __version__
from txf_converter.data_model import (
    ORGANIZATION_NAME_LIMIT,
    HasTxfEntry,
    ResolvedTransaction,
    TxfHeader,
    TxfRecord,
)


def generate_header(export_date: date, app_version: Optional[str] = None) -> str:
    return TxfHeader(export_date=export_date, app_version=app_version or __version__).txf_entry()


def generate_record(
    txn: ResolvedTransaction, organization_name_limit: int = ORGANIZATION_NAME_LIMIT
) -> str:
    return TxfRecord.from_resolved(txn, organization_name_limit).txf_entry()


def emit_blocks(blocks: Iterable[HasTxfEntry]) -> str:
    return "".join(block.txf_entry() for block in blocks)


def generate_txf(
    transactions: Iterable[ResolvedTransaction],
    export_date: date,
    *,
    app_version: Optional[str] = None,
    organization_name_limit: int = ORGANIZATION_NAME_LIMIT,
) -> str:
    """Render a complete TXF document for ``transactions``."""
    header = TxfHeader(export_date=export_date, app_version=app_version or __version__)
    records = [TxfRecord.from_resolved(t, organization_name_limit) for t in transactions]
    return emit_blocks([header, *records])
