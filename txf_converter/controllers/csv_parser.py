# txf_converter/controllers/csv_parser.py
from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import List

from txf_converter.data_model import (
    EXPECTED_HEADERS,
    ConversionStatus,
    RawRow,
    TxfConversionError,
)
from txf_converter.utilities.core_util import open_for_read

log = logging.getLogger(__name__)

_BOM = "\ufeff"


def read_csv_file(path: Path, encoding: str = "utf-8") -> str:
    """Return the whole export as text.

    Raises
    ------
    TxfConversionError
        ``INPUT_UNREADABLE`` if the file cannot be opened or decoded.
    """
    try:
        with open_for_read(path=path, binary=False, encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TxfConversionError(
            ConversionStatus.INPUT_UNREADABLE, f"Failed to read CSV file: {e}"
        ) from e


def _header_matches(header: List[str]) -> bool:
    return all(
        index < len(header) and header[index].strip() == expected
        for index, expected in enumerate(EXPECTED_HEADERS)
    )


def parse_csv_text(text: str) -> List[RawRow]:
    """
    Parse a transaction export into ``RawRow`` records.

    Quoted fields may contain commas and line breaks. Empty records are
    skipped; ragged rows are tolerated (missing trailing cells read as ``""``,
    surplus cells are ignored). The first record must be the header in
    ``EXPECTED_HEADERS`` order.

    Returns
    -------
    List[RawRow]
        One row per data record, in file order. ``line_number`` counts records
        with the header as line 1. A header-only file yields ``[]``.

    Raises
    ------
    TxfConversionError
        ``INPUT_INVALID`` if the text is empty, cannot be tokenized, or the
        header does not match.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]

    try:
        records = [
            record
            for record in csv.reader(io.StringIO(text, newline=""), strict=True)
            if record
        ]
    except csv.Error as e:
        raise TxfConversionError(
            ConversionStatus.INPUT_INVALID, f"Failed to parse CSV: {e}"
        ) from e

    if not records:
        raise TxfConversionError(ConversionStatus.INPUT_INVALID, "CSV file is empty")

    if not _header_matches(records[0]):
        raise TxfConversionError(
            ConversionStatus.INPUT_INVALID,
            f"Invalid CSV headers. Expected: {', '.join(EXPECTED_HEADERS)}",
        )

    rows = [
        RawRow.from_cells(record, line_number=i + 1)
        for i, record in enumerate(records)
        if i > 0
    ]
    log.debug("Parsed %d data row(s)", len(rows))
    return rows


def parse_csv_file(path: Path, encoding: str = "utf-8") -> List[RawRow]:
    return parse_csv_text(read_csv_file(path, encoding=encoding))
