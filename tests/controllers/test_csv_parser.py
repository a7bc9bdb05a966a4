# tests/controllers/test_csv_parser.py
from __future__ import annotations

from pathlib import Path

import pytest

from txf_converter.controllers.csv_parser import (
    parse_csv_file,
    parse_csv_text,
    read_csv_file,
)
from txf_converter.data_model import ConversionStatus, RawRow, TxfConversionError


def test_parse_single_row_maps_columns_positionally(make_csv_text, red_cross_row):
    # Arrange
    text = make_csv_text(red_cross_row)
    # Act
    rows = parse_csv_text(text)
    # Assert
    assert rows == [
        RawRow(
            date="01/15/2026",
            payee="RED CROSS",
            category="Donations",
            account="Chase Checking",
            original_statement="REDCROSS*DONATION",
            notes="Annual donation",
            amount="-100.00",
            tags="tax",
            owner="John",
            line_number=2,
        )
    ]


def test_header_only_is_an_empty_success(make_csv_text):
    assert parse_csv_text(make_csv_text()) == []


def test_strips_leading_byte_order_mark(make_csv_text, red_cross_row):
    rows = parse_csv_text("\ufeff" + make_csv_text(red_cross_row))
    assert len(rows) == 1
    assert rows[0].date == "01/15/2026"


def test_quoted_fields_may_hold_delimiters_and_line_breaks(make_csv_text):
    # Arrange
    text = make_csv_text(
        '01/15/2026,"RED CROSS, INC",Donations,Checking,,"line one\nline two",-5.00,,'
    )
    # Act
    rows = parse_csv_text(text)
    # Assert
    assert rows[0].payee == "RED CROSS, INC"
    assert rows[0].notes == "line one\nline two"
    assert rows[0].amount == "-5.00"


def test_blank_lines_are_skipped_and_do_not_count_as_lines(make_csv_text, red_cross_row):
    text = make_csv_text("", red_cross_row, "", red_cross_row)
    rows = parse_csv_text(text)
    assert [r.line_number for r in rows] == [2, 3]


def test_crlf_input_is_accepted(make_csv_text, red_cross_row):
    rows = parse_csv_text(make_csv_text(red_cross_row, red_cross_row, newline="\r\n"))
    assert [r.line_number for r in rows] == [2, 3]
    assert rows[1].owner == "John"


def test_short_rows_are_padded_and_long_rows_truncated(make_csv_text):
    # Arrange
    text = make_csv_text("01/15/2026,RED CROSS", "a,b,c,d,e,f,g,h,i,EXTRA,MORE")
    # Act
    short, long_row = parse_csv_text(text)
    # Assert
    assert short.payee == "RED CROSS"
    assert short.amount == "" and short.owner == ""
    assert long_row.owner == "i"


def test_fields_are_trimmed(make_csv_text):
    rows = parse_csv_text(make_csv_text(" 01/15/2026 ,  RED CROSS ,,,,, -1.00 ,,"))
    assert rows[0].date == "01/15/2026"
    assert rows[0].payee == "RED CROSS"
    assert rows[0].amount == "-1.00"


def test_header_cells_are_trimmed_before_matching(make_csv_text, red_cross_row):
    header = " Date , Merchant ,Category,Account,Original Statement,Notes,Amount,Tags,Owner "
    assert len(parse_csv_text(make_csv_text(red_cross_row, header=header))) == 1


@pytest.mark.parametrize(
    "header",
    [
        "Merchant,Date,Category,Account,Original Statement,Notes,Amount,Tags,Owner",
        "date,Merchant,Category,Account,Original Statement,Notes,Amount,Tags,Owner",
        "Date,Merchant,Category,Account,Original Statement,Notes,Amount,Tags",
        "Date,Payee,Category,Account,Original Statement,Notes,Amount,Tags,Owner",
    ],
)
def test_header_mismatch_is_a_single_structural_error(make_csv_text, red_cross_row, header):
    with pytest.raises(TxfConversionError) as exc:
        parse_csv_text(make_csv_text(red_cross_row, header=header))
    assert exc.value.status is ConversionStatus.INPUT_INVALID
    assert "Invalid CSV headers" in str(exc.value)


@pytest.mark.parametrize("text", ["", "\ufeff", "\n\n", "\r\n"])
def test_empty_input_is_rejected(text):
    with pytest.raises(TxfConversionError) as exc:
        parse_csv_text(text)
    assert exc.value.status is ConversionStatus.INPUT_INVALID
    assert str(exc.value) == "CSV file is empty"


def test_unterminated_quote_is_a_structural_error(make_csv_text):
    with pytest.raises(TxfConversionError) as exc:
        parse_csv_text(make_csv_text('01/15/2026,"RED CROSS,Donations'))
    assert exc.value.status is ConversionStatus.INPUT_INVALID


def test_read_missing_file_is_input_unreadable(tmp_path: Path):
    with pytest.raises(TxfConversionError) as exc:
        read_csv_file(tmp_path / "missing.csv")
    assert exc.value.status is ConversionStatus.INPUT_UNREADABLE


def test_parse_csv_file_reads_and_parses(write_csv, red_cross_row):
    path = write_csv([red_cross_row, red_cross_row])
    rows = parse_csv_file(path)
    assert [r.payee for r in rows] == ["RED CROSS", "RED CROSS"]
