# txf_converter/data_model/csv_rows/__init__.py
from .raw_row import EXPECTED_HEADERS, RawRow
from .validated_transaction import RowValidationResult, ValidatedTransaction

__all__ = ["EXPECTED_HEADERS", "RawRow", "RowValidationResult", "ValidatedTransaction"]
