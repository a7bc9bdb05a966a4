# txf_converter/data_model/__init__.py
from .csv_rows import EXPECTED_HEADERS, RawRow, RowValidationResult, ValidatedTransaction
from .interfaces import ConversionStatus, HasTxfEntry, IToDict, RecursiveDictStr
from .mapping import (
    LARGE_CONTRIBUTION_THRESHOLD,
    ORGANIZATION_NAME_LIMIT,
    OrganizationMapping,
    ResolvedTransaction,
    TxfConfig,
    payee_key,
)
from .results import ConversionOutcome, DuplicateGroup, TxfConversionError
from .txf import TxfHeader, TxfRecord, format_detail_line, txf_codes

__all__ = [
    "EXPECTED_HEADERS", "RawRow", "RowValidationResult", "ValidatedTransaction",
    "ConversionStatus", "HasTxfEntry", "IToDict", "RecursiveDictStr",
    "LARGE_CONTRIBUTION_THRESHOLD", "ORGANIZATION_NAME_LIMIT",
    "OrganizationMapping", "ResolvedTransaction", "TxfConfig", "payee_key",
    "ConversionOutcome", "DuplicateGroup", "TxfConversionError",
    "TxfHeader", "TxfRecord", "format_detail_line", "txf_codes"]
