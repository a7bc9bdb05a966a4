# txf_converter/controllers/__init__.py
from .business_checks import (
    check_large_contribution,
    check_tax_year,
    describe_duplicate,
    find_duplicates,
    find_non_ascii,
)
from .config_loader import load_config, parse_config, validate_config
from .config_template import dump_config, generate_config_template, merge_config
from .convert_pipeline import ConvertOptions, convert, convert_file, filter_by_category
from .csv_parser import parse_csv_file, parse_csv_text, read_csv_file
from .merchant_resolver import build_merchant_index, lookup_merchant, lookup_merchant_fast
from .preflight import PayeeCheckResult, extract_unique_payees, validate_all_payees_mapped
from .row_validator import RowsValidation, validate_row, validate_rows
from .txf_generator import generate_header, generate_record, generate_txf

__all__ = [
    "check_large_contribution", "check_tax_year", "describe_duplicate",
    "find_duplicates", "find_non_ascii",
    "load_config", "parse_config", "validate_config",
    "dump_config", "generate_config_template", "merge_config",
    "ConvertOptions", "convert", "convert_file", "filter_by_category",
    "parse_csv_file", "parse_csv_text", "read_csv_file",
    "build_merchant_index", "lookup_merchant", "lookup_merchant_fast",
    "PayeeCheckResult", "extract_unique_payees", "validate_all_payees_mapped",
    "RowsValidation", "validate_row", "validate_rows",
    "generate_header", "generate_record", "generate_txf",
]
