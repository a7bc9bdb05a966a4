from .config_logging import LOGGING, configure_logging
from .converters_scalar import format_txf_amount, format_txf_date, to_date, to_decimal
from .core_util import (
    convert_value,
    default_config_path,
    default_output_path,
    from_dict,
    is_null_or_whitespace,
    open_for_read,
    open_for_write,
    resolve_path,
    write_text_atomic,
)

__all__ = [
    "is_null_or_whitespace",
    "to_date",
    "to_decimal",
    "format_txf_date",
    "format_txf_amount",
    "convert_value",
    "from_dict",
    "open_for_read",
    "open_for_write",
    "write_text_atomic",
    "resolve_path",
    "default_config_path",
    "default_output_path",
    "LOGGING",
    "configure_logging",
]
