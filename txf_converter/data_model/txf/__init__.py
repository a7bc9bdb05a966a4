# txf_converter/data_model/txf/__init__.py

from . import txf_codes
from .txf_header import TxfHeader
from .txf_record import TxfRecord, format_detail_line

__all__ = ["txf_codes", "TxfHeader", "TxfRecord", "format_detail_line"]
