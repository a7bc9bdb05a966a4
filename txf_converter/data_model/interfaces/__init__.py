# txf_converter/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the TXF data model.
"""

from .enum_conversion_status import ConversionStatus
from .i_has_txf_entry import HasTxfEntry
from .i_to_dict import IToDict, RecursiveDictStr

__all__ = [
    "ConversionStatus",
    "HasTxfEntry",
    "IToDict",
    "RecursiveDictStr",
]
