# txf_converter/data_model/results/__init__.py
from .conversion_outcome import ConversionOutcome
from .duplicate_group import DuplicateGroup
from .errors import TxfConversionError

__all__ = ["ConversionOutcome", "DuplicateGroup", "TxfConversionError"]
