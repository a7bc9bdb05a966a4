# txf_converter/__init__.py
__version__ = "1.0.0"

from .controllers import ConvertOptions, convert, convert_file  # noqa: E402
from .data_model import ConversionOutcome, ConversionStatus, TxfConfig  # noqa: E402

__all__ = [
    "__version__",
    "ConvertOptions",
    "convert",
    "convert_file",
    "ConversionOutcome",
    "ConversionStatus",
    "TxfConfig",
]
