from enum import Enum


class ConversionStatus(Enum):
    """
    Outcome classification of a conversion run.

    ``OK`` is the only successful status; every other member names the stage
    that stopped the pipeline.
    """
    OK = "OK"
    CONFIG_UNAVAILABLE = "CONFIG_UNAVAILABLE"
    CONFIG_MALFORMED = "CONFIG_MALFORMED"
    CONFIG_INVALID = "CONFIG_INVALID"
    INPUT_UNREADABLE = "INPUT_UNREADABLE"
    INPUT_INVALID = "INPUT_INVALID"
    MERCHANT_UNMAPPED = "MERCHANT_UNMAPPED"
    ROW_INVALID = "ROW_INVALID"
    OUTPUT_UNWRITABLE = "OUTPUT_UNWRITABLE"

    @property
    def is_success(self) -> bool:
        return self is ConversionStatus.OK
