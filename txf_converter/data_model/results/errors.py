from __future__ import annotations

from typing import Optional

from ..interfaces import ConversionStatus


class TxfConversionError(ValueError):
    """
    Single error type raised by the pipeline components.

    The failure kind travels in ``status``; callers branch on it rather than
    on exception subclasses.
    """

    def __init__(
        self,
        status: ConversionStatus,
        message: str,
        line_number: Optional[int] = None,
    ) -> None:
        self.status = status
        self.message = message
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message
