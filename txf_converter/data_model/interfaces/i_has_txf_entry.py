# txf_converter/data_model/interfaces/i_has_txf_entry.py
from __future__ import annotations

from typing import runtime_checkable

from typing_extensions import Protocol


@runtime_checkable
class HasTxfEntry(Protocol):
    """A TXF building block that renders itself as CRLF-terminated lines."""

    def txf_lines(self) -> list[str]: ...

    def txf_entry(self) -> str: ...
