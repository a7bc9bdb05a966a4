from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Column order of a transaction export; the header must match exactly.
EXPECTED_HEADERS: Final[tuple[str, ...]] = (
    "Date",
    "Merchant",
    "Category",
    "Account",
    "Original Statement",
    "Notes",
    "Amount",
    "Tags",
    "Owner",
)


@dataclass(frozen=True)
class RawRow:
    """One data record of the export, every cell still an (trimmed) string."""

    date: str = ""
    payee: str = ""
    category: str = ""
    account: str = ""
    original_statement: str = ""
    notes: str = ""
    amount: str = ""
    tags: str = ""
    owner: str = ""
    line_number: int = -1  # 1-based; the header is line 1

    @classmethod
    def from_cells(cls, cells: list[str], line_number: int) -> RawRow:
        """Build a row positionally; missing trailing cells become ``""``."""
        padded = [c.strip() for c in cells[: len(EXPECTED_HEADERS)]]
        padded += [""] * (len(EXPECTED_HEADERS) - len(padded))
        return cls(*padded, line_number=line_number)
