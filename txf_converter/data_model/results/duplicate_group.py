from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class DuplicateGroup:
    """Two or more resolved transactions sharing date, organization and amount."""

    date: date
    organization: str
    amount: Decimal
    line_numbers: tuple[int, ...]
