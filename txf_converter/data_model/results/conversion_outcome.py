from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from ..interfaces import ConversionStatus, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class ConversionOutcome:
    """
    Result of one conversion run.

    ``succeeded`` is true only for ``ConversionStatus.OK``. When the output
    write fails the counts computed before the write are still reported.
    """

    succeeded: bool
    status: ConversionStatus
    transactions_processed: int = 0
    total_amount: Decimal = Decimal("0")
    unique_organizations: int = 0
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    unmapped_payees: tuple[str, ...] = ()
    output_path: Optional[Path] = None
    txf_content: Optional[str] = None

    @classmethod
    def failure(
        cls,
        status: ConversionStatus,
        errors: Iterable[str],
        warnings: Iterable[str] = (),
        **counts: object,
    ) -> ConversionOutcome:
        return cls(
            succeeded=False,
            status=status,
            errors=tuple(errors),
            warnings=tuple(warnings),
            **counts,  # type: ignore[arg-type]
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "succeeded": str(self.succeeded).lower(),
            "status": self.status.value,
            "transactions_processed": str(self.transactions_processed),
            "total_amount": f"{self.total_amount:.2f}",
            "unique_organizations": str(self.unique_organizations),
            "warnings": list(self.warnings),
            "errors": list(self.errors),
            "unmapped_payees": list(self.unmapped_payees),
            "output_path": str(self.output_path) if self.output_path else "",
        }


if TYPE_CHECKING:
    _is_IToDict: type[IToDict] = ConversionOutcome
