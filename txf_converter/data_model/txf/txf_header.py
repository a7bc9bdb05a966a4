from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from txf_converter.utilities.converters_scalar import format_txf_date

from ..interfaces import HasTxfEntry, IToDict, RecursiveDictStr
from . import txf_codes as codes


@dataclass(frozen=True)
class TxfHeader:
    export_date: date
    app_version: str = "1.0.0"
    version: str = codes.TXF_VERSION
    application: str = codes.APPLICATION_NAME

    def txf_lines(self) -> list[str]:
        return [
            self.version,
            f"{codes.TAG_APPLICATION}{self.application} {self.app_version}",
            f"{codes.TAG_EXPORT_DATE}{format_txf_date(self.export_date)}",
        ]

    def txf_entry(self) -> str:
        return "".join(line + codes.CRLF for line in self.txf_lines())

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "version": self.version,
            "application": f"{self.application} {self.app_version}",
            "export_date": self.export_date.isoformat(),
        }


if TYPE_CHECKING:
    _is_has_txf_entry: type[HasTxfEntry] = TxfHeader
    _is_IToDict: type[IToDict] = TxfHeader
