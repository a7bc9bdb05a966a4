# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from txf_converter.data_model import OrganizationMapping, TxfConfig

HEADER = "Date,Merchant,Category,Account,Original Statement,Notes,Amount,Tags,Owner"

RED_CROSS_ROW = (
    "01/15/2026,RED CROSS,Donations,Chase Checking,REDCROSS*DONATION,"
    "Annual donation,-100.00,tax,John"
)


def csv_text(*rows: str, header: str = HEADER, newline: str = "\n") -> str:
    return newline.join([header, *rows]) + newline


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write a CSV export (header + rows) under tmp_path and return its path."""

    def _write(rows: Iterable[str], name: str = "export.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text(csv_text(*rows, header=header), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def red_cross_config() -> TxfConfig:
    return TxfConfig(
        mappings=(
            OrganizationMapping(
                merchant="RED CROSS", organization="American National Red Cross"
            ),
        )
    )


@pytest.fixture
def make_csv_text() -> Callable[..., str]:
    return csv_text


@pytest.fixture
def red_cross_row() -> str:
    return RED_CROSS_ROW
