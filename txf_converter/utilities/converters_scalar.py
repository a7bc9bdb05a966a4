# txf_converter/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Final, overload


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}")


@overload
def to_date(s: date, /) -> date: ...
@overload
def to_date(s: str, /) -> date: ...


def to_date(s: object, /) -> date:
    """
    Parse a transaction date from a CSV export.

    Supported examples:
      - 1/5/2026, 01/15/2026   (M/D/YYYY, month/day may be one or two digits)
      - 2026-01-15             (ISO, fixed width)

    The parsed date must exist on the calendar: "02/30/2026" is rejected rather
    than rolled forward into March.

    Raises:
        ValueError: for any other shape or a non-existent calendar date.
    """
    if isinstance(s, date):
        return s
    if not isinstance(s, str):
        raise _bad(s, "date")

    txt = s.strip()
    m = _SLASH_DATE_RE.match(txt)
    if m:
        month, day, year = (int(g) for g in m.groups())
    else:
        m = _ISO_DATE_RE.match(txt)
        if not m:
            raise ValueError(f"Unrecognized date format: {s!r}")
        year, month, day = (int(g) for g in m.groups())

    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Not a calendar date: {s!r}") from e


def to_decimal(value: Any) -> Decimal:
    """
    Convert a CSV amount cell to a finite Decimal.

    A currency symbol and thousands separators are removed before parsing:
        to_decimal("$1,234.56")  -> Decimal('1234.56')
        to_decimal("-$100.00")   -> Decimal('-100.00')

    Raises:
        ValueError: if the cleaned text is not a finite decimal number.
    """
    if isinstance(value, Decimal):
        cleaned_value = value
    elif isinstance(value, bool):
        raise _bad(value, "Decimal")
    elif isinstance(value, int):
        cleaned_value = Decimal(value)
    elif isinstance(value, float):
        # Avoid binary float artifacts
        cleaned_value = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = _CURRENCY_AND_GROUPING_RE.sub("", value.strip())
        try:
            cleaned_value = Decimal(cleaned)
        except InvalidOperation as e:
            raise ValueError(
                f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
            ) from e
    else:
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    if not cleaned_value.is_finite():
        raise ValueError(f"Amount must be a finite number: {value!r}")
    return cleaned_value


def format_txf_date(d: date) -> str:
    """Render ``d`` as MM/DD/YYYY, the only date shape TXF accepts."""
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


def format_txf_amount(amount: Decimal) -> str:
    """Render a signed amount with exactly two decimal places (ROUND_HALF_EVEN)."""
    return f"{amount:.2f}"


def _to_int(v: Any) -> int:
    if isinstance(v, bool):
        raise _bad(v, "int")
    if isinstance(v, int):
        return v
    if isinstance(v, Decimal):
        if v != v.to_integral_value():
            raise ValueError(f"Non-integer Decimal {v} for int field")
        return int(v)
    if isinstance(v, float):
        if not v.is_integer():
            raise ValueError(f"Non-integer float {v} for int field")
        return int(v)
    if isinstance(v, str):
        try:
            return int(v.strip())
        except ValueError as e:
            raise ValueError(f"Could not parse int from {v!r}") from e
    raise _bad(v, "int")


def _to_str(v: Any) -> str:
    return "" if v is None else str(v)


_SLASH_DATE_RE: Final[re.Pattern[str]] = re.compile(
    r"^([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})$"
)
_ISO_DATE_RE: Final[re.Pattern[str]] = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
_CURRENCY_AND_GROUPING_RE: Final[re.Pattern[str]] = re.compile(r"[$,]")
SCALAR_CONVERTERS: Dict[type, Any] = {
    Decimal: to_decimal,
    int: _to_int,
    str: _to_str,
    date: to_date,
}
