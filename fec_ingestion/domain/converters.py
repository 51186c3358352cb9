"""
Cell converters for FEC records.

Each converter takes a raw cell (None when the column is absent from the
line), the canonical field name and the physical line number, and returns a
typed value or raises the matching FecParseError subclass tagged with that
field and line.

Architecture: fec_ingestion/domain. ZERO I/O. Imports only fec_kernel.exceptions.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation

from fec_kernel.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    InvalidNumberError,
    MissingRequiredFieldError,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_DATE_RE = re.compile(r"[0-9]{8}")


def _clean(raw: str | None) -> str:
    return raw.strip() if raw is not None else ""


def _strip_whitespace(value: str) -> str:
    # Also removes the (narrow) no-break spaces used as French thousands separators
    return "".join(value.split())


# -----------------------------------------------------------------------------
# Strings
# -----------------------------------------------------------------------------


def required_string(raw: str | None, field: str, line: int | None = None) -> str:
    value = _clean(raw)
    if not value:
        raise MissingRequiredFieldError(field, line)
    return value


def optional_string(raw: str | None, field: str, line: int | None = None) -> str | None:
    return _clean(raw) or None


# -----------------------------------------------------------------------------
# Numbers
# -----------------------------------------------------------------------------


def optional_integer(raw: str | None, field: str, line: int | None = None) -> int | None:
    """Blank cell -> None; otherwise a base-10 integer with whitespace removed."""
    value = _clean(raw)
    if not value:
        return None
    compact = _strip_whitespace(value)
    if not _INTEGER_RE.fullmatch(compact):
        raise InvalidNumberError(field, value, line)
    try:
        return int(compact)
    except ValueError:
        # exceeds sys.get_int_max_str_digits()
        raise InvalidNumberError(field, value, line) from None


def _parse_decimal(value: str, field: str, line: int | None) -> Decimal:
    normalized = _strip_whitespace(value).replace(",", ".", 1)
    if not _DECIMAL_RE.fullmatch(normalized):
        raise InvalidAmountError(field, value, line)
    try:
        return Decimal(normalized)
    except InvalidOperation:
        raise InvalidAmountError(field, value, line) from None


def amount(raw: str | None, field: str, line: int | None = None) -> Decimal:
    """
    Parse a French-formatted amount ("1 000,50" -> Decimal("1000.50")).

    Blank cell -> Decimal(0). Negative values are accepted here; the
    semantic validator rejects them.
    """
    value = _clean(raw)
    if not value:
        return Decimal(0)
    return _parse_decimal(value, field, line)


def optional_amount(raw: str | None, field: str, line: int | None = None) -> Decimal | None:
    value = _clean(raw)
    if not value:
        return None
    return _parse_decimal(value, field, line)


# -----------------------------------------------------------------------------
# Dates
# -----------------------------------------------------------------------------


def _parse_date(value: str, field: str, line: int | None) -> date:
    if not _DATE_RE.fullmatch(value):
        raise InvalidDateError(field, value, "must be in YYYYMMDD format", line)
    try:
        return date(int(value[:4]), int(value[4:6]), int(value[6:]))
    except ValueError:
        raise InvalidDateError(field, value, "contains an invalid date", line) from None


def required_date(raw: str | None, field: str, line: int | None = None) -> date:
    value = _clean(raw)
    if not value:
        raise MissingRequiredFieldError(field, line)
    return _parse_date(value, field, line)


def optional_date(raw: str | None, field: str, line: int | None = None) -> date | None:
    value = _clean(raw)
    if not value:
        return None
    return _parse_date(value, field, line)
