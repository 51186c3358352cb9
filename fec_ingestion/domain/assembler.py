"""
Record assembler: positional FEC cells -> LedgerEntry.

Walks FEC_LAYOUT left to right, converting each cell with the converter for
its FieldKind. The first converter failure propagates unchanged; errors are
never accumulated for one line. Columns past the end of a short line are
passed as None (absent). Column 15 is skipped.

Externally supplied records (LedgerEntry.from_dict, stored-entry updates) go
through the same converters via coerce_fields(), so they fail with the same
typed errors as file lines.

Architecture: fec_ingestion/domain. ZERO I/O.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Mapping, Sequence

from fec_ingestion.domain import converters
from fec_ingestion.domain.types import FEC_LAYOUT, FieldKind, LedgerEntry

_CONVERTERS: dict[FieldKind, Callable[[str | None, str, int | None], Any]] = {
    FieldKind.REQUIRED_STRING: converters.required_string,
    FieldKind.OPTIONAL_STRING: converters.optional_string,
    FieldKind.OPTIONAL_INTEGER: converters.optional_integer,
    FieldKind.AMOUNT: converters.amount,
    FieldKind.OPTIONAL_AMOUNT: converters.optional_amount,
    FieldKind.REQUIRED_DATE: converters.required_date,
    FieldKind.OPTIONAL_DATE: converters.optional_date,
}

# LedgerEntry attribute -> FieldKind; ecriture_lettrage has no column of its own
FIELD_KINDS: dict[str, FieldKind] = {
    column.field: column.kind for column in FEC_LAYOUT if column.field is not None
}
FIELD_KINDS["ecriture_lettrage"] = FieldKind.OPTIONAL_STRING

_DATE_KINDS = frozenset({FieldKind.REQUIRED_DATE, FieldKind.OPTIONAL_DATE})
_AMOUNT_KINDS = frozenset({FieldKind.AMOUNT, FieldKind.OPTIONAL_AMOUNT})


def assemble_entry(cells: Sequence[str], line_number: int | None = None) -> LedgerEntry:
    """Build one LedgerEntry from a line's cells (column count already checked)."""
    values: dict[str, Any] = {}
    for column in FEC_LAYOUT:
        if column.kind is FieldKind.RESERVED:
            continue
        raw = cells[column.index] if column.index < len(cells) else None
        values[column.field] = _CONVERTERS[column.kind](raw, column.field, line_number)
    values["ecriture_lettrage"] = values["lettrage"]
    return LedgerEntry(**values)


def coerce_value(field: str, value: Any) -> Any:
    """
    Convert one externally supplied value for `field`.

    Already-typed values pass through (date for date fields, int for
    ecriture_numero). Decimals and other scalars are rendered as text and
    parsed by the field's converter, so "1000,50", "20240101" and 12.5 are
    all accepted while "2024111" or "NaN" are rejected as in a FEC file.
    """
    kind = FIELD_KINDS.get(field)
    if kind is None:
        raise ValueError(f"Unknown ledger entry field {field!r}")
    if value is not None:
        if kind in _DATE_KINDS and isinstance(value, date):
            return value.date() if isinstance(value, datetime) else value
        if kind is FieldKind.OPTIONAL_INTEGER and type(value) is int:
            return value
        if kind in _AMOUNT_KINDS and isinstance(value, Decimal):
            value = format(value, "f")
        elif not isinstance(value, str):
            value = str(value)
    return _CONVERTERS[kind](value, field)


def coerce_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce a partial attribute mapping; unknown names raise ValueError."""
    unknown = sorted(set(data) - set(FIELD_KINDS))
    if unknown:
        raise ValueError(f"Unknown ledger entry field(s): {', '.join(unknown)}")
    return {name: coerce_value(name, value) for name, value in data.items()}


def entry_from_record(data: Mapping[str, Any], wire_keys: Mapping[str, str]) -> LedgerEntry:
    """
    Build a LedgerEntry from an external record keyed by wire or attribute names.

    Fields are converted in layout order; a missing required field raises
    MissingRequiredFieldError and missing debit/credit default to 0.
    """
    values: dict[str, Any] = {}
    for name in FIELD_KINDS:
        wire = wire_keys[name]
        raw = data[wire] if wire in data else data.get(name)
        values[name] = coerce_value(name, raw)
    if values["ecriture_lettrage"] is None:
        values["ecriture_lettrage"] = values["lettrage"]
    return LedgerEntry(**values)
