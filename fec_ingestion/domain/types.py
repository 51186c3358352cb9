"""
fec_ingestion.domain.types -- Pure frozen dataclasses for FEC ingestion.

ZERO I/O. Defines the ledger entry value, the parse options and the fixed
18-column FEC layout.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

# =============================================================================
# FEC layout
# =============================================================================

MIN_COLUMNS = 13

DATE_FORMAT = "%Y%m%d"


class FieldKind(str, Enum):
    """Conversion applied to a cell."""

    REQUIRED_STRING = "required_string"
    OPTIONAL_STRING = "optional_string"
    OPTIONAL_INTEGER = "optional_integer"
    AMOUNT = "amount"
    OPTIONAL_AMOUNT = "optional_amount"
    REQUIRED_DATE = "required_date"
    OPTIONAL_DATE = "optional_date"
    RESERVED = "reserved"


@dataclass(frozen=True)
class FecColumn:
    """One positional column of the FEC layout."""

    index: int
    wire_name: str  # Standard FEC header name
    field: str | None  # LedgerEntry attribute; None for the reserved slot
    kind: FieldKind


FEC_LAYOUT: tuple[FecColumn, ...] = (
    FecColumn(0, "JournalCode", "journal_code", FieldKind.REQUIRED_STRING),
    FecColumn(1, "JournalLib", "journal_libelle", FieldKind.REQUIRED_STRING),
    FecColumn(2, "EcritureNum", "ecriture_numero", FieldKind.OPTIONAL_INTEGER),
    FecColumn(3, "EcritureDate", "ecriture_date", FieldKind.REQUIRED_DATE),
    FecColumn(4, "CompteNum", "compte_numero", FieldKind.REQUIRED_STRING),
    FecColumn(5, "CompteLib", "compte_libelle", FieldKind.REQUIRED_STRING),
    FecColumn(6, "CompAuxNum", "tiers_numero", FieldKind.OPTIONAL_STRING),
    FecColumn(7, "CompAuxLib", "tiers_libelle", FieldKind.OPTIONAL_STRING),
    FecColumn(8, "PieceRef", "piece_ref", FieldKind.OPTIONAL_STRING),
    FecColumn(9, "PieceDate", "piece_date", FieldKind.OPTIONAL_DATE),
    FecColumn(10, "EcritureLib", "libelle", FieldKind.REQUIRED_STRING),
    FecColumn(11, "Debit", "debit", FieldKind.AMOUNT),
    FecColumn(12, "Credit", "credit", FieldKind.AMOUNT),
    FecColumn(13, "EcritureLet", "lettrage", FieldKind.OPTIONAL_STRING),
    FecColumn(14, "DateLet", "date_lettrage", FieldKind.OPTIONAL_DATE),
    FecColumn(15, "ValidDate", None, FieldKind.RESERVED),  # Read but never mapped
    FecColumn(16, "Montantdevise", "montant_devise", FieldKind.OPTIONAL_AMOUNT),
    FecColumn(17, "Idevise", "devise", FieldKind.OPTIONAL_STRING),
)


# =============================================================================
# Parse options
# =============================================================================


@dataclass(frozen=True)
class ParseOptions:
    """Options for reading a FEC buffer: cell separator, text encoding, header skip."""

    separator: str = "\t"
    text_encoding: str = "utf-8"
    skip_first_line: bool = False

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        try:
            codecs.lookup(self.text_encoding)
        except LookupError:
            raise ValueError(f"Unknown text encoding {self.text_encoding!r}") from None


# =============================================================================
# Ledger entry
# =============================================================================

# snake_case attribute -> camelCase wire key used by external records
_WIRE_KEYS: dict[str, str] = {
    "journal_code": "journalCode",
    "journal_libelle": "journalLibelle",
    "ecriture_numero": "ecritureNumero",
    "ecriture_date": "ecritureDate",
    "compte_numero": "compteNumero",
    "compte_libelle": "compteLibelle",
    "tiers_numero": "tiersNumero",
    "tiers_libelle": "tiersLibelle",
    "piece_ref": "pieceRef",
    "piece_date": "pieceDate",
    "libelle": "libelle",
    "debit": "debit",
    "credit": "credit",
    "devise": "devise",
    "montant_devise": "montantDevise",
    "lettrage": "lettrage",
    "date_lettrage": "dateLettrage",
    "ecriture_lettrage": "ecritureLettrage",
}


@dataclass(frozen=True)
class LedgerEntry:
    """One FEC journal line, immutable once constructed."""

    journal_code: str
    journal_libelle: str
    ecriture_date: date
    compte_numero: str
    compte_libelle: str
    libelle: str
    debit: Decimal = Decimal(0)
    credit: Decimal = Decimal(0)
    ecriture_numero: int | None = None
    tiers_numero: str | None = None
    tiers_libelle: str | None = None
    piece_ref: str | None = None
    piece_date: date | None = None
    devise: str | None = None
    montant_devise: Decimal | None = None
    lettrage: str | None = None
    date_lettrage: date | None = None
    ecriture_lettrage: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict keyed by wire names; dates as YYYYMMDD, decimals as plain strings."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, date):
                value = value.strftime(DATE_FORMAT)
            elif isinstance(value, Decimal):
                value = format(value, "f")
            out[_WIRE_KEYS[f.name]] = value
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LedgerEntry:
        """Build an entry from wire-named (camelCase) or attribute-named keys.

        Values go through the same converters as FEC cells: dates are `date`
        objects or YYYYMMDD strings, amounts accept French formatting
        ("1 000,50"). Invalid or missing required values raise the matching
        FecParseError subclass. Missing debit/credit default to 0.
        """
        from fec_ingestion.domain.assembler import entry_from_record

        return entry_from_record(data, _WIRE_KEYS)
