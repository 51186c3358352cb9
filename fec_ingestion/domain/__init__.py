"""
fec_ingestion.domain -- Pure types, converters and validators for FEC ingestion.

ZERO I/O. Imports only from fec_kernel.exceptions.
"""

from fec_ingestion.domain.assembler import assemble_entry, coerce_fields
from fec_ingestion.domain.types import (
    FEC_LAYOUT,
    MIN_COLUMNS,
    FecColumn,
    FieldKind,
    LedgerEntry,
    ParseOptions,
)
from fec_ingestion.domain.validators import (
    entry_violations,
    validate_entries,
    validate_entry,
)

__all__ = [
    "FEC_LAYOUT",
    "MIN_COLUMNS",
    "FecColumn",
    "FieldKind",
    "LedgerEntry",
    "ParseOptions",
    "assemble_entry",
    "coerce_fields",
    "entry_violations",
    "validate_entries",
    "validate_entry",
]
