"""FEC ingestion services (import orchestration, entry storage)."""

from fec_ingestion.services.entry_store import (
    LedgerEntryStore,
    SqlAlchemyLedgerEntryStore,
    StoredLedgerEntry,
)
from fec_ingestion.services.import_service import FecImportService

__all__ = [
    "FecImportService",
    "LedgerEntryStore",
    "SqlAlchemyLedgerEntryStore",
    "StoredLedgerEntry",
]
