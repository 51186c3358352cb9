"""ORM models for stored FEC entries."""

from fec_ingestion.models.ledger_entry import LedgerEntryModel

__all__ = ["LedgerEntryModel"]
