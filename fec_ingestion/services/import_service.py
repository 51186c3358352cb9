"""
Import service: decode -> split -> assemble -> validate -> store.

Strictly sequential and fail-fast. The first error from any line, or the
first entry violating a business rule, aborts the whole import: no partial
list is returned and nothing reaches the store.
Uses structured logging (LogContext, get_logger("ingestion.*")).
"""

from __future__ import annotations

from uuid import uuid4

from fec_kernel.exceptions import FecParseError
from fec_kernel.logging_config import LogContext, get_logger

from fec_ingestion.adapters.fec_reader import parse_fec_buffer
from fec_ingestion.domain.types import LedgerEntry, ParseOptions
from fec_ingestion.domain.validators import validate_entries
from fec_ingestion.services.entry_store import LedgerEntryStore, StoredLedgerEntry

logger = get_logger("ingestion.import_service")


class FecImportService:
    """Orchestrates FEC parsing and validation; hands accepted entries to an optional store."""

    def __init__(self, store: LedgerEntryStore | None = None):
        self._store = store

    def parse(self, data: bytes, options: ParseOptions | None = None) -> list[LedgerEntry]:
        """Parse and validate a buffered FEC file. Raises FecParseError on the first failure."""
        options = options or ParseOptions()
        try:
            entries = parse_fec_buffer(data, options)
        except FecParseError as exc:
            logger.warning(
                "fec_parse_failed",
                extra={"kind": exc.kind, "line": exc.line, "field": exc.field, "error": exc.message},
            )
            raise
        logger.info("fec_entries_parsed", extra={"count": len(entries)})

        try:
            validate_entries(entries)
        except FecParseError as exc:
            logger.warning(
                "fec_entry_rejected",
                extra={"kind": exc.kind, "position": exc.line, "error": exc.message},
            )
            raise
        return entries

    def import_buffer(
        self,
        data: bytes,
        options: ParseOptions | None = None,
        source_name: str | None = None,
    ) -> list[StoredLedgerEntry]:
        """Parse, validate and store a FEC file; returns the stored records in input order."""
        if self._store is None:
            raise RuntimeError("FecImportService was created without a store")
        options = options or ParseOptions()

        with LogContext.bind(import_id=str(uuid4()), source_name=source_name):
            logger.info(
                "fec_import_started",
                extra={
                    "bytes": len(data),
                    "separator": options.separator,
                    "text_encoding": options.text_encoding,
                    "skip_first_line": options.skip_first_line,
                },
            )
            entries = self.parse(data, options)
            stored = self._store.save_entries(entries)
            logger.info("fec_import_completed", extra={"count": len(stored)})
            return stored
