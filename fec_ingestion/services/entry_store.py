"""
Storage collaborator for validated FEC entries.

Contract:
    LedgerEntryStore.save_entries() accepts an ordered sequence of entries and
    returns, for each, an opaque record id plus the stored entry, or fails the
    whole batch. The import service depends only on this protocol.

SqlAlchemyLedgerEntryStore works inside the caller's session: it flushes but
never commits, so the caller's transaction (e.g. session_scope()) decides.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Protocol, Sequence, runtime_checkable
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from fec_kernel.logging_config import get_logger

from fec_ingestion.domain.assembler import coerce_fields
from fec_ingestion.domain.types import LedgerEntry
from fec_ingestion.domain.validators import validate_entry
from fec_ingestion.models.ledger_entry import LedgerEntryModel

logger = get_logger("ingestion.entry_store")


@dataclass(frozen=True)
class StoredLedgerEntry:
    """A stored entry and its record id."""

    record_id: UUID
    entry: LedgerEntry


@runtime_checkable
class LedgerEntryStore(Protocol):
    """Protocol for persisting an ordered batch of validated entries."""

    def save_entries(self, entries: Sequence[LedgerEntry]) -> list[StoredLedgerEntry]:
        """Store all entries in order, or none."""
        ...


class SqlAlchemyLedgerEntryStore:
    """LedgerEntryStore backed by the fec_entries table."""

    def __init__(self, session: Session):
        self._session = session

    def save_entries(self, entries: Sequence[LedgerEntry]) -> list[StoredLedgerEntry]:
        models = [LedgerEntryModel.from_dto(e) for e in entries]
        self._session.add_all(models)
        self._session.flush()
        logger.info("fec_entries_stored", extra={"count": len(models)})
        return [StoredLedgerEntry(record_id=m.id, entry=m.to_dto()) for m in models]

    def get_entry(self, record_id: UUID) -> StoredLedgerEntry | None:
        model = self._session.get(LedgerEntryModel, record_id)
        if model is None:
            return None
        return StoredLedgerEntry(record_id=model.id, entry=model.to_dto())

    def list_entries(
        self,
        journal_code: str | None = None,
        compte_numero: str | None = None,
        ecriture_numero: int | None = None,
    ) -> list[StoredLedgerEntry]:
        """Stored entries, optionally filtered, ordered by ecriture date then number."""
        stmt = select(LedgerEntryModel)
        if journal_code is not None:
            stmt = stmt.where(LedgerEntryModel.journal_code == journal_code)
        if compte_numero is not None:
            stmt = stmt.where(LedgerEntryModel.compte_numero == compte_numero)
        if ecriture_numero is not None:
            stmt = stmt.where(LedgerEntryModel.ecriture_numero == ecriture_numero)
        stmt = stmt.order_by(
            LedgerEntryModel.ecriture_date,
            LedgerEntryModel.ecriture_numero,
            LedgerEntryModel.created_at,
        )
        return [
            StoredLedgerEntry(record_id=m.id, entry=m.to_dto())
            for m in self._session.scalars(stmt)
        ]

    def update_entry(self, record_id: UUID, **changes: Any) -> StoredLedgerEntry | None:
        """
        Apply attribute changes to a stored entry.

        Values are converted like FEC cells ("20240105", "1 000,50"); an
        unknown attribute raises ValueError and a malformed value the matching
        FecParseError. The merged entry is re-validated before anything is
        written; returns None when no entry has that id. Changing `lettrage`
        also updates `ecriture_lettrage`.
        """
        changes = coerce_fields(changes)
        model = self._session.get(LedgerEntryModel, record_id)
        if model is None:
            return None
        if "lettrage" in changes and "ecriture_lettrage" not in changes:
            changes["ecriture_lettrage"] = changes["lettrage"]
        merged = replace(model.to_dto(), **changes)
        validate_entry(merged)
        for name, value in changes.items():
            setattr(model, name, getattr(merged, name))
        self._session.flush()
        logger.info("fec_entry_updated", extra={"record_id": record_id, "fields": sorted(changes)})
        return StoredLedgerEntry(record_id=model.id, entry=model.to_dto())

    def delete_entries(self, record_ids: Iterable[UUID]) -> int:
        """Delete entries by id; returns how many rows were removed."""
        ids = list(record_ids)
        if not ids:
            return 0
        result = self._session.execute(
            delete(LedgerEntryModel).where(LedgerEntryModel.id.in_(ids))
        )
        self._session.flush()
        deleted = result.rowcount or 0
        logger.info("fec_entries_deleted", extra={"requested": len(ids), "deleted": deleted})
        return deleted
