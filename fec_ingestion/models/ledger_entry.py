"""
ORM model for stored FEC ledger entries.

Contract:
    LedgerEntryModel persists one validated LedgerEntry per row. The row's
    UUID primary key is the opaque record identifier returned to callers.
    to_dto()/from_dto() are the only conversions between the ORM row and the
    domain value.

Architecture: fec_ingestion/models. Imports from fec_kernel.db.base only.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from fec_kernel.db.base import TrackedBase

if TYPE_CHECKING:
    from fec_ingestion.domain.types import LedgerEntry


class LedgerEntryModel(TrackedBase):
    """One stored FEC journal line."""

    __tablename__ = "fec_entries"

    __table_args__ = (
        Index("ix_fec_entries_journal_code", "journal_code"),
        Index("ix_fec_entries_compte_numero", "compte_numero"),
        Index("ix_fec_entries_ecriture_numero", "ecriture_numero"),
    )

    journal_code: Mapped[str] = mapped_column(String(50), nullable=False)
    journal_libelle: Mapped[str] = mapped_column(String(200), nullable=False)
    ecriture_numero: Mapped[int | None] = mapped_column(nullable=True)
    ecriture_date: Mapped[date] = mapped_column(Date, nullable=False)
    compte_numero: Mapped[str] = mapped_column(String(50), nullable=False)
    compte_libelle: Mapped[str] = mapped_column(String(200), nullable=False)
    tiers_numero: Mapped[str | None] = mapped_column(String(50), nullable=True)
    tiers_libelle: Mapped[str | None] = mapped_column(String(200), nullable=True)
    piece_ref: Mapped[str | None] = mapped_column(String(100), nullable=True)
    piece_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    libelle: Mapped[str] = mapped_column(String(500), nullable=False)
    debit: Mapped[Decimal] = mapped_column(nullable=False)
    credit: Mapped[Decimal] = mapped_column(nullable=False)
    devise: Mapped[str | None] = mapped_column(String(10), nullable=True)
    montant_devise: Mapped[Decimal | None] = mapped_column(nullable=True)
    lettrage: Mapped[str | None] = mapped_column(String(50), nullable=True)
    date_lettrage: Mapped[date | None] = mapped_column(Date, nullable=True)
    ecriture_lettrage: Mapped[str | None] = mapped_column(String(50), nullable=True)

    def to_dto(self) -> LedgerEntry:
        from fec_ingestion.domain.types import LedgerEntry

        return LedgerEntry(
            journal_code=self.journal_code,
            journal_libelle=self.journal_libelle,
            ecriture_numero=self.ecriture_numero,
            ecriture_date=self.ecriture_date,
            compte_numero=self.compte_numero,
            compte_libelle=self.compte_libelle,
            tiers_numero=self.tiers_numero,
            tiers_libelle=self.tiers_libelle,
            piece_ref=self.piece_ref,
            piece_date=self.piece_date,
            libelle=self.libelle,
            debit=self.debit,
            credit=self.credit,
            devise=self.devise,
            montant_devise=self.montant_devise,
            lettrage=self.lettrage,
            date_lettrage=self.date_lettrage,
            ecriture_lettrage=self.ecriture_lettrage,
        )

    @classmethod
    def from_dto(cls, dto: LedgerEntry) -> LedgerEntryModel:
        return cls(
            journal_code=dto.journal_code,
            journal_libelle=dto.journal_libelle,
            ecriture_numero=dto.ecriture_numero,
            ecriture_date=dto.ecriture_date,
            compte_numero=dto.compte_numero,
            compte_libelle=dto.compte_libelle,
            tiers_numero=dto.tiers_numero,
            tiers_libelle=dto.tiers_libelle,
            piece_ref=dto.piece_ref,
            piece_date=dto.piece_date,
            libelle=dto.libelle,
            debit=dto.debit,
            credit=dto.credit,
            devise=dto.devise,
            montant_devise=dto.montant_devise,
            lettrage=dto.lettrage,
            date_lettrage=dto.date_lettrage,
            ecriture_lettrage=dto.ecriture_lettrage,
        )
