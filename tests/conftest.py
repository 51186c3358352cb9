"""
Pytest fixtures for the FEC ingestion test suite.

Provides:
- Sample FEC lines and buffers
- In-memory SQLite sessions for the entry store
- Logging state isolation
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from fec_ingestion.domain.types import LedgerEntry
from fec_kernel.db.engine import (
    create_tables,
    drop_tables,
    get_session,
    init_engine_from_url,
    reset_engine,
)
from fec_kernel.logging_config import LogContext, reset_logging

from tests.fec_samples import PURCHASE_LINE, SALE_LINE


@pytest.fixture
def sale_line() -> str:
    return SALE_LINE


@pytest.fixture
def fec_buffer() -> bytes:
    return f"{SALE_LINE}\n{PURCHASE_LINE}\n".encode("utf-8")


@pytest.fixture
def sale_entry() -> LedgerEntry:
    return LedgerEntry(
        journal_code="VT",
        journal_libelle="Ventes",
        ecriture_numero=1,
        ecriture_date=date(2024, 1, 1),
        compte_numero="411000",
        compte_libelle="Clients",
        piece_ref="FAC001",
        piece_date=date(2024, 1, 1),
        libelle="Vente produit",
        debit=Decimal("1000"),
        credit=Decimal("0"),
    )


@pytest.fixture
def session() -> Session:
    """Session bound to a fresh in-memory SQLite database."""
    init_engine_from_url("sqlite://")
    create_tables()
    s = get_session()
    try:
        yield s
    finally:
        s.rollback()
        s.close()
        drop_tables()
        reset_engine()


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
