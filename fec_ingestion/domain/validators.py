"""
Business-rule validators for assembled FEC entries.

Runs after parsing and may also be applied to externally supplied entries.
All rules are evaluated for an entry and reported together; across a batch
validation stops at the first offending entry.

Architecture: fec_ingestion/domain. ZERO I/O.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from fec_kernel.exceptions import SemanticViolationError

from fec_ingestion.domain.types import LedgerEntry

_ZERO = Decimal(0)

BOTH_SIDES = "an entry cannot have both a debit and a credit"
NO_SIDE = "an entry must have at least one of debit or credit"
NEGATIVE_AMOUNT = "debit and credit amounts cannot be negative"


def entry_violations(entry: LedgerEntry) -> list[str]:
    """Return the business-rule violations of one entry (empty when valid)."""
    violations: list[str] = []
    if entry.debit > _ZERO and entry.credit > _ZERO:
        violations.append(BOTH_SIDES)
    if entry.debit == _ZERO and entry.credit == _ZERO:
        violations.append(NO_SIDE)
    if entry.debit < _ZERO or entry.credit < _ZERO:
        violations.append(NEGATIVE_AMOUNT)
    return violations


def validate_entry(entry: LedgerEntry, position: int | None = None) -> None:
    """Raise SemanticViolationError listing every violated rule of `entry`."""
    violations = entry_violations(entry)
    if violations:
        raise SemanticViolationError(violations, position)


def validate_entries(entries: Iterable[LedgerEntry]) -> None:
    """Validate entries in order at 1-based positions; the first failure propagates."""
    for position, entry in enumerate(entries, start=1):
        validate_entry(entry, position)
