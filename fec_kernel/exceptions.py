"""
Typed Exception Hierarchy for FEC ingestion.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A rejected FEC file must be reported precisely: which line, which column,
what went wrong. Callers (an HTTP layer, a CLI, a batch job) render that
diagnostic without parsing message strings, so every error:
  1. Has a TYPED exception class (catch by type, not message)
  2. Has a CODE attribute (machine-readable, API-safe)
  3. Carries structured DATA (kind, line, field, message)

Example:
    try:
        entries = service.parse(data, options)
    except InsufficientColumnsError as e:
        print(f"Line {e.line} has only {e.actual_count} columns")
    except FecParseError as e:
        api_response(status=400, body=e.to_dict())

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    FecError (base)
    |
    +-- FecParseError
    |   +-- EmptyInputError
    |   +-- UndecodableInputError
    |   +-- InsufficientColumnsError
    |   +-- MissingRequiredFieldError
    |   +-- InvalidNumberError
    |   +-- InvalidAmountError
    |   +-- InvalidDateError
    |   +-- SemanticViolationError
    |
    +-- ConfigError
        +-- UnknownProfileError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                    | When Raised
-----------|-------------------------|------------------------------------------
Parse      | EMPTY_INPUT             | No non-blank line after decoding
           | UNDECODABLE_INPUT       | Bytes invalid for the configured encoding
           | INSUFFICIENT_COLUMNS    | Fewer than 13 cells on a line
           | MISSING_REQUIRED_FIELD  | Required cell empty or absent
           | INVALID_NUMBER          | Integer cell is not a base-10 integer
           | INVALID_AMOUNT          | Amount cell is not a decimal
           | INVALID_DATE            | Date cell not YYYYMMDD or not a real date
           | SEMANTIC_VIOLATION      | Debit/credit business rules broken
-----------|-------------------------|------------------------------------------
Config     | UNKNOWN_PROFILE         | No parse-option profile with that name

===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence


class ParseErrorKind(str, Enum):
    """Kinds of terminal parse failures."""

    EMPTY_INPUT = "EMPTY_INPUT"
    UNDECODABLE_INPUT = "UNDECODABLE_INPUT"
    INSUFFICIENT_COLUMNS = "INSUFFICIENT_COLUMNS"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"
    SEMANTIC_VIOLATION = "SEMANTIC_VIOLATION"


class FecError(Exception):
    """
    Base exception for all FEC ingestion errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "FEC_ERROR"


# Parse-related exceptions


class FecParseError(FecError):
    """
    Base exception for a rejected FEC input.

    Every parse error carries its kind, the 1-based line it refers to (when
    known), the canonical field name (when the failure is field-specific)
    and a human-readable message.
    """

    code: str = "FEC_PARSE_ERROR"
    kind: ParseErrorKind

    def __init__(self, message: str, line: int | None = None, field: str | None = None):
        self.message = message
        self.line = line
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Structured payload for rendering the diagnostic."""
        return {
            "kind": self.kind.value,
            "line": self.line,
            "field": self.field,
            "message": self.message,
        }


def _at(line: int | None) -> str:
    return f"Line {line}: " if line is not None else ""


class EmptyInputError(FecParseError):
    """Decoded input contains no non-blank line."""

    code: str = ParseErrorKind.EMPTY_INPUT.value
    kind = ParseErrorKind.EMPTY_INPUT

    def __init__(self):
        super().__init__("FEC input is empty")


class UndecodableInputError(FecParseError):
    """Input bytes cannot be decoded with the configured text encoding."""

    code: str = ParseErrorKind.UNDECODABLE_INPUT.value
    kind = ParseErrorKind.UNDECODABLE_INPUT

    def __init__(self, encoding: str, reason: str):
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"FEC input cannot be decoded as {encoding}: {reason}")


class InsufficientColumnsError(FecParseError):
    """A line has fewer cells than the FEC minimum."""

    code: str = ParseErrorKind.INSUFFICIENT_COLUMNS.value
    kind = ParseErrorKind.INSUFFICIENT_COLUMNS

    def __init__(self, line: int | None, actual_count: int, minimum: int = 13):
        self.actual_count = actual_count
        self.minimum = minimum
        super().__init__(
            f"{_at(line)}insufficient number of columns ({actual_count} instead of at least {minimum})",
            line=line,
        )


class MissingRequiredFieldError(FecParseError):
    """A required cell is empty or absent."""

    code: str = ParseErrorKind.MISSING_REQUIRED_FIELD.value
    kind = ParseErrorKind.MISSING_REQUIRED_FIELD

    def __init__(self, field: str, line: int | None = None):
        super().__init__(f"{_at(line)}field {field} is required", line=line, field=field)


class InvalidNumberError(FecParseError):
    """An integer cell does not hold a base-10 integer."""

    code: str = ParseErrorKind.INVALID_NUMBER.value
    kind = ParseErrorKind.INVALID_NUMBER

    def __init__(self, field: str, value: str, line: int | None = None):
        self.value = value
        super().__init__(f"{_at(line)}field {field} must be a valid number", line=line, field=field)


class InvalidAmountError(FecParseError):
    """An amount cell is not a decimal after normalization."""

    code: str = ParseErrorKind.INVALID_AMOUNT.value
    kind = ParseErrorKind.INVALID_AMOUNT

    def __init__(self, field: str, value: str, line: int | None = None):
        self.value = value
        super().__init__(f"{_at(line)}field {field} must be a valid amount", line=line, field=field)


class InvalidDateError(FecParseError):
    """A date cell is not YYYYMMDD or does not denote a calendar date."""

    code: str = ParseErrorKind.INVALID_DATE.value
    kind = ParseErrorKind.INVALID_DATE

    def __init__(self, field: str, value: str, reason: str, line: int | None = None):
        self.value = value
        self.reason = reason
        super().__init__(f"{_at(line)}field {field} {reason}", line=line, field=field)


class SemanticViolationError(FecParseError):
    """
    One or more business rules fail on an assembled entry.

    `line` holds the entry's 1-based position in the validated batch, not
    its physical line: validation may run on entries that were never parsed.
    """

    code: str = ParseErrorKind.SEMANTIC_VIOLATION.value
    kind = ParseErrorKind.SEMANTIC_VIOLATION

    def __init__(self, violations: Sequence[str], position: int | None = None):
        self.violations = tuple(violations)
        self.position = position
        where = f" (entry {position})" if position is not None else ""
        super().__init__(
            f"Validation error{where}: {', '.join(self.violations)}",
            line=position,
        )


# Configuration exceptions


class ConfigError(FecError):
    """Base exception for configuration errors."""

    code: str = "CONFIG_ERROR"


class UnknownProfileError(ConfigError):
    """No parse-option profile exists with the requested name."""

    code: str = "UNKNOWN_PROFILE"

    def __init__(self, profile: str, available: Sequence[str]):
        self.profile = profile
        self.available = tuple(available)
        super().__init__(
            f"Unknown parse profile {profile!r} (available: {', '.join(self.available) or 'none'})"
        )
