"""
FEC source reader: bytes -> text -> physical lines -> cells -> LedgerEntry.

Works on a fully buffered input. Configurable via ParseOptions: separator,
text_encoding, skip_first_line. Handles a UTF-8 BOM via utf-8-sig when the
encoding is UTF-8. No quoting: FEC cells never contain the separator.

Line numbers are always 1-based physical positions in the decoded text,
counting the skipped header and dropped blank lines.
"""

from __future__ import annotations

import codecs
from typing import Iterator

from fec_kernel.exceptions import (
    EmptyInputError,
    InsufficientColumnsError,
    UndecodableInputError,
)

from fec_ingestion.domain.assembler import assemble_entry
from fec_ingestion.domain.types import MIN_COLUMNS, LedgerEntry, ParseOptions


def _get_encoding(text_encoding: str) -> str:
    if codecs.lookup(text_encoding).name == "utf-8":
        return "utf-8-sig"  # Strip BOM if present
    return text_encoding


def decode_buffer(data: bytes, text_encoding: str = "utf-8") -> str:
    """Decode an in-memory FEC buffer."""
    try:
        return data.decode(_get_encoding(text_encoding))
    except UnicodeDecodeError as exc:
        raise UndecodableInputError(text_encoding, str(exc)) from exc


def iter_physical_lines(text: str, skip_first_line: bool = False) -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, raw_line) for every non-blank physical line.

    With skip_first_line, physical line 1 is discarded whatever it holds.
    A trailing carriage return is removed from each line.
    """
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        if skip_first_line and line_number == 1:
            continue
        if raw_line.endswith("\r"):
            raw_line = raw_line[:-1]
        if not raw_line.strip():
            continue
        yield line_number, raw_line


def split_columns(raw_line: str, separator: str, line_number: int | None = None) -> list[str]:
    """Split a line into cells; fewer than MIN_COLUMNS cells is an error."""
    cells = raw_line.split(separator)
    if len(cells) < MIN_COLUMNS:
        raise InsufficientColumnsError(line_number, len(cells), MIN_COLUMNS)
    return cells


def iter_entries(text: str, options: ParseOptions | None = None) -> Iterator[LedgerEntry]:
    """Lazily assemble entries in physical-line order; raises on the first bad line."""
    options = options or ParseOptions()
    for line_number, raw_line in iter_physical_lines(text, options.skip_first_line):
        cells = split_columns(raw_line, options.separator, line_number)
        yield assemble_entry(cells, line_number)


def parse_fec_text(text: str, options: ParseOptions | None = None) -> list[LedgerEntry]:
    """
    Parse decoded FEC content into entries (structural checks only).

    Raises EmptyInputError when the text holds no non-blank line at all,
    before any header is skipped. A header-only input yields [].
    """
    if not text.strip():
        raise EmptyInputError()
    return list(iter_entries(text, options))


def parse_fec_buffer(data: bytes, options: ParseOptions | None = None) -> list[LedgerEntry]:
    """Decode a FEC buffer with options.text_encoding and parse it."""
    options = options or ParseOptions()
    return parse_fec_text(decode_buffer(data, options.text_encoding), options)
