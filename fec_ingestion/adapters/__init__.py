"""Source readers for FEC ingestion (in-memory decoding and splitting, no DB)."""

from fec_ingestion.adapters.fec_reader import (
    decode_buffer,
    iter_entries,
    iter_physical_lines,
    parse_fec_buffer,
    parse_fec_text,
    split_columns,
)

__all__ = [
    "decode_buffer",
    "iter_entries",
    "iter_physical_lines",
    "parse_fec_buffer",
    "parse_fec_text",
    "split_columns",
]
