#!/usr/bin/env python3
"""
Parse a FEC file, validate it, and print the entries (or the first error) as JSON.

Options come from a named profile (fec_config/profiles/*.yaml) and can be
overridden individually on the command line. Optionally stores the accepted
entries in a database.

Usage:
    python3 scripts/parse_fec.py --file <path> [options]

Examples:
    # Tab-separated file, no header (profile "standard")
    python3 scripts/parse_fec.py --file 123456789FEC20241231.txt

    # Pipe-separated export with a header line
    python3 scripts/parse_fec.py --file export.txt --profile pipe_with_header

    # Structural parsing only, no debit/credit rules
    python3 scripts/parse_fec.py --file export.txt --no-validate

    # Parse, validate and store
    python3 scripts/parse_fec.py --file export.txt --db-url sqlite:///fec.db
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Project root on sys.path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse and validate a FEC ledger export.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--file",
        required=True,
        type=Path,
        help="Path to the FEC file.",
    )
    parser.add_argument(
        "--profile",
        default="standard",
        help="Parse-option profile name (default: standard).",
    )
    parser.add_argument(
        "--separator",
        default=None,
        help="Override the profile's cell separator (use '\\t' for tab).",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Override the profile's text encoding.",
    )
    parser.add_argument(
        "--skip-first-line",
        action="store_true",
        default=None,
        help="Discard the first line as a header.",
    )
    # Stored entries are always validated
    output_mode = parser.add_mutually_exclusive_group()
    output_mode.add_argument(
        "--no-validate",
        action="store_true",
        help="Only parse; do not apply the debit/credit business rules.",
    )
    output_mode.add_argument(
        "--db-url",
        default=None,
        help="Store accepted entries in this database (SQLAlchemy URL).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit structured JSON logs on stderr.",
    )
    return parser.parse_args()


def main() -> int:
    args = _parse_args()

    source_path = args.file.resolve()
    if not source_path.is_file():
        print(f"ERROR: File not found: {source_path}", file=sys.stderr)
        return 1

    # Lazy imports so we fail fast on args first
    from dataclasses import replace

    from fec_config import get_parse_options
    from fec_ingestion.adapters import parse_fec_buffer
    from fec_ingestion.services import FecImportService, SqlAlchemyLedgerEntryStore
    from fec_kernel.exceptions import FecError, FecParseError
    from fec_kernel.logging_config import configure_logging

    # stderr carries exactly one JSON error document unless --verbose
    configure_logging(level=logging.INFO if args.verbose else logging.ERROR)

    try:
        options = get_parse_options(args.profile)
        overrides = {}
        if args.separator is not None:
            overrides["separator"] = args.separator.replace("\\t", "\t")
        if args.encoding is not None:
            overrides["text_encoding"] = args.encoding
        if args.skip_first_line:
            overrides["skip_first_line"] = True
        options = replace(options, **overrides)
    except (FecError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    data = source_path.read_bytes()

    try:
        if args.db_url:
            from fec_kernel.db.engine import create_tables, init_engine_from_url, session_scope

            init_engine_from_url(args.db_url)
            create_tables()
            with session_scope() as session:
                service = FecImportService(SqlAlchemyLedgerEntryStore(session))
                stored = service.import_buffer(data, options, source_name=source_path.name)
                output = [{"id": str(s.record_id), **s.entry.to_dict()} for s in stored]
        elif args.no_validate:
            output = [e.to_dict() for e in parse_fec_buffer(data, options)]
        else:
            output = [e.to_dict() for e in FecImportService().parse(data, options)]
    except FecParseError as e:
        print(json.dumps({"error": e.code, **e.to_dict()}, ensure_ascii=False), file=sys.stderr)
        return 1

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
