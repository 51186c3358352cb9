"""
fec_ingestion -- FEC (Fichier des Écritures Comptables) ledger ingestion.

Decodes a buffered FEC export, splits it into positional cells, converts
each cell to a typed value, validates debit/credit business rules and hands
the ordered entries to a storage collaborator. Fail-fast: the first error
aborts the whole import.

Architecture:
    domain/    pure types, converters, assembler, validators (ZERO I/O)
    adapters/  buffer decoding and line/column splitting
    models/    SQLAlchemy ORM for stored entries
    services/  import orchestration and entry storage
"""
