"""
FEC Kernel - shared infrastructure for FEC ledger ingestion.

Provides:
- Typed exception hierarchy with machine-readable codes
- Structured JSON logging with context propagation
- SQLAlchemy declarative base and engine/session management
"""

__version__ = "0.1.0"
