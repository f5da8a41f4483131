"""Append-only JSONL logs for proof-of-work mining receipts and errors."""

from .storage import (
    ErrorRecord,
    LogRecord,
    LogStore,
    LogStoreError,
    ReceiptEntry,
    ReceiptRecord,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorRecord",
    "LogRecord",
    "LogStore",
    "LogStoreError",
    "ReceiptEntry",
    "ReceiptRecord",
]
