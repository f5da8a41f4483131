"""Storage helpers for the JSONL receipt and error logs."""

from .log_store import LogStore, LogStoreError
from .records import ErrorRecord, LogRecord, ReceiptEntry, ReceiptRecord

__all__ = [
    "LogStore",
    "LogStoreError",
    "LogRecord",
    "ReceiptRecord",
    "ReceiptEntry",
    "ErrorRecord",
]
