from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from loguru import logger
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..const import ERRORS_FILENAME, RECEIPTS_FILENAME
from .records import ErrorRecord, LogRecord, ReceiptRecord

R = TypeVar("R", bound=LogRecord)


class LogStoreError(RuntimeError):
    """Raised when the store cannot be set up on its storage directory."""


class LogStore:
    """Persist mining receipts and submission errors to append-only JSONL files.

    Each channel lives in its own file under ``root``. Appends never raise:
    I/O and serialisation faults are logged and the record is dropped, so the
    mining loop that produced it keeps running. Reads degrade the same way,
    skipping corrupt lines and returning an empty list when a file cannot be
    read at all.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Cannot create log directory {}: {}", self.root, exc)
            raise LogStoreError(f"Cannot create log directory {self.root}") from exc

        self.receipts_path = self.root / RECEIPTS_FILENAME
        self.errors_path = self.root / ERRORS_FILENAME

    # Writers --------------------------------------------------------------

    def append_receipt(self, record: ReceiptRecord) -> None:
        """Append one receipt to ``receipts.jsonl``."""
        self._append(self.receipts_path, record, "receipt")

    def append_error(self, record: ErrorRecord) -> None:
        """Append one error record to ``errors.jsonl``."""
        self._append(self.errors_path, record, "error")

    # Readers --------------------------------------------------------------

    def read_all_receipts(self) -> list[ReceiptRecord]:
        """Return every readable receipt, oldest first."""
        return self._read_all(self.receipts_path, ReceiptRecord)

    def read_recent_receipts(self, count: int) -> list[ReceiptRecord]:
        """Return the last ``count`` readable receipts, oldest of them first."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []

        recent: list[ReceiptRecord] = []
        for line in reversed(self._read_lines(self.receipts_path)):
            record = self._parse_line(self.receipts_path, ReceiptRecord, line)
            if record is None:
                continue
            recent.append(record)
            if len(recent) == count:
                break
        recent.reverse()
        return recent

    def read_all_errors(self) -> list[ErrorRecord]:
        """Return every readable error record, oldest first."""
        return self._read_all(self.errors_path, ErrorRecord)

    # Internal helpers -----------------------------------------------------

    def _append(self, path: Path, record: LogRecord, kind: str) -> None:
        try:
            line = record.to_json_line()
        except PydanticSerializationError as exc:
            logger.error("Failed to serialise {} for challenge {}: {}", kind, record.challenge_id, exc)
            return

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as wf:
                # One write per record so the line lands in a single append.
                wf.write(line + "\n")
        except OSError as exc:
            logger.error("Failed to log {} to {}: {}", kind, path, exc)
            return

        logger.debug("Logged {} for challenge {} into {}", kind, record.challenge_id, path)

    def _read_all(self, path: Path, record_cls: type[R]) -> list[R]:
        records: list[R] = []
        for line in self._read_lines(path):
            record = self._parse_line(path, record_cls, line)
            if record is not None:
                records.append(record)
        return records

    def _read_lines(self, path: Path) -> list[bytes]:
        try:
            content = path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.error("Failed to read {}: {}", path, exc)
            return []

        return [line for line in content.split(b"\n") if line.strip()]

    def _parse_line(self, path: Path, record_cls: type[R], line: bytes) -> R | None:
        try:
            return record_cls.from_json_line(line.decode("utf-8"))
        except UnicodeDecodeError as exc:
            reason = str(exc)
        except ValidationError as exc:
            reason = _first_error(exc)

        raw = line.decode("utf-8", errors="replace")
        logger.warning("Skip corrupt line in {}: {!r} ({})", path.name, raw, reason)
        return None


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else first["msg"]


__all__ = ["LogStore", "LogStoreError"]
