from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..fields import (
    ADDRESS_INDEX,
    CRYPTO_RECEIPT,
    IS_DEV_FEE,
)


class LogRecord(BaseModel):
    """Fields shared by every line in the receipts and errors logs.

    Unknown keys are kept as extras so that a line written by a newer miner
    survives a read/append cycle untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    ts: str
    address: str
    address_index: int | None = Field(default=None, alias=ADDRESS_INDEX)
    challenge_id: str
    nonce: str
    hash: str

    def to_json_line(self) -> str:
        """Serialise to a single JSON object without the trailing newline.

        Declared optional fields left at ``None`` are omitted; extras are
        written as they were read, nulls included.
        """
        unset = {
            name
            for name, info in type(self).model_fields.items()
            if not info.is_required() and getattr(self, name) is None
        }
        return self.model_dump_json(by_alias=True, exclude=unset)

    @classmethod
    def from_json_line(cls, line: str | bytes):
        """Parse one stored line; raises ``pydantic.ValidationError`` on bad input."""
        return cls.model_validate_json(line)


class ReceiptRecord(LogRecord):
    """An accepted proof-of-work solution."""

    crypto_receipt: Any = Field(default=None, alias=CRYPTO_RECEIPT)
    is_dev_fee: bool | None = Field(default=None, alias=IS_DEV_FEE)


# Name used by the statistics side of the miner.
ReceiptEntry = ReceiptRecord


class ErrorRecord(LogRecord):
    """A rejected or failed solution submission."""

    error: str
    response: Any = None


__all__ = ["LogRecord", "ReceiptRecord", "ReceiptEntry", "ErrorRecord"]
