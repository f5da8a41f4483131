"""Aggregate statistics over the receipts and errors logs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import polars as pl

from .fields import ADDRESS, ADDRESS_INDEX, CHALLENGE_ID, IS_DEV_FEE, TS
from .storage import ErrorRecord, LogStore, ReceiptEntry

RECEIPTS = "receipts"
ERRORS = "errors"

RECEIPT_STATS_SCHEMA: dict[str, pl.DataType] = {
    TS: pl.Utf8,
    ADDRESS: pl.Utf8,
    ADDRESS_INDEX: pl.Int64,
    CHALLENGE_ID: pl.Utf8,
    IS_DEV_FEE: pl.Boolean,
}

ERROR_STATS_SCHEMA: dict[str, pl.DataType] = {
    TS: pl.Utf8,
    ADDRESS: pl.Utf8,
    ADDRESS_INDEX: pl.Int64,
}


@dataclass(slots=True)
class AddressStats:
    address: str
    address_index: int | None
    receipts: int
    errors: int


@dataclass(slots=True)
class MiningStats:
    total_receipts: int
    user_receipts: int
    dev_fee_receipts: int
    total_errors: int
    unique_challenges: int
    first_ts: str | None
    last_ts: str | None
    per_address: list[AddressStats] = field(default_factory=list)

    @property
    def unique_addresses(self) -> int:
        return len(self.per_address)

    @property
    def success_rate(self) -> float | None:
        attempts = self.total_receipts + self.total_errors
        if attempts == 0:
            return None
        return self.total_receipts / attempts


def receipts_frame(receipts: Sequence[ReceiptEntry]) -> pl.DataFrame:
    """Project the scalar receipt fields into a DataFrame.

    Opaque payloads are left out since they have no fixed shape.
    """
    return pl.DataFrame(
        {
            TS: [r.ts for r in receipts],
            ADDRESS: [r.address for r in receipts],
            ADDRESS_INDEX: [r.address_index for r in receipts],
            CHALLENGE_ID: [r.challenge_id for r in receipts],
            IS_DEV_FEE: [bool(r.is_dev_fee) for r in receipts],
        },
        schema=RECEIPT_STATS_SCHEMA,
    )


def errors_frame(errors: Sequence[ErrorRecord]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            TS: [e.ts for e in errors],
            ADDRESS: [e.address for e in errors],
            ADDRESS_INDEX: [e.address_index for e in errors],
        },
        schema=ERROR_STATS_SCHEMA,
    )


def compute_stats(
    receipts: Sequence[ReceiptEntry],
    errors: Sequence[ErrorRecord] = (),
) -> MiningStats:
    """Summarise receipts and errors into counts per channel and per address."""
    receipt_df = receipts_frame(receipts)
    error_df = errors_frame(errors)

    dev_fee = int(receipt_df[IS_DEV_FEE].sum())
    total = receipt_df.height

    return MiningStats(
        total_receipts=total,
        user_receipts=total - dev_fee,
        dev_fee_receipts=dev_fee,
        total_errors=error_df.height,
        unique_challenges=receipt_df[CHALLENGE_ID].n_unique(),
        first_ts=receipt_df[TS].min(),
        last_ts=receipt_df[TS].max(),
        per_address=_per_address(receipt_df, error_df),
    )


def load_stats(store: LogStore) -> MiningStats:
    """Read both channels of ``store`` and summarise them."""
    return compute_stats(store.read_all_receipts(), store.read_all_errors())


def _per_address(receipt_df: pl.DataFrame, error_df: pl.DataFrame) -> list[AddressStats]:
    receipt_counts = receipt_df.group_by(ADDRESS).agg(
        pl.len().alias(RECEIPTS),
        pl.col(ADDRESS_INDEX).drop_nulls().first(),
    )
    error_counts = error_df.group_by(ADDRESS).agg(
        pl.len().alias(ERRORS),
        pl.col(ADDRESS_INDEX).drop_nulls().first(),
    )

    merged = (
        receipt_counts.join(error_counts, on=ADDRESS, how="full", coalesce=True, suffix="_err")
        .with_columns(
            pl.col(RECEIPTS).fill_null(0),
            pl.col(ERRORS).fill_null(0),
            pl.coalesce(ADDRESS_INDEX, f"{ADDRESS_INDEX}_err").alias(ADDRESS_INDEX),
        )
        .sort([RECEIPTS, ADDRESS], descending=[True, False])
    )

    return [
        AddressStats(
            address=row[ADDRESS],
            address_index=row[ADDRESS_INDEX],
            receipts=int(row[RECEIPTS]),
            errors=int(row[ERRORS]),
        )
        for row in merged.iter_rows(named=True)
    ]


__all__ = [
    "AddressStats",
    "MiningStats",
    "compute_stats",
    "load_stats",
    "receipts_frame",
    "errors_frame",
]
