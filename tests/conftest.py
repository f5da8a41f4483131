"""
Pytest configuration and fixtures for minerlog tests.
"""

import pytest
from loguru import logger

from minerlog import ErrorRecord, LogStore, ReceiptRecord


@pytest.fixture
def store(tmp_path):
    """Log store rooted in a fresh temporary directory."""
    return LogStore(tmp_path / "storage")


@pytest.fixture
def log_messages():
    """Collect loguru output as ``LEVEL|message`` strings."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(str(message).rstrip("\n")),
        level="DEBUG",
        format="{level}|{message}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_receipt():
    """Receipt carrying every optional field."""
    return ReceiptRecord(
        ts="2024-01-01T00:00:00Z",
        address="addr1qx9wallet",
        address_index=7,
        challenge_id="**D07C10",
        nonce="00000000deadbeef",
        hash="0000a1b2c3d4e5f6",
        crypto_receipt={
            "preimage": "abc",
            "signature": "ed25519:ff00",
            "timestamp": 1704067200,
            "nested": {"difficulty": "000FFFFF", "weights": [0.5, 1.25, None]},
        },
        is_dev_fee=False,
    )


@pytest.fixture
def sample_receipts():
    """Receipts from the two-record example scenario."""
    return [
        ReceiptRecord(ts="2024-01-01T00:00:00Z", address="0xA", challenge_id="c1", nonce="n1", hash="h1"),
        ReceiptRecord(
            ts="2024-01-01T00:00:05Z",
            address="0xB",
            challenge_id="c2",
            nonce="n2",
            hash="h2",
            isDevFee=True,
        ),
    ]


@pytest.fixture
def sample_error():
    """Error record with a structured rejection payload."""
    return ErrorRecord(
        ts="2024-01-01T00:01:00Z",
        address="0xA",
        address_index=0,
        challenge_id="c1",
        nonce="n9",
        hash="h9",
        error="Solution rejected: hash does not meet difficulty",
        response={"status": 400, "body": {"message": "invalid solution"}},
    )


@pytest.fixture
def make_receipts():
    """Factory building ``n`` distinct receipts in timestamp order."""

    def _make(n, address="0xA"):
        return [
            ReceiptRecord(
                ts=f"2024-01-01T00:{i // 60:02d}:{i % 60:02d}Z",
                address=address,
                address_index=i % 200,
                challenge_id=f"c{i}",
                nonce=f"n{i}",
                hash=f"h{i}",
            )
            for i in range(n)
        ]

    return _make
