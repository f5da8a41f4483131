"""
Tests for receipt statistics.
"""

from minerlog import ErrorRecord, ReceiptRecord
from minerlog.stats import compute_stats, load_stats, receipts_frame


def _receipt(ts, address, challenge_id, index=None, dev_fee=None):
    return ReceiptRecord(
        ts=ts,
        address=address,
        address_index=index,
        challenge_id=challenge_id,
        nonce="n",
        hash="h",
        is_dev_fee=dev_fee,
    )


def _error(address, index=None):
    return ErrorRecord(
        ts="2024-01-02T00:00:00Z",
        address=address,
        address_index=index,
        challenge_id="c9",
        nonce="n",
        hash="h",
        error="rejected",
    )


class TestComputeStats:
    """Tests for compute_stats."""

    def test_empty(self):
        """No data yields zero counts rather than an error."""
        stats = compute_stats([], [])
        assert stats.total_receipts == 0
        assert stats.dev_fee_receipts == 0
        assert stats.total_errors == 0
        assert stats.unique_challenges == 0
        assert stats.first_ts is None
        assert stats.last_ts is None
        assert stats.per_address == []
        assert stats.success_rate is None

    def test_dev_fee_split(self, sample_receipts):
        """Dev fee receipts are counted apart from user receipts."""
        stats = compute_stats(sample_receipts)
        assert stats.total_receipts == 2
        assert stats.user_receipts == 1
        assert stats.dev_fee_receipts == 1
        assert stats.first_ts == "2024-01-01T00:00:00Z"
        assert stats.last_ts == "2024-01-01T00:00:05Z"

    def test_per_address(self):
        """Counts are grouped per address, busiest first."""
        receipts = [
            _receipt("2024-01-01T00:00:00Z", "0xB", "c1", index=1),
            _receipt("2024-01-01T00:00:01Z", "0xA", "c1", index=0),
            _receipt("2024-01-01T00:00:02Z", "0xB", "c2", index=1),
        ]
        errors = [_error("0xA", 0), _error("0xC", 2), _error("0xC", 2)]

        stats = compute_stats(receipts, errors)

        assert stats.unique_challenges == 2
        assert stats.unique_addresses == 3
        rows = [(r.address, r.address_index, r.receipts, r.errors) for r in stats.per_address]
        assert rows == [
            ("0xB", 1, 2, 0),
            ("0xA", 0, 1, 1),
            ("0xC", 2, 0, 2),
        ]
        assert stats.success_rate == 0.5

    def test_frame_excludes_payload(self, sample_receipt):
        """Opaque payloads stay out of the statistics frame."""
        df = receipts_frame([sample_receipt])
        assert df.columns == ["ts", "address", "addressIndex", "challenge_id", "isDevFee"]
        assert df.height == 1


def test_load_stats(store, sample_receipts, sample_error):
    """Statistics read both channels of a store."""
    for receipt in sample_receipts:
        store.append_receipt(receipt)
    store.append_error(sample_error)

    stats = load_stats(store)
    assert stats.total_receipts == 2
    assert stats.total_errors == 1
    assert stats.unique_addresses == 2
