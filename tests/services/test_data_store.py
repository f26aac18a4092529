"""Tests for DataStore JSON persistence, seeding and reset."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from storerank.examples import demo_stores, demo_transactions
from storerank.services.data import DataStore, Transaction, parse_timestamp
from storerank.services.data.store import (
    STORES_FILE,
    TRACKING_FILE,
    TRANSACTIONS_FILE,
)
from storerank.services.leaderboard import Leaderboard
from tests.factories import make_store


class TestParseTimestamp:
    """Tests for reading persisted createdAt values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            pytest.param(
                "2024-01-02T03:04:05+00:00",
                datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                id="iso_offset",
            ),
            pytest.param(
                "2024-01-02T03:04:05Z",
                datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                id="iso_zulu",
            ),
            pytest.param(
                "2024-01-02T03:04:05",
                datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                id="naive_is_utc",
            ),
            pytest.param(
                1704164645000,
                datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                id="epoch_millis",
            ),
        ],
    )
    def test_parse(self, raw, expected: datetime) -> None:
        assert parse_timestamp(raw) == expected


class TestDataStoreReading:
    """Tests for loading stores and transactions from disk."""

    def test_missing_directory_reads_empty(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "nope")

        assert store.stores == []
        assert store.transactions == []
        assert store.is_empty()

    def test_seed_then_read(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        original = make_store("1", "Alpha", url="https://alpha.example.com/")

        store.seed([original], [Transaction("1", 12.5)])

        assert store.stores == [original]
        assert store.transactions == [Transaction("1", 12.5)]
        assert not store.is_empty()

    def test_reads_external_format(self, tmp_path: Path) -> None:
        """Numeric ids and extra fields in hand-written files are accepted."""
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / STORES_FILE).write_text(
            json.dumps(
                [{"id": 1, "name": "A", "url": "a.com", "createdAt": 1704164645000}]
            )
        )
        (data_dir / TRANSACTIONS_FILE).write_text(
            json.dumps([{"storeId": 1, "amount": 100, "note": "ignored"}])
        )

        store = DataStore(data_dir)

        assert store.stores[0].id == "1"
        assert store.transactions == [Transaction("1", 100.0)]

    def test_rereads_on_each_access(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        store.seed([make_store("1")], [])
        assert len(store.stores) == 1

        other = DataStore(tmp_path / "data")
        other.seed([make_store("1"), make_store("2")], [])

        assert len(store.stores) == 2

    @pytest.mark.parametrize(
        "content",
        [
            pytest.param(b"{not json", id="corrupt"),
            pytest.param(b'{"id": 1}', id="not_a_list"),
            pytest.param(b"\xff\xfe[not utf8", id="invalid_utf8"),
        ],
    )
    def test_unreadable_file_reads_empty(
        self, tmp_path: Path, content: bytes, caplog: pytest.LogCaptureFixture
    ) -> None:
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / STORES_FILE).write_bytes(content)

        assert DataStore(data_dir).stores == []
        assert STORES_FILE in caplog.text

    def test_malformed_records_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """One bad record in a hand-edited file does not hide the others."""
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / STORES_FILE).write_text(
            json.dumps(
                [
                    {"id": 1, "name": "Good", "url": "a.com", "createdAt": 1704164645000},
                    {"id": 2, "name": "No date", "url": "b.com"},
                    {"id": 3, "name": "Bad date", "createdAt": "yesterday"},
                    "not a record",
                    {"name": "No id", "createdAt": 1704164645000},
                ]
            )
        )
        (data_dir / TRANSACTIONS_FILE).write_text(
            json.dumps(
                [
                    {"storeId": 1, "amount": 10},
                    {"storeId": 1},
                    {"amount": 5},
                    {"storeId": 1, "amount": "lots"},
                    None,
                ]
            )
        )
        store = DataStore(data_dir)

        assert [s.name for s in store.stores] == ["Good"]
        assert store.transactions == [Transaction("1", 10.0)]
        assert "Skipping record 1 in stores.json" in caplog.text
        assert "Skipping record 4 in transactions.json" in caplog.text

    def test_leaderboard_renders_with_malformed_store(self, tmp_path: Path) -> None:
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / STORES_FILE).write_text(
            json.dumps([{"id": 1, "name": "A", "url": "a.com"}])
        )

        view = Leaderboard(DataStore(data_dir)).render()

        assert view.summary.total_stores == 0
        assert view.podium[0].is_placeholder


class TestDataStoreSeeding:
    """Tests for first-run demo data."""

    def test_ensure_seeded_writes_when_empty(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")

        assert store.ensure_seeded(demo_stores(), demo_transactions()) is True
        assert len(store.stores) == len(demo_stores())
        assert len(store.transactions) == len(demo_transactions())

    def test_ensure_seeded_keeps_existing(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        store.seed([make_store("1")], [])

        assert store.ensure_seeded(demo_stores(), demo_transactions()) is False
        assert [s.id for s in store.stores] == ["1"]


class TestDataStoreReset:
    """Tests for the destructive reset."""

    def test_reset_removes_all_files(self, tmp_path: Path) -> None:
        data_dir = tmp_path / "data"
        store = DataStore(data_dir)
        store.seed([make_store("1")], [Transaction("1", 1.0)])
        (data_dir / TRACKING_FILE).write_text("[]")

        store.reset()

        for filename in (STORES_FILE, TRANSACTIONS_FILE, TRACKING_FILE):
            assert not (data_dir / filename).exists()
        assert store.stores == []
        assert store.is_empty()

    def test_reset_when_nothing_persisted(self, tmp_path: Path) -> None:
        DataStore(tmp_path / "data").reset()
