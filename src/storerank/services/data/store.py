"""DataStore - JSON-file persistence for stores and transactions.

The leaderboard only reads from the data store. Every property access goes
back to disk so edits made outside the app show up on the next render.
"""

import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")

STORES_FILE = "stores.json"
TRANSACTIONS_FILE = "transactions.json"
TRACKING_FILE = "tracking.json"

RESET_FILES = (STORES_FILE, TRANSACTIONS_FILE, TRACKING_FILE)


@dataclass(frozen=True)
class Store:
    """A store listed on the leaderboard."""

    id: str
    name: str
    url: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """A single order placed against a store."""

    store_id: str
    amount: float


def parse_timestamp(value: Any) -> datetime:
    """Parse a persisted timestamp into an aware datetime.

    ISO-8601 strings are accepted as-is (naive values are treated as UTC).
    Numbers are epoch milliseconds.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _store_from_dict(data: dict[str, Any]) -> Store:
    return Store(
        id=str(data["id"]),
        name=data.get("name", ""),
        url=data.get("url", ""),
        created_at=parse_timestamp(data["createdAt"]),
    )


def _store_to_dict(store: Store) -> dict[str, Any]:
    return {
        "id": store.id,
        "name": store.name,
        "url": store.url,
        "createdAt": store.created_at.isoformat(),
    }


def _transaction_from_dict(data: dict[str, Any]) -> Transaction:
    return Transaction(store_id=str(data["storeId"]), amount=float(data["amount"]))


def _transaction_to_dict(tx: Transaction) -> dict[str, Any]:
    return {"storeId": tx.store_id, "amount": tx.amount}


class DataStore:
    """Reads and writes the store/transaction JSON files in ``data_dir``."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def stores(self) -> list[Store]:
        return self._read_records(STORES_FILE, _store_from_dict)

    @property
    def transactions(self) -> list[Transaction]:
        return self._read_records(TRANSACTIONS_FILE, _transaction_from_dict)

    def is_empty(self) -> bool:
        """True when no stores file has been written yet."""
        return not (self._data_dir / STORES_FILE).exists()

    def seed(
        self, stores: Iterable[Store], transactions: Iterable[Transaction]
    ) -> None:
        """Write the given stores and transactions, replacing existing data."""
        self._write_list(STORES_FILE, [_store_to_dict(s) for s in stores])
        self._write_list(
            TRANSACTIONS_FILE, [_transaction_to_dict(tx) for tx in transactions]
        )

    def ensure_seeded(
        self, stores: Iterable[Store], transactions: Iterable[Transaction]
    ) -> bool:
        """Seed only if the data directory holds no stores yet.

        Returns True if data was written.
        """
        if not self.is_empty():
            return False
        _log.info("Seeding demo data into %s", self._data_dir)
        self.seed(stores, transactions)
        return True

    def reset(self) -> None:
        """Delete all persisted store, transaction and tracking data."""
        for filename in RESET_FILES:
            (self._data_dir / filename).unlink(missing_ok=True)
        _log.info("Reset leaderboard data in %s", self._data_dir)

    def _read_list(self, filename: str) -> list[dict[str, Any]]:
        path = self._data_dir / filename
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError, ValueError) as exc:
            _log.warning("Could not read %s: %s", path, exc)
            return []
        if not isinstance(data, list):
            _log.warning("Expected a list in %s, got %s", path, type(data).__name__)
            return []
        return data

    def _read_records(
        self, filename: str, parse: Callable[[dict[str, Any]], T]
    ) -> list[T]:
        """Parse each record, skipping any that are malformed."""
        records = []
        for index, item in enumerate(self._read_list(filename)):
            try:
                records.append(parse(item))
            except (KeyError, TypeError, ValueError, OverflowError) as exc:
                _log.warning(
                    "Skipping record %d in %s: %s", index, filename, exc
                )
        return records

    def _write_list(self, filename: str, items: list[dict[str, Any]]) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        path = self._data_dir / filename
        path.write_text(json.dumps(items, indent=2) + "\n")
