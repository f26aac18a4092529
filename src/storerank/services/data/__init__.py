"""Data services: store/transaction models and JSON persistence."""

from storerank.services.data.store import (
    DataStore,
    Store,
    Transaction,
    parse_timestamp,
)

__all__ = [
    "DataStore",
    "Store",
    "Transaction",
    "parse_timestamp",
]
