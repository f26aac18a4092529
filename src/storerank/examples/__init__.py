"""Examples package - demo stores and transactions for first launch."""

from storerank.examples.demo_data import (
    APP_INFO,
    METRIC_FILTERS,
    demo_stores,
    demo_transactions,
)

__all__ = [
    "APP_INFO",
    "METRIC_FILTERS",
    "demo_stores",
    "demo_transactions",
]
