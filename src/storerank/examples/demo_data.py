"""Demo data definitions.

This module contains the initial state written on first launch:
- DEMO_STORES: Store names, URLs and how many days ago each opened
- DEMO_ORDERS: Order amounts per store
- demo_stores() / demo_transactions(): Build model objects from the above
- METRIC_FILTERS: The three leaderboard filter buttons
- APP_INFO: Application metadata
"""

from datetime import datetime, timedelta, timezone

from storerank.services.data import Store, Transaction

DEMO_STORES = [
    {"id": "1", "name": "Northwind Goods", "url": "https://northwind.example.com/", "days_ago": 120},
    {"id": "2", "name": "Blue Fern Botanics", "url": "https://bluefern.example.com", "days_ago": 45},
    {"id": "3", "name": "Copper Kettle Co.", "url": "http://copperkettle.example.com/", "days_ago": 300},
    {"id": "4", "name": "Lumen Lighting", "url": "https://lumen.example.com/shop", "days_ago": 12},
    {"id": "5", "name": "Tidewater Outfitters", "url": "https://tidewater.example.com/", "days_ago": 75},
    {"id": "6", "name": "Paper & Pine", "url": "paperandpine.example.com", "days_ago": 30},
    {"id": "7", "name": "Quiet Hours Tea", "url": "https://quiethours.example.com/", "days_ago": 5},
]

DEMO_ORDERS: dict[str, list[float]] = {
    "1": [129.0, 89.5, 240.0, 35.99, 410.0, 72.25],
    "2": [54.0, 61.5, 18.75],
    "3": [999.0, 1250.0, 430.0, 88.0],
    "4": [45.0, 45.0, 120.0, 15.5, 60.0],
    "5": [310.0, 275.0],
    "6": [12.0, 24.0, 8.5, 16.0, 30.0, 9.99, 14.0],
    # Quiet Hours Tea has no orders yet
}

METRIC_FILTERS = [
    {"id": "revenue", "name": "Revenue", "shortcut": "1"},
    {"id": "orders", "name": "Orders", "shortcut": "2"},
    {"id": "growth", "name": "Growth", "shortcut": "3"},
]

APP_INFO = {
    "name": "StoreRank",
    "version": "0.1.0",
    "description": "Store leaderboard by revenue, orders and growth",
}


def demo_stores(now: datetime | None = None) -> list[Store]:
    now = now or datetime.now(timezone.utc)
    return [
        Store(
            id=item["id"],
            name=item["name"],
            url=item["url"],
            created_at=now - timedelta(days=item["days_ago"]),
        )
        for item in DEMO_STORES
    ]


def demo_transactions() -> list[Transaction]:
    return [
        Transaction(store_id=store_id, amount=amount)
        for store_id, amounts in DEMO_ORDERS.items()
        for amount in amounts
    ]
