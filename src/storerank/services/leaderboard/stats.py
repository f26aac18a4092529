"""Aggregation and sorting of per-store leaderboard statistics."""

import logging
import math
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal

from storerank.services.data import Store, Transaction
from storerank.services.leaderboard.formatting import format_currency

_log = logging.getLogger(__name__)

Metric = Literal["revenue", "orders", "growth"]

METRICS: tuple[Metric, ...] = ("revenue", "orders", "growth")
DEFAULT_METRIC: Metric = "revenue"

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StoreStat:
    """Aggregated figures for one store, rebuilt on every render."""

    id: str
    name: str
    url: str
    created_at: datetime
    revenue: float = 0.0
    orders: int = 0
    growth: float = 0.0


@dataclass(frozen=True)
class LeaderboardSummary:
    """Headline counts shown above the podium."""

    total_stores: int
    total_revenue: float

    @property
    def total_stores_display(self) -> str:
        return f"{self.total_stores:,}"

    @property
    def total_revenue_display(self) -> str:
        return format_currency(self.total_revenue)


def days_active(created_at: datetime, now: datetime) -> int:
    """Whole days since creation, never less than 1."""
    return max(1, math.floor((now - created_at) / ONE_DAY))


def compute_stats(
    stores: Iterable[Store],
    transactions: Iterable[Transaction],
    now: datetime | None = None,
) -> list[StoreStat]:
    """Build one StoreStat per store, in store order.

    growth is revenue per active day, a proxy rather than a true growth rate.
    """
    now = now or datetime.now(timezone.utc)

    revenue_by_store: dict[str, float] = defaultdict(float)
    orders_by_store: dict[str, int] = defaultdict(int)
    for tx in transactions:
        revenue_by_store[tx.store_id] += tx.amount
        orders_by_store[tx.store_id] += 1

    stats = []
    for store in stores:
        revenue = revenue_by_store.get(store.id, 0.0)
        stats.append(
            StoreStat(
                id=store.id,
                name=store.name,
                url=store.url,
                created_at=store.created_at,
                revenue=revenue,
                orders=orders_by_store.get(store.id, 0),
                growth=revenue / days_active(store.created_at, now),
            )
        )
    return stats


def sort_stats(stats: Sequence[StoreStat], metric: str) -> list[StoreStat]:
    """Sort descending by ``metric``; ties keep their input order.

    An unrecognised metric leaves the order untouched.
    """
    if metric not in METRICS:
        _log.debug("Unknown metric %r, leaving order unchanged", metric)
        return list(stats)
    return sorted(stats, key=lambda stat: getattr(stat, metric), reverse=True)


def summarize(stats: Sequence[StoreStat]) -> LeaderboardSummary:
    return LeaderboardSummary(
        total_stores=len(stats),
        total_revenue=sum(stat.revenue for stat in stats),
    )
