"""Leaderboard - aggregator/renderer bound to a data store."""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from storerank.services.config import LeaderboardSettings
from storerank.services.data import Store, Transaction
from storerank.services.leaderboard.render import (
    PodiumEntry,
    TableRow,
    badge_source,
    render_podium,
    render_table,
)
from storerank.services.leaderboard.stats import (
    LeaderboardSummary,
    StoreStat,
    compute_stats,
    sort_stats,
    summarize,
)

_log = logging.getLogger(__name__)


class DataStoreMissingError(RuntimeError):
    """Raised when a leaderboard is built without a data store."""


class StoreSource(Protocol):
    """Anything exposing read-only stores and transactions."""

    @property
    def stores(self) -> list[Store]: ...

    @property
    def transactions(self) -> list[Transaction]: ...


@dataclass(frozen=True)
class LeaderboardView:
    """Everything the display needs for one render."""

    metric: str
    time_range: str
    podium: list[PodiumEntry]
    rows: list[TableRow]
    summary: LeaderboardSummary


class Leaderboard:
    """Ranks the stores of a data store by the selected metric.

    Every call recomputes from the data store; no aggregate is kept between
    calls. The time range is stored for the UI but does not filter anything.
    """

    def __init__(
        self,
        data_store: StoreSource | None,
        settings: LeaderboardSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if data_store is None:
            _log.error("DataStore not found, cannot build leaderboard")
            raise DataStoreMissingError("DataStore not found")
        settings = settings or LeaderboardSettings()
        self._data_store = data_store
        self.metric = settings.metric
        self.time_range = settings.time_range
        if rng is None and settings.badge_seed is not None:
            rng = random.Random(settings.badge_seed)
        self._badges = badge_source(settings.badge_mode, rng)

    def set_metric(self, metric: str) -> None:
        self.metric = metric

    def set_time_range(self, time_range: str) -> None:
        self.time_range = time_range

    def stats(self, now: datetime | None = None) -> list[StoreStat]:
        return compute_stats(
            self._data_store.stores, self._data_store.transactions, now=now
        )

    def sorted_stats(self, now: datetime | None = None) -> list[StoreStat]:
        return sort_stats(self.stats(now), self.metric)

    def podium(self, now: datetime | None = None) -> list[PodiumEntry]:
        return render_podium(self.sorted_stats(now), self.metric)

    def table(self, now: datetime | None = None) -> list[TableRow]:
        return render_table(self.sorted_stats(now), self._badges)

    def summary(self, now: datetime | None = None) -> LeaderboardSummary:
        return summarize(self.stats(now))

    def render(self, now: datetime | None = None) -> LeaderboardView:
        """Compute everything for one screen refresh from a single read."""
        stats = self.stats(now)
        ranked = sort_stats(stats, self.metric)
        return LeaderboardView(
            metric=self.metric,
            time_range=self.time_range,
            podium=render_podium(ranked, self.metric),
            rows=render_table(ranked, self._badges),
            summary=summarize(stats),
        )
