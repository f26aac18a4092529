"""Pure rendering of sorted stats into podium and table records.

Nothing here touches the display. The Textual screen paints whatever these
functions return, and tests can check the records directly.
"""

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from statistics import mean
from typing import Literal

from storerank.services.leaderboard.formatting import format_currency, format_url
from storerank.services.leaderboard.stats import StoreStat

PODIUM_PLACES = ("first", "second", "third")
PODIUM_SIZE = len(PODIUM_PLACES)
FIRST_TABLE_RANK = PODIUM_SIZE + 1

PLACEHOLDER_NAME = "-"
PLACEHOLDER_VALUE = format_currency(0)

# Cosmetic badge range, percent: [low, high)
BADGE_LOW = -15.0
BADGE_HIGH = 25.0

BadgeMode = Literal["cosmetic", "metric"]


@dataclass(frozen=True)
class PodiumEntry:
    """One of the three podium slots."""

    position: int
    place: str
    name: str
    value: str
    is_placeholder: bool = False


@dataclass(frozen=True)
class GrowthBadge:
    percent: float

    @property
    def is_positive(self) -> bool:
        return self.percent >= 0

    @property
    def label(self) -> str:
        sign = "+" if self.is_positive else ""
        return f"{sign}{self.percent:.1f}%"


@dataclass(frozen=True)
class TableRow:
    """A leaderboard row below the podium."""

    rank: int
    name: str
    url: str
    revenue: str
    orders: int
    badge: GrowthBadge


GrowthBadgeSource = Callable[[StoreStat, Sequence[StoreStat]], GrowthBadge]


def cosmetic_badges(rng: random.Random | None = None) -> GrowthBadgeSource:
    """Badge source drawing a random percentage for visual variety.

    The value is unrelated to the store's data. Pass a seeded ``rng`` for
    reproducible output.
    """
    rng = rng or random.Random()

    def badge(stat: StoreStat, rows: Sequence[StoreStat]) -> GrowthBadge:
        return GrowthBadge(rng.random() * (BADGE_HIGH - BADGE_LOW) + BADGE_LOW)

    return badge


def metric_badge(stat: StoreStat, rows: Sequence[StoreStat]) -> GrowthBadge:
    """Badge relative to the mean daily revenue of the table rows."""
    baseline = mean(row.growth for row in rows) if rows else 0.0
    if baseline == 0:
        return GrowthBadge(0.0)
    return GrowthBadge((stat.growth / baseline - 1) * 100)


def badge_source(
    mode: BadgeMode, rng: random.Random | None = None
) -> GrowthBadgeSource:
    if mode == "metric":
        return metric_badge
    return cosmetic_badges(rng)


def format_metric_value(stat: StoreStat, metric: str) -> str:
    """Podium text for the active metric. Unknown metrics render blank."""
    if metric == "revenue":
        return format_currency(stat.revenue)
    if metric == "orders":
        return f"{stat.orders} orders"
    if metric == "growth":
        return f"{format_currency(stat.growth)}/day"
    return ""


def render_podium(sorted_stats: Sequence[StoreStat], metric: str) -> list[PodiumEntry]:
    """Return exactly three podium entries, padding with placeholders."""
    entries = []
    for index, place in enumerate(PODIUM_PLACES):
        if index < len(sorted_stats):
            stat = sorted_stats[index]
            entries.append(
                PodiumEntry(
                    position=index + 1,
                    place=place,
                    name=stat.name,
                    value=format_metric_value(stat, metric),
                )
            )
        else:
            entries.append(
                PodiumEntry(
                    position=index + 1,
                    place=place,
                    name=PLACEHOLDER_NAME,
                    value=PLACEHOLDER_VALUE,
                    is_placeholder=True,
                )
            )
    return entries


def render_table(
    sorted_stats: Sequence[StoreStat],
    badge: GrowthBadgeSource | None = None,
) -> list[TableRow]:
    """Rows for every store after the podium, ranked from 4 upward."""
    badge = badge or cosmetic_badges()
    remaining = list(sorted_stats[PODIUM_SIZE:])
    return [
        TableRow(
            rank=rank,
            name=stat.name,
            url=format_url(stat.url),
            revenue=format_currency(stat.revenue),
            orders=stat.orders,
            badge=badge(stat, remaining),
        )
        for rank, stat in enumerate(remaining, start=FIRST_TABLE_RANK)
    ]
