"""Leaderboard services: aggregation, ranking and display records."""

from storerank.services.leaderboard.board import (
    DataStoreMissingError,
    Leaderboard,
    LeaderboardView,
)
from storerank.services.leaderboard.formatting import format_currency, format_url
from storerank.services.leaderboard.render import (
    GrowthBadge,
    PodiumEntry,
    TableRow,
    cosmetic_badges,
    metric_badge,
    render_podium,
    render_table,
)
from storerank.services.leaderboard.stats import (
    METRICS,
    LeaderboardSummary,
    Metric,
    StoreStat,
    compute_stats,
    sort_stats,
    summarize,
)

__all__ = [
    "METRICS",
    "DataStoreMissingError",
    "GrowthBadge",
    "Leaderboard",
    "LeaderboardSummary",
    "LeaderboardView",
    "Metric",
    "PodiumEntry",
    "StoreStat",
    "TableRow",
    "compute_stats",
    "cosmetic_badges",
    "format_currency",
    "format_url",
    "metric_badge",
    "render_podium",
    "render_table",
    "sort_stats",
    "summarize",
]
