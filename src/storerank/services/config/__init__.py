"""Config services for leaderboard settings and data location."""

from storerank.services.config.settings import (
    DATA_DIR_ENV_VAR,
    TIME_RANGES,
    LeaderboardSettings,
    LeaderboardSettingsManager,
    resolve_data_dir,
)

__all__ = [
    "DATA_DIR_ENV_VAR",
    "TIME_RANGES",
    "LeaderboardSettings",
    "LeaderboardSettingsManager",
    "resolve_data_dir",
]
