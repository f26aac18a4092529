"""LeaderboardSettings - persisted view preferences and data location."""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import ClassVar

from dotenv import dotenv_values

CONFIG_DIR = Path.home() / ".storerank"
DEFAULT_SETTINGS_PATH = CONFIG_DIR / "settings.json"
DEFAULT_DATA_DIR = CONFIG_DIR / "data"
DATA_DIR_ENV_VAR = "STORERANK_DATA_DIR"

TIME_RANGES = ("week", "month", "year", "all")


@dataclass
class LeaderboardSettings:
    """View preferences for the leaderboard screen.

    time_range is remembered between sessions but does not filter any data.
    badge_seed pins the cosmetic growth badges to a reproducible sequence.
    """

    DEFAULT_METRIC: ClassVar[str] = "revenue"
    DEFAULT_TIME_RANGE: ClassVar[str] = "month"
    DEFAULT_BADGE_MODE: ClassVar[str] = "cosmetic"

    metric: str = DEFAULT_METRIC
    time_range: str = DEFAULT_TIME_RANGE
    badge_mode: str = DEFAULT_BADGE_MODE
    badge_seed: int | None = None


class LeaderboardSettingsManager:
    """Manages leaderboard settings persistence to JSON file."""

    def __init__(self, settings_path: Path = DEFAULT_SETTINGS_PATH) -> None:
        self._path = settings_path

    def load(self) -> LeaderboardSettings:
        """Load settings from disk. Returns defaults if file missing."""
        if not self._path.exists():
            return LeaderboardSettings()
        data = json.loads(self._path.read_text())
        defaults = LeaderboardSettings()
        return LeaderboardSettings(
            metric=data.get("metric", defaults.metric),
            time_range=data.get("time_range", defaults.time_range),
            badge_mode=data.get("badge_mode", defaults.badge_mode),
            badge_seed=data.get("badge_seed"),
        )

    def save(self, settings: LeaderboardSettings) -> None:
        """Save settings to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(asdict(settings), indent=2) + "\n")


def resolve_data_dir(env_path: Path | None = None) -> Path:
    """Locate the data directory.

    Order: process environment, then the ``.env`` file, then the default.
    """
    if value := os.environ.get(DATA_DIR_ENV_VAR):
        return Path(value).expanduser()
    env_path = env_path or Path.cwd() / ".env"
    if env_path.exists():
        if value := dotenv_values(env_path).get(DATA_DIR_ENV_VAR):
            return Path(value).expanduser()
    return DEFAULT_DATA_DIR
