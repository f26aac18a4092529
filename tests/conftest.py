"""Shared test fixtures for storerank tests."""

from pathlib import Path

import pytest

from storerank.services.config import LeaderboardSettingsManager
from storerank.services.data import DataStore, Transaction
from tests.factories import make_store


@pytest.fixture
def data_store(tmp_path: Path) -> DataStore:
    """Data store with five stores of distinct revenue and order counts.

    Revenue order: 3 > 1 > 5 > 2 > 4
    Orders order:  2 > 1 > 3 > 4 > 5
    """
    store = DataStore(tmp_path / "data")
    store.seed(
        [
            make_store("1", "Alpha", days_ago=10),
            make_store("2", "Bravo", days_ago=100),
            make_store("3", "Charlie", days_ago=50),
            make_store("4", "Delta", days_ago=1),
            make_store("5", "Echo", days_ago=2),
        ],
        [
            Transaction("1", 300.0),
            Transaction("1", 200.0),
            Transaction("1", 100.0),
            Transaction("2", 50.0),
            Transaction("2", 50.0),
            Transaction("2", 50.0),
            Transaction("2", 50.0),
            Transaction("3", 1000.0),
            Transaction("3", 500.0),
            Transaction("4", 20.0),
            Transaction("5", 400.0),
        ],
    )
    return store


@pytest.fixture
def settings_manager(tmp_path: Path) -> LeaderboardSettingsManager:
    return LeaderboardSettingsManager(settings_path=tmp_path / "settings.json")
