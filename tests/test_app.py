"""Tests for StoreRankApp setup and the main() entry point."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from storerank.app import StoreRankApp, main
from storerank.screens import LeaderboardScreen
from storerank.services.config import LeaderboardSettings, LeaderboardSettingsManager
from storerank.services.data import DataStore


class TestStoreRankApp:
    async def test_missing_data_store_exits_with_error(self) -> None:
        app = StoreRankApp(None)
        async with app.run_test():
            pass

        assert app.return_code == 1

    async def test_pushes_leaderboard_screen(self, data_store: DataStore) -> None:
        app = StoreRankApp(data_store)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, LeaderboardScreen)

    async def test_loads_saved_metric(
        self, data_store: DataStore, settings_manager: LeaderboardSettingsManager
    ) -> None:
        settings_manager.save(LeaderboardSettings(metric="orders"))
        app = StoreRankApp(data_store, settings_manager=settings_manager)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.screen.query_one("#filter-orders").has_class("-active")


class TestMain:
    def test_main_seeds_demo_data_and_runs(self, tmp_path: Path) -> None:
        data_dir = tmp_path / "data"
        with (
            patch("storerank.app.resolve_data_dir", return_value=data_dir),
            patch("storerank.app.StoreRankApp") as app_cls,
        ):
            app_cls.return_value.run = MagicMock()
            main()

            app_cls.return_value.run.assert_called_once()

        assert DataStore(data_dir).stores
