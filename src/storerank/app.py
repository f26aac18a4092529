"""StoreRank - Textual app showing the store leaderboard.

This is the main application entry point. It wires the data store,
settings and leaderboard together and pushes the leaderboard screen.
"""

import logging

from textual.app import App
from textual.binding import Binding

from storerank.examples import APP_INFO, demo_stores, demo_transactions
from storerank.screens import LeaderboardScreen
from storerank.services.config import (
    LeaderboardSettingsManager,
    resolve_data_dir,
)
from storerank.services.data import DataStore
from storerank.services.leaderboard import DataStoreMissingError, Leaderboard

_log = logging.getLogger(__name__)


class StoreRankApp(App):
    """Main application.

    The data store is passed in rather than looked up globally. Building
    the app without one is a setup error: the app exits before rendering.
    """

    TITLE = f"{APP_INFO['name']} v{APP_INFO['version']}"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("f1", "toggle_help", "Help"),
    ]

    def __init__(
        self,
        data_store: DataStore | None,
        settings_manager: LeaderboardSettingsManager | None = None,
    ) -> None:
        super().__init__()
        self._data_store = data_store
        self._settings_manager = settings_manager

    def on_mount(self) -> None:
        """Build the leaderboard and push its screen."""
        settings = (
            self._settings_manager.load() if self._settings_manager else None
        )
        try:
            leaderboard = Leaderboard(self._data_store, settings=settings)
        except DataStoreMissingError as exc:
            _log.error("Cannot start leaderboard: %s", exc)
            self.exit(return_code=1, message=f"{exc}. Cannot start StoreRank.")
            return

        self.push_screen(
            LeaderboardScreen(
                leaderboard,
                self._data_store,
                settings_manager=self._settings_manager,
                settings=settings,
            )
        )

    def action_toggle_help(self) -> None:
        """Toggle help panel display."""
        self.notify(
            "1-3: Rank by revenue / orders / growth\n"
            "Tab: Cycle focus\n"
            "Ctrl+R: Reset all data\n"
            "Q: Quit",
            title="Keyboard Shortcuts",
        )


def main() -> None:
    """Entry point for the application."""
    data_store = DataStore(resolve_data_dir())
    data_store.ensure_seeded(demo_stores(), demo_transactions())

    app = StoreRankApp(data_store, settings_manager=LeaderboardSettingsManager())
    app.run()


if __name__ == "__main__":
    main()
