"""Leaderboard screen - ranked stores with a podium and table.

Layout:
+------------------------------------------------------------------+
|  StoreRank                     Stores: 7     Revenue: $6,049      |
+------------------------------------------------------------------+
|  [1 Revenue] [2 Orders] [3 Growth]                 [Month   v]   |
+------------------------------------------------------------------+
|  +------------+  +------------+  +------------+                  |
|  |    2nd     |  |    1st     |  |    3rd     |                  |
|  |  Store B   |  |  Store A   |  |  Store C   |                  |
|  |   $1,024   |  |   $2,767   |  |    $977    |                  |
|  +------------+  +------------+  +------------+                  |
+------------------------------------------------------------------+
| #  | Store            | URL            | Revenue | Orders | Trend |
| 4  | Lumen Lighting   | lumen.example  | $286    | 5      | +3.2% |
+------------------------------------------------------------------+

Every metric or time range change re-renders from the data store.
Display elements that are not mounted are skipped.
"""

from typing import ClassVar

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, DataTable, Footer, Select, Static

from storerank.examples import APP_INFO, METRIC_FILTERS
from storerank.modals import ResetDataModal
from storerank.services.config import (
    TIME_RANGES,
    LeaderboardSettings,
    LeaderboardSettingsManager,
)
from storerank.services.data import DataStore
from storerank.services.leaderboard import (
    Leaderboard,
    LeaderboardSummary,
    PodiumEntry,
    TableRow,
)
from storerank.widgets import PodiumPlace

POSITIVE_STYLE = "bold #50FA7B"
NEGATIVE_STYLE = "bold #FF5555"

# Visual order: second, first, third
PODIUM_LAYOUT = (2, 1, 3)
PODIUM_IDS = {1: "first-place", 2: "second-place", 3: "third-place"}

RESET_MESSAGE = "All data has been reset."


class LeaderboardScreen(Screen):
    """Store leaderboard with metric filters and an admin reset."""

    DEFAULT_CSS = """
    LeaderboardScreen {
        layout: vertical;
    }

    LeaderboardScreen #header {
        height: auto;
        padding: 0 1;
    }

    LeaderboardScreen .title {
        width: 1fr;
        color: #BD93F9;
        text-style: bold;
    }

    LeaderboardScreen .stat {
        width: auto;
        padding: 0 2;
        color: #F8F8F2;
    }

    LeaderboardScreen #filters {
        height: auto;
        padding: 0 1;
    }

    LeaderboardScreen .filter-btn {
        min-width: 12;
        margin-right: 1;

        &.-active {
            background: #BD93F9 60%;
            text-style: bold;
        }
    }

    LeaderboardScreen #time-filter {
        width: 20;
        dock: right;
    }

    LeaderboardScreen #podium {
        height: auto;
        padding: 1 1 0 1;
    }

    LeaderboardScreen #leaderboard-table {
        height: 1fr;
        margin: 1 1 0 1;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("q", "app.quit", "Quit"),
        *(
            Binding(f["shortcut"], f"filter('{f['id']}')", f["name"], show=False)
            for f in METRIC_FILTERS
        ),
        Binding("ctrl+r", "reset_data", "Reset data"),
    ]

    def __init__(
        self,
        leaderboard: Leaderboard,
        data_store: DataStore,
        settings_manager: LeaderboardSettingsManager | None = None,
        settings: LeaderboardSettings | None = None,
    ) -> None:
        super().__init__()
        self._leaderboard = leaderboard
        self._data_store = data_store
        self._settings_manager = settings_manager
        self._settings = settings or LeaderboardSettings(
            metric=leaderboard.metric, time_range=leaderboard.time_range
        )

    def compose(self) -> ComposeResult:
        with Horizontal(id="header"):
            yield Static(APP_INFO["name"], classes="title")
            yield Static("", id="total-stores", classes="stat")
            yield Static("", id="total-revenue", classes="stat")

        with Horizontal(id="filters"):
            for f in METRIC_FILTERS:
                yield Button(
                    f"{f['shortcut']} {f['name']}",
                    id=f"filter-{f['id']}",
                    classes="filter-btn",
                )
            yield Select(
                [(r.capitalize(), r) for r in TIME_RANGES],
                value=(
                    self._leaderboard.time_range
                    if self._leaderboard.time_range in TIME_RANGES
                    else LeaderboardSettings.DEFAULT_TIME_RANGE
                ),
                allow_blank=False,
                id="time-filter",
            )

        with Horizontal(id="podium"):
            for position in PODIUM_LAYOUT:
                yield PodiumPlace(position=position, id=PODIUM_IDS[position])

        yield DataTable(id="leaderboard-table", cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#leaderboard-table", DataTable)
        table.add_column("#", key="rank", width=4)
        table.add_column("Store", key="name", width=24)
        table.add_column("URL", key="url", width=28)
        table.add_column("Revenue", key="revenue", width=10)
        table.add_column("Orders", key="orders", width=8)
        table.add_column("Trend", key="growth", width=8)
        self.update_leaderboard()

    def update_leaderboard(self) -> None:
        """Recompute and repaint every section."""
        view = self._leaderboard.render()
        self._update_filter_buttons(view.metric)
        self._update_stats(view.summary)
        self._update_podium(view.podium)
        self._update_table(view.rows)

    def _update_filter_buttons(self, metric: str) -> None:
        for button in self.query(".filter-btn"):
            button.set_class(button.id == f"filter-{metric}", "-active")

    def _update_stats(self, summary: LeaderboardSummary) -> None:
        self._set_text("#total-stores", f"Stores: {summary.total_stores_display}")
        self._set_text("#total-revenue", f"Revenue: {summary.total_revenue_display}")

    def _update_podium(self, podium: list[PodiumEntry]) -> None:
        for entry in podium:
            try:
                place = self.query_one(f"#{PODIUM_IDS[entry.position]}", PodiumPlace)
            except NoMatches:
                continue
            place.update_entry(entry)

    def _update_table(self, rows: list[TableRow]) -> None:
        try:
            table = self.query_one("#leaderboard-table", DataTable)
        except NoMatches:
            return
        table.clear()
        for row in rows:
            style = POSITIVE_STYLE if row.badge.is_positive else NEGATIVE_STYLE
            table.add_row(
                str(row.rank),
                row.name,
                row.url,
                row.revenue,
                str(row.orders),
                Text(row.badge.label, style=style),
            )

    def _set_text(self, selector: str, text: str) -> None:
        try:
            self.query_one(selector, Static).update(text)
        except NoMatches:
            pass

    def _save_settings(self) -> None:
        self._settings.metric = self._leaderboard.metric
        self._settings.time_range = self._leaderboard.time_range
        if self._settings_manager is not None:
            self._settings_manager.save(self._settings)

    def action_filter(self, metric: str) -> None:
        """Switch the ranking metric."""
        self._leaderboard.set_metric(metric)
        self._save_settings()
        self.update_leaderboard()

    @on(Button.Pressed, ".filter-btn")
    def _on_filter_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_filter(event.button.id.removeprefix("filter-"))

    @on(Select.Changed, "#time-filter")
    def _on_time_filter_changed(self, event: Select.Changed) -> None:
        if event.value == self._leaderboard.time_range:
            return
        self._leaderboard.set_time_range(str(event.value))
        self._save_settings()
        self.update_leaderboard()

    def action_reset_data(self) -> None:
        """Ask for confirmation, then wipe all data and end the session."""
        self.app.push_screen(ResetDataModal(), callback=self._on_reset_confirmed)

    def _on_reset_confirmed(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self._data_store.reset()
        self.app.notify(RESET_MESSAGE)
        self.app.exit(message=RESET_MESSAGE)
