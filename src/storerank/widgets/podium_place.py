"""PodiumPlace widget - one of the three top-ranked slots.

Shows the place medal, store name and the value for the active metric.
Placeholder slots (fewer than three stores) are dimmed.
"""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from storerank.services.leaderboard import PodiumEntry

MEDALS = {1: "1st", 2: "2nd", 3: "3rd"}


class PodiumPlace(Vertical):
    """A single podium slot.

    Example:
        place = PodiumPlace(position=1, id="first-place")
        place.update_entry(entry)
    """

    DEFAULT_CSS = """
    PodiumPlace {
        width: 1fr;
        height: auto;
        padding: 0 1;
        border: round #BD93F9 30%;
        content-align: center middle;

        &.-first {
            border: round #F1FA8C;
        }

        &.-placeholder {
            opacity: 60%;
        }
    }

    PodiumPlace .podium-medal {
        width: 100%;
        text-align: center;
        color: #F1FA8C;
        text-style: bold;
    }

    PodiumPlace .podium-name {
        width: 100%;
        text-align: center;
        color: #F8F8F2;
        text-style: bold;
    }

    PodiumPlace .podium-value {
        width: 100%;
        text-align: center;
        color: #50FA7B;
    }
    """

    def __init__(
        self,
        position: int,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the podium slot.

        Args:
            position: 1, 2 or 3
            name: Widget name
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(name=name, id=id, classes=classes)
        self.position = position
        if position == 1:
            self.add_class("-first")

    def compose(self) -> ComposeResult:
        yield Static(MEDALS.get(self.position, str(self.position)), classes="podium-medal")
        yield Static("-", classes="podium-name")
        yield Static("", classes="podium-value")

    def update_entry(self, entry: PodiumEntry) -> None:
        """Show the given podium entry."""
        self.query_one(".podium-name", Static).update(entry.name)
        self.query_one(".podium-value", Static).update(entry.value)
        self.set_class(entry.is_placeholder, "-placeholder")
