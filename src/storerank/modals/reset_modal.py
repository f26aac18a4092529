"""ResetDataModal - Confirmation before wiping all leaderboard data."""

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

RESET_WARNING = (
    "This will delete all stores and transactions and cannot be undone.\n"
    "The application will return to its initial demo state."
)


class ResetDataModal(ModalScreen[bool]):
    """Ask before deleting every store and transaction.

    Returns True when the user confirms, False otherwise.

    Layout:
    +------------------------------------------------+
    |      Are you sure you want to reset all data?   |
    |  This will delete all stores and transactions   |
    |                          [Cancel]  [Reset]      |
    +------------------------------------------------+
    """

    DEFAULT_CSS = """
    ResetDataModal {
        align: center middle;
        background: black 50%;
    }

    ResetDataModal #container {
        width: 60;
        height: auto;
        padding: 1 2;
        background: #1E1F29;
        border: round #FF5555;
    }

    ResetDataModal .modal-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: #FF5555;
    }

    ResetDataModal #reset-warning {
        margin: 1 0;
        color: #F8F8F2;
    }

    ResetDataModal #buttons {
        width: 100%;
        height: auto;
        align-horizontal: right;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="container"):
            yield Static("Are you sure you want to reset all data?", classes="modal-title")
            yield Static(RESET_WARNING, id="reset-warning")
            with Horizontal(id="buttons"):
                yield Button("Cancel", id="cancel-btn", variant="default")
                yield Button("Reset", id="confirm-btn", variant="error")

    def on_mount(self) -> None:
        self.query_one("#cancel-btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-btn")

    def action_cancel(self) -> None:
        self.dismiss(False)
