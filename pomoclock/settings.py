"""Settings dialog for phase durations."""

from typing import Optional, Tuple

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

Durations = Tuple[int, int, int]

INPUT_ERROR = "Please enter valid positive integers."


def parse_durations(work_text: str, break_text: str, long_text: str) -> Durations:
    """Parse three minute values typed by the user.

    Raises:
        ValueError: If any value is not a positive integer.
    """
    values = []
    for text in (work_text, break_text, long_text):
        try:
            value = int(text.strip())
        except ValueError:
            raise ValueError(INPUT_ERROR) from None
        if value <= 0:
            raise ValueError(INPUT_ERROR)
        values.append(value)
    return values[0], values[1], values[2]


class SettingsScreen(ModalScreen[Optional[Durations]]):
    """Modal dialog returning (work, break, long break) minutes, or None."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, work: int, brk: int, long_break: int) -> None:
        super().__init__()
        self._initial = (work, brk, long_break)

    def compose(self) -> ComposeResult:
        work, brk, long_break = self._initial
        with Vertical(id="settings-dialog"):
            yield Label("Work (minutes)")
            yield Input(str(work), id="work-input")
            yield Label("Break (minutes)")
            yield Input(str(brk), id="break-input")
            yield Label("Long break (minutes)")
            yield Input(str(long_break), id="long-input")
            with Horizontal(id="settings-buttons"):
                yield Button("OK", variant="primary", id="ok")
                yield Button("Cancel", id="cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "ok":
            self._submit()
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self) -> None:
        try:
            values = parse_durations(
                self.query_one("#work-input", Input).value,
                self.query_one("#break-input", Input).value,
                self.query_one("#long-input", Input).value,
            )
        except ValueError as exc:
            self.notify(str(exc), title="Input Error", severity="warning")
            return
        self.dismiss(values)
