"""Textual-based UI for the Pomodoro clock."""

import logging
from functools import partial
from typing import Callable, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.timer import Timer
from textual.widgets import Digits, Footer, Static

from .clock import Phase, PhaseClock, PhaseTransition, format_time
from .ring import render_ring
from .settings import Durations, SettingsScreen

logger = logging.getLogger(__name__)

READY = "ready"
PAUSED = "paused"
ACTIVE = "active"


class StateLabel(Static):
    """Ready/Paused or the current phase label."""

    label_text = ""

    def show(self, clock: PhaseClock, view_state: str) -> None:
        if view_state == READY:
            self.label_text = "Ready"
        elif view_state == PAUSED:
            self.label_text = "Paused"
        else:
            self.label_text = clock.phase_label
        self.update(self.label_text)


class ProgressRing(Static):
    """Circular progress indicator. Clicking it starts or pauses the clock."""

    def show(self, fraction: float) -> None:
        self.update(render_ring(fraction))

    def on_click(self, event: events.Click) -> None:
        self.app.action_toggle()


class PomodoroApp(App):
    """Pomodoro timer application."""

    CSS_PATH = "pomoclock.tcss"
    TITLE = "Pomodoro"

    BINDINGS = [
        Binding("space", "toggle", "Start/Pause"),
        Binding("r", "reset", "Reset"),
        Binding("s", "settings", "Settings"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        clock: PhaseClock,
        auto_start: bool = False,
        on_phase_complete: Optional[Callable[[PhaseTransition], None]] = None,
        sound_enabled: bool = True,
    ) -> None:
        super().__init__()
        self.clock = clock
        self.auto_start = auto_start
        self.sound_enabled = sound_enabled
        self.on_phase_complete_callback = on_phase_complete
        self.view_state = READY
        self._tick_timer: Timer | None = None

        self.state_label = StateLabel(id="state-label")
        self.ring = ProgressRing(id="ring")
        self.time_digits = Digits(format_time(clock.time_remaining), id="time")
        self.completed_label = Static(id="completed")

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="clock-container"):
                yield self.state_label
                yield self.ring
                yield self.time_digits
                yield self.completed_label
        yield Footer()

    def on_mount(self) -> None:
        self._tick_timer = self.set_interval(1.0, self._tick, pause=True)
        self._refresh_display()

    def _sync_tick_timer(self) -> None:
        """Run the interval timer only while the clock is running."""
        if self._tick_timer is None:
            return
        if self.clock.running:
            # Fresh one second cadence, no overdue tick from the pause.
            self._tick_timer.reset()
            self._tick_timer.resume()
        else:
            self._tick_timer.pause()

    def _tick(self) -> None:
        """Called every second while the clock runs."""
        transition = self.clock.tick()
        if transition is not None:
            self.view_state = ACTIVE
            if self.sound_enabled:
                self.bell()
            if self.on_phase_complete_callback:
                # Notifiers shell out; keep them off the event loop.
                self.run_worker(
                    partial(self.on_phase_complete_callback, transition),
                    group="alerts",
                    thread=True,
                )
            if self.auto_start:
                self.clock.start()
            self._sync_tick_timer()
        self._refresh_display()

    def _refresh_display(self) -> None:
        """Update all display elements."""
        self.state_label.show(self.clock, self.view_state)
        self.ring.show(self.clock.progress_fraction)
        self.time_digits.update(format_time(self.clock.time_remaining))
        self.completed_label.update(f"Completed: {self.clock.completed_work_intervals}")
        self._update_phase_class()

    def _update_phase_class(self) -> None:
        """Update CSS class based on current phase."""
        container = self.ring.parent
        container.remove_class("work", "break", "long-break")

        if self.clock.phase == Phase.WORK:
            container.add_class("work")
        elif self.clock.phase == Phase.BREAK:
            container.add_class("break")
        else:
            container.add_class("long-break")

    def action_toggle(self) -> None:
        """Start or pause the clock."""
        self.clock.toggle()
        self.view_state = ACTIVE if self.clock.running else PAUSED
        logger.debug("Clock %s", "started" if self.clock.running else "paused")
        self._sync_tick_timer()
        self._refresh_display()

    def action_reset(self) -> None:
        """Return to a fresh work phase."""
        self.clock.reset()
        self.view_state = READY
        logger.debug("Clock reset")
        self._sync_tick_timer()
        self._refresh_display()

    def action_settings(self) -> None:
        """Open the settings dialog."""
        self.push_screen(
            SettingsScreen(
                self.clock.work_minutes,
                self.clock.break_minutes,
                self.clock.long_break_minutes,
            ),
            self._apply_settings,
        )

    def _apply_settings(self, durations: Optional[Durations]) -> None:
        if durations is None:
            return
        self.clock.configure(*durations)
        self._refresh_display()


def run_ui(
    clock: PhaseClock,
    auto_start: bool = False,
    on_phase_complete: Optional[Callable[[PhaseTransition], None]] = None,
    sound_enabled: bool = True,
) -> None:
    """Run the Pomodoro UI.

    Args:
        clock: The clock instance.
        auto_start: Start the next phase automatically when one completes.
        on_phase_complete: Callback for phase completion, run in a worker thread.
        sound_enabled: Ring the terminal bell when a phase completes.
    """
    app = PomodoroApp(clock, auto_start, on_phase_complete, sound_enabled)
    app.run()
