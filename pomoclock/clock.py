"""Pure logic for the Pomodoro phase clock."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
LONG_BREAK_EVERY = 4


class Phase(Enum):
    """Interval kinds."""
    WORK = auto()
    BREAK = auto()
    LONG_BREAK = auto()


PHASE_LABELS = {
    Phase.WORK: "Work",
    Phase.BREAK: "Break",
    Phase.LONG_BREAK: "Long Break",
}


class InvalidConfiguration(ValueError):
    """Raised when a phase duration is not a positive integer."""


@dataclass(frozen=True)
class PhaseTransition:
    """A completed phase and the phase that replaced it."""
    previous: Phase
    current: Phase
    completed_work_intervals: int

    @property
    def finished_work(self) -> bool:
        return self.previous == Phase.WORK


def format_time(seconds: int) -> str:
    """Format seconds as mm:ss."""
    mins, secs = divmod(max(0, seconds), 60)
    return f"{mins:02d}:{secs:02d}"


def _validate(work: int, brk: int, long_break: int) -> None:
    for name, value in (("work", work), ("break", brk), ("long break", long_break)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfiguration(f"{name} duration must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidConfiguration(f"{name} duration must be positive, got {value}")


class PhaseClock:
    """Pomodoro countdown state machine.

    Counts down the current phase one second per tick, moves Work to Break
    (or Long Break every fourth completed work interval) and any break back
    to Work. The clock pauses itself whenever a phase completes; the host
    decides whether to resume.
    """

    def __init__(
        self,
        work_minutes: int = DEFAULT_WORK_MINUTES,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
        long_break_minutes: int = DEFAULT_LONG_BREAK_MINUTES,
        on_phase_complete: Optional[Callable[[PhaseTransition], None]] = None,
    ):
        """Initialize the clock.

        Args:
            work_minutes: Duration of a work phase in minutes.
            break_minutes: Duration of a short break in minutes.
            long_break_minutes: Duration of a long break in minutes.
            on_phase_complete: Callback(transition) fired when a phase ends.

        Raises:
            InvalidConfiguration: If any duration is not a positive integer.
        """
        _validate(work_minutes, break_minutes, long_break_minutes)
        self.work_minutes = work_minutes
        self.break_minutes = break_minutes
        self.long_break_minutes = long_break_minutes
        self.on_phase_complete = on_phase_complete

        self._phase = Phase.WORK
        self._remaining = work_minutes * 60
        self._completed = 0
        self._running = False

    @property
    def phase(self) -> Phase:
        """Current phase."""
        return self._phase

    @property
    def running(self) -> bool:
        """Whether the countdown is decrementing."""
        return self._running

    @property
    def time_remaining(self) -> int:
        """Seconds remaining in the current phase."""
        return self._remaining

    @property
    def completed_work_intervals(self) -> int:
        """Work phases completed since creation or the last reset."""
        return self._completed

    @property
    def total_seconds(self) -> int:
        """Full duration of the current phase in seconds."""
        return self._duration_for(self._phase)

    @property
    def progress_fraction(self) -> float:
        """Elapsed share of the current phase, in [0, 1)."""
        return 1.0 - (self._remaining / self.total_seconds)

    @property
    def phase_label(self) -> str:
        """Human-readable phase label."""
        return PHASE_LABELS[self._phase]

    def _duration_for(self, phase: Phase) -> int:
        if phase == Phase.WORK:
            return self.work_minutes * 60
        elif phase == Phase.LONG_BREAK:
            return self.long_break_minutes * 60
        return self.break_minutes * 60

    def configure(self, work: int, brk: int, long_break: int) -> None:
        """Apply new durations in minutes.

        The current phase restarts at its new full duration. Phase, running
        state and the completed count are kept.

        Raises:
            InvalidConfiguration: If any value is not a positive integer.
                Durations are left unchanged in that case.
        """
        _validate(work, brk, long_break)
        self.work_minutes = work
        self.break_minutes = brk
        self.long_break_minutes = long_break
        self._remaining = self.total_seconds
        logger.info("Durations set to %d/%d/%d minutes", work, brk, long_break)

    def start(self) -> None:
        """Start the countdown."""
        self._running = True

    def pause(self) -> None:
        """Pause the countdown."""
        self._running = False

    def toggle(self) -> None:
        """Toggle between running and paused."""
        if self._running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Return to a fresh, paused work phase. Durations are kept."""
        self._phase = Phase.WORK
        self._remaining = self.work_minutes * 60
        self._completed = 0
        self._running = False

    def _complete_phase(self) -> Phase:
        """Count a finished work interval and pick the following phase."""
        if self._phase == Phase.WORK:
            self._completed += 1
            if self._completed % LONG_BREAK_EVERY == 0:
                return Phase.LONG_BREAK
            return Phase.BREAK
        return Phase.WORK

    def tick(self) -> Optional[PhaseTransition]:
        """Advance the countdown by one second if running.

        Returns:
            The transition when this tick completed the phase, else None.
        """
        if not self._running:
            return None

        self._remaining -= 1
        if self._remaining > 0:
            return None

        previous = self._phase
        self._phase = self._complete_phase()
        self._remaining = self.total_seconds
        self._running = False

        transition = PhaseTransition(previous, self._phase, self._completed)
        logger.info(
            "%s finished, now %s (%d completed)",
            PHASE_LABELS[previous], self.phase_label, self._completed,
        )
        if self.on_phase_complete:
            self.on_phase_complete(transition)
        return transition
