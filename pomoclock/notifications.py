"""Desktop notifications for phase completion."""

import logging
import platform
import subprocess
from typing import Tuple

from .clock import Phase, PhaseTransition

logger = logging.getLogger(__name__)


def _run(command: list) -> bool:
    try:
        subprocess.run(command, capture_output=True, timeout=5)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Notification command %s failed: %s", command[0], exc)
        return False


def _send_macos_notification(title: str, message: str) -> bool:
    script = f'display notification "{message}" with title "{title}"'
    return _run(["osascript", "-e", script])


def _send_linux_notification(title: str, message: str) -> bool:
    return _run(["notify-send", "--app-name=pomoclock", title, message])


def notify(title: str, message: str) -> bool:
    """Send a native notification.

    Returns:
        True if a notifier ran, False if none is available or it failed.
    """
    system = platform.system()
    if system == "Darwin":
        return _send_macos_notification(title, message)
    elif system == "Linux":
        return _send_linux_notification(title, message)
    logger.debug("No native notifier on %s", system)
    return False


def transition_message(transition: PhaseTransition) -> Tuple[str, str]:
    """Title and body for a completed phase."""
    if transition.finished_work:
        if transition.current == Phase.LONG_BREAK:
            return "Pomodoro complete!", "Time for a long break."
        return "Pomodoro complete!", "Time for a break."
    return "Break over", "Ready for the next Pomodoro."


def announce(transition: PhaseTransition) -> bool:
    """Send the notification for a phase-completion event."""
    title, message = transition_message(transition)
    logger.debug("Announcing %s", title)
    return notify(title, message)
