"""Entry point for python -m pomoclock."""

import argparse
import logging
import sys
from typing import List, Optional

from .clock import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    InvalidConfiguration,
    PhaseClock,
)
from .notifications import announce
from .ui import run_ui

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="pomoclock",
        description="Terminal Pomodoro timer with a circular progress ring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Space    Start/Pause (clicking the ring works too)
  r        Reset to a fresh work phase
  s        Settings
  q        Quit

Examples:
  pomoclock                       # Default settings (25/5/15)
  pomoclock --work 50 --long 30   # Longer pomodoros and long breaks
  pomoclock --auto                # Start the next phase automatically
""",
    )

    parser.add_argument(
        "--work",
        type=int,
        default=DEFAULT_WORK_MINUTES,
        metavar="MINS",
        help=f"Work phase duration in minutes (default: {DEFAULT_WORK_MINUTES})",
    )
    parser.add_argument(
        "--break",
        type=int,
        default=DEFAULT_BREAK_MINUTES,
        dest="brk",
        metavar="MINS",
        help=f"Break duration in minutes (default: {DEFAULT_BREAK_MINUTES})",
    )
    parser.add_argument(
        "--long",
        type=int,
        default=DEFAULT_LONG_BREAK_MINUTES,
        metavar="MINS",
        help=f"Long break duration in minutes (default: {DEFAULT_LONG_BREAK_MINUTES})",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Start the next phase automatically when one completes",
    )

    # Alerts
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable desktop notifications",
    )
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Disable the terminal bell",
    )

    # Logging
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write a log to PATH (the terminal belongs to the UI)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for --log-file (default: INFO)",
    )

    return parser


def setup_logging(log_file: Optional[str], level: str) -> None:
    """Send package logs to a file, or nowhere when no file is given."""
    package_logger = logging.getLogger("pomoclock")
    if not log_file:
        package_logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def build_clock(args: argparse.Namespace, parser: argparse.ArgumentParser) -> PhaseClock:
    """Create the clock from parsed arguments, reporting bad durations via the parser."""
    try:
        return PhaseClock(args.work, args.brk, args.long)
    except InvalidConfiguration as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    clock = build_clock(args, parser)
    on_phase_complete = None if args.no_notify else announce

    try:
        run_ui(
            clock,
            auto_start=args.auto,
            on_phase_complete=on_phase_complete,
            sound_enabled=not args.no_sound,
        )
    except KeyboardInterrupt:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
