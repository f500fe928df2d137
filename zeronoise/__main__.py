"""Entry point for python -m zeronoise."""

import argparse
import logging
import sys
from typing import List, Optional

from .log import get_logger, log_path
from .notifications import completion_message, notify
from .session import SessionType
from .settings import Settings, SettingsError
from .ui import run_ui


def build_parser() -> argparse.ArgumentParser:
    """Command line parser."""
    parser = argparse.ArgumentParser(
        prog="zeronoise",
        description="Single-screen focus timer with a draggable dial",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Space         Start/Pause
  Left/Right    Adjust duration by one minute (while paused)
  Drag dial     Select duration (3 degrees per minute)
  Click centre  Start/Pause
  r             Restart from the first focus session
  s             Settings
  q             Quit

Examples:
  zeronoise                     # Default settings (25/5/15, long break every 4)
  zeronoise --focus 50          # 50-minute focus sessions
  zeronoise --auto              # Auto-start both focus and breaks
  zeronoise --no-auto-break     # Pause when focus ends
""",
    )

    parser.add_argument(
        "--focus",
        type=int,
        default=25,
        metavar="MINS",
        help="Focus session duration in minutes (default: 25)",
    )
    parser.add_argument(
        "--short",
        type=int,
        default=5,
        metavar="MINS",
        help="Short break duration in minutes (default: 5)",
    )
    parser.add_argument(
        "--long",
        type=int,
        default=15,
        metavar="MINS",
        help="Long break duration in minutes (default: 15)",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=4,
        metavar="N",
        help="Focus sessions before a long break (default: 4)",
    )

    parser.add_argument(
        "--auto",
        action="store_true",
        help="Auto-start both breaks and focus sessions",
    )
    parser.add_argument(
        "--auto-break",
        action="store_true",
        default=True,
        dest="auto_break",
        help="Auto-start breaks when focus ends (default: on)",
    )
    parser.add_argument(
        "--no-auto-break",
        action="store_false",
        dest="auto_break",
        help="Don't auto-start breaks",
    )
    parser.add_argument(
        "--auto-focus",
        action="store_true",
        default=False,
        dest="auto_focus",
        help="Auto-start focus when a break ends (default: off)",
    )
    parser.add_argument(
        "--no-auto-focus",
        action="store_false",
        dest="auto_focus",
        help="Don't auto-start focus sessions",
    )

    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable notifications (bell and system)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Verbose logging to {log_path()}",
    )
    return parser


def settings_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Settings:
    """Build Settings from parsed arguments, exiting on bad values."""
    auto_break = args.auto_break
    auto_focus = args.auto_focus
    if args.auto:
        auto_break = True
        auto_focus = True

    try:
        return Settings(
            focus_minutes=args.focus,
            short_break_minutes=args.short,
            long_break_minutes=args.long,
            long_break_interval=args.interval,
            auto_start_breaks=auto_break,
            auto_start_focus=auto_focus,
        )
    except SettingsError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(parser, args)

    logger = get_logger(logging.DEBUG if args.debug else logging.INFO)
    logger.info("Starting with %s", settings)

    notify_enabled = not args.no_notify

    def on_session_complete(old_type: SessionType, new_type: SessionType) -> None:
        """Notification callback."""
        if not notify_enabled:
            return
        title, message = completion_message(old_type, new_type)
        notify(title, message)

    try:
        run_ui(settings, notify_enabled, on_session_complete=on_session_complete)
    except KeyboardInterrupt:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
