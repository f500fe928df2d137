"""Native desktop notifications for session completion.

The terminal bell is rung by the textual app itself, since the app owns
stdout while it runs.
"""

import logging
import platform
import subprocess
from typing import List, Tuple

from .session import SessionType

logger = logging.getLogger(__name__)


def _run_quietly(command: List[str]) -> bool:
    """Run a notifier command, reporting whether it could be launched."""
    try:
        subprocess.run(command, capture_output=True, timeout=5)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Notifier %s unavailable: %s", command[0], exc)
        return False


def _send_macos_notification(title: str, message: str) -> bool:
    script = f'display notification "{message}" with title "{title}"'
    return _run_quietly(["osascript", "-e", script])


def _send_linux_notification(title: str, message: str) -> bool:
    return _run_quietly(["notify-send", title, message])


def notify(title: str, message: str) -> None:
    """Send a native notification.

    Missing notifiers are logged and otherwise ignored.

    Args:
        title: Notification title.
        message: Notification message.
    """
    system = platform.system()
    if system == "Darwin":
        _send_macos_notification(title, message)
    elif system == "Linux":
        _send_linux_notification(title, message)
    # Other platforms: the app's bell only


def completion_message(old_type: SessionType, new_type: SessionType) -> Tuple[str, str]:
    """Title and message announcing the end of a session."""
    if old_type == SessionType.FOCUS:
        title = "Focus Complete!"
        if new_type == SessionType.LONG_BREAK:
            message = "Time for a long break. You've earned it!"
        else:
            message = "Time for a short break."
    else:
        title = "Break Over"
        message = "Ready to focus?"
    return title, message
