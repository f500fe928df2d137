"""Session types and the snapshot published to the UI."""

from dataclasses import dataclass
from enum import Enum, auto


class SessionType(Enum):
    """Session types in the focus/break rotation."""
    FOCUS = auto()
    SHORT_BREAK = auto()
    LONG_BREAK = auto()

    @property
    def label(self) -> str:
        """Human-readable label."""
        labels = {
            SessionType.FOCUS: "Focus",
            SessionType.SHORT_BREAK: "Short Break",
            SessionType.LONG_BREAK: "Long Break",
        }
        return labels[self]

    @property
    def is_break(self) -> bool:
        return self != SessionType.FOCUS


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of a SessionTimer for rendering."""
    session_type: SessionType
    running: bool
    remaining_seconds: int
    total_seconds: int
    completed_focus_count: int
    long_break_interval: int
    progress_fraction: float
    angle_degrees: float

    @property
    def minutes_label(self) -> str:
        return f"{self.remaining_seconds // 60:02d}"

    @property
    def seconds_label(self) -> str:
        return f"{self.remaining_seconds % 60:02d}"

    @property
    def time_label(self) -> str:
        """Remaining time as MM:SS."""
        return f"{self.minutes_label}:{self.seconds_label}"

    @property
    def session_label(self) -> str:
        return self.session_type.label

    @property
    def cycle_display(self) -> str:
        """Position in the long-break cycle (e.g. '2/4')."""
        done = self.completed_focus_count % self.long_break_interval
        if self.session_type == SessionType.FOCUS:
            current = done + 1
        elif done == 0:
            # Long break closes the cycle
            current = self.long_break_interval
        else:
            current = done
        return f"{current}/{self.long_break_interval}"
