"""Timer settings and their bounds."""

from dataclasses import dataclass

from .session import SessionType

MIN_MINUTES = 1
MAX_MINUTES = 120  # One full turn of the dial
MIN_INTERVAL = 2
MAX_INTERVAL = 12


class SettingsError(ValueError):
    """Raised when a settings value is outside its bounds."""


def clamp(value: int, low: int, high: int) -> int:
    """Force value into [low, high]."""
    return max(low, min(high, value))


@dataclass(frozen=True)
class Settings:
    """Configured durations and auto-start behavior.

    Attributes:
        focus_minutes: Length of a focus session.
        short_break_minutes: Length of a short break.
        long_break_minutes: Length of a long break.
        long_break_interval: Completed focus sessions before a long break.
        auto_start_breaks: Start breaks automatically when focus ends.
        auto_start_focus: Start focus automatically when a break ends.
    """

    focus_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    long_break_interval: int = 4
    auto_start_breaks: bool = True
    auto_start_focus: bool = False

    def __post_init__(self):
        for name in ("focus_minutes", "short_break_minutes", "long_break_minutes"):
            value = getattr(self, name)
            if not MIN_MINUTES <= value <= MAX_MINUTES:
                raise SettingsError(
                    f"{name} must be between {MIN_MINUTES} and {MAX_MINUTES}, got {value}"
                )
        if not MIN_INTERVAL <= self.long_break_interval <= MAX_INTERVAL:
            raise SettingsError(
                f"long_break_interval must be between {MIN_INTERVAL} and "
                f"{MAX_INTERVAL}, got {self.long_break_interval}"
            )

    @classmethod
    def clamped(
        cls,
        focus_minutes: int = 25,
        short_break_minutes: int = 5,
        long_break_minutes: int = 15,
        long_break_interval: int = 4,
        auto_start_breaks: bool = True,
        auto_start_focus: bool = False,
    ) -> "Settings":
        """Build settings with every bounded field forced into range."""
        return cls(
            focus_minutes=clamp(focus_minutes, MIN_MINUTES, MAX_MINUTES),
            short_break_minutes=clamp(short_break_minutes, MIN_MINUTES, MAX_MINUTES),
            long_break_minutes=clamp(long_break_minutes, MIN_MINUTES, MAX_MINUTES),
            long_break_interval=clamp(long_break_interval, MIN_INTERVAL, MAX_INTERVAL),
            auto_start_breaks=auto_start_breaks,
            auto_start_focus=auto_start_focus,
        )

    def minutes_for(self, session_type: SessionType) -> int:
        """Configured minutes for a session type."""
        if session_type == SessionType.FOCUS:
            return self.focus_minutes
        elif session_type == SessionType.SHORT_BREAK:
            return self.short_break_minutes
        else:
            return self.long_break_minutes

    def duration_seconds(self, session_type: SessionType) -> int:
        """Configured duration in seconds for a session type."""
        return self.minutes_for(session_type) * 60

    def auto_start_for(self, session_type: SessionType) -> bool:
        """Whether a session of this type starts on its own."""
        if session_type == SessionType.FOCUS:
            return self.auto_start_focus
        return self.auto_start_breaks
