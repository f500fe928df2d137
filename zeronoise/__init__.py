"""ZeroNoise: a single-screen focus timer."""

from .scheduler import SessionTimer
from .session import SessionType, TimerSnapshot
from .settings import Settings, SettingsError

__version__ = "0.1.0"

__all__ = ["SessionTimer", "SessionType", "Settings", "SettingsError", "TimerSnapshot"]
