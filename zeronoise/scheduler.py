"""Pure logic for the focus timer state machine."""

import logging
import math
from typing import Callable, List, Optional, Protocol

from .session import SessionType, TimerSnapshot
from .settings import Settings

logger = logging.getLogger(__name__)

TICK_INTERVAL = 1.0
AUTO_START_DELAY = 1.0  # Seconds between a completion and an automatic start
DEGREES_PER_MINUTE = 3.0  # 360 degrees == 120 minutes
SECONDS_PER_DEGREE = 60 / DEGREES_PER_MINUTE


class Handle(Protocol):
    """A scheduled callback that can be stopped."""

    def stop(self) -> None:
        ...


class Scheduler(Protocol):
    """Clock facility the timer is driven by.

    A textual ``App`` satisfies this protocol as-is.
    """

    def set_interval(self, interval: float, callback: Callable[[], None]) -> Handle:
        ...

    def set_timer(self, delay: float, callback: Callable[[], None]) -> Handle:
        ...


def minutes_from_angle(angle: float) -> int:
    """Minutes selected by a dial angle, halves rounded up."""
    return max(0, int(math.floor(angle / DEGREES_PER_MINUTE + 0.5)))


class SessionTimer:
    """Focus timer state machine.

    Tracks the countdown, start/pause/restart, rotation through session
    types on completion, and the mapping between remaining time and the
    selection angle of the dial.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
        on_session_complete: Optional[Callable[[SessionType, SessionType], None]] = None,
    ):
        """Initialize the timer.

        Args:
            settings: Durations and auto-start flags. Defaults to Settings().
            scheduler: Clock used for ticks and auto-start. Without one,
                ticks must be delivered by calling tick() directly.
            on_session_complete: Callback(old_type, new_type) when a
                session runs out.
        """
        self.settings = settings or Settings()
        self.scheduler = scheduler
        self.on_session_complete = on_session_complete

        self._session_type = SessionType.FOCUS
        self._running = False
        self._completed_focus_count = 0
        self._remaining = self.settings.duration_seconds(SessionType.FOCUS)
        self._total = self._remaining

        self._tick_handle: Optional[Handle] = None
        self._auto_start_handle: Optional[Handle] = None
        self._listeners: List[Callable[[TimerSnapshot], None]] = []

    @property
    def session_type(self) -> SessionType:
        """Current session type."""
        return self._session_type

    @property
    def running(self) -> bool:
        return self._running

    @property
    def remaining_seconds(self) -> int:
        """Seconds left in the current session."""
        return self._remaining

    @property
    def total_seconds(self) -> int:
        """Duration the progress ring is measured against."""
        return self._total

    @property
    def completed_focus_count(self) -> int:
        return self._completed_focus_count

    @property
    def auto_start_pending(self) -> bool:
        """True while a deferred auto-start is waiting to fire."""
        return self._auto_start_handle is not None

    @property
    def progress_fraction(self) -> float:
        """Fraction of the session left (1.0 at start, 0.0 at the end)."""
        if self._total == 0:
            return 0.0
        return self._remaining / self._total

    @property
    def minutes_label(self) -> str:
        return f"{self._remaining // 60:02d}"

    @property
    def seconds_label(self) -> str:
        return f"{self._remaining % 60:02d}"

    @property
    def angle_degrees(self) -> float:
        """Angle of the dial indicator.

        Follows the remaining time while idle so the knob sits on the
        selected duration; sweeps the progress ring while running.
        """
        if self._running:
            return self.progress_fraction * 360.0
        return self._remaining / SECONDS_PER_DEGREE

    def snapshot(self) -> TimerSnapshot:
        """Current state for rendering."""
        return TimerSnapshot(
            session_type=self._session_type,
            running=self._running,
            remaining_seconds=self._remaining,
            total_seconds=self._total,
            completed_focus_count=self._completed_focus_count,
            long_break_interval=self.settings.long_break_interval,
            progress_fraction=self.progress_fraction,
            angle_degrees=self.angle_degrees,
        )

    def subscribe(self, listener: Callable[[TimerSnapshot], None]) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def set_duration_from_angle(self, angle: float) -> None:
        """Select the session length from a dial angle in [0, 360)."""
        if self._running:
            logger.debug("Ignoring duration change while running")
            return
        self.cancel_auto_start()

        minutes = minutes_from_angle(angle)
        self._remaining = minutes * 60
        self._total = self._remaining
        self._publish()

    def toggle(self) -> None:
        """Start or pause the countdown."""
        self.cancel_auto_start()
        if self._remaining == 0:
            logger.debug("Ignoring start of a zero-length session")
            return

        if self._running:
            self._pause()
        else:
            self._start()
        self._publish()

    def _start(self) -> None:
        self._running = True
        self._total = self._remaining
        if self.scheduler is not None:
            self._tick_handle = self.scheduler.set_interval(TICK_INTERVAL, self.tick)
        logger.info(
            "Started %s with %d seconds", self._session_type.label, self._remaining
        )

    def _pause(self) -> None:
        self._running = False
        self._stop_ticking()
        logger.info(
            "Paused %s with %d seconds left", self._session_type.label, self._remaining
        )

    def tick(self) -> None:
        """Advance the countdown by one second if running."""
        if not self._running:
            return

        if self._remaining > 0:
            self._remaining -= 1

        if self._remaining == 0:
            self._stop_ticking()
            self._running = False
            self._complete()

        self._publish()

    def _complete(self) -> None:
        """Rotate to the next session type after a countdown ends."""
        old_type = self._session_type
        if old_type == SessionType.FOCUS:
            self._completed_focus_count += 1
            if self._completed_focus_count % self.settings.long_break_interval == 0:
                new_type = SessionType.LONG_BREAK
            else:
                new_type = SessionType.SHORT_BREAK
        else:
            new_type = SessionType.FOCUS

        self._load(new_type)
        logger.info(
            "%s complete (%d focus sessions done), next: %s",
            old_type.label,
            self._completed_focus_count,
            new_type.label,
        )

        if self.settings.auto_start_for(new_type) and self._remaining > 0:
            self._schedule_auto_start()

        if self.on_session_complete:
            self.on_session_complete(old_type, new_type)

    def _load(self, session_type: SessionType) -> None:
        self._session_type = session_type
        self._remaining = self.settings.duration_seconds(session_type)
        self._total = self._remaining

    def _schedule_auto_start(self) -> None:
        if self.scheduler is None:
            return
        self._auto_start_handle = self.scheduler.set_timer(
            AUTO_START_DELAY, self._auto_start
        )

    def _auto_start(self) -> None:
        self._auto_start_handle = None
        if self._running or self._remaining == 0:
            return
        logger.debug("Auto-starting %s", self._session_type.label)
        self._start()
        self._publish()

    def cancel_auto_start(self) -> None:
        """Drop a pending automatic start, if any."""
        if self._auto_start_handle is not None:
            self._auto_start_handle.stop()
            self._auto_start_handle = None
            logger.debug("Cancelled pending auto-start")

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.stop()
            self._tick_handle = None

    def restart(self) -> None:
        """Stop everything and go back to the first focus session."""
        self.cancel_auto_start()
        self._stop_ticking()
        self._running = False
        self._completed_focus_count = 0
        self._load(SessionType.FOCUS)
        logger.info("Restarted")
        self._publish()

    def apply_settings(self, settings: Settings) -> None:
        """Replace the settings while idle.

        Reloads the countdown when the current session type's duration
        changed. Ignored while running.
        """
        if self._running:
            logger.debug("Ignoring settings change while running")
            return
        self.cancel_auto_start()

        old_seconds = self.settings.duration_seconds(self._session_type)
        self.settings = settings
        new_seconds = settings.duration_seconds(self._session_type)
        if new_seconds != old_seconds:
            self._remaining = new_seconds
            self._total = new_seconds
        self._publish()
