"""Shared fixtures: a manual clock standing in for the UI event loop."""

from typing import Callable, List

import pytest

from zeronoise.scheduler import SessionTimer
from zeronoise.settings import Settings


class FakeTimer:
    """Handle returned by FakeScheduler."""

    def __init__(self, due: float, interval: float, callback: Callable[[], None], repeat: bool):
        self.due = due
        self.interval = interval
        self.callback = callback
        self.repeat = repeat
        self.active = True

    def stop(self) -> None:
        self.active = False


class FakeScheduler:
    """Fires callbacks only when the test advances the clock."""

    def __init__(self):
        self.now = 0.0
        self.timers: List[FakeTimer] = []

    def set_interval(self, interval, callback):
        timer = FakeTimer(self.now + interval, interval, callback, repeat=True)
        self.timers.append(timer)
        return timer

    def set_timer(self, delay, callback):
        timer = FakeTimer(self.now + delay, delay, callback, repeat=False)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> List[FakeTimer]:
        return [t for t in self.timers if t.active]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing everything that falls due."""
        target = self.now + seconds
        while True:
            due = [t for t in self.active if t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            if timer.repeat:
                timer.due += timer.interval
            else:
                timer.active = False
            timer.callback()
        self.now = target


@pytest.fixture
def clock():
    return FakeScheduler()


@pytest.fixture
def make_timer(clock):
    """Build a SessionTimer driven by the fake clock."""

    def factory(on_session_complete=None, **settings_kwargs):
        return SessionTimer(
            Settings(**settings_kwargs),
            scheduler=clock,
            on_session_complete=on_session_complete,
        )

    return factory
