"""Tests for the textual UI."""

from textual.widgets import Button, Input

from zeronoise.session import SessionType
from zeronoise.settings import Settings
from zeronoise.ui import (
    DIAL_HEIGHT,
    DIAL_WIDTH,
    Dial,
    FocusTimerApp,
    SettingsScreen,
    render_big_time,
)

SCREEN_SIZE = (100, 40)


class TestBigTime:

    def test_shape(self):
        lines = render_big_time(1500).split("\n")
        assert len(lines) == 5
        # Five glyphs, six columns each, single-space separators
        assert all(len(line) == 34 for line in lines)

    def test_three_digit_minutes(self):
        lines = render_big_time(120 * 60).split("\n")
        assert all(len(line) == 41 for line in lines)


async def test_space_toggles_timer():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.press("space")
        assert app.session_timer.running is True

        await pilot.press("space")
        assert app.session_timer.running is False


async def test_arrow_keys_adjust_duration():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.press("right")
        assert app.session_timer.remaining_seconds == 26 * 60

        await pilot.press("left", "left")
        assert app.session_timer.remaining_seconds == 24 * 60


async def test_dial_drag_selects_duration():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        app.query_one(Dial).post_message(Dial.AngleSelected(90.0))
        await pilot.pause()
        assert app.session_timer.remaining_seconds == 30 * 60


async def test_dial_centre_click_toggles():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.click("#dial", offset=(DIAL_WIDTH // 2, DIAL_HEIGHT // 2))
        assert app.session_timer.running is True


async def test_restart_key():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.press("right", "space", "r")
        assert app.session_timer.running is False
        assert app.session_timer.session_type == SessionType.FOCUS
        assert app.session_timer.remaining_seconds == 25 * 60


async def test_settings_screen_applies_changes():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.press("s")
        screen = app.screen
        assert isinstance(screen, SettingsScreen)

        screen.query_one("#focus-minutes", Input).value = "30"
        screen.query_one("#long-break-interval", Input).value = "99"
        screen.query_one("#save", Button).press()
        await pilot.pause()

        assert not isinstance(app.screen, SettingsScreen)
        assert app.session_timer.remaining_seconds == 30 * 60
        assert app.session_timer.settings.long_break_interval == 12


async def test_settings_screen_cancel_keeps_settings():
    app = FocusTimerApp(Settings())
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        await pilot.press("s")
        app.screen.query_one("#focus-minutes", Input).value = "40"
        app.screen.query_one("#cancel", Button).press()
        await pilot.pause()

        assert app.session_timer.settings.focus_minutes == 25
        assert app.session_timer.remaining_seconds == 25 * 60


async def test_opening_settings_cancels_pending_auto_start():
    """A session that is about to auto-start waits while settings are edited."""
    app = FocusTimerApp(Settings(focus_minutes=1, auto_start_breaks=True))
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        timer = app.session_timer
        timer._remaining = 1
        await pilot.press("space")
        timer.tick()
        assert timer.session_type == SessionType.SHORT_BREAK
        assert timer.auto_start_pending is True

        await pilot.press("s")
        await pilot.pause(1.3)
        assert timer.auto_start_pending is False
        assert timer.running is False

        app.screen.query_one("#short-break-minutes", Input).value = "10"
        app.screen.query_one("#save", Button).press()
        await pilot.pause()

        assert timer.settings.short_break_minutes == 10
        assert timer.remaining_seconds == 10 * 60


async def test_completion_rings_bell(monkeypatch):
    completions = []
    rings = []
    app = FocusTimerApp(
        Settings(auto_start_breaks=False),
        on_session_complete=lambda old, new: completions.append((old, new)),
    )
    monkeypatch.setattr(app, "bell", lambda: rings.append(True))
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        app.session_timer._remaining = 1
        await pilot.press("space")
        app.session_timer.tick()

        assert rings == [True]
        assert completions == [(SessionType.FOCUS, SessionType.SHORT_BREAK)]


async def test_no_bell_when_notifications_disabled(monkeypatch):
    completions = []
    rings = []
    app = FocusTimerApp(
        Settings(auto_start_breaks=False),
        notify_enabled=False,
        on_session_complete=lambda old, new: completions.append((old, new)),
    )
    monkeypatch.setattr(app, "bell", lambda: rings.append(True))
    async with app.run_test(size=SCREEN_SIZE) as pilot:
        app.session_timer._remaining = 1
        await pilot.press("space")
        app.session_timer.tick()

        assert rings == []
        assert len(completions) == 1
