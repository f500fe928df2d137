"""Textual-based UI for the focus timer."""

import math
from typing import Callable, Dict, Optional, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Input, Label, Static, Switch

from .dial import angle_from_offset, normalize_angle, offset_in_ring, render_dial
from .scheduler import DEGREES_PER_MINUTE, SessionTimer
from .session import SessionType, TimerSnapshot
from .settings import Settings

DIAL_WIDTH = 61
DIAL_HEIGHT = 25
CENTER_RADIUS = 0.55  # Presses inside this (unit) radius are taps, not drags

# 3x5 glyphs; each '#' becomes a double-width block
_GLYPHS: Dict[str, Tuple[str, ...]] = {
    "0": ("###", "# #", "# #", "# #", "###"),
    "1": (" # ", "## ", " # ", " # ", "###"),
    "2": ("###", "  #", "###", "#  ", "###"),
    "3": ("###", "  #", " ##", "  #", "###"),
    "4": ("# #", "# #", "###", "  #", "  #"),
    "5": ("###", "#  ", "###", "  #", "###"),
    "6": ("###", "#  ", "###", "# #", "###"),
    "7": ("###", "  #", " # ", " # ", " # "),
    "8": ("###", "# #", "###", "# #", "###"),
    "9": ("###", "# #", "###", "  #", "###"),
    ":": ("   ", " # ", "   ", " # ", "   "),
}
GLYPH_HEIGHT = 5


def render_big_time(seconds: int) -> str:
    """Render MM:SS as big block digits."""
    time_str = f"{seconds // 60:02d}:{seconds % 60:02d}"

    lines = []
    for row in range(GLYPH_HEIGHT):
        parts = [
            _GLYPHS[char][row].replace("#", "██").replace(" ", "  ")
            for char in time_str
        ]
        lines.append(" ".join(parts))
    return "\n".join(lines)


class Dial(Static):
    """Circular progress ring with the time in the middle.

    Pressing and dragging on the ring selects a duration; a click in the
    middle starts or pauses the timer.
    """

    class AngleSelected(Message):
        """The user dragged the dial to a new angle."""

        def __init__(self, angle: float) -> None:
            super().__init__()
            self.angle = angle

    class Tapped(Message):
        """The user clicked the middle of the dial."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._dragging = False

    def update_display(self, snapshot: TimerSnapshot) -> None:
        self.update(
            render_dial(
                snapshot.angle_degrees,
                DIAL_WIDTH,
                DIAL_HEIGHT,
                knob=not snapshot.running,
                center=render_big_time(snapshot.remaining_seconds).split("\n"),
            )
        )

    def _select(self, event: events.MouseEvent) -> None:
        dx, dy = offset_in_ring(event.x, event.y, DIAL_WIDTH, DIAL_HEIGHT)
        self.post_message(self.AngleSelected(angle_from_offset(dx, dy)))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        dx, dy = offset_in_ring(event.x, event.y, DIAL_WIDTH, DIAL_HEIGHT)
        if math.hypot(dx, dy) < CENTER_RADIUS:
            self.post_message(self.Tapped())
            return
        self._dragging = True
        self.capture_mouse()
        self._select(event)

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._dragging:
            self._select(event)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self._dragging:
            self._dragging = False
            self.release_mouse()


class SessionLabel(Static):
    """Session type with cycle counter."""

    def update_display(self, snapshot: TimerSnapshot) -> None:
        self.update(f"─── {snapshot.session_label} {snapshot.cycle_display} ───")


class StatusBadge(Static):
    """Status indicator badge."""

    def update_display(self, snapshot: TimerSnapshot) -> None:
        if snapshot.running:
            self.update("▶ RUNNING")
            self.remove_class("paused")
            self.add_class("running")
        else:
            self.update("⏸ PAUSED" if snapshot.remaining_seconds else "drag the dial to set a time")
            self.remove_class("running")
            self.add_class("paused")


class SettingsScreen(ModalScreen):
    """Modal form editing durations and auto-start flags."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    _NUMBER_FIELDS = (
        ("focus_minutes", "Focus (min)"),
        ("short_break_minutes", "Short break (min)"),
        ("long_break_minutes", "Long break (min)"),
        ("long_break_interval", "Long break every"),
    )
    _SWITCH_FIELDS = (
        ("auto_start_breaks", "Auto-start breaks"),
        ("auto_start_focus", "Auto-start focus"),
    )

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings

    def compose(self) -> ComposeResult:
        with Vertical(id="settings-dialog"):
            yield Label("Settings", id="settings-title")
            for field, text in self._NUMBER_FIELDS:
                with Horizontal(classes="settings-row"):
                    yield Label(text, classes="settings-label")
                    yield Input(
                        value=str(getattr(self.settings, field)),
                        type="integer",
                        id=field.replace("_", "-"),
                    )
            for field, text in self._SWITCH_FIELDS:
                with Horizontal(classes="settings-row"):
                    yield Label(text, classes="settings-label")
                    yield Switch(value=getattr(self.settings, field), id=field.replace("_", "-"))
            with Horizontal(id="settings-buttons"):
                yield Button("Save", variant="primary", id="save")
                yield Button("Cancel", id="cancel")

    def _read_number(self, field: str) -> int:
        raw = self.query_one(f"#{field.replace('_', '-')}", Input).value
        try:
            return int(raw)
        except ValueError:
            return getattr(self.settings, field)

    def read_settings(self) -> Settings:
        """Settings from the form, clamped to their bounds."""
        values = {field: self._read_number(field) for field, _ in self._NUMBER_FIELDS}
        for field, _ in self._SWITCH_FIELDS:
            values[field] = self.query_one(f"#{field.replace('_', '-')}", Switch).value
        return Settings.clamped(**values)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.dismiss(self.read_settings())
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class FocusTimerApp(App):
    """Focus timer application."""

    CSS_PATH = "zeronoise.tcss"

    BINDINGS = [
        Binding("space", "toggle", "Start/Pause"),
        Binding("r", "restart", "Restart"),
        Binding("left", "adjust(-1)", "-1 min", show=False),
        Binding("right", "adjust(1)", "+1 min", show=False),
        Binding("s", "settings", "Settings"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        notify_enabled: bool = True,
        on_session_complete: Optional[Callable[[SessionType, SessionType], None]] = None,
    ) -> None:
        super().__init__()
        self.notify_enabled = notify_enabled
        self.on_session_complete_callback = on_session_complete
        self.session_timer = SessionTimer(
            settings, scheduler=self, on_session_complete=self._session_complete
        )
        self._unsubscribe: Optional[Callable[[], None]] = None

    def _session_complete(self, old_type: SessionType, new_type: SessionType) -> None:
        """Ring the bell, then hand off to the outer completion hook."""
        if self.notify_enabled:
            self.bell()
        if self.on_session_complete_callback:
            self.on_session_complete_callback(old_type, new_type)

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="timer-container"):
                yield SessionLabel(id="session-label")
                yield Dial(id="dial")
                yield StatusBadge(id="status-badge")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.session_timer.subscribe(self._refresh_display)
        self._refresh_display(self.session_timer.snapshot())

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _refresh_display(self, snapshot: TimerSnapshot) -> None:
        """Redraw every widget from a snapshot."""
        self.query_one("#dial", Dial).update_display(snapshot)
        self.query_one("#session-label", SessionLabel).update_display(snapshot)
        self.query_one("#status-badge", StatusBadge).update_display(snapshot)
        self._update_session_class(snapshot.session_type)

    def _update_session_class(self, session_type: SessionType) -> None:
        container = self.query_one("#timer-container")
        container.remove_class("focus", "short-break", "long-break")

        if session_type == SessionType.FOCUS:
            container.add_class("focus")
        elif session_type == SessionType.SHORT_BREAK:
            container.add_class("short-break")
        else:
            container.add_class("long-break")

    def on_dial_angle_selected(self, message: Dial.AngleSelected) -> None:
        self.session_timer.set_duration_from_angle(normalize_angle(message.angle))

    def on_dial_tapped(self, message: Dial.Tapped) -> None:
        self.session_timer.toggle()

    def action_toggle(self) -> None:
        """Toggle timer start/pause."""
        self.session_timer.toggle()

    def action_restart(self) -> None:
        """Back to the first focus session."""
        self.session_timer.restart()

    def action_adjust(self, minutes: int) -> None:
        """Nudge the selected duration by whole minutes."""
        angle = self.session_timer.angle_degrees + minutes * DEGREES_PER_MINUTE
        self.session_timer.set_duration_from_angle(normalize_angle(angle))

    def action_settings(self) -> None:
        if self.session_timer.running:
            self.notify("Pause the timer to change settings.", severity="warning")
            return
        self.session_timer.cancel_auto_start()
        self.push_screen(SettingsScreen(self.session_timer.settings), self._apply_settings)

    def _apply_settings(self, settings: Optional[Settings]) -> None:
        if settings is not None:
            self.session_timer.apply_settings(settings)


def run_ui(
    settings: Optional[Settings] = None,
    notify_enabled: bool = True,
    on_session_complete: Optional[Callable[[SessionType, SessionType], None]] = None,
) -> None:
    """Run the focus timer UI.

    Args:
        settings: Initial timer settings.
        notify_enabled: Whether to ring the bell on completion.
        on_session_complete: Callback for session completion.
    """
    app = FocusTimerApp(settings, notify_enabled, on_session_complete)
    app.run()
