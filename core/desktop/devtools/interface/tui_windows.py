"""Modal window manager: open / dispatch / close.

State machine ``Closed -> Open(window) -> {Open, Closed}``. A key is first
dispatched to the window payload; the closing policy then looks only at the
window kind and the raw key. Payload handlers never close the window
themselves.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, NamedTuple, Optional, Tuple

from core import (
    DURATION_PRESETS,
    MUSIC_REGION,
    ActiveWindow,
    CreateTaskPayload,
    EmptyPayload,
    PomodoroPayload,
    SearchPayload,
    SettingsPayload,
    WindowKind,
    WindowLayout,
    focus_region_count,
    next_focus,
)
from core.window import is_minutes_text
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_editing import cursor_at_end, edit_text
from core.desktop.devtools.interface.tui_keys import (
    DOWN,
    ENTER,
    ESCAPE,
    SPACE,
    TAB,
    UP,
    is_printable,
)
from core.desktop.devtools.interface.tui_state import AppState, MusicOptions, PomodoroConfig

logger = logging.getLogger("tomatodo.windows")

DEFAULT_TERMINAL_SIZE: Tuple[int, int] = (120, 30)

# kind -> (width ratio, height ratio, vertical divisor for the top offset)
LAYOUT_RATIOS = {
    WindowKind.CREATE_TASK: (0.7, 0.8, 3),
    WindowKind.POMODORO_SETTINGS: (0.8, 0.85, 2),
    WindowKind.SETTINGS: (0.75, 0.9, 2),
}
DEFAULT_LAYOUT_RATIO = (0.7, 0.7, 2)

CLOSE_ON_ENTER = frozenset({WindowKind.CREATE_TASK, WindowKind.SEARCH, WindowKind.TASK_DETAIL})

VOLUME_STEP = 0.1


class WindowOutcome(NamedTuple):
    handled: bool
    closed: bool


def terminal_size() -> Tuple[int, int]:
    try:
        size = os.get_terminal_size()
    except (AttributeError, ValueError, OSError):
        return DEFAULT_TERMINAL_SIZE
    return size.columns, size.lines


def compute_layout(kind: WindowKind, columns: int, lines: int) -> WindowLayout:
    width_ratio, height_ratio, divisor = LAYOUT_RATIOS.get(kind, DEFAULT_LAYOUT_RATIO)
    width = int(columns * width_ratio)
    height = int(lines * height_ratio)
    return WindowLayout(x=(columns - width) // 2, y=(lines - height) // divisor, width=width, height=height)


def should_close(kind: WindowKind, key: str) -> bool:
    if key == ESCAPE:
        return True
    if key == ENTER:
        return kind in CLOSE_ON_ENTER
    return False


class WindowManager:
    def __init__(self, player, size_provider: Callable[[], Tuple[int, int]] = terminal_size):
        self.player = player
        self._size_provider = size_provider

    # -------------------- lifecycle --------------------
    def open(self, state: AppState, kind: WindowKind) -> bool:
        """Open `kind` from the Closed state; requests while a window is open are rejected."""
        if state.window is not None:
            logger.debug("Not opening %s: %s is already open", kind.value, state.window.kind.value)
            return False
        if kind is WindowKind.TASK_DETAIL and state.selected_task is None:
            return False
        columns, lines = self._size_provider()
        state.window = ActiveWindow(
            kind=kind,
            layout=compute_layout(kind, columns, lines),
            payload=self._new_payload(state, kind),
        )
        return True

    def close(self, state: AppState) -> None:
        state.window = None

    def handle_key(self, state: AppState, key: str) -> WindowOutcome:
        window = state.window
        if window is None:
            return WindowOutcome(False, False)
        handled = self.dispatch(state, window, key)
        closed = should_close(window.kind, key)
        state.window = None if closed else window
        return WindowOutcome(handled, closed)

    def dispatch(self, state: AppState, window: ActiveWindow, key: str) -> bool:
        payload = window.payload
        if isinstance(payload, CreateTaskPayload):
            return self._dispatch_create_task(state, payload, key)
        if isinstance(payload, PomodoroPayload):
            return self._dispatch_pomodoro(state, payload, key)
        if isinstance(payload, SettingsPayload):
            return self._dispatch_settings(state, payload, key)
        if isinstance(payload, SearchPayload):
            return self._dispatch_search(state, payload, key)
        if window.kind is WindowKind.TASK_DETAIL:
            return self._dispatch_task_detail(state, key)
        return False

    @staticmethod
    def _new_payload(state: AppState, kind: WindowKind):
        if kind is WindowKind.CREATE_TASK:
            return CreateTaskPayload()
        if kind is WindowKind.POMODORO_SETTINGS:
            cfg = state.pomodoro
            custom = "" if cfg.minutes == DURATION_PRESETS[cfg.duration_index] else str(cfg.minutes)
            return PomodoroPayload(selected_duration=cfg.duration_index, custom_duration=custom, cursor=len(custom))
        if kind is WindowKind.SETTINGS:
            opts = state.music_options
            return SettingsPayload(play_during_pomodoro=opts.play_during_pomodoro, play_on_finish=opts.play_on_finish)
        if kind is WindowKind.SEARCH:
            return SearchPayload(query=state.search_query, cursor=len(state.search_query))
        return EmptyPayload()

    # -------------------- payload handlers --------------------
    def _dispatch_create_task(self, state: AppState, payload: CreateTaskPayload, key: str) -> bool:
        if key == TAB:
            payload.active_field = next_focus(WindowKind.CREATE_TASK, payload.active_field)
            payload.cursor = cursor_at_end(payload.active_text)
            return True
        if key == ENTER:
            task = state.store.create(payload.title, payload.description)
            if task is not None:
                state.sync_task_count()
                state.set_status_message(translate("STATUS_TASK_CREATED", title=task.title))
            return True
        if key == ESCAPE:
            return True
        result = edit_text(payload.active_text, payload.cursor, key)
        if result.handled:
            payload.active_text = result.text
            payload.cursor = result.cursor
        return result.handled

    def _dispatch_search(self, state: AppState, payload: SearchPayload, key: str) -> bool:
        if key == TAB:
            payload.cursor = cursor_at_end(payload.query)
            return True
        if key == ENTER:
            state.search_query = payload.query.strip()
            if not state.search_query:
                return True
            start = state.task_nav.selected or 0
            match = state.store.find(state.search_query, start)
            if match is None:
                state.set_status_message(translate("STATUS_SEARCH_NO_MATCH", query=state.search_query))
            else:
                state.task_nav.select(match)
            return True
        if key == ESCAPE:
            return True
        result = edit_text(payload.query, payload.cursor, key)
        if result.handled:
            payload.query, payload.cursor = result.text, result.cursor
        return result.handled

    def _dispatch_task_detail(self, state: AppState, key: str) -> bool:
        if key == "x":
            if state.store.complete(state.task_nav.selected):
                state.set_status_message(translate("STATUS_TASK_COMPLETED"))
            return True
        return key in (ENTER, ESCAPE, TAB)

    def _dispatch_pomodoro(self, state: AppState, payload: PomodoroPayload, key: str) -> bool:
        if key == TAB:
            payload.focus = next_focus(WindowKind.POMODORO_SETTINGS, payload.focus)
            payload.cursor = cursor_at_end(payload.custom_duration)
            return True
        if key == ESCAPE:
            return True
        if payload.focus == MUSIC_REGION:
            return self._dispatch_music(state, key)
        if key == ENTER:
            state.pomodoro = PomodoroConfig(duration_index=payload.selected_duration, minutes=payload.minutes)
            state.set_status_message(translate("STATUS_POMODORO_SAVED", minutes=payload.minutes))
            return True
        if payload.focus == 0:
            if key in (UP, "k"):
                payload.selected_duration = max(0, payload.selected_duration - 1)
                return True
            if key in (DOWN, "j"):
                payload.selected_duration = min(len(DURATION_PRESETS) - 1, payload.selected_duration + 1)
                return True
            return key == SPACE
        if key in (UP, DOWN):
            return True
        if is_printable(key) and not is_minutes_text(key):
            # minutes field: swallow non-digits so they never reach global shortcuts
            return True
        result = edit_text(payload.custom_duration, payload.cursor, key)
        if result.handled:
            payload.custom_duration, payload.cursor = result.text, result.cursor
        return result.handled

    def _dispatch_settings(self, state: AppState, payload: SettingsPayload, key: str) -> bool:
        if key == TAB:
            payload.focus = next_focus(WindowKind.SETTINGS, payload.focus)
            return True
        if key == ESCAPE:
            return True
        if payload.focus == MUSIC_REGION and self._dispatch_music(state, key):
            return True
        if key in ("+", "="):
            return self._change_volume(state, VOLUME_STEP)
        if key == "-":
            return self._change_volume(state, -VOLUME_STEP)
        if payload.focus == MUSIC_REGION:
            return False
        if key == ENTER:
            state.music_options = MusicOptions(
                play_during_pomodoro=payload.play_during_pomodoro,
                play_on_finish=payload.play_on_finish,
            )
            state.set_status_message(translate("STATUS_SETTINGS_SAVED"))
            return True
        if key == SPACE:
            if payload.focus == 0:
                payload.play_during_pomodoro = not payload.play_during_pomodoro
            else:
                payload.play_on_finish = not payload.play_on_finish
            return True
        if key in (UP, "k"):
            payload.focus = max(0, payload.focus - 1)
            return True
        if key in (DOWN, "j"):
            payload.focus = min(focus_region_count(WindowKind.SETTINGS) - 1, payload.focus + 1)
            return True
        return False

    def _dispatch_music(self, state: AppState, key: str) -> bool:
        if key in (UP, "k"):
            state.music_nav.previous()
            return True
        if key in (DOWN, "j"):
            state.music_nav.next()
            return True
        if key == ENTER:
            self.player.play(state.music_nav.selected)
            return True
        if key == SPACE:
            self.player.toggle()
            return True
        if key == "s":
            self.player.stop()
            return True
        return False

    def _change_volume(self, state: AppState, delta: float) -> bool:
        volume = self.player.set_volume(state.music.volume + delta)
        state.set_status_message(translate("STATUS_VOLUME", volume=int(round(volume * 100))))
        return True


def window_title(kind: Optional[WindowKind]) -> str:
    if kind is None:
        return ""
    return translate(f"WINDOW_{kind.name}")


__all__ = [
    "CLOSE_ON_ENTER",
    "DEFAULT_TERMINAL_SIZE",
    "WindowManager",
    "WindowOutcome",
    "compute_layout",
    "should_close",
    "terminal_size",
    "window_title",
]
