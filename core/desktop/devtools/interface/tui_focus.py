"""Global key routing: the open window first, then the shortcut table."""

import logging

from core import WindowKind
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_keys import DOWN, ENTER, SPACE, UP
from core.desktop.devtools.interface.tui_state import AppState

logger = logging.getLogger("tomatodo.focus")

OPEN_SHORTCUTS = {
    "a": WindowKind.CREATE_TASK,
    "n": WindowKind.CREATE_TASK,
    "p": WindowKind.POMODORO_SETTINGS,
    "o": WindowKind.SETTINGS,
    "s": WindowKind.SEARCH,
    "/": WindowKind.SEARCH,
    ENTER: WindowKind.TASK_DETAIL,
}


class FocusRouter:
    def __init__(self, windows, player):
        self.windows = windows
        self.player = player

    def handle_key(self, state: AppState, key: str) -> bool:
        """Route one key press; returns True when something consumed it.

        Precedence: dismiss the dashboard, then the open window, then global
        shortcuts. A window that closes on this key ends routing, and so does
        one that stays open and consumed it.
        """
        if state.show_dashboard:
            state.show_dashboard = False
            return True
        if state.window is not None:
            outcome = self.windows.handle_key(state, key)
            if outcome.closed or outcome.handled:
                return True
        return self._handle_global(state, key)

    def _handle_global(self, state: AppState, key: str) -> bool:
        if key == "q":
            state.exit = True
            return True
        if key in ("j", DOWN):
            if state.window is None:
                state.task_nav.next()
            return True
        if key in ("k", UP):
            if state.window is None:
                state.task_nav.previous()
            return True
        kind = OPEN_SHORTCUTS.get(key)
        if kind is not None:
            return self.windows.open(state, kind)
        if state.window is not None:
            return False
        if key == "x":
            if state.store.complete(state.task_nav.selected):
                state.set_status_message(translate("STATUS_TASK_COMPLETED"))
            return True
        if key == SPACE:
            self.player.toggle()
            return True
        if key == "r":
            state.store.refresh_statuses()
            return True
        logger.debug("Unbound key %r", key)
        return False


__all__ = ["FocusRouter", "OPEN_SHORTCUTS"]
