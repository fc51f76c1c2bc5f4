#!/usr/bin/env python3
"""TUI application - TomatodoTUI class and cmd_tui command."""

import logging
from typing import Callable, Iterable, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import ConditionalContainer, Float, FloatContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from config import get_music_dir, get_ttimeoutlen, get_user_theme, get_volume
from core import AudioFileInfo, DEFAULT_VOLUME, Task
from core.desktop.devtools.application.playback import PlaybackController
from core.desktop.devtools.application.task_store import demo_tasks
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_focus import FocusRouter
from core.desktop.devtools.interface.tui_keys import normalize_key
from core.desktop.devtools.interface.tui_render import (
    render_dashboard,
    render_footer,
    render_status_bar,
    render_task_list,
    render_window,
    render_window_title,
)
from core.desktop.devtools.interface.tui_state import build_state
from core.desktop.devtools.interface.tui_windows import WindowManager, terminal_size
from infrastructure.audio_backend import PygameAudioBackend
from infrastructure.music_scanner import scan_audio_files

from .tui_themes import DEFAULT_THEME, build_style, get_theme_palette

logger = logging.getLogger("tomatodo.tui")


class TomatodoTUI:
    @staticmethod
    def get_theme_palette(theme: str) -> dict:
        return get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        audio_files: Iterable[AudioFileInfo] = (),
        theme: str = DEFAULT_THEME,
        volume: float = DEFAULT_VOLUME,
        backend=None,
        size_provider: Callable[[], Tuple[int, int]] = terminal_size,
        show_dashboard: bool = True,
        version: str = "0.0.0",
        app_input=None,
        app_output=None,
    ):
        self.state = build_state(
            tasks=demo_tasks() if tasks is None else tasks,
            audio_files=audio_files,
            volume=volume,
            show_dashboard=show_dashboard,
        )
        self.player = PlaybackController(
            self.state.music,
            self.state.audio_files,
            backend if backend is not None else PygameAudioBackend(),
            on_error=self._report_playback_error,
        )
        self.windows = WindowManager(self.player, size_provider)
        self.router = FocusRouter(self.windows, self.player)
        self.get_terminal_size = size_provider
        self.version = version
        self.theme_name = theme
        self.style = self.build_style(theme)
        self._float_window = None

        kb = KeyBindings()

        @kb.add(Keys.Any, eager=True)
        def _(event):
            """Every key press goes through the focus router."""
            if not event.key_sequence:
                return
            press = event.key_sequence[0]
            key = normalize_key(press.key, press.data)
            if key is None:
                return
            self.handle_key(key)
            if self.state.exit:
                event.app.exit()

        window_open = Condition(lambda: self.state.window is not None and not self.state.show_dashboard)

        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.main_window = Window(content=FormattedTextControl(self.get_body_text), always_hide_cursor=True, wrap_lines=False)
        self.footer = Window(
            content=FormattedTextControl(self.get_footer_text),
            height=Dimension(min=1, max=2),
            always_hide_cursor=True,
        )
        self.modal = ConditionalContainer(
            Frame(
                Window(content=FormattedTextControl(self.get_window_text), always_hide_cursor=True, wrap_lines=False),
                title=self.get_window_title,
                style="class:window",
            ),
            filter=window_open,
        )
        self.root = FloatContainer(content=HSplit([self.status_bar, self.main_window, self.footer]), floats=[])

        self.app = Application(
            layout=Layout(self.root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            refresh_interval=1.0,
            before_render=self._before_render,
            input=app_input,
            output=app_output,
        )
        # Esc must not wait for a possible ANSI sequence.
        self.app.ttimeoutlen = get_ttimeoutlen()

    # -------------------- input --------------------
    def handle_key(self, key: str) -> bool:
        handled = self.router.handle_key(self.state, key)
        self._sync_modal_float()
        return handled

    def _sync_modal_float(self) -> None:
        """Place the modal frame at the layout computed when the window opened."""
        window = self.state.window
        if window is self._float_window:
            return
        self._float_window = window
        if window is None:
            self.root.floats[:] = []
            return
        layout = window.layout
        self.root.floats[:] = [
            Float(content=self.modal, left=layout.x, top=layout.y, width=layout.width, height=layout.height)
        ]

    # -------------------- rendering --------------------
    def _before_render(self, _app=None) -> None:
        self.state.store.refresh_statuses()
        self.player.poll()

    def get_status_text(self) -> FormattedText:
        if self.state.show_dashboard:
            return FormattedText([])
        columns, _ = self.get_terminal_size()
        return render_status_bar(self.state, columns)

    def get_body_text(self) -> FormattedText:
        columns, lines = self.get_terminal_size()
        if self.state.show_dashboard:
            return render_dashboard(columns, lines - 2, self.version)
        return render_task_list(self.state, columns, max(2, lines - 3))

    def get_footer_text(self) -> FormattedText:
        if self.state.show_dashboard:
            return FormattedText([])
        columns, _ = self.get_terminal_size()
        return render_footer(self.state, columns)

    def get_window_text(self) -> FormattedText:
        if self.state.window is None:
            return FormattedText([])
        return render_window(self.state, self.state.window)

    def get_window_title(self) -> str:
        return render_window_title(self.state.window)

    def _report_playback_error(self, message: str) -> None:
        self.state.set_status_message(translate("STATUS_PLAYBACK_ERROR", error=message), ttl=6)

    def run(self) -> None:
        try:
            self.app.run()
        finally:
            self.player.close()


def cmd_tui(args) -> int:
    music_dir = getattr(args, "music_dir", None) or get_music_dir()
    tui = TomatodoTUI(
        audio_files=scan_audio_files(music_dir),
        theme=getattr(args, "theme", None) or get_user_theme() or DEFAULT_THEME,
        volume=get_volume(),
        version=getattr(args, "app_version", "0.0.0"),
    )
    logger.info("Starting TUI with %d audio files from %s", len(tui.state.audio_files), music_dir)
    tui.run()
    return 0
