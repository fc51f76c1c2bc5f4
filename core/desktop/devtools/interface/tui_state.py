"""Application state aggregate passed by reference to every component."""

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core import (
    DURATION_PRESETS,
    ActiveWindow,
    AudioFileInfo,
    DEFAULT_VOLUME,
    MusicPlayerState,
    Task,
)
from core.window import DEFAULT_DURATION_INDEX
from core.desktop.devtools.application.task_store import TaskStore
from core.desktop.devtools.interface.tui_navigation import ListNavigator


@dataclass
class PomodoroConfig:
    duration_index: int = DEFAULT_DURATION_INDEX
    minutes: int = DURATION_PRESETS[DEFAULT_DURATION_INDEX]


@dataclass
class MusicOptions:
    play_during_pomodoro: bool = False
    play_on_finish: bool = False


@dataclass
class AppState:
    store: TaskStore = field(default_factory=TaskStore)
    task_nav: ListNavigator = field(default_factory=ListNavigator)
    audio_files: List[AudioFileInfo] = field(default_factory=list)
    music_nav: ListNavigator = field(default_factory=ListNavigator)
    music: MusicPlayerState = field(default_factory=MusicPlayerState)
    window: Optional[ActiveWindow] = None
    pomodoro: PomodoroConfig = field(default_factory=PomodoroConfig)
    music_options: MusicOptions = field(default_factory=MusicOptions)
    search_query: str = ""
    show_dashboard: bool = True
    exit: bool = False
    status_message: str = ""
    status_message_expires: float = 0.0

    @property
    def selected_task(self) -> Optional[Task]:
        return self.store.get(self.task_nav.selected)

    def set_status_message(self, message: str, ttl: float = 4.0) -> None:
        self.status_message = message
        self.status_message_expires = time.time() + ttl

    def current_status_message(self, now: Optional[float] = None) -> str:
        ts = now if now is not None else time.time()
        if self.status_message and ts > self.status_message_expires:
            self.status_message = ""
        return self.status_message

    def sync_task_count(self) -> None:
        self.task_nav.set_count(len(self.store))


def build_state(
    tasks: Iterable[Task] = (),
    audio_files: Iterable[AudioFileInfo] = (),
    volume: float = DEFAULT_VOLUME,
    show_dashboard: bool = True,
) -> AppState:
    store = TaskStore(tasks)
    files = list(audio_files)
    return AppState(
        store=store,
        task_nav=ListNavigator(len(store)),
        audio_files=files,
        music_nav=ListNavigator(len(files)),
        music=MusicPlayerState(volume=max(0.0, min(1.0, volume))),
        show_dashboard=show_dashboard,
    )


__all__ = ["AppState", "MusicOptions", "PomodoroConfig", "build_state"]
