from .status import TaskStatus
from .task import Tag, Task, utc_now
from .music import AudioFileInfo, MusicPlayerState, PlaybackState, DEFAULT_VOLUME
from .window import (
    ActiveWindow,
    CreateTaskPayload,
    DURATION_PRESETS,
    EmptyPayload,
    MUSIC_REGION,
    PomodoroPayload,
    SearchPayload,
    SettingsPayload,
    WindowKind,
    WindowLayout,
    focus_region_count,
    next_focus,
)

__all__ = [
    "TaskStatus",
    "Tag",
    "Task",
    "utc_now",
    # Music
    "AudioFileInfo",
    "MusicPlayerState",
    "PlaybackState",
    "DEFAULT_VOLUME",
    # Windows
    "ActiveWindow",
    "CreateTaskPayload",
    "DURATION_PRESETS",
    "EmptyPayload",
    "MUSIC_REGION",
    "PomodoroPayload",
    "SearchPayload",
    "SettingsPayload",
    "WindowKind",
    "WindowLayout",
    "focus_region_count",
    "next_focus",
]
