"""Modal window model: kinds, layout and typed payloads.

Exactly one payload type belongs to each window kind. The number of focus
regions per kind is defined once in ``FOCUS_REGIONS`` so every Tab handler
cycles with the same modulus.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union

DURATION_PRESETS = (15, 20, 25, 30, 45)
DEFAULT_DURATION_INDEX = 2


def is_minutes_text(text: str) -> bool:
    """Non-empty and ASCII digits only, so int() always accepts it."""
    return bool(text) and all(ch in string.digits for ch in text)


class WindowKind(Enum):
    CREATE_TASK = "create_task"
    POMODORO_SETTINGS = "pomodoro_settings"
    SETTINGS = "settings"
    SEARCH = "search"
    TASK_DETAIL = "task_detail"


FOCUS_REGIONS: Dict[WindowKind, int] = {
    WindowKind.CREATE_TASK: 2,
    WindowKind.POMODORO_SETTINGS: 3,
    WindowKind.SETTINGS: 3,
    WindowKind.SEARCH: 1,
    WindowKind.TASK_DETAIL: 1,
}

# Focus index of the embedded music list in the pomodoro and settings panels.
MUSIC_REGION = 2


def focus_region_count(kind: WindowKind) -> int:
    return FOCUS_REGIONS[kind]


def next_focus(kind: WindowKind, focus: int) -> int:
    return (focus + 1) % focus_region_count(kind)


@dataclass(frozen=True)
class WindowLayout:
    x: int
    y: int
    width: int
    height: int


@dataclass
class CreateTaskPayload:
    title: str = ""
    description: str = ""
    active_field: int = 0
    cursor: int = 0

    @property
    def active_text(self) -> str:
        return self.title if self.active_field == 0 else self.description

    @active_text.setter
    def active_text(self, value: str) -> None:
        if self.active_field == 0:
            self.title = value
        else:
            self.description = value


@dataclass
class PomodoroPayload:
    selected_duration: int = DEFAULT_DURATION_INDEX
    custom_duration: str = ""
    cursor: int = 0
    focus: int = 0

    @property
    def minutes(self) -> int:
        custom = self.custom_duration.strip()
        if is_minutes_text(custom) and int(custom) > 0:
            return int(custom)
        return DURATION_PRESETS[self.selected_duration]


@dataclass
class SettingsPayload:
    play_during_pomodoro: bool = False
    play_on_finish: bool = False
    focus: int = 0


@dataclass
class SearchPayload:
    query: str = ""
    cursor: int = 0


@dataclass
class EmptyPayload:
    pass


WindowPayload = Union[CreateTaskPayload, PomodoroPayload, SettingsPayload, SearchPayload, EmptyPayload]


@dataclass
class ActiveWindow:
    kind: WindowKind
    layout: WindowLayout
    payload: WindowPayload = field(default_factory=EmptyPayload)
    is_visible: bool = True
