from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

DEFAULT_VOLUME = 0.8


@dataclass(frozen=True)
class AudioFileInfo:
    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "AudioFileInfo":
        return cls(name=path.stem, path=path)


class PlaybackState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass
class MusicPlayerState:
    current_index: Optional[int] = None
    playback: PlaybackState = PlaybackState.STOPPED
    position: Optional[float] = None
    volume: float = DEFAULT_VOLUME
