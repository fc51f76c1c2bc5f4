"""pygame.mixer adapter used by the playback controller.

pygame plays the stream on its own audio thread; callers only issue control
commands. Every failure surfaces as AudioError so the controller has a single
exception type to recover from.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class AudioError(RuntimeError):
    """Output device, file or decoder failure."""


class AudioSink:
    """Handle to the track currently loaded into the mixer."""

    def __init__(self, music_module, path: Path):
        self._music = music_module
        self.path = path
        self.is_paused = False

    def pause(self) -> None:
        self._music.pause()
        self.is_paused = True

    def resume(self) -> None:
        self._music.unpause()
        self.is_paused = False

    def stop(self) -> None:
        try:
            self._music.stop()
            self._music.unload()
        except pygame.error as exc:
            raise AudioError(f"cannot stop playback of {self.path}: {exc}") from exc
        finally:
            self.is_paused = False

    def set_volume(self, volume: float) -> None:
        self._music.set_volume(max(0.0, min(1.0, float(volume))))

    def is_busy(self) -> bool:
        return self.is_paused or bool(self._music.get_busy())

    def position(self) -> Optional[float]:
        """Seconds played so far; None once the mixer has no stream."""
        millis = self._music.get_pos()
        return None if millis < 0 else millis / 1000.0


class AudioOutput:
    """An initialised mixer; `close` releases the device."""

    def __init__(self, mixer_module):
        self._mixer = mixer_module
        self.closed = False

    def play_file(self, path: Path, volume: float) -> AudioSink:
        if not Path(path).is_file():
            raise AudioError(f"cannot open audio file: {path}")
        try:
            self._mixer.music.load(str(path))
        except pygame.error as exc:
            raise AudioError(f"cannot decode audio file {path}: {exc}") from exc
        sink = AudioSink(self._mixer.music, Path(path))
        sink.set_volume(volume)
        try:
            self._mixer.music.play()
        except pygame.error as exc:
            raise AudioError(f"cannot start playback of {path}: {exc}") from exc
        return sink

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._mixer.quit()


class PygameAudioBackend:
    def __init__(self, mixer_module=None):
        self._mixer = mixer_module or pygame.mixer

    def open_output(self) -> AudioOutput:
        try:
            self._mixer.init()
        except pygame.error as exc:
            raise AudioError(f"cannot open audio output: {exc}") from exc
        return AudioOutput(self._mixer)


__all__ = ["AudioError", "AudioOutput", "AudioSink", "PygameAudioBackend"]
