"""Playback control state machine (Stopped / Playing / Paused).

The controller is the only writer of MusicPlayerState and the exclusive owner
of the live audio output and sink. Both live only between a successful
``play`` and the next ``stop`` or failure. Every control call holds the lock
for its whole duration, never across frames.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Sequence

from core import AudioFileInfo, MusicPlayerState, PlaybackState
from infrastructure.audio_backend import AudioError

logger = logging.getLogger("tomatodo.music")


class PlaybackController:
    def __init__(
        self,
        state: MusicPlayerState,
        files: Sequence[AudioFileInfo],
        backend,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.state = state
        self.files = files
        self._backend = backend
        self._on_error = on_error
        self._lock = threading.Lock()
        self._output = None
        self._sink = None

    @property
    def has_resource(self) -> bool:
        return self._sink is not None

    def play(self, index: Optional[int]) -> bool:
        if index is None or not 0 <= index < len(self.files):
            logger.debug("play(%r) ignored: %d audio files", index, len(self.files))
            return False
        with self._lock:
            self._release()
            track = self.files[index]
            self.state.current_index = index
            self.state.position = None
            output = None
            try:
                output = self._backend.open_output()
                sink = output.play_file(track.path, self.state.volume)
            except AudioError as exc:
                if output is not None:
                    output.close()
                self.state.playback = PlaybackState.STOPPED
                self._report(str(exc))
                return False
            self._output = output
            self._sink = sink
            self.state.playback = PlaybackState.PLAYING
        logger.info("Playing %s", track.path)
        return True

    def toggle(self) -> None:
        with self._lock:
            sink = self._sink
            if sink is not None:
                if sink.is_paused:
                    sink.resume()
                    self.state.playback = PlaybackState.PLAYING
                else:
                    sink.pause()
                    self.state.playback = PlaybackState.PAUSED
                return
        if self.state.current_index is not None:
            self.play(self.state.current_index)

    def stop(self) -> None:
        with self._lock:
            self._release()

    def set_volume(self, volume: float) -> float:
        """Store the volume used by the next `play`; the live sink keeps its level."""
        self.state.volume = round(max(0.0, min(1.0, float(volume))), 2)
        return self.state.volume

    def poll(self) -> None:
        """Track the play position; drop the resource once the backend finished the track."""
        with self._lock:
            if self._sink is None:
                return
            if not self._sink.is_busy():
                logger.debug("Track finished")
                self._release()
                return
            self.state.position = self._sink.position()

    def close(self) -> None:
        self.stop()

    def _release(self) -> None:
        sink, output = self._sink, self._output
        self._sink = None
        self._output = None
        self.state.playback = PlaybackState.STOPPED
        self.state.position = None
        try:
            if sink is not None:
                sink.stop()
        except AudioError as exc:
            self._report(str(exc))
        finally:
            if output is not None:
                output.close()

    def _report(self, message: str) -> None:
        logger.warning("Playback error: %s", message)
        if self._on_error:
            self._on_error(message)


__all__ = ["PlaybackController"]
