from pathlib import Path

import pytest

from core import AudioFileInfo
from infrastructure.audio_backend import AudioError


class FakeSink:
    def __init__(self, path, volume):
        self.path = path
        self.volume = volume
        self.is_paused = False
        self.stopped = False
        self.busy = True
        self.elapsed = 0.0

    def pause(self):
        self.is_paused = True

    def resume(self):
        self.is_paused = False

    def stop(self):
        self.stopped = True
        self.is_paused = False

    def set_volume(self, volume):
        self.volume = volume

    def is_busy(self):
        return self.is_paused or self.busy

    def position(self):
        return self.elapsed


class FakeOutput:
    def __init__(self, backend):
        self.backend = backend
        self.closed = False

    def play_file(self, path, volume):
        if str(path) in self.backend.broken:
            raise AudioError(f"cannot decode audio file {path}")
        sink = FakeSink(path, volume)
        self.backend.sinks.append(sink)
        return sink

    def close(self):
        self.closed = True


class FakeBackend:
    """Records every output and sink it hands out."""

    def __init__(self, broken=(), fail_open=False):
        self.broken = {str(p) for p in broken}
        self.fail_open = fail_open
        self.outputs = []
        self.sinks = []

    def open_output(self):
        if self.fail_open:
            raise AudioError("cannot open audio output: no device")
        output = FakeOutput(self)
        self.outputs.append(output)
        return output

    def live_sinks(self):
        return [s for s in self.sinks if not s.stopped]

    def open_outputs(self):
        return [o for o in self.outputs if not o.closed]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def audio_files():
    return [AudioFileInfo.from_path(Path(f"/music/{name}.mp3")) for name in ("alpha", "beta", "gamma")]


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("TOMATODO_CONFIG", str(tmp_path / "missing_config.yaml"))
    monkeypatch.delenv("TOMATODO_MUSIC_DIR", raising=False)
    monkeypatch.delenv("TOMATODO_LANG", raising=False)
