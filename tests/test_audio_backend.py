from types import SimpleNamespace

import pygame
import pytest

from infrastructure.audio_backend import AudioError, AudioSink, PygameAudioBackend


class FakeMusic:
    def __init__(self, fail_load=False):
        self.fail_load = fail_load
        self.calls = []
        self.busy = False
        self.pos = -1

    def load(self, path):
        if self.fail_load:
            raise pygame.error("Unrecognized audio format")
        self.calls.append(("load", path))

    def play(self):
        self.calls.append(("play",))
        self.busy = True

    def pause(self):
        self.calls.append(("pause",))

    def unpause(self):
        self.calls.append(("unpause",))

    def stop(self):
        self.calls.append(("stop",))
        self.busy = False

    def unload(self):
        self.calls.append(("unload",))

    def set_volume(self, volume):
        self.calls.append(("volume", volume))

    def get_busy(self):
        return self.busy

    def get_pos(self):
        return self.pos


def _mixer(music=None, fail_init=False):
    state = {"init": 0, "quit": 0}

    def init():
        if fail_init:
            raise pygame.error("No available audio device")
        state["init"] += 1

    def quit():
        state["quit"] += 1

    return SimpleNamespace(music=music or FakeMusic(), init=init, quit=quit, counts=state)


def test_play_file_loads_sets_volume_and_plays(tmp_path):
    track = tmp_path / "song.mp3"
    track.write_bytes(b"ID3")
    mixer = _mixer()
    output = PygameAudioBackend(mixer).open_output()
    sink = output.play_file(track, 0.5)
    assert mixer.counts["init"] == 1
    assert mixer.music.calls == [("load", str(track)), ("volume", 0.5), ("play",)]
    assert sink.is_busy()


def test_missing_file_raises_audio_error(tmp_path):
    output = PygameAudioBackend(_mixer()).open_output()
    with pytest.raises(AudioError):
        output.play_file(tmp_path / "nope.wav", 0.8)


def test_decode_error_is_wrapped(tmp_path):
    track = tmp_path / "broken.wav"
    track.write_bytes(b"not audio")
    output = PygameAudioBackend(_mixer(FakeMusic(fail_load=True))).open_output()
    with pytest.raises(AudioError, match="cannot decode"):
        output.play_file(track, 0.8)


def test_device_error_is_wrapped():
    backend = PygameAudioBackend(_mixer(fail_init=True))
    with pytest.raises(AudioError, match="audio output"):
        backend.open_output()


def test_sink_pause_resume_stop():
    music = FakeMusic()
    music.busy = True
    sink = AudioSink(music, "x.mp3")
    sink.pause()
    music.busy = False
    assert sink.is_paused and sink.is_busy()
    sink.resume()
    assert not sink.is_paused and not sink.is_busy()
    sink.stop()
    assert music.calls[-2:] == [("stop",), ("unload",)]


def test_output_close_quits_mixer_once():
    mixer = _mixer()
    output = PygameAudioBackend(mixer).open_output()
    output.close()
    output.close()
    assert mixer.counts["quit"] == 1


def test_sink_position_in_seconds():
    music = FakeMusic()
    sink = AudioSink(music, "x.mp3")
    assert sink.position() is None
    music.pos = 1500
    assert sink.position() == 1.5
