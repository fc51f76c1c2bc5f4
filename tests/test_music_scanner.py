import logging

from infrastructure.music_scanner import is_audio_file, scan_audio_files


def test_scan_filters_extensions_case_insensitively(tmp_path):
    (tmp_path / "b.MP3").write_bytes(b"")
    (tmp_path / "a.wav").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("x")
    (tmp_path / "cover.jpg").write_bytes(b"")
    nested = tmp_path / "albums" / "live"
    nested.mkdir(parents=True)
    (nested / "c.Wav").write_bytes(b"")

    files = scan_audio_files(tmp_path)

    assert [f.name for f in files] == ["a", "b", "c"]
    assert files[2].path == nested / "c.Wav"


def test_missing_directory_returns_empty_and_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="tomatodo.music"):
        assert scan_audio_files(tmp_path / "nowhere") == []
    assert "not found" in caplog.text


def test_none_directory_returns_empty():
    assert scan_audio_files(None) == []


def test_is_audio_file(tmp_path):
    assert is_audio_file(tmp_path / "x.mp3")
    assert is_audio_file(tmp_path / "x.WAV")
    assert not is_audio_file(tmp_path / "x.flac")
    assert not is_audio_file(tmp_path / "mp3")
