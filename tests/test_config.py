from pathlib import Path

import config


def _write(monkeypatch, tmp_path, text):
    path = tmp_path / "tomatodo.yaml"
    path.write_text(text, encoding="utf-8")
    monkeypatch.setenv("TOMATODO_CONFIG", str(path))
    return path


def test_defaults_without_config_file():
    assert config.get_music_dir() == config.DEFAULT_MUSIC_DIR
    assert config.get_volume() == 0.8
    assert config.get_user_theme() == ""
    assert config.get_user_lang() == ""
    assert config.get_log_file() is None


def test_values_are_read_from_yaml(monkeypatch, tmp_path):
    _write(
        monkeypatch,
        tmp_path,
        "music_dir: /srv/music\nvolume: 0.4\ntheme: mono\nlang: zh\nlog_file: /tmp/tomatodo.log\n",
    )
    assert config.get_music_dir() == Path("/srv/music")
    assert config.get_volume() == 0.4
    assert config.get_user_theme() == "mono"
    assert config.get_user_lang() == "zh"
    assert config.get_log_file() == Path("/tmp/tomatodo.log")


def test_volume_is_clamped_and_validated(monkeypatch, tmp_path):
    _write(monkeypatch, tmp_path, "volume: 7\n")
    assert config.get_volume() == 1.0
    _write(monkeypatch, tmp_path, "volume: loud\n")
    assert config.get_volume() == 0.8


def test_malformed_yaml_falls_back(monkeypatch, tmp_path):
    _write(monkeypatch, tmp_path, "music_dir: [unclosed\n")
    assert config.get_music_dir() == config.DEFAULT_MUSIC_DIR
    _write(monkeypatch, tmp_path, "- just\n- a list\n")
    assert config.get_user_theme() == ""


def test_music_dir_env_override(monkeypatch, tmp_path):
    _write(monkeypatch, tmp_path, "music_dir: /srv/music\n")
    monkeypatch.setenv("TOMATODO_MUSIC_DIR", str(tmp_path))
    assert config.get_music_dir() == tmp_path


def test_ttimeoutlen_env(monkeypatch):
    monkeypatch.setenv("TOMATODO_TUI_TTIMEOUTLEN", "0.2")
    assert config.get_ttimeoutlen() == 0.2
    monkeypatch.setenv("TOMATODO_TUI_TTIMEOUTLEN", "soon")
    assert config.get_ttimeoutlen() == 0.05
