from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from core import DEFAULT_VOLUME

USER_CONFIG_PATH = Path.home() / ".tomatodo_config.yaml"
DEFAULT_MUSIC_DIR = Path.home() / "Music"


def _config_path() -> Path:
    override = os.getenv("TOMATODO_CONFIG")
    return Path(override).expanduser() if override else USER_CONFIG_PATH


def _load_config() -> Dict[str, Any]:
    path = _config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def get_music_dir() -> Path:
    env_dir = os.getenv("TOMATODO_MUSIC_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    value = str(_load_config().get("music_dir", "") or "").strip()
    return Path(value).expanduser() if value else DEFAULT_MUSIC_DIR


def get_volume() -> float:
    raw = _load_config().get("volume", DEFAULT_VOLUME)
    try:
        volume = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_VOLUME
    return max(0.0, min(1.0, volume))


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def get_log_file() -> Optional[Path]:
    value = str(_load_config().get("log_file", "") or "").strip()
    return Path(value).expanduser() if value else None


def get_ttimeoutlen(default: float = 0.05) -> float:
    try:
        return max(0.0, float(os.getenv("TOMATODO_TUI_TTIMEOUTLEN", str(default))))
    except ValueError:
        return default
