"""Directory scan producing the session's audio file list."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from core import AudioFileInfo

AUDIO_EXTENSIONS = frozenset({"mp3", "wav"})

logger = logging.getLogger("tomatodo.music")


def is_audio_file(path: Path) -> bool:
    return path.suffix[1:].lower() in AUDIO_EXTENSIONS


def scan_audio_files(directory: Optional[Union[str, Path]]) -> List[AudioFileInfo]:
    """Recursively collect mp3/wav files under `directory`, sorted by name."""
    if not directory:
        return []
    root = Path(directory).expanduser()
    if not root.is_dir():
        logger.warning("Music directory not found: %s", root)
        return []
    files: List[AudioFileInfo] = []
    for dirpath, _dirnames, filenames in os.walk(root, followlinks=True):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.is_file() and is_audio_file(path):
                files.append(AudioFileInfo.from_path(path))
    files.sort(key=lambda info: info.name)
    logger.debug("Found %d audio files in %s", len(files), root)
    return files


__all__ = ["AUDIO_EXTENSIONS", "is_audio_file", "scan_audio_files"]
