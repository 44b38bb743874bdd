"""
Find every audio file below a directory.

Matching is by file extension only and is case-sensitive: `a.mp3` is picked
up, `a.MP3` is not.
"""
from __future__ import annotations
from pathlib import Path
from typing import List

# ───────────────────────── config ──────────────────────────
AUDIO_EXTENSIONS = frozenset(
    {"mp3", "wav", "flac", "ogg", "m4a", "aac", "wma", "aiff", "au", "mp2"}
)


def is_audio_file(path: Path) -> bool:
    # Path(".mp3").suffix is "" so dotfiles without a real extension never match
    return path.suffix[1:] in AUDIO_EXTENSIONS


def find_audio_files(root: Path) -> List[Path]:
    """
    Walk `root` recursively and return the audio files in visitation order.
    Any OSError while listing a directory propagates; there are no partial
    results.
    """
    files: List[Path] = []
    for child in Path(root).iterdir():
        if child.is_dir():
            files.extend(find_audio_files(child))
        elif is_audio_file(child):
            files.append(child)
    return files
