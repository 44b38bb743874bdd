import os
import stat
import sys
from pathlib import Path

import pytest

from wav_convert.errors import TranscodeError


@pytest.fixture
def make_tree(tmp_path):
    """Create empty files below tmp_path/in and return that root."""
    root = tmp_path / "in"
    root.mkdir()

    def _make(*names):
        for name in names:
            p = root / name
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(b"")
        return root
    return _make


@pytest.fixture
def fake_ffmpeg(tmp_path):
    """
    Write a stand-in `ffmpeg` shell script and return its path.
    The default body creates the last argument (the output path); every
    invocation's argv is appended to calls.log next to the script.
    """
    if sys.platform == "win32":
        pytest.skip("fake ffmpeg is a POSIX shell script")

    bindir = tmp_path / "bin"
    bindir.mkdir()

    def _make(body='for last; do :; done\nprintf "ok" > "$last"\n'):
        script = bindir / "ffmpeg"
        script.write_text(
            "#!/bin/sh\n"
            f'echo "$@" >> "{bindir / "calls.log"}"\n' + body
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)
    return _make


@pytest.fixture
def ffmpeg_calls():
    def _read(ffmpeg_bin):
        log = Path(ffmpeg_bin).parent / "calls.log"
        return log.read_text().splitlines() if log.exists() else []
    return _read


class RecordingTranscoder:
    """In-process transcoder that writes a marker file instead of running ffmpeg."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, task, ffmpeg_bin):
        self.calls.append((task, ffmpeg_bin))
        if task.src.name == self.fail_on:
            raise TranscodeError(f"FFmpeg failed for {task.src} with status: 1")
        task.dst.write_bytes(os.fsencode(str(task.src)))


@pytest.fixture
def recorder():
    return RecordingTranscoder
