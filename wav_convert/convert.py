"""
Convert discovered audio files to 16 kHz mono 16-bit WAV under a mirrored
output tree.

Requires `ffmpeg` to be installed on the system (or passed explicitly as
`ffmpeg_bin`).
"""
from __future__ import annotations
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, NamedTuple

from wav_convert.errors import PathError, TranscodeError

# ───────────────────────── config ──────────────────────────
DEFAULT_FFMPEG = "ffmpeg"
TARGET_FORMAT = "wav"
TARGET_CODEC = "pcm_s16le"     # signed 16-bit little-endian
TARGET_SR = 16_000
TARGET_CHANNELS = 1
STDERR_TAIL = 10               # ffmpeg stderr lines kept in error messages


class ConversionTask(NamedTuple):
    src: Path
    dst: Path


Transcoder = Callable[[ConversionTask, str], None]


# ───────────────────────── planning ────────────────────────
def plan_conversion(src: Path, input_root: Path, output_root: Path) -> ConversionTask:
    """Mirror `src` from `input_root` onto `output_root` with a .wav suffix."""
    try:
        rel = Path(src).relative_to(input_root)
    except ValueError:
        raise PathError(f"Failed to compute relative path for: {src}") from None
    return ConversionTask(Path(src), (Path(output_root) / rel).with_suffix(".wav"))


def _as_text(path: Path, what: str) -> str:
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise PathError(f"Invalid UTF-8 {what}: {text!r}") from None
    return text


def ffmpeg_command(ffmpeg_bin: str, task: ConversionTask) -> List[str]:
    return [
        str(ffmpeg_bin),
        "-i",  _as_text(task.src, "path"),
        "-f",  TARGET_FORMAT,
        "-acodec", TARGET_CODEC,
        "-ar", str(TARGET_SR),
        "-ac", str(TARGET_CHANNELS),
        "-y",                    # overwrite
        _as_text(task.dst, "output path"),
    ]


# ───────────────────────── ffmpeg ──────────────────────────
def run_ffmpeg(task: ConversionTask, ffmpeg_bin: str = DEFAULT_FFMPEG) -> None:
    """
    Run one ffmpeg conversion and wait for it.
    Raises TranscodeError when ffmpeg is missing or exits non-zero.
    """
    cmd = ffmpeg_command(ffmpeg_bin, task)
    try:
        subprocess.run(cmd, check=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as e:
        raise TranscodeError(f"Could not launch {ffmpeg_bin}: {e}") from e
    except subprocess.CalledProcessError as e:
        tail = e.stderr.decode("utf-8", errors="replace").strip().splitlines()[-STDERR_TAIL:]
        msg = f"FFmpeg failed for {task.src} with status: {e.returncode}"
        if tail:
            msg += "\n" + "\n".join(tail)
        raise TranscodeError(msg) from e


# ───────────────────────── driver ──────────────────────────
def convert_audio_file(
    src: Path,
    input_root: Path,
    output_root: Path,
    ffmpeg_bin: str = DEFAULT_FFMPEG,
    transcode: Transcoder = run_ffmpeg,
) -> Path:
    task = plan_conversion(src, input_root, output_root)
    task.dst.parent.mkdir(parents=True, exist_ok=True)
    transcode(task, ffmpeg_bin)
    print(f"✓ Converted: {task.src} -> {task.dst}")
    return task.dst


def convert_all(
    files: Iterable[Path],
    input_root: Path,
    output_root: Path,
    ffmpeg_bin: str = DEFAULT_FFMPEG,
    transcode: Transcoder = run_ffmpeg,
) -> int:
    """Convert `files` in order; the first failure aborts the batch."""
    done = 0
    for src in files:
        convert_audio_file(src, input_root, output_root, ffmpeg_bin, transcode)
        done += 1
    return done
