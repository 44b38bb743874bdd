"""
CLI that recursively converts audio files to 16-bit mono 16 kHz WAV using
ffmpeg. The subfolder structure of the input directory is kept in the output.

  wav-convert in/ out/
  wav-convert in/ out/ --ffmpeg-bin /opt/ffmpeg/bin/ffmpeg
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path

from wav_convert import __version__
from wav_convert.convert import DEFAULT_FFMPEG, convert_all
from wav_convert.discover import find_audio_files
from wav_convert.errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wav-convert",
        description="Recursively converts audio files to 16-bit mono 16kHz WAV using FFmpeg",
    )
    ap.add_argument("input", type=Path,
                    help="input directory containing audio files (processed recursively)")
    ap.add_argument("output", type=Path,
                    help="output directory for converted WAV files (subfolder structure preserved)")
    ap.add_argument("-f", "--ffmpeg-bin", default=DEFAULT_FFMPEG,
                    help="path to FFmpeg binary (defaults to 'ffmpeg' in PATH)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not args.input.exists():
        sys.exit(f"✗ Input directory does not exist: {args.input}")

    try:
        args.output.mkdir(parents=True, exist_ok=True)
        files = find_audio_files(args.input)
        print(f"🔎 Found {len(files)} audio files under {args.input}")
        done = convert_all(files, args.input, args.output, args.ffmpeg_bin)
    except ConversionError as e:
        sys.exit(f"✗ {e}")
    except OSError as e:
        sys.exit(f"✗ I/O error: {e}")

    print(f"Conversion complete. Processed {done} files.")


if __name__ == "__main__":
    main()
