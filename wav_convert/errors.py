from __future__ import annotations


class ConversionError(Exception):
    """Base class for everything that stops a conversion run."""


class PathError(ConversionError, ValueError):
    """A path is outside the input root or cannot be passed to ffmpeg as text."""


class TranscodeError(ConversionError, RuntimeError):
    """ffmpeg could not be launched or exited with a non-zero status."""
