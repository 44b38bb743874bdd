"""
wav_convert – batch-convert an audio tree to 16 kHz mono 16-bit WAV via ffmpeg.
"""
__version__ = "0.1.0"
