"""Inspect canonical RIFF/WAVE files and reshape their sample data."""

__version__ = "0.1.0"
__all__ = ["formats", "wavfile", "cli"]