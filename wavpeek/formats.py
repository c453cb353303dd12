"""Mapping of WAVE encoding tags to in-memory sample formats."""

from __future__ import annotations

from enum import Enum, IntEnum

__all__ = [
    "AudioFormat",
    "WaveEncoding",
    "UnsupportedFormatError",
    "format_from_file_format",
    "encoding_name",
]


class WaveEncoding(IntEnum):
    """Format tags found in the ``fmt `` chunk of a WAVE file."""

    PCM = 1
    MS_ADPCM = 2
    IEEE_FLOAT = 3
    ALAW = 6
    MULAW = 7
    IMA4_ADPCM = 17
    EXTENSIBLE = 0xFFFE


class AudioFormat(Enum):
    """Sample formats a WAVE payload can be handed over as."""

    PCM8U = "pcm8u"
    PCM16S_LE = "pcm16s_le"
    PCM32S_LE = "pcm32s_le"
    FLOAT_LE = "float_le"
    DOUBLE_LE = "double_le"
    ALAW = "alaw"
    MULAW = "mulaw"
    IMA4_ADPCM = "ima4_adpcm"


class UnsupportedFormatError(ValueError):
    """Raised when a WAVE encoding has no matching sample format."""


_PCM_BY_BITS = {
    8: AudioFormat.PCM8U,
    16: AudioFormat.PCM16S_LE,
    32: AudioFormat.PCM32S_LE,
}

_FLOAT_BY_BITS = {
    32: AudioFormat.FLOAT_LE,
    64: AudioFormat.DOUBLE_LE,
}

_FIXED = {
    WaveEncoding.ALAW: AudioFormat.ALAW,
    WaveEncoding.MULAW: AudioFormat.MULAW,
    WaveEncoding.IMA4_ADPCM: AudioFormat.IMA4_ADPCM,
}

_NAMES = {
    WaveEncoding.PCM: "PCM",
    WaveEncoding.MS_ADPCM: "Microsoft ADPCM",
    WaveEncoding.IEEE_FLOAT: "PCM Floating point",
    WaveEncoding.ALAW: "G.711 a-law",
    WaveEncoding.MULAW: "G.711 mulaw",
    WaveEncoding.IMA4_ADPCM: "IMA4 ADPCM",
}


def format_from_file_format(format: int, bps: int) -> AudioFormat:
    """Return the sample format for a WAVE format tag and bits per sample."""
    if format == WaveEncoding.PCM:
        try:
            return _PCM_BY_BITS[bps]
        except KeyError:
            raise UnsupportedFormatError(
                f"Unsupported PCM sample size: {bps} bits"
            ) from None
    if format == WaveEncoding.IEEE_FLOAT:
        try:
            return _FLOAT_BY_BITS[bps]
        except KeyError:
            raise UnsupportedFormatError(
                f"Unsupported floating point sample size: {bps} bits"
            ) from None
    if format in _FIXED:
        return _FIXED[WaveEncoding(format)]
    if format == WaveEncoding.EXTENSIBLE:
        raise UnsupportedFormatError("Extended WAV format not yet implemented")
    raise UnsupportedFormatError(f"Unsupported WAV format: {format}")


def encoding_name(format: int, ext_subformat: int = 0) -> str:
    """Return a human readable name for a WAVE format tag."""
    if format in _NAMES:
        return _NAMES[WaveEncoding(format)]
    if format == WaveEncoding.EXTENSIBLE:
        return f"Extensible format (0x{ext_subformat:X})"
    return f"unknown (0x{format:X})"