"""Reading canonical WAVE files and reshaping their sample data."""

from __future__ import annotations

import math
import os
import struct
from dataclasses import dataclass, replace

from .formats import WaveEncoding, encoding_name

__all__ = [
    "WaveInfo",
    "WaveFormatError",
    "parse_header",
    "find_data_chunk",
    "load_data",
    "load_file",
    "to_interleaved",
    "convert_ms_ima_to_ima4",
]

_HEADER_WORDS = 17
_HEADER_SIZE = _HEADER_WORDS * 4
_MIN_HEADER_SIZE = 36
_DATA_SEARCH_START = 32
_WORD = 4

_RIFF = 0x46464952
_WAVE = 0x45564157
_FMT = 0x20746D66


class WaveFormatError(ValueError):
    """Raised when bytes do not hold a usable WAVE file."""


@dataclass(frozen=True)
class WaveInfo:
    """Layout of a WAVE file.

    ``data_size`` and ``no_samples`` are zero until the data chunk is found.
    """

    frequency: int
    no_tracks: int
    bits_per_sample: int
    format: int
    block_size: int
    ext_subformat: int = 0
    data_size: int = 0
    no_samples: int = 0

    def duration(self) -> float:
        """Playing time of the data chunk in seconds."""
        denominator = self.frequency * self.no_tracks * self.bits_per_sample
        if denominator == 0:
            return math.inf
        return self.data_size * 8 / denominator

    def describe(self, name: str) -> str:
        """Return a multi-line summary of the file called ``name``."""
        size = self.data_size
        if size < 10240:
            size_text = f"{size} bytes"
        else:
            size_text = f"{size // 1024} kb ({size} bytes)"
        lines = [
            f"Audio file: {name}",
            f"Size:\t\t\t{size_text}",
            f"Sample rate:\t\t{self.frequency // 1000} kHz",
            f"No. tracks:\t\t{self.no_tracks}",
            f"Bits per sample:\t{self.bits_per_sample}",
            f"Data format:\t\t{encoding_name(self.format, self.ext_subformat)}",
            f"Samples per block:\t{self.block_size}",
            f"No. samples:\t\t{self.no_samples}",
            f"Duration:\t\t{self.duration():5.3f} sec.",
        ]
        return "\n".join(lines)


def parse_header(header: bytes) -> WaveInfo:
    """Read the format description from the start of a WAVE file."""
    if len(header) < _MIN_HEADER_SIZE:
        raise WaveFormatError(
            f"WAVE header too short: {len(header)} bytes"
        )
    padded = bytes(header[:_HEADER_SIZE]).ljust(_HEADER_SIZE, b"\0")
    words = struct.unpack(f"<{_HEADER_WORDS}I", padded)

    if words[0] != _RIFF:
        raise WaveFormatError("not a RIFF file")
    if words[2] != _WAVE or words[3] != _FMT:
        raise WaveFormatError("RIFF file holds no WAVE format chunk")

    tag = words[5] & 0xFFFF
    extensible = tag == WaveEncoding.EXTENSIBLE
    return WaveInfo(
        frequency=words[6],
        no_tracks=words[5] >> 16,
        bits_per_sample=(words[9] if extensible else words[8]) >> 16,
        format=words[11] if extensible else tag,
        block_size=words[8] & 0xFFFF,
        ext_subformat=words[11] >> 16,
    )


def find_data_chunk(data: bytes) -> tuple[int, int]:
    """Return the offset of the data chunk's payload and its declared size."""
    marker = bytes(data).find(b"data", _DATA_SEARCH_START)
    if marker < 0:
        raise WaveFormatError("no data chunk found")
    size_at = marker + 4
    if size_at + 4 > len(data):
        raise WaveFormatError("data chunk size is missing")
    (size,) = struct.unpack_from("<I", data, size_at)
    return size_at + 4, size


def load_data(data: bytes) -> tuple[WaveInfo, bytes]:
    """Parse an in-memory WAVE file and return its layout and sample data."""
    info = parse_header(data)
    offset, size = find_data_chunk(data)
    bits_per_frame = info.no_tracks * info.bits_per_sample
    if bits_per_frame == 0:
        raise WaveFormatError("WAVE header declares no tracks or no bits")
    info = replace(info, data_size=size, no_samples=(size * 8) // bits_per_frame)
    return info, bytes(data[offset:offset + size])


def load_file(path: str | os.PathLike[str]) -> tuple[WaveInfo, bytes]:
    """Read a WAVE file from disk and return its layout and sample data."""
    with open(path, "rb") as handle:
        contents = handle.read()
    return load_data(contents)


def to_interleaved(
    data: bytes, no_tracks: int, bytes_per_sample: int, no_samples: int
) -> bytes:
    """Turn track-after-track sample data into frame-after-frame data."""
    track_len = no_samples * bytes_per_sample
    total = no_tracks * track_len
    if len(data) < total:
        raise ValueError(
            f"need {total} bytes of sample data, got {len(data)}"
        )
    if no_tracks == 1:
        return bytes(data[:track_len])

    source = memoryview(bytes(data))
    frame_size = no_tracks * bytes_per_sample
    out = bytearray(total)
    for track in range(no_tracks):
        samples = source[track * track_len:(track + 1) * track_len]
        for byte in range(bytes_per_sample):
            out[track * bytes_per_sample + byte::frame_size] = samples[
                byte::bytes_per_sample
            ]
    return bytes(out)


def convert_ms_ima_to_ima4(
    data: bytes, channels: int, no_samples: int, block_size: int
) -> tuple[bytes, int]:
    """Regroup multichannel MS IMA ADPCM blocks so each channel is contiguous.

    Returns the converted data and the new per-channel block size.
    """
    if channels < 2:
        return bytes(data), block_size
    if block_size <= 0:
        raise ValueError("block size must be positive")

    blocks = no_samples // block_size
    block_bytes = block_size // channels
    chunks = block_bytes // _WORD
    step = channels * chunks * _WORD

    out = bytearray(data)
    pos = 0
    for _ in range(blocks):
        if pos + block_size > len(out):
            raise ValueError("sample data ends inside an ADPCM block")
        block = bytes(out[pos:pos + step])
        words = [block[i:i + _WORD] for i in range(0, step, _WORD)]
        out[pos:pos + step] = b"".join(
            b"".join(words[channel::channels]) for channel in range(channels)
        )
        pos += step
    return bytes(out), block_bytes