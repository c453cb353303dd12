# wavpeek

`wavpeek` reads canonical RIFF/WAVE files. It reports how the samples in a
file are laid out and gives you the raw bytes of the data chunk. It also
has helpers that reshape sample data. One turns sample data stored track
by track into interleaved frames. The other reorders multichannel
Microsoft IMA ADPCM blocks so that each channel's data is contiguous.

It uses nothing outside the Python standard library.

## Installation

```
pip install .
```

## Command line

```
wavpeek sound.wav [more.wav ...]
```

For each file it prints a summary with these lines:

- the size of the data block
- the sample rate in kHz
- the number of tracks
- the bits per sample
- the encoding
- the block size from the header
- the number of samples per track
- the duration in seconds

If a file cannot be read or is not a usable WAVE file, the command writes a
message to standard error and goes on to the next file. It exits with
status 1 if any file failed and 0 otherwise.

## Library use

```python
from wavpeek.wavfile import load_file
from wavpeek.formats import format_from_file_format

info, samples = load_file("sound.wav")
print(info.describe("sound.wav"))
print(info.duration())

audio_format = format_from_file_format(info.format, info.bits_per_sample)
```

### `wavpeek.wavfile`

- `load_file(path)` reads a file from disk and returns `(WaveInfo, bytes)`.
- `load_data(data)` does the same for a WAVE image already held in memory.
- `parse_header(header)` reads the format description from the first bytes
  of a file and returns a `WaveInfo` whose `data_size` and `no_samples` are
  still zero. It needs at least 36 bytes, and it checks for the `RIFF`,
  `WAVE` and `fmt ` tags. For the extensible format (tag `0xFFFE`), the bits
  per sample and the format are taken from the extension part of the header.
- `find_data_chunk(data)` searches for `data` from byte 32 onward. It
  returns the offset of the payload and the chunk size declared in the file.
- `WaveInfo` is a frozen dataclass with these fields:
  - `frequency`
  - `no_tracks`
  - `bits_per_sample`
  - `format`
  - `block_size`
  - `ext_subformat`
  - `data_size`
  - `no_samples`

  Its `duration()` method returns seconds. It returns infinity when the
  frequency, the track count or the bits per sample is zero. Its
  `describe(name)` method returns the multi-line summary that the command
  prints.
- `to_interleaved(data, no_tracks, bytes_per_sample, no_samples)` takes
  sample data stored one track after another and returns interleaved
  frames. It raises `ValueError` if `data` is shorter than
  `no_tracks * no_samples * bytes_per_sample` bytes.
- `convert_ms_ima_to_ima4(data, channels, no_samples, block_size)` returns
  the reordered data and the new per-channel block size. Mono data comes
  back unchanged together with the original block size.

### `wavpeek.formats`

- `WaveEncoding` lists the WAVE format tags the package knows.
- `AudioFormat` lists the sample formats a payload can be handed over as.
- `format_from_file_format(format, bps)` maps a format tag and a bits per
  sample value to an `AudioFormat`. It covers PCM with 8, 16 or 32 bits,
  float with 32 or 64 bits, a-law, mu-law and IMA4 ADPCM.
- `encoding_name(format, ext_subformat=0)` returns a readable name for a
  format tag.

### Errors

Malformed input raises `WaveFormatError`. An encoding with no matching
sample format raises `UnsupportedFormatError`; this includes the extensible
format tag itself. Both errors are subclasses of `ValueError`.

## What it does not do

`wavpeek` does not play or record audio, and it does not write WAVE files.
It does not decode ADPCM, a-law or mu-law data into PCM samples. It reads
the header fields at fixed offsets of a canonical file. It does not walk
every chunk of arbitrary RIFF files.

## Tests

```
pip install .[test]
pytest
```