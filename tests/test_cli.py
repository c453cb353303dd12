import struct

from wavpeek.cli import main


def make_wav(channels, rate, bits, payload):
    block_align = channels * bits // 8
    fmt = struct.pack(
        "<HHIIHH", 1, channels, rate, rate * block_align, block_align, bits
    )
    body = (
        b"WAVE" + b"fmt " + struct.pack("<I", len(fmt)) + fmt
        + b"data" + struct.pack("<I", len(payload)) + payload
    )
    return b"RIFF" + struct.pack("<I", len(body)) + body


def test_main_describes_file(tmp_path, capsys):
    path = tmp_path / "tone.wav"
    path.write_bytes(make_wav(2, 44100, 16, bytes(400)))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Audio file: {path}" in out
    assert "Sample rate:\t\t44 kHz" in out
    assert "Bits per sample:\t16" in out


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.wav"
    assert main([str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err


def test_main_bad_file_reports_and_continues(tmp_path, capsys):
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"not a wave file at all, just some bytes here")
    good = tmp_path / "good.wav"
    good.write_bytes(make_wav(1, 8000, 8, bytes(80)))
    assert main([str(bad), str(good)]) == 1
    captured = capsys.readouterr()
    assert "RIFF" in captured.err
    assert f"Audio file: {good}" in captured.out