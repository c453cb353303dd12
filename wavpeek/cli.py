"""Command that prints the layout of WAVE files."""

from __future__ import annotations

import argparse
import sys

from .wavfile import WaveFormatError, load_file


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavpeek",
        description="Show the sample layout of canonical WAVE files.",
    )
    parser.add_argument("files", nargs="+", help="WAVE files to inspect")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Describe each file named on the command line; return an exit status."""
    args = _parser().parse_args(argv)
    status = 0
    for name in args.files:
        try:
            info, _ = load_file(name)
        except OSError as exc:
            print(f"{name}: {exc.strerror or exc}", file=sys.stderr)
            status = 1
            continue
        except WaveFormatError as exc:
            print(f"{name}: {exc}", file=sys.stderr)
            status = 1
            continue
        print(info.describe(name))
    return status


if __name__ == "__main__":
    sys.exit(main())