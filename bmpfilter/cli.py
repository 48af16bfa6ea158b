"""Command line: apply one filter to a 24-bit BMP file."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from typing import NamedTuple

from bmpfilter import bmp, parallel
from bmpfilter.filters import FilterKind

USAGE = "Usage: filter [flag] infile outfile"
_FLAGS = frozenset(kind.value for kind in FilterKind)


class UsageError(Exception):
    """Bad command line; carries the exit status the command ends with."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class _OpenError(OSError):
    """A file could not be opened; carries the exit status."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class Arguments(NamedTuple):
    """Parsed command line: the filter (None for a plain copy) and two paths."""

    kind: FilterKind | None
    infile: str
    outfile: str


def _scan(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split arguments into option letters and operands, options anywhere."""
    letters: list[str] = []
    operands: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            operands.extend(args)
            break
        if arg.startswith("-") and len(arg) > 1:
            letters.extend(arg[1:])
        else:
            operands.append(arg)
    return letters, operands


def parse_args(argv: Sequence[str]) -> Arguments:
    """Parse the arguments that follow the program name.

    Raises UsageError with status 1 for an unknown flag, 2 for more than one
    flag and 3 when there are not exactly two file names.
    """
    letters, operands = _scan(argv)
    kind: FilterKind | None = None
    if letters:
        if letters[0] not in _FLAGS:
            raise UsageError("Invalid filter.", 1)
        if len(letters) > 1:
            raise UsageError("Only one filter allowed.", 2)
        kind = FilterKind(letters[0])
    if len(operands) != 2:
        raise UsageError(USAGE, 3)
    return Arguments(kind, operands[0], operands[1])


def run(
    kind: FilterKind | str | None,
    infile: bmp.StrPath,
    outfile: bmp.StrPath,
    workers: int | None = None,
) -> float:
    """Filter infile into outfile and return the seconds spent filtering and writing.

    With kind None the image is copied unchanged.
    """
    try:
        source = open(infile, "rb")
    except OSError:
        raise _OpenError(f"Could not open {infile}.", 4) from None
    with source:
        try:
            target = open(outfile, "wb")
        except OSError:
            raise _OpenError(f"Could not create {outfile}.", 5) from None
        with target:
            bitmap = bmp.read_bitmap(source)
            started = time.perf_counter()
            pixels = bitmap.pixels
            if kind is not None:
                pixels = parallel.apply_filter(kind, pixels, workers)
            result = bmp.Bitmap(bitmap.file_header, bitmap.info_header, pixels)
            bmp.write_bitmap(result, target)
    return time.perf_counter() - started


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        parsed = parse_args(args)
        elapsed = run(parsed.kind, parsed.infile, parsed.outfile)
    except (UsageError, _OpenError) as error:
        print(error, file=sys.stderr)
        return error.exit_code
    except ValueError as error:
        print(f"Unsupported file format: {error}.", file=sys.stderr)
        return 6
    print(f"Edit function took {elapsed:f} seconds to execute ")
    return 0


if __name__ == "__main__":
    sys.exit(main())