"""Command that prints the ELF header of a file."""

from __future__ import annotations

import sys
from pathlib import Path

from lowkit.elfheader import ElfFormatError, ElfHeader, format_header, parse_header

_READ_SIZE = 64  # size of an ELF64 header, read whatever the class


def read_header(path: str | Path) -> ElfHeader:
    """Read and decode the ELF header at the start of ``path``."""
    with open(path, "rb") as handle:
        data = handle.read(_READ_SIZE)
    if len(data) != _READ_SIZE:
        raise ElfFormatError("Error reading ELF header")
    return parse_header(data)


def main(argv: list[str] | None = None) -> int:
    """Print the ELF header of the one file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: exactly two arguments should be used", file=sys.stderr)
        return 1
    try:
        header = read_header(args[0])
    except OSError as exc:
        print(f"Error: cannot open file: {exc.strerror}", file=sys.stderr)
        return 1
    except ElfFormatError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(format_header(header))
    return 0


if __name__ == "__main__":
    sys.exit(main())