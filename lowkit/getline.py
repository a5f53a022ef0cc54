"""Line reading straight from file descriptors."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

READ_SIZE = 1024

# Bytes already read from a descriptor but not yet handed out as a line.
_pending: dict[int, bytes] = {}


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def getline(fd: int) -> str | None:
    """Return the next line from ``fd`` without its newline, or None at end of input."""
    if fd < 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    buffer = _pending.pop(fd, b"")
    searched = 0
    while True:
        newline = buffer.find(b"\n", searched)
        if newline != -1:
            rest = buffer[newline + 1:]
            if rest:
                _pending[fd] = rest
            return _decode(buffer[:newline])
        searched = len(buffer)
        chunk = os.read(fd, READ_SIZE)
        if not chunk:
            return _decode(buffer) if buffer else None
        buffer += chunk


def iter_lines(fd: int) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    try:
        while (line := getline(fd)) is not None:
            yield line
    finally:
        _pending.pop(fd, None)


def main(argv: list[str] | None = None) -> int:
    """Print every line of the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage: getline FILE", file=sys.stderr)
        return 1
    try:
        fd = os.open(args[0], os.O_RDONLY)
    except OSError as exc:
        print(f"getline: cannot open {args[0]}: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        for line in iter_lines(fd):
            print(line)
    finally:
        os.close(fd)
    return 0


if __name__ == "__main__":
    sys.exit(main())