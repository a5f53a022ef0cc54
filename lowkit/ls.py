"""A small directory lister with a handful of ls-style flags."""

from __future__ import annotations

import os
import stat
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

try:
    import grp
    import pwd
except ImportError:  # platforms without a user database
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]

_ONE_FLAGS = ("-1", "-11111")
_FLAGS = _ONE_FLAGS + ("-a", "-A", "-l")

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


@dataclass
class Options:
    """Flags that change how entries are listed."""

    one_per_line: bool = False
    show_all: bool = False
    almost_all: bool = False
    long_format: bool = False


def parse_args(args: Iterable[str]) -> tuple[Options, list[str]]:
    """Split arguments into options and the paths to list."""
    options = Options()
    paths: list[str] = []
    for arg in args:
        if arg in _ONE_FLAGS:
            options.one_per_line = True
        elif arg == "-a":
            options.show_all = True
        elif arg == "-A":
            options.almost_all = True
        elif arg == "-l":
            options.long_format = True
        else:
            paths.append(arg)
    return options, paths


def format_mode(mode: int) -> str:
    """Render a file mode as a ten-character permission string."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def _user_name(uid: int) -> str:
    if pwd is None:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    if grp is None:
        return str(gid)
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _long_line(directory: str, name: str) -> str:
    info = os.lstat(os.path.join(directory, name))
    stamp = time.strftime("%b %d %Y", time.localtime(info.st_mtime))
    return (
        f"{format_mode(info.st_mode)} {info.st_nlink} {_user_name(info.st_uid)} "
        f"{_group_name(info.st_gid)} {info.st_size} {stamp} {name}\n"
    )


def _visible(name: str, options: Options) -> bool:
    if name.startswith(".") and not (options.show_all or options.almost_all):
        return False
    if options.almost_all and name in (".", ".."):
        return False
    return True


def _list_directory(
    path: str, options: Options, out: TextIO, err: TextIO, heading: bool
) -> None:
    sep = "\n" if options.one_per_line else " "
    if heading:
        out.write(f"{path}:{sep}")
    try:
        names = [".", ".."] + os.listdir(path)
    except OSError as exc:
        err.write(f"unable to open directory: {exc.strerror}\n")
        return
    for name in names:
        if not _visible(name, options):
            continue
        if options.long_format:
            out.write(_long_line(path, name))
        else:
            out.write(f"{name}{sep}")
    if not options.long_format:
        out.write("\n")


def list_paths(
    prog: str,
    paths: Iterable[str],
    options: Options,
    out: TextIO,
    err: TextIO,
) -> int:
    """List each path: files by name, directories by their entries."""
    found: list[tuple[str, os.stat_result | None]] = []
    for path in paths:
        try:
            found.append((path, os.lstat(path)))
        except OSError:
            found.append((path, None))
    directory_count = sum(1 for _, info in found if info and stat.S_ISDIR(info.st_mode))
    sep = "\n" if options.one_per_line else " "

    for path, info in found:
        if info is None:
            err.write(f"{prog}: cannot access {path}: No such file or directory\n")
        elif stat.S_ISREG(info.st_mode):
            out.write(f"{path}{sep}")
        elif stat.S_ISDIR(info.st_mode):
            _list_directory(path, options, out, err, heading=directory_count > 1)
    return 0


def main(argv: list[str] | None = None) -> int:
    """List the paths named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "ls"
    options, paths = parse_args(args)
    return list_paths(prog, paths, options, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())