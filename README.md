# lowkit

A small collection of Unix tools, usable as commands and as a Python library:

- reading a file descriptor one line at a time (`lowkit.getline`),
- keeping track of the laps in a race (`lowkit.laps`),
- decoding and printing the header of an ELF file (`lowkit.elfheader`,
  `lowkit.readelf`),
- listing files and directories (`lowkit.ls`),
- installing and inspecting `SIGINT` handlers (`lowkit.signals`) and small
  commands that describe, send and wait for signals (`lowkit.sigtools`).

It has no dependencies outside the standard library and needs Python 3.10 or
later on a POSIX system.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `lowkit-getline FILE` | Prints each line of `FILE`, read with `lowkit.getline`. |
| `lowkit-laps` | Runs a sample race and prints its state after each round. |
| `lowkit-readelf FILE` | Prints the ELF header of `FILE` (32-bit or 64-bit). |
| `lowkit-ls [-1] [-a] [-A] [-l] PATH...` | Lists files and the contents of directories. |
| `lowkit-signal-describe SIGNUM` | Prints the system's description of a signal number. |
| `lowkit-signal-send PID` | Sends `SIGINT` to the process `PID`. |
| `lowkit-suspend` | Waits for `SIGINT`, prints `Caught 2` and `Signal received`, and exits 0. |
| `lowkit-wait [pid\|signal\|sigaction] [--limit N] [--interval SECONDS]` | Prints a line at a fixed interval until interrupted. |

Commands that fail print a message to standard error (or, for
`lowkit-signal-describe`, standard output) and exit with status 1.

### `lowkit-wait`

- `pid` (the default) prints `PID: <pid>` first, then `Waiting ...` every
  interval.
- `signal` and `sigaction` install a `SIGINT` handler that prints
  `Gotcha! [2]` instead of stopping, then print `[<n>] Wait for it ...` every
  interval.
- `--limit N` stops after `N` lines; `--interval` sets the pause in seconds
  (default 1). A keyboard interrupt that reaches the command makes it exit
  with status 130.

`lowkit-wait` and `lowkit-signal-send` work together: start the first in one
terminal and send it `SIGINT` from another using the PID it printed.
`lowkit-signal-send` reads the leading integer of its argument, so an
argument that does not start with a number is taken as 0.

### Listing options

- `-1` (or `-11111`) prints one entry per line; otherwise entries are
  separated by spaces.
- `-a` includes entries whose names start with a dot, including `.` and `..`.
- `-A` includes hidden entries but leaves out `.` and `..`.
- `-l` prints a long listing of each entry: permissions, link count, owner,
  group, size, modification date and name.

Regular files given as arguments are printed by name; directories are listed
entry by entry, in the order the system returns them, after `.` and `..`.
When more than one directory is given, each listing starts with the
directory's name. Paths that do not exist are reported on standard error.

## Library use

Reading lines from a file descriptor:

```python
import os
from lowkit.getline import getline, iter_lines

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in iter_lines(fd):
        print(line)
finally:
    os.close(fd)
```

`getline(fd)` returns the next line without its newline, or `None` once the
descriptor is exhausted; a negative descriptor raises `ValueError`.

Tracking a race:

```python
from lowkit.laps import Race

race = Race()
race.race_state([1, 42, 101])   # prints "Car 1 joined the race" ... and the standings
race.race_state([42])           # car 42 completes a lap
race.race_state([])             # an empty list resets the race
```

`Race.race_state` returns the cars, sorted by id, as a tuple of `Car`
copies. `Race(out=stream)` writes to `stream` instead of standard output.
The module-level `race_state(ids)` works on one shared race.

Reading an ELF header:

```python
from lowkit.readelf import read_header
from lowkit.elfheader import format_header

header = read_header("/bin/ls")
print(format_header(header))
```

`parse_header(data)` in `lowkit.elfheader` builds an `ElfHeader` from raw
bytes, in either byte order, and raises `ElfFormatError` when they do not
hold a 32-bit or 64-bit header. `swap_uint16` and `swap_uint32` reverse the
byte order of 16- and 32-bit values.

Working with signals:

```python
from lowkit.signals import handle_signal, current_handler_signal
from lowkit.sigtools import describe_signal

handle_signal()                     # print "Gotcha! [2]" on SIGINT
handler = current_handler_signal()  # None if SIGINT is ignored
print(describe_signal(2))           # None for an unknown signal
```

`set_print_hello()` installs `print_hello`, which writes `Hello :)`;
`current_handler_sigaction()` returns the current handler without changing
it.

## What it does not do

- `lowkit-ls` lists nothing when given no path (it does not default to the
  current directory), does not sort entries, and supports only the flags
  above. Paths that are neither regular files nor directories, such as
  symbolic links, are skipped.
- `lowkit-readelf` prints only the file header; it does not show program
  headers, section headers or symbols, and needs at least 64 bytes of input.