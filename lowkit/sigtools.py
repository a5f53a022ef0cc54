"""Small commands for describing, sending and waiting for signals."""

from __future__ import annotations

import argparse
import itertools
import os
import re
import signal
import sys
import time
from pathlib import Path
from types import FrameType

from lowkit.signals import handle_sigaction, handle_signal

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _SignalReceived(Exception):
    """Raised from a handler to end a wait."""


def _prog(default: str) -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else default


def _to_int(text: str) -> int:
    """Read a leading integer from text, as atoi does; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def describe_signal(signum: int) -> str | None:
    """Return the system's description of a signal, or None if unknown."""
    try:
        return signal.strsignal(signum)
    except (ValueError, OverflowError):
        return None


def describe_main(argv: list[str] | None = None) -> int:
    """Print the description of the signal number given as argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {_prog('signal_describe')} <signum>")
        return 1
    signum = _to_int(args[0])
    description = describe_signal(signum)
    if description is None:
        print(f"Unknown signal: {signum}")
        return 1
    print(f"{args[0]}: {description}")
    return 0


def send_main(argv: list[str] | None = None) -> int:
    """Send SIGINT to the process whose id is given as argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {_prog('signal_send')} <pid>", file=sys.stderr)
        return 1
    pid = _to_int(args[0])
    try:
        os.kill(pid, signal.SIGINT)
    except OSError as exc:
        print(f"Error sending signal: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


def suspend_main(argv: list[str] | None = None) -> int:
    """Wait until SIGINT arrives, report it and finish."""

    def on_sigint(signum: int, frame: FrameType | None) -> None:
        print(f"Caught {int(signum)}")
        print("Signal received", flush=True)
        raise _SignalReceived

    previous = signal.signal(signal.SIGINT, on_sigint)
    try:
        signal.pause()
    except _SignalReceived:
        pass
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)
    return 0


def wait_main(argv: list[str] | None = None) -> int:
    """Print a line every interval until interrupted.

    Mode "pid" first prints the process id; "signal" and "sigaction"
    first install the SIGINT handler the respective way.
    """
    parser = argparse.ArgumentParser(prog=_prog("wait"))
    parser.add_argument("mode", nargs="?", default="pid", choices=("pid", "signal", "sigaction"))
    parser.add_argument("--limit", type=int, default=None, help="stop after this many lines")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between lines")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.mode == "pid":
        print(f"PID: {os.getpid()}", flush=True)
    else:
        install = handle_signal if args.mode == "signal" else handle_sigaction
        try:
            install()
        except (OSError, ValueError):
            print("Failure")
            return 1

    counter = itertools.count() if args.limit is None else range(args.limit)
    try:
        for i in counter:
            if args.mode == "pid":
                print("Waiting ...", flush=True)
            else:
                print(f"[{i}] Wait for it ...", flush=True)
            time.sleep(args.interval)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(describe_main())