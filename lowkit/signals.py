"""Installing and inspecting SIGINT handlers."""

from __future__ import annotations

import signal
import sys
from types import FrameType
from typing import Any

HELLO = "Hello :)\n"


def sigint_handler(signum: int, frame: FrameType | None) -> None:
    """Report that SIGINT was caught."""
    print(f"Gotcha! [{int(signum)}]", flush=True)


def handle_signal() -> None:
    """Install sigint_handler for SIGINT."""
    signal.signal(signal.SIGINT, sigint_handler)


def current_handler_signal() -> Any:
    """Return the current SIGINT handler, or None if SIGINT is ignored.

    The handler in place is left unchanged.
    """
    handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
    if handler is signal.SIG_IGN:
        return None
    if handler is not None:
        signal.signal(signal.SIGINT, handler)
    return handler


def handle_sigaction() -> None:
    """Install sigint_handler for SIGINT with an empty signal mask."""
    signal.signal(signal.SIGINT, sigint_handler)
    if hasattr(signal, "siginterrupt"):
        signal.siginterrupt(signal.SIGINT, True)


def current_handler_sigaction() -> Any:
    """Return the current SIGINT handler without touching it."""
    return signal.getsignal(signal.SIGINT)


def print_hello(signum: int, frame: FrameType | None) -> int:
    """Write the greeting to standard output and flush it.

    Returns the number of characters written.
    """
    stream = sys.stdout
    written = stream.write(HELLO)
    stream.flush()
    return written


def set_print_hello() -> None:
    """Install print_hello for SIGINT."""
    signal.signal(signal.SIGINT, print_hello)