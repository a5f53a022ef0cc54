import signal

import pytest

from lowkit import signals


@pytest.fixture(autouse=True)
def restore_sigint():
    saved = signal.getsignal(signal.SIGINT)
    yield
    if saved is not None:
        signal.signal(signal.SIGINT, saved)


def test_sigint_handler_output(capsys):
    signals.sigint_handler(signal.SIGINT, None)
    assert capsys.readouterr().out == f"Gotcha! [{int(signal.SIGINT)}]\n"


def test_print_hello_output(capsys):
    signals.print_hello(signal.SIGINT, None)
    assert capsys.readouterr().out == "Hello :)\n"


def test_handle_signal_installs_handler(capsys):
    signals.handle_signal()
    assert signal.getsignal(signal.SIGINT) is signals.sigint_handler
    signal.raise_signal(signal.SIGINT)
    assert capsys.readouterr().out == f"Gotcha! [{int(signal.SIGINT)}]\n"


def test_current_handler_signal_when_ignored():
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    assert signals.current_handler_signal() is None
    assert signal.getsignal(signal.SIGINT) is signal.SIG_IGN


def test_current_handler_signal_keeps_handler():
    signals.set_print_hello()
    assert signals.current_handler_signal() is signals.print_hello
    assert signal.getsignal(signal.SIGINT) is signals.print_hello


def test_current_handler_signal_default():
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    assert signals.current_handler_signal() is signal.SIG_DFL
    assert signal.getsignal(signal.SIGINT) is signal.SIG_DFL


def test_handle_sigaction_installs_handler(capsys):
    signals.handle_sigaction()
    assert signals.current_handler_sigaction() is signals.sigint_handler
    signal.raise_signal(signal.SIGINT)
    assert capsys.readouterr().out == f"Gotcha! [{int(signal.SIGINT)}]\n"


def test_current_handler_sigaction_does_not_change_handler():
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    assert signals.current_handler_sigaction() is signal.SIG_IGN
    assert signal.getsignal(signal.SIGINT) is signal.SIG_IGN


def test_set_print_hello_handles_signal(capsys):
    signals.set_print_hello()
    signal.raise_signal(signal.SIGINT)
    assert capsys.readouterr().out == "Hello :)\n"