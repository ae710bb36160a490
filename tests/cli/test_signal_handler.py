"""Unit tests for the signal handler module in dircmp CLI."""

import os
import signal
from unittest.mock import MagicMock, patch

import pytest

from dircmp.cli.signal_handler import (
    EXIT_SIGINT,
    EXIT_SIGPIPE,
    SIGPIPE,
    SignalHandler,
    cleanup,
    setup_signal_handling,
    signal_handler,
)


@pytest.fixture
def mock_signal():
    """Create a mock for signal.signal so no real handler is installed."""
    with patch("signal.signal", autospec=True) as mock:
        yield mock


@pytest.fixture
def mock_os():
    """Create a mock for os module functions used in signal handling."""
    with patch("dircmp.cli.signal_handler.os", autospec=True) as mock:
        mock.open.return_value = 123
        mock.dup2 = MagicMock()
        mock.devnull = "/dev/null"
        mock.O_WRONLY = os.O_WRONLY
        yield mock


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance for tests.

    This avoids interference with the singleton instance.
    """
    return SignalHandler()


@pytest.fixture
def reset_singleton():
    yield
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()


def test_initial_state(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() is None


def test_original_handlers_recorded():
    with patch("signal.getsignal", return_value=signal.SIG_DFL) as mock_getsignal:
        handler = SignalHandler()
    mock_getsignal.assert_any_call(signal.SIGINT)
    assert handler.original_sigint_handler is signal.SIG_DFL


def test_handle_sigint(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() == EXIT_SIGINT
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


@pytest.mark.skipif(SIGPIPE is None, reason="SIGPIPE not available on this platform")
def test_handle_sigpipe(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigpipe(SIGPIPE, None)

    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE
    mock_signal.assert_called_once_with(SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_sigpipe_takes_priority_in_exit_code(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle_sigint(signal.SIGINT, None)
    fresh_signal_handler.handle_sigpipe(signal.SIGINT, None)
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE


def test_setup_signal_handling(mock_signal):
    setup_signal_handling()

    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)
    if SIGPIPE is not None:
        mock_signal.assert_any_call(SIGPIPE, signal_handler.handle_sigpipe)
        assert mock_signal.call_count == 2
    else:
        assert mock_signal.call_count == 1


def test_cleanup_without_signal(mock_os):
    cleanup()
    mock_os.open.assert_not_called()
    mock_os.dup2.assert_not_called()


def test_cleanup_after_signal(mock_os, reset_singleton):
    signal_handler.sigpipe_received.set()
    with patch("dircmp.cli.signal_handler.sys") as mock_sys:
        mock_sys.stdout.fileno.return_value = 1
        cleanup()

    mock_os.open.assert_called_once_with("/dev/null", os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)
