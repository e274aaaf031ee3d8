"""Tests for in-memory and console adapters."""

import time

import pytest

from toastkit import (
    ConsoleStrategy,
    DisplayRequest,
    InMemoryStrategy,
    InvalidRequestError,
    RecordingInterceptor,
    ToastDuration,
)
from toastkit.style import DarkToastStyle


def _resolved(text, **kwargs):
    return DisplayRequest(
        text=text,
        strategy=InMemoryStrategy(),
        style=DarkToastStyle(),
        interceptor=RecordingInterceptor(),
        duration=ToastDuration.SHORT,
        **kwargs,
    )


def test_in_memory_strategy_records_requests():
    """Test InMemoryStrategy records shown requests."""
    strategy = InMemoryStrategy()

    strategy.show_toast(_resolved("one"))
    strategy.show_toast(_resolved("one"))

    strategy.assert_shown("one", count=2)
    assert strategy.last.text == "one"


def test_in_memory_strategy_assert_shown_failure():
    """Test assert_shown raises with wrong count."""
    strategy = InMemoryStrategy()
    strategy.show_toast(_resolved("one"))

    with pytest.raises(AssertionError) as exc_info:
        strategy.assert_shown("one", count=2)

    assert "Expected 2 toasts" in str(exc_info.value)


def test_in_memory_strategy_rejects_unresolved():
    """Test strategies refuse requests that skipped resolution."""
    with pytest.raises(InvalidRequestError):
        InMemoryStrategy().show_toast(DisplayRequest(text="raw"))


def test_in_memory_strategy_clear():
    """Test clear resets shown requests and cancels."""
    strategy = InMemoryStrategy()
    strategy.show_toast(_resolved("one"))
    strategy.cancel_toast()

    strategy.clear()

    assert strategy.shown == []
    assert strategy.cancel_count == 0


def test_console_strategy_prints_output(capsys):
    """Test ConsoleStrategy prints the toast."""
    ConsoleStrategy().show_toast(_resolved("Saved"))

    captured = capsys.readouterr()
    assert "TOAST (SHORT)" in captured.out
    assert "Saved" in captured.out


def test_console_strategy_waits_for_delay(capsys):
    """Test a delayed toast is printed only after the delay."""
    strategy = ConsoleStrategy()

    strategy.show_toast(_resolved("Later", delay_millis=50))
    assert "Later" not in capsys.readouterr().out

    time.sleep(0.3)
    captured = capsys.readouterr()
    assert "Later" in captured.out
    assert "Delay:    50ms" in captured.out


def test_console_strategy_cancel_drops_pending(capsys):
    """Test cancel_toast drops a pending delayed toast."""
    strategy = ConsoleStrategy()

    strategy.show_toast(_resolved("Never", delay_millis=100))
    strategy.cancel_toast()
    time.sleep(0.2)

    assert "Never" not in capsys.readouterr().out
