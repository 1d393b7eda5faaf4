"""
Unit tests for the notification channel.
"""

import threading
from unittest.mock import patch

import pytest

from chronicler.events.channel import NotificationChannel


def test_emit_calls_handlers_in_order():
    """Test handlers run synchronously in subscription order."""
    channel = NotificationChannel("test")
    calls = []
    channel.subscribe(lambda p: calls.append(('first', p)))
    channel.subscribe(lambda p: calls.append(('second', p)))

    channel.emit("payload")

    assert calls == [('first', 'payload'), ('second', 'payload')]


def test_subscribe_rejects_non_callable():
    """Test subscribing something that is not callable fails."""
    channel = NotificationChannel("test")

    with pytest.raises(TypeError):
        channel.subscribe("not callable")


def test_disconnect_stops_delivery():
    """Test a disconnected handler is no longer called."""
    channel = NotificationChannel("test")
    calls = []
    sub = channel.subscribe(calls.append)
    assert sub.connected

    sub.disconnect()
    sub.disconnect()
    channel.emit("ignored")

    assert not sub.connected
    assert calls == []
    assert channel.subscriber_count == 0


def test_failing_handler_is_logged():
    """Test a raising handler is logged and does not stop delivery."""
    channel = NotificationChannel("test")
    calls = []

    def broken(payload):
        raise ValueError("boom")

    channel.subscribe(broken)
    channel.subscribe(calls.append)

    with patch('chronicler.utils.error_handling.logger') as mock_logger:
        channel.emit("p")

    assert calls == ["p"]
    assert mock_logger.error.called
    assert "test handler" in str(mock_logger.error.call_args)


def test_clear_disconnects_everything():
    """Test clear removes every subscription."""
    channel = NotificationChannel("test")
    subs = [channel.subscribe(lambda p: None) for _ in range(3)]

    channel.clear()

    assert channel.subscriber_count == 0
    assert not any(sub.connected for sub in subs)


def test_wait_for_next_returns_payload():
    """Test wait_for_next blocks until another thread emits."""
    channel = NotificationChannel("test")

    timer = threading.Timer(0.05, channel.emit, args=("done",))
    timer.start()
    try:
        payload = channel.wait_for_next(timeout=5)
    finally:
        timer.join()

    assert payload == "done"


def test_wait_for_next_timeout():
    """Test wait_for_next returns None when nothing is emitted."""
    channel = NotificationChannel("test")

    assert channel.wait_for_next(timeout=0.01) is None


def test_wait_for_next_ignores_past_emissions():
    """Test an emission before waiting does not satisfy the wait."""
    channel = NotificationChannel("test")
    channel.emit("old")

    assert channel.wait_for_next(timeout=0.01) is None
