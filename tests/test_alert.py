import io

from porsmo.alert import Alerter, alert, notify_default, play_bell


def test_notify_writes_escape_with_title_and_message():
    stream = io.StringIO()
    notify_default("Timer", "Done now", stream)
    value = stream.getvalue()
    assert value.startswith("\x1b]777;notify;")
    assert "Timer" in value
    assert "Done now" in value


def test_notify_strips_control_characters():
    stream = io.StringIO()
    notify_default("a\x1bb", "c\x07d", stream)
    value = stream.getvalue()
    assert value.count("\x1b") == 1
    assert value.count("\x07") == 1
    assert "ab" in value and "cd" in value


def test_play_bell_rings():
    stream = io.StringIO()
    play_bell(stream)
    assert stream.getvalue() == "\a"


def test_alert_runs_in_background_and_writes_both():
    stream = io.StringIO()
    thread = alert("Hello", "World", stream)
    thread.join(timeout=5)
    value = stream.getvalue()
    assert "Hello" in value
    assert value.endswith("\a")


def test_alerter_fires_only_once_until_reset():
    stream = io.StringIO()
    alerter = Alerter(stream=stream)
    first = alerter.alert_once("t", "m")
    first.join(timeout=5)
    assert alerter.alert_once("t", "m") is None
    assert stream.getvalue().count("\a") == 1

    alerter.reset()
    assert alerter.fired is False
    again = alerter.alert_once("t", "m")
    again.join(timeout=5)
    assert stream.getvalue().count("\a") == 2