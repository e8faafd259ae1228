import io
from datetime import datetime, timedelta

import pytest
from blessed import Terminal

from porsmo.alert import Alerter
from porsmo.durations import format_duration
from porsmo.input import Command
from porsmo.timer import CONTROLS, TimerUI


class FakeClock:
    def __init__(self, start=500.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def term():
    return Terminal(stream=io.StringIO(), force_styling=None)


def make_timer(clock, seconds=90):
    return TimerUI(
        timedelta(seconds=seconds),
        clock=clock,
        now=datetime(2024, 1, 1, 12, 0, 0),
        alerter=Alerter(stream=io.StringIO()),
    )


def test_finish_time_is_start_plus_target(clock):
    ui = make_timer(clock)
    assert ui.finish_time == datetime(2024, 1, 1, 12, 0, 0) + timedelta(seconds=90)


def test_render_counting_down(clock, term):
    ui = make_timer(clock)
    clock.advance(30)
    lines = ui.render(term)
    assert lines[0] == "Timer"
    assert lines[1] == format_duration(timedelta(seconds=60))
    assert lines[2] == "ETA: 12:01:30"
    assert lines[3] == CONTROLS
    assert not ui.alerter.fired


def test_render_after_end_alerts_once(clock, term):
    ui = make_timer(clock)
    clock.advance(100)
    lines = ui.render(term)
    assert lines[0] == "Timer has ended"
    assert lines[1] == "+" + format_duration(timedelta(seconds=10))
    assert ui.alerter.fired
    assert ui.alerter.alert_once("again", "again") is None


def test_render_exactly_at_target_has_ended(clock, term):
    ui = make_timer(clock)
    clock.advance(90)
    lines = ui.render(term)
    assert lines[0] == "Timer has ended"
    assert lines[1] == "+" + format_duration(timedelta(0))


def test_pause_stops_countdown(clock, term):
    ui = make_timer(clock)
    clock.advance(10)
    ui.update(Command.PAUSE)
    clock.advance(1000)
    assert ui.stopwatch.elapsed() == timedelta(seconds=10)
    assert ui.render(term)[0] == "Timer"


def test_enter_and_toggle_switch_running_state(clock):
    ui = make_timer(clock)
    ui.update(Command.ENTER)
    assert not ui.stopwatch.started()
    ui.update(Command.TOGGLE)
    assert ui.stopwatch.started()
    ui.update(Command.PAUSE)
    ui.update(Command.RESUME)
    assert ui.stopwatch.started()


def test_irrelevant_command_is_ignored(clock):
    ui = make_timer(clock)
    ui.update(Command.SKIP)
    assert ui.stopwatch.started()


def test_huge_target_raises(clock):
    with pytest.raises(ValueError):
        TimerUI(timedelta.max, clock=clock, now=datetime(2024, 1, 1))