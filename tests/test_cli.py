from datetime import timedelta

import pytest

from porsmo.cli import build_parser, create_counter, main
from porsmo.pomodoro import PomodoroConfig, PomodoroUI
from porsmo.stopwatch import StopwatchUI
from porsmo.timer import TimerUI


def _counter(*argv):
    return create_counter(build_parser().parse_args(list(argv)))


def test_no_mode_defaults_to_short_pomodoro():
    counter = _counter()
    assert isinstance(counter, PomodoroUI)
    assert counter.config == PomodoroConfig.short()


@pytest.mark.parametrize("name", ["stopwatch", "s"])
def test_stopwatch_and_alias(name):
    counter = _counter(name)
    assert isinstance(counter, StopwatchUI)
    assert counter.stopwatch.started() is True


@pytest.mark.parametrize("name", ["timer", "t"])
def test_timer_target_is_parsed(name):
    counter = _counter(name, "1h2m3s")
    assert isinstance(counter, TimerUI)
    assert counter.target == timedelta(hours=1, minutes=2, seconds=3)


@pytest.mark.parametrize("name", ["pomodoro", "p"])
@pytest.mark.parametrize("sub", ["short", "s"])
def test_pomodoro_short(name, sub):
    counter = _counter(name, sub)
    assert counter.config == PomodoroConfig.short()


@pytest.mark.parametrize("sub", ["long", "l"])
def test_pomodoro_long(sub):
    counter = _counter("pomodoro", sub)
    assert counter.config == PomodoroConfig.long()


@pytest.mark.parametrize("sub", ["custom", "c"])
def test_pomodoro_custom(sub):
    counter = _counter("p", sub, "30m", "5m", "15m")
    assert counter.config.work_time == timedelta(minutes=30)
    assert counter.config.break_time == timedelta(minutes=5)
    assert counter.config.long_break == timedelta(minutes=15)


def test_exit_message_flag():
    args = build_parser().parse_args(["pomodoro", "-e", "short"])
    assert args.exitmessage is True
    assert args.mode == "pomodoro"
    assert args.pomo_mode == "short"


def test_exit_message_flag_off_by_default():
    args = build_parser().parse_args(["pomodoro", "long"])
    assert args.exitmessage is False
    assert args.pomo_mode == "long"


def test_pomodoro_requires_mode():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["pomodoro"])
    assert info.value.code == 2


def test_timer_requires_target():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["timer"])
    assert info.value.code == 2


def test_bad_duration_is_reported(capsys):
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["timer", "abc"])
    assert info.value.code == 2
    assert "Wrong format for time" in capsys.readouterr().err


def test_custom_bad_duration_rejected():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["p", "c", "30m", "5x", "15m"])
    assert info.value.code == 2


def test_main_rejects_bad_arguments_before_touching_terminal():
    with pytest.raises(SystemExit) as info:
        main(["timer", "1h2x"])
    assert info.value.code == 2


def test_main_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "0.1.0" in capsys.readouterr().out


def test_create_counter_unknown_mode():
    args = build_parser().parse_args([])
    args.mode = "bogus"
    with pytest.raises(ValueError):
        create_counter(args)