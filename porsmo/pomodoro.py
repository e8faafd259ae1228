"""Pomodoro sessions: work, break and long break in rounds of four."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import timedelta
from enum import Enum

from porsmo.alert import Alerter
from porsmo.counter import CounterUI
from porsmo.durations import format_duration
from porsmo.input import Command
from porsmo.stopwatch import Stopwatch
from porsmo.terminal import running_color

CONTROLS = "[Q]: quit, [Shift S]: Skip, [Space]: pause/resume"
ENDING_CONTROLS = "[Q]: quit, [Shift S]: Skip, [Space]: pause/resume, [Enter]: Next"
SKIP_CONTROLS = "[Enter]: Yes, [Q/N]: No"


class Mode(Enum):
    WORK = "work"
    BREAK = "break"
    LONG_BREAK = "long_break"


_DEFAULT_TITLES = {
    Mode.WORK: "Pomodoro (Work)",
    Mode.BREAK: "Pomodoro (Break)",
    Mode.LONG_BREAK: "Pomodoro (Long Break)",
}

_END_TITLES = {
    Mode.WORK: "Break has ended! Start work?",
    Mode.BREAK: "Work has ended! Start break?",
    Mode.LONG_BREAK: "Work has ended! Start a long break",
}

_ALERT_MESSAGES = {
    Mode.WORK: ("Your break ended!", "Time for some work"),
    Mode.BREAK: ("Pomodoro ended!", "Time for a short break"),
    Mode.LONG_BREAK: ("Pomodoro 4 sessions complete!", "Time for a long break"),
}

_SKIP_PROMPTS = {
    Mode.WORK: ("red", "skip to work?"),
    Mode.BREAK: ("green", "skip to break?"),
    Mode.LONG_BREAK: ("green", "skip to long break?"),
}


@dataclass(frozen=True)
class PomodoroConfig:
    """Target lengths of the work, break and long-break phases."""

    work_time: timedelta = timedelta(minutes=25)
    break_time: timedelta = timedelta(minutes=5)
    long_break: timedelta = timedelta(minutes=10)

    @classmethod
    def short(cls) -> PomodoroConfig:
        return cls(timedelta(minutes=25), timedelta(minutes=5), timedelta(minutes=10))

    @classmethod
    def long(cls) -> PomodoroConfig:
        return cls(timedelta(minutes=55), timedelta(minutes=10), timedelta(minutes=20))

    def current_target(self, mode: Mode) -> timedelta:
        if mode is Mode.WORK:
            return self.work_time
        if mode is Mode.BREAK:
            return self.break_time
        return self.long_break


@dataclass(frozen=True)
class Session:
    """Current phase and round, with the time spent working and on break."""

    mode: Mode = Mode.WORK
    round: int = 1
    work_elapsed: timedelta = timedelta(0)
    break_elapsed: timedelta = timedelta(0)

    def advance(self, duration: timedelta) -> Session:
        """Move to the next phase, crediting ``duration`` to the phase just ended."""
        if self.mode is Mode.WORK:
            next_mode = Mode.LONG_BREAK if self.round % 4 == 0 else Mode.BREAK
            return replace(self, mode=next_mode, work_elapsed=self.work_elapsed + duration)
        return replace(
            self,
            mode=Mode.WORK,
            round=self.round + 1,
            break_elapsed=self.break_elapsed + duration,
        )

    def next(self) -> Session:
        return self.advance(timedelta(0))


@dataclass(frozen=True)
class _Skip:
    elapsed: timedelta


class PomodoroUI(CounterUI):
    """Terminal view that walks through pomodoro phases."""

    def __init__(
        self,
        config: PomodoroConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        alerter: Alerter | None = None,
    ) -> None:
        self.config = config if config is not None else PomodoroConfig.short()
        self.session = Session()
        self.alerter = alerter if alerter is not None else Alerter()
        self._clock = clock
        self.ui_mode: Stopwatch | _Skip = Stopwatch(clock=clock)

    def __repr__(self) -> str:
        return f"PomodoroUI(config={self.config!r}, session={self.session!r})"

    @property
    def skipping(self) -> bool:
        return isinstance(self.ui_mode, _Skip)

    def _current_elapsed(self) -> timedelta:
        if isinstance(self.ui_mode, _Skip):
            return self.ui_mode.elapsed
        return self.ui_mode.elapsed()

    def _next_phase(self, elapsed: timedelta) -> None:
        self.alerter.reset()
        self.session = self.session.advance(elapsed)
        self.ui_mode = Stopwatch(clock=self._clock)

    def render(self, term) -> list:
        target = self.config.current_target(self.session.mode)
        round_number = f"Session: {self.session.round}"
        next_mode = self.session.next().mode

        if isinstance(self.ui_mode, _Skip):
            color, prompt = _SKIP_PROMPTS[next_mode]
            return [getattr(term, color)(prompt), round_number, SKIP_CONTROLS]

        stopwatch = self.ui_mode
        elapsed = stopwatch.elapsed()
        paint = getattr(term, running_color(stopwatch.started()))

        if elapsed < target:
            return [
                _DEFAULT_TITLES[self.session.mode],
                paint(format_duration(target - elapsed)),
                CONTROLS,
                round_number,
            ]

        title, message = _ALERT_MESSAGES[next_mode]
        self.alerter.alert_once(title, message)
        return [
            _END_TITLES[next_mode],
            paint(f"+{format_duration(elapsed - target)}"),
            ENDING_CONTROLS,
            round_number,
            message,
        ]

    def update(self, command: Command) -> None:
        if isinstance(self.ui_mode, _Skip):
            elapsed = self.ui_mode.elapsed
            if command in (Command.QUIT, Command.NO):
                self.ui_mode = Stopwatch(elapsed_before=elapsed, clock=self._clock)
            elif command in (Command.ENTER, Command.YES):
                self._next_phase(elapsed)
            return

        stopwatch = self.ui_mode
        elapsed = stopwatch.elapsed()
        target = self.config.current_target(self.session.mode)

        if command is Command.ENTER and elapsed >= target:
            self._next_phase(elapsed)
        elif command is Command.PAUSE:
            stopwatch.stop()
        elif command is Command.RESUME:
            stopwatch.start()
        elif command is Command.TOGGLE:
            stopwatch.toggle()
        elif command is Command.SKIP:
            self.ui_mode = _Skip(elapsed)

    def finish(self) -> None:
        """Credit the time of the phase in progress to the session totals."""
        self.session = self.session.advance(self._current_elapsed())

    def exit_message(self) -> str:
        return (
            f"You have spent {format_duration(self.session.work_elapsed)} working "
            f"and {format_duration(self.session.break_elapsed)} on break. Well done!"
        )

    def run_ui(self, term) -> str:
        super().run_ui(term)
        self.finish()
        return self.exit_message()