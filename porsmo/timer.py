"""A countdown timer and its terminal view."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime, timedelta

from porsmo.alert import Alerter
from porsmo.counter import CounterUI
from porsmo.durations import format_duration
from porsmo.input import Command
from porsmo.stopwatch import Stopwatch
from porsmo.terminal import running_color

CONTROLS = "[Q]: quit, [Space]: pause/resume"


class TimerUI(CounterUI):
    """Counts down to a target and keeps counting past it once it ends."""

    def __init__(
        self,
        target: timedelta,
        *,
        clock: Callable[[], float] = time.monotonic,
        now: datetime | None = None,
        alerter: Alerter | None = None,
    ) -> None:
        self.target = target
        self.stopwatch = Stopwatch(clock=clock)
        self.alerter = alerter if alerter is not None else Alerter()
        start = now if now is not None else datetime.now()
        try:
            self.finish_time = start + target
        except OverflowError as exc:
            raise ValueError("Failed to calculate estimated time") from exc

    def __repr__(self) -> str:
        return f"TimerUI(target={self.target!r}, finish_time={self.finish_time!r})"

    def render(self, term) -> list:
        elapsed = self.stopwatch.elapsed()
        paint = getattr(term, running_color(self.stopwatch.started()))
        eta = f"ETA: {term.blue(self.finish_time.strftime('%H:%M:%S'))}"

        if elapsed < self.target:
            return ["Timer", paint(format_duration(self.target - elapsed)), eta, CONTROLS]

        self.alerter.alert_once(
            "The timer has ended!",
            f"Your Timer of {format_duration(self.target)} has ended",
        )
        excess = format_duration(elapsed - self.target)
        return ["Timer has ended", paint(f"+{excess}"), eta, CONTROLS]

    def update(self, command: Command) -> None:
        if command is Command.PAUSE:
            self.stopwatch.stop()
        elif command is Command.RESUME:
            self.stopwatch.start()
        elif command in (Command.TOGGLE, Command.ENTER):
            self.stopwatch.toggle()