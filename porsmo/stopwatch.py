"""A pausable stopwatch with lap recording, and its terminal view."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from porsmo.counter import CounterUI
from porsmo.durations import format_duration
from porsmo.input import Command
from porsmo.terminal import running_color

CONTROLS = "[Q]: quit, [Space]: pause/resume, [Enter]: record lap"

_LAP_DEBOUNCE_SECONDS = 0.1
_NOW = object()


class Stopwatch:
    """Measures elapsed time across pauses; starts running unless told otherwise."""

    def __init__(
        self,
        start_time: float | None | object = _NOW,
        elapsed_before: timedelta = timedelta(0),
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        now = clock()
        self.start_time: float | None = now if start_time is _NOW else start_time
        self.elapsed_before = elapsed_before
        self.laps: list[timedelta] = []
        self._last_lap = now

    def __repr__(self) -> str:
        return (
            f"Stopwatch(start_time={self.start_time!r}, "
            f"elapsed_before={self.elapsed_before!r}, laps={self.laps!r})"
        )

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    def _since(self, moment: float) -> timedelta:
        return timedelta(seconds=self._clock() - moment)

    def elapsed(self) -> timedelta:
        if self.start_time is None:
            return self.elapsed_before
        return self.elapsed_before + self._since(self.start_time)

    def started(self) -> bool:
        return self.start_time is not None

    def start(self) -> None:
        if self.start_time is None:
            self.start_time = self._clock()

    def stop(self) -> None:
        if self.start_time is not None:
            self.elapsed_before += self._since(self.start_time)
            self.start_time = None

    def toggle(self) -> None:
        if self.started():
            self.stop()
        else:
            self.start()

    def record_lap(self) -> None:
        """Record the current time as a lap, ignoring repeats within 100 ms."""
        now = self._clock()
        if now - self._last_lap < _LAP_DEBOUNCE_SECONDS:
            return
        self.laps.append(self.elapsed())
        self._last_lap = now


@dataclass
class StopwatchUI(CounterUI):
    """Terminal view of a stopwatch."""

    stopwatch: Stopwatch = field(default_factory=Stopwatch)

    def render(self, term) -> list:
        elapsed = self.stopwatch.elapsed()
        paint = getattr(term, running_color(self.stopwatch.started()))
        laps = [
            f"Lap {number}: {term.cyan(format_duration(lap))}"
            for number, lap in enumerate(self.stopwatch.laps, start=1)
        ]
        return ["Stopwatch", paint(format_duration(elapsed)), CONTROLS, "", *laps]

    def update(self, command: Command) -> None:
        if command is Command.PAUSE:
            self.stopwatch.stop()
        elif command is Command.RESUME:
            self.stopwatch.start()
        elif command is Command.TOGGLE:
            self.stopwatch.toggle()
        elif command is Command.ENTER:
            self.stopwatch.record_lap()