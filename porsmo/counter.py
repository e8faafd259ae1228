"""The shared interface and main loop of the counters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from porsmo.input import TIMEOUT, Command, command_from_key, get_event
from porsmo.terminal import render_lines


class CounterUI(ABC):
    """A counter drawn on a terminal and driven by key commands."""

    @abstractmethod
    def render(self, term) -> list:
        """Return the lines of the current frame."""

    @abstractmethod
    def update(self, command: Command) -> None:
        """Apply a command other than quit."""

    def show(self, term) -> None:
        term.stream.write(render_lines(term, self.render(term)))
        term.stream.flush()

    def run_ui(self, term) -> str:
        """Draw and react to keys until quit; return the exit message."""
        while True:
            self.show(term)
            key = get_event(term, TIMEOUT)
            if key is None:
                continue
            command = command_from_key(key)
            if command is Command.QUIT:
                break
            self.update(command)
        return ""