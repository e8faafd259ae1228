"""Terminal setup and frame drawing."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import ExitStack

from blessed import Terminal

from porsmo.errors import TerminalInitError


class TerminalHandler:
    """Context manager: raw mode, alternate screen and a hidden cursor."""

    def __init__(self, term=None) -> None:
        self.term = term if term is not None else Terminal()
        self._stack: ExitStack | None = None

    def _write(self, text: str) -> None:
        self.term.stream.write(text)
        self.term.stream.flush()

    def __enter__(self):
        stack = ExitStack()
        try:
            stack.enter_context(self.term.raw())
        except Exception as exc:
            stack.close()
            raise TerminalInitError("Error entering raw mode in terminal") from exc
        try:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.hidden_cursor())
            stack.callback(self._write, self.term.clear)
            self._write(self.term.clear + self.term.home)
        except Exception as exc:
            stack.close()
            raise TerminalInitError(
                "Error initializing terminal with alternate screen and mouse capture"
            ) from exc
        self._stack = stack
        return self.term

    def __exit__(self, *args) -> None:
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()


def running_color(running: bool) -> str:
    """Colour name for a counter that is running or paused."""
    return "green" if running else "red"


def render_lines(term, lines: Iterable[object]) -> str:
    """Build a frame drawing each item on its own line from the top left."""
    parts = [term.home]
    for line in lines:
        parts.extend((str(line), term.clear_eol, "\r", term.move_down(1)))
    parts.append(term.clear_eos)
    return "".join(parts)