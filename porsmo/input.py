"""Keyboard input mapped to counter commands."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta
from enum import Enum, auto


class Command(Enum):
    QUIT = auto()
    PAUSE = auto()
    RESUME = auto()
    TOGGLE = auto()
    ENTER = auto()
    SKIP = auto()
    YES = auto()
    NO = auto()
    INVALID = auto()


TIMEOUT = timedelta(milliseconds=250)

_KEYMAP = {
    "q": Command.QUIT,
    "\x03": Command.QUIT,  # Ctrl-C
    "\x1a": Command.QUIT,  # Ctrl-Z
    " ": Command.TOGGLE,
    "\r": Command.ENTER,
    "\n": Command.ENTER,
    "S": Command.SKIP,
    "y": Command.YES,
    "n": Command.NO,
    "t": Command.TOGGLE,
    "p": Command.PAUSE,
    "c": Command.RESUME,
}


def command_from_key(key) -> Command:
    """Map a keystroke (a string or a blessed Keystroke) to a Command."""
    if getattr(key, "name", None) == "KEY_ENTER":
        return Command.ENTER
    return _KEYMAP.get(str(key), Command.INVALID)


def get_event(term, timeout=TIMEOUT):
    """Wait up to ``timeout`` for a key; return it, or None when none came."""
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else timeout
    key = term.inkey(timeout=seconds)
    return key if key else None


def iter_commands(term) -> Iterator[Command]:
    """Yield commands for incoming keys until a poll times out."""
    while (key := get_event(term, TIMEOUT)) is not None:
        yield command_from_key(key)