"""Desktop notifications and the bell that mark the end of a countdown."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import TextIO

_STRIP = str.maketrans("", "", "\x07\x1b")
_write_lock = threading.Lock()


def _resolve(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(stream: TextIO, data: str) -> None:
    with _write_lock:
        stream.write(data)
        stream.flush()


def notify_default(title: str, message: str, stream: TextIO | None = None) -> None:
    """Ask the terminal to raise a desktop notification (OSC 777)."""
    clean_title = str(title).translate(_STRIP).replace(";", ",")
    clean_message = str(message).translate(_STRIP)
    _emit(_resolve(stream), f"\x1b]777;notify;{clean_title};{clean_message}\x07")


def play_bell(stream: TextIO | None = None) -> None:
    """Ring the terminal bell."""
    _emit(_resolve(stream), "\a")


def alert(title: str, message: str, stream: TextIO | None = None) -> threading.Thread:
    """Notify and ring the bell on a background thread, which is returned."""
    target = _resolve(stream)

    def _run() -> None:
        notify_default(title, message, target)
        play_bell(target)

    thread = threading.Thread(target=_run, name="porsmo-alert", daemon=True)
    thread.start()
    return thread


@dataclass
class Alerter:
    """Fires an alert at most once until reset."""

    stream: TextIO | None = field(default=None, repr=False)
    fired: bool = False

    def alert_once(self, title: str, message: str) -> threading.Thread | None:
        if self.fired:
            return None
        self.fired = True
        return alert(title, message, self.stream)

    def reset(self) -> None:
        self.fired = False