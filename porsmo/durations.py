"""Formatting and parsing of ``XhYmZs`` durations."""

from __future__ import annotations

import re
from datetime import timedelta

from porsmo.errors import WrongFormatError

_UINT = re.compile(r"\+?[0-9]+")


def _parse_uint(text: str) -> int:
    if not _UINT.fullmatch(text):
        raise WrongFormatError(f"invalid number {text!r} in duration")
    return int(text)


def format_duration(dur: timedelta | float) -> str:
    """Render a duration as ``"<h>h <m>m <s>s"``, dropping fractions of a second."""
    if isinstance(dur, timedelta):
        if dur < timedelta(0):
            raise ValueError("duration must not be negative")
        total = dur // timedelta(seconds=1)
    else:
        if dur < 0:
            raise ValueError("duration must not be negative")
        total = int(dur)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}h {minutes}m {seconds}s"


def parse_duration(text: str) -> timedelta:
    """Parse strings such as ``30m``, ``1h`` or ``2h25m30s`` into a timedelta."""
    hours = minutes = seconds = 0

    head, sep, rest = text.partition("h")
    if sep:
        hours = _parse_uint(head)
        text = rest

    head, sep, rest = text.partition("m")
    if sep:
        minutes = _parse_uint(head)
        text = rest

    head, sep, rest = text.partition("s")
    if sep and not rest:
        seconds = _parse_uint(head)
    elif sep or text:
        raise WrongFormatError()

    try:
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError as exc:
        raise WrongFormatError("duration is too large") from exc