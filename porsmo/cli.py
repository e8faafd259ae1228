"""Command line entry point: pick a counter and run it in the terminal."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from porsmo.counter import CounterUI
from porsmo.durations import parse_duration
from porsmo.errors import WrongFormatError
from porsmo.pomodoro import PomodoroConfig, PomodoroUI
from porsmo.stopwatch import StopwatchUI
from porsmo.terminal import TerminalHandler
from porsmo.timer import TimerUI

_VERSION = "0.1.0"
_EXAMPLES = "example values: 30m 20m 40m 2h25m30s"


def _duration_arg(text: str):
    try:
        return parse_duration(text)
    except WrongFormatError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``porsmox`` command."""
    parser = argparse.ArgumentParser(
        prog="porsmox",
        description="A pomodoro, timer and stopwatch, all in one app",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.set_defaults(mode=None, exitmessage=False, pomo_mode=None)

    modes = parser.add_subparsers(dest="_mode_cmd", metavar="mode")

    stopwatch = modes.add_parser(
        "stopwatch",
        aliases=["s"],
        help="alias: s, stopwatch, counts up until you tell it to stop",
    )
    stopwatch.set_defaults(mode="stopwatch")

    timer = modes.add_parser(
        "timer",
        aliases=["t"],
        help="alias: t, timer, counts down until you tell it to stop, or it ends",
    )
    timer.add_argument(
        "target",
        type=_duration_arg,
        metavar="time",
        help=f"target time: {_EXAMPLES}",
    )
    timer.set_defaults(mode="timer")

    pomodoro = modes.add_parser(
        "pomodoro",
        aliases=["p"],
        help="alias: p, pomodoro, for all you productivity needs (default)",
    )
    pomodoro.add_argument(
        "-e",
        dest="exitmessage",
        action="store_true",
        help="Display a message after quitting the pomodoro timer",
    )
    pomodoro.set_defaults(mode="pomodoro")

    pomo_modes = pomodoro.add_subparsers(dest="_pomo_cmd", metavar="mode")
    pomo_modes.required = True

    short = pomo_modes.add_parser(
        "short",
        aliases=["s"],
        help="alias: s, short pomodoro, with 25m, 5m, 10m values (default)",
    )
    short.set_defaults(pomo_mode="short")

    long_ = pomo_modes.add_parser(
        "long",
        aliases=["l"],
        help="alias: l, long pomodoro, with 55m, 10m, 20m values",
    )
    long_.set_defaults(pomo_mode="long")

    custom = pomo_modes.add_parser(
        "custom",
        aliases=["c"],
        help="alias: c, custom pomodoro, with any specified values",
    )
    custom.add_argument(
        "work_time",
        type=_duration_arg,
        metavar="work-time",
        help=f"target work time: {_EXAMPLES}",
    )
    custom.add_argument(
        "break_time",
        type=_duration_arg,
        metavar="break-time",
        help=f"target break time: {_EXAMPLES}",
    )
    custom.add_argument(
        "long_break",
        type=_duration_arg,
        metavar="long-break-time",
        help=f"target long break time: {_EXAMPLES}",
    )
    custom.set_defaults(pomo_mode="custom")

    return parser


def create_counter(args: argparse.Namespace) -> CounterUI:
    """Build the counter the parsed arguments ask for."""
    mode = getattr(args, "mode", None)
    if mode is None:
        return PomodoroUI(PomodoroConfig.short())
    if mode == "stopwatch":
        return StopwatchUI()
    if mode == "timer":
        return TimerUI(args.target)
    if mode == "pomodoro":
        pomo_mode = args.pomo_mode
        if pomo_mode == "short":
            return PomodoroUI(PomodoroConfig.short())
        if pomo_mode == "long":
            return PomodoroUI(PomodoroConfig.long())
        if pomo_mode == "custom":
            return PomodoroUI(
                PomodoroConfig(args.work_time, args.break_time, args.long_break)
            )
        raise ValueError(f"unknown pomodoro mode: {pomo_mode!r}")
    raise ValueError(f"unknown counter mode: {mode!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the counter chosen on the command line until the user quits."""
    args = build_parser().parse_args(argv)
    counter = create_counter(args)
    with TerminalHandler() as term:
        message = counter.run_ui(term)
    if args.mode == "pomodoro" and args.exitmessage:
        print(message)
    return 0