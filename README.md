# porsmo

A pomodoro timer, a countdown timer and a stopwatch in one terminal app.
The counter takes over the terminal (alternate screen, hidden cursor, raw
keyboard input) and restores it when you quit.

## Installation

```
pip install .
```

This installs the `porsmox` command.

## Usage

Run with no arguments for a short pomodoro (25 minutes of work, 5 minutes of
break, and a 10 minute long break after every fourth round):

```
porsmox
```

### Modes

| Command | Alias | What it does |
|---|---|---|
| `porsmox stopwatch` | `porsmox s` | Counts up until you quit, with lap recording. |
| `porsmox timer <time>` | `porsmox t <time>` | Counts down from `<time>` and shows the expected finish time; once it ends it counts the overrun. |
| `porsmox pomodoro short` | `porsmox p s` | Pomodoro with 25m work, 5m break, 10m long break. |
| `porsmox pomodoro long` | `porsmox p l` | Pomodoro with 55m work, 10m break, 20m long break. |
| `porsmox pomodoro custom <work> <break> <long-break>` | `porsmox p c ...` | Pomodoro with your own times. |

Give `-e` to `pomodoro`, before the pomodoro mode, to have a summary of the
time spent working and on break printed once you quit:

```
porsmox pomodoro -e short
```

`porsmox --version` prints the version.

### Time format

Times are written as hours, minutes and seconds, in that order, each part
optional: `30m`, `45s`, `1h`, `2h25m30s`. Anything else is rejected with an
error from the argument parser.

### Keys

- `q`, `Ctrl+C`, `Ctrl+Z`: quit
- `Space` or `t`: pause or resume
- `p`: pause, `c`: resume
- `Enter`: record a lap (stopwatch, at most one per 100 ms), pause/resume
  (timer), start the next round once the current one has ended (pomodoro)
- `Shift+S`: skip to the next round (pomodoro); confirm with `Enter` or `y`,
  cancel with `q` or `n`

### Alerts

When a timer or pomodoro round ends, porsmo writes an OSC 777 desktop
notification request to the terminal and rings the terminal bell, once per
round.

## Using it as a library

- `porsmo.durations.parse_duration` and `format_duration` convert between
  `XhYmZs` strings and `datetime.timedelta` (formatted as `"1h 2m 3s"`).
  Malformed strings raise `porsmo.errors.WrongFormatError`, a subclass of
  both `PorsmoError` and `ValueError`.
- `porsmo.stopwatch.Stopwatch` is a pausable stopwatch with `start`, `stop`,
  `toggle`, `elapsed`, `started` and `record_lap`; it takes an injectable
  `clock`.
- `porsmo.pomodoro.Session` tracks the phase, round and time worked and
  spent on break; `advance` moves to the next phase. `PomodoroConfig` holds
  the phase lengths, with `short()` and `long()` presets.
- `porsmo.stopwatch.StopwatchUI`, `porsmo.timer.TimerUI` and
  `porsmo.pomodoro.PomodoroUI` are the counters; each has `render`, `update`
  and `run_ui`, and `porsmo.terminal.TerminalHandler` is the context manager
  that prepares the terminal for them.

## What it does not do

- It plays no sound file: the end-of-round alert is the terminal bell.
- Desktop notifications appear only if your terminal supports OSC 777
  notifications; otherwise nothing is shown outside the terminal.
- The stopwatch cannot be started from a given time, and nothing is saved
  between runs.