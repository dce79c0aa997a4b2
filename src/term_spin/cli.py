"""term-spin's demo CLI"""

from __future__ import annotations

import argparse
import logging as _logging
import sys
from math import isfinite
from time import sleep

from typing_extensions import Callable, TextIO

from . import DEFAULT_INTERVAL, __version__
from .ctlseqs import HIDE_CURSOR, SHOW_CURSOR
from .exit_codes import INVALID_ARG, SUCCESS
from .frame import Group, Line
from .logging import init_log
from .render import Loop
from .spinner import Empty, dots


def fire_and_forget(stream: TextIO, interval: float, pace: float) -> None:
    """A spawned loop ending by itself once its handle is dropped"""
    task = Line(dots(), "waiting ...").shared()
    spin_loop = Loop(task, interval)
    thread = spin_loop.spawn_stream(stream)

    sleep(2 * pace)
    with task.lock() as line:
        line.text = "done."

    del spin_loop  # auto-stop
    thread.join()
    stream.write("\n")


def groups(stream: TextIO, interval: float, pace: float) -> None:
    """Nested groups of tasks completing while the loop runs"""
    main_group = Group().shared()
    spin_loop = Loop(main_group, interval)
    spin_loop.spawn_stream(stream)

    main_task = Line(dots(), "executing main task...").shared()
    with main_group.lock() as group:
        group.append(main_task)

    subtask_group = Group(indent=1).shared()
    subtasks = [
        Line(dots(), f"executing subtask {i}...").shared() for i in range(5)
    ]
    with subtask_group.lock() as group:
        group.extend(subtasks)
    with main_group.lock() as group:
        group.append(subtask_group)

    sleep(2 * pace)

    for i, subtask in enumerate(subtasks):
        with subtask.lock() as line:
            line.spinner_visible = False
            line.text = f"✓ subtask {i} complete."
        sleep(0.5 * pace)

    with subtask_group.lock() as group:
        group.append(Line(Empty(), "✓ this task was added after."))
    with main_task.lock() as line:
        line.spinner_visible = False
        line.text = "✓ first main task done."

    sleep(pace)

    last_task = Line(
        dots(), "almost ready, do not turn off your computer..."
    ).shared()
    with main_group.lock() as group:
        group.append(last_task)

    sleep(5 * pace)

    with last_task.lock() as line:
        line.spinner_visible = False
        line.text = "x fatal error."

    spin_loop.stop()
    spin_loop.join()
    sleep(pace)
    spin_loop.clear_stream(stream)


def stop_and_start(stream: TextIO, interval: float, pace: float) -> None:
    """A loop stopped, then cleared, reset and restarted"""
    task = Line(dots(), "waiting ...").shared()
    spin_loop = Loop(task, interval)
    spin_loop.spawn_stream(stream)

    sleep(2 * pace)
    with task.lock() as line:
        line.text = "stopped."
    spin_loop.stop()
    spin_loop.join()

    sleep(pace)

    with task.lock() as line:
        line.text = "waiting again ..."
    spin_loop.clear_stream(stream)
    spin_loop.reset()
    spin_loop.spawn_stream(stream)

    sleep(2 * pace)
    spin_loop.stop()
    spin_loop.join()
    stream.write("\n")


def main(argv: list[str] | None = None, stream: TextIO | None = None) -> int:
    """Runs a demo

    Args:
        argv: Command-line arguments. If ``None``, ``sys.argv[1:]`` is used.
        stream: The stream the demo is written to. If ``None``, standard output is
          used.

    Returns:
        An exit code, see :py:mod:`term_spin.exit_codes`.
    """
    parser = argparse.ArgumentParser(
        prog="term-spin",
        description="Demonstrate multi-line terminal spinners",
    )
    parser.add_argument(
        "demo",
        choices=tuple(DEMOS),
        help="The demo to run",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
        help="Show the program version and exit",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        metavar="N",
        default=DEFAULT_INTERVAL,
        help="Time (in seconds) between two consecutive renders (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--pace",
        type=float,
        metavar="N",
        default=1.0,
        help=(
            "Multiplier for the pauses between steps of the demo; values below 1 "
            "speed it up (default: %(default)s)"
        ),
    )
    parser.add_argument(
        "-l",
        "--log-file",
        metavar="FILE",
        help="Write logs to FILE instead of standard error",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at debug level",
    )

    args = parser.parse_args(argv)

    if args.log_file or args.debug:
        init_log(args.log_file, debug=args.debug)

    for name, value, valid in (
        ("interval", args.interval, isfinite(args.interval) and args.interval > 0),
        ("pace", args.pace, isfinite(args.pace) and args.pace >= 0),
    ):
        if not valid:
            msg = f"Invalid {name} (got: {value})"
            _logger.critical(msg)
            parser.print_usage(sys.stderr)
            print(f"{parser.prog}: error: {msg}", file=sys.stderr)
            return INVALID_ARG

    if stream is None:
        stream = sys.stdout
    hide_cursor = stream.isatty()

    _logger.info(f"Running the {args.demo!r} demo")
    try:
        if hide_cursor:
            stream.write(HIDE_CURSOR)
        DEMOS[args.demo](stream, args.interval, args.pace)
    finally:
        if hide_cursor:
            stream.write(SHOW_CURSOR)
        stream.flush()

    return SUCCESS


DEMOS: dict[str, Callable[[TextIO, float, float], None]] = {
    "fire-and-forget": fire_and_forget,
    "groups": groups,
    "stop-and-start": stop_and_start,
}

_logger = _logging.getLogger(__name__)
