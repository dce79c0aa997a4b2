"""
.. The timed render loop
"""

from __future__ import annotations

__all__ = ("Loop",)

import logging as _logging
import weakref
from math import isfinite
from collections.abc import Callable
from threading import RLock
from time import sleep
from typing import Generic

from typing_extensions import Any, TextIO

import term_spin

from .._utils import arg_type_error, arg_value_error_range
from ..frame import Frame, FrameT
from ..logging import Thread
from ..shared import SharedFrame, tree_lock

WriteT = Callable[[str], Any]


class _LoopState(Generic[FrameT]):
    """The state shared by all handles on one loop."""

    def __init__(self, frame: FrameT, interval: float) -> None:
        self.lock = RLock()
        self.running = False
        self.stop = False
        self.auto_stop = True
        self.reset = False
        self.interval = interval
        self.wait: float | None = None
        self.frame = frame
        self.n_handles = 0
        self.spawned = False
        self.thread: Thread | None = None

    def add_handle(self) -> None:
        with self.lock:
            self.n_handles += 1

    def drop_handle(self) -> None:
        with self.lock:
            self.n_handles -= 1

    def start(self, *, spawned: bool) -> bool:
        """Transitions to the running state.

        Returns:
            ``False`` if the loop was already running. Otherwise, ``True``.
        """
        with self.lock:
            if self.running:
                return False
            self.stop = False
            self.running = True
            self.spawned = spawned
            return True

    def drive(self, write: WriteT) -> None:
        """Runs the drive cycle until stopped.

        The loop must have been started via :py:meth:`start`.
        """
        frame = self.frame
        first = True
        tree_locked = False

        _logger.debug(f"Driving {frame!r}")
        try:
            while True:
                with self.lock:
                    if self.stop:
                        cause = "stopped"
                        break
                    if self.auto_stop and self._is_orphaned():
                        cause = "auto-stopped"
                        break
                    wait, self.wait = self.wait, None
                    reset, self.reset = self.reset, False
                    interval = self.interval

                if wait:
                    sleep(wait)

                if reset:
                    frame.reset()
                elif not first:
                    write(frame.clear())
                first = False

                # The tree may change only between clearing and rendering it.
                if tree_locked:
                    tree_lock.yield_to_waiters(interval)
                else:
                    tree_lock.acquire()
                    tree_locked = True

                write(frame.render())
                frame.advance()

                sleep(interval)
        finally:
            if tree_locked:
                tree_lock.release()
            with self.lock:
                self.running = self.spawned = False

        _logger.debug(f"Drive cycle {cause}")

    def _is_orphaned(self) -> bool:
        """Returns ``True`` if nothing outside the drive cycle can observe or influence
        it anymore. Otherwise, ``False``.
        """
        if isinstance(self.frame, SharedFrame) and self.frame.handle_count == 1:
            return True

        return self.spawned and not self.n_handles


class Loop(Generic[FrameT]):
    """A timed driver that alternates clearing, rendering and advancing a frame tree.

    Args:
        frame: The root of the frame tree.
        interval: The time between two consecutive renders, in seconds. If ``None``,
          the :py:func:`default interval <term_spin.get_default_interval>` is used.

    Raises:
        TypeError: An argument is of an inappropriate type.
        ValueError: *interval* is not a finite number greater than zero.

    If *frame* is a :py:class:`~term_spin.shared.SharedFrame`, the loop owns a new
    handle on it. Other handles may then be used to mutate the tree while the loop
    runs.

    Every cycle of a running loop:

    1. sleeps for any delay scheduled by :py:meth:`wait`,
    2. writes the codes clearing the previous output of the tree (except on the first
       cycle) or, if scheduled by :py:meth:`reset`, resets the tree instead,
    3. lets threads waiting to lock shared frames take their turn,
    4. writes the output of the tree,
    5. advances the tree,
    6. sleeps for :py:attr:`interval`.

    From step 4 of a cycle till step 2 of the next, the loop holds
    :py:data:`~term_spin.shared.tree_lock` to guarantee the tree is cleared in
    exactly the state in which it was written.

    Handles are cheap: :py:meth:`clone` returns another handle on the same loop,
    possibly for use in another thread.

    .. collapse:: Example

       >>> task = Line(dots(), "waiting...").shared()
       >>> loop = Loop(task, 0.1)
       >>> loop.spawn_stream(sys.stdout)
       >>> time.sleep(2)
       >>> with task.lock() as line:
       ...     line.text = "done."
       >>> del loop  # auto-stops the spawned loop
    """

    _state: _LoopState[FrameT]

    def __init__(self, frame: FrameT, interval: float | None = None) -> None:
        if not isinstance(frame, Frame):
            raise arg_type_error("frame", frame)
        if interval is None:
            interval = term_spin.get_default_interval()
        else:
            _check_duration("interval", interval)

        if isinstance(frame, SharedFrame):
            frame = frame.clone()
        self._init(_LoopState(frame, interval))

    def __copy__(self) -> Loop[FrameT]:
        return self.clone()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}: frame={self._state.frame!r}, "
            f"interval={self._state.interval}, running={self._state.running}>"
        )

    # Properties ===============================================================

    @property
    def auto_stop(self) -> bool:
        """Auto-stop

        GET:
            Returns ``True`` if auto-stop is enabled (the default). Otherwise,
            ``False``.

        SET:
            Enables (``True``) or disables (``False``) auto-stop.

        While enabled, a running loop exits (as if :py:meth:`stop` was called) at the
        start of a cycle if either:

        * the root is a :py:class:`~term_spin.shared.SharedFrame` and the handle
          owned by the loop is the only one left, or
        * the loop was spawned (see :py:meth:`spawn_stream`) and every handle on the
          loop has been dropped.

        Hence, a spawned loop ends by itself once nothing can observe or influence
        it anymore.
        """
        return self._state.auto_stop

    @auto_stop.setter
    def auto_stop(self, auto_stop: bool) -> None:
        if not isinstance(auto_stop, bool):
            raise arg_type_error("auto_stop", auto_stop)
        with self._state.lock:
            self._state.auto_stop = auto_stop

    @property
    def frame(self) -> FrameT:
        """The root of the frame tree

        If the root is a :py:class:`~term_spin.shared.SharedFrame`, a new handle on
        it is returned.
        """
        frame = self._state.frame
        return frame.clone() if isinstance(frame, SharedFrame) else frame

    @property
    def interval(self) -> float:
        """Tick interval

        GET:
            Returns the time between two consecutive renders, in seconds.

        SET:
            Sets the time between two consecutive renders, in seconds. Takes effect
            from the next cycle of a running loop.
        """
        return self._state.interval

    @interval.setter
    def interval(self, interval: float) -> None:
        _check_duration("interval", interval)
        with self._state.lock:
            self._state.interval = interval

    @property
    def running(self) -> bool:
        """``True`` if a drive cycle is currently executing. Otherwise, ``False``."""
        return self._state.running

    # Public Methods ===========================================================

    def clear_stream(self, stream: TextIO) -> None:
        """Writes the codes clearing the last output of the frame tree.

        Args:
            stream: The stream to which the tree was written.

        Raises:
            OSError: Writing to or flushing *stream* failed.

        Typically used after the loop has been stopped. Writing is synchronized with
        :py:data:`~term_spin.shared.tree_lock`.
        """
        with tree_lock:
            stream.write(self._state.frame.clear())
            stream.flush()

    def clone(self) -> Loop[FrameT]:
        """Returns a new handle on the same loop."""
        new = object.__new__(type(self))
        new._init(self._state)
        return new

    def join(self, timeout: float | None = None) -> None:
        """Waits for the thread of the last spawned loop to end.

        Args:
            timeout: See :py:meth:`threading.Thread.join`.

        Returns immediately if the loop was never spawned.
        """
        thread = self._state.thread
        if thread:
            thread.join(timeout)

    def reset(self) -> None:
        """Schedules the frame tree to be reset in place of the next clear step.

        Used to jump back to the initial state of the tree (e.g before restarting a
        stopped loop), rather than animating forward from the current state.

        NOTE:
            The output of the previous cycle is not cleared in the cycle in which the
            tree is reset. If the loop is to be restarted, the previous output should
            be cleared beforehand, see :py:meth:`clear_stream`.
        """
        with self._state.lock:
            self._state.reset = True

    def run(self, write: Callable[[str], Any]) -> None:
        """Runs the loop, blocking the calling thread.

        Args:
            write: Called with every chunk of output to be displayed.

        Raises:
            TypeError: *write* is not callable.

        Returns immediately if the loop is already running. Otherwise, returns when
        the loop is stopped. Any exception raised by *write* ends the loop and is
        propagated.
        """
        if not callable(write):
            raise arg_type_error("write", write)

        if self._state.start(spawned=False):
            self._state.drive(write)

    def run_stream(self, stream: TextIO) -> None:
        """Runs the loop, writing output to a stream and blocking the calling thread.

        Args:
            stream: The stream to which output is written. It's flushed after every
              write.

        Raises:
            OSError: Writing to or flushing *stream* failed.

        See :py:meth:`run`.
        """
        self.run(_stream_writer(stream))

    def spawn_stream(self, stream: TextIO) -> Thread | None:
        """Runs the loop on a separate thread, writing output to a stream.

        Args:
            stream: The stream to which output is written. It's flushed after every
              write.

        Returns:
            The (daemon) thread running the loop or ``None`` if the loop is already
            running.

        If writing to or flushing *stream* fails, the exception is logged and the
        thread ends. The exception is available via
        :py:attr:`Thread.exception <term_spin.logging.Thread.exception>`.

        The thread does not own a handle on the loop. See :py:attr:`auto_stop`.
        """
        state = self._state
        if not state.start(spawned=True):
            return None

        thread = Thread(
            target=state.drive,
            args=(_stream_writer(stream),),
            name="SpinnerLoop",
            daemon=True,
        )
        state.thread = thread
        try:
            thread.start()
        except Exception:
            with state.lock:
                state.running = state.spawned = False
            raise

        return thread

    def stop(self) -> None:
        """Stops the running loop.

        The loop exits at the start of its next cycle. A cycle already writing output
        is not interrupted.
        """
        with self._state.lock:
            self._state.stop = True

    def wait(self, duration: float) -> None:
        """Schedules a one-shot delay before the next cycle.

        Args:
            duration: The delay, in seconds.

        Raises:
            TypeError: *duration* is not a number.
            ValueError: *duration* is negative or not finite.

        Pauses the animation without stopping the loop.
        """
        _check_duration("duration", duration, allow_zero=True)
        with self._state.lock:
            self._state.wait = duration

    # Private Methods ==========================================================

    def _init(self, state: _LoopState[FrameT]) -> None:
        self._state = state
        state.add_handle()
        weakref.finalize(self, state.drop_handle)


def _check_duration(name: str, value: Any, allow_zero: bool = False) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise arg_type_error(name, value)
    if not isfinite(value) or value < 0 or not (allow_zero or value):
        raise arg_value_error_range(name, value)


def _stream_writer(stream: TextIO) -> Callable[[str], None]:
    def write(output: str) -> None:
        stream.write(output)
        stream.flush()

    return write


_logger = _logging.getLogger(__name__)
