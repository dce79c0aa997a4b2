"""
.. Sharing frames across threads
"""

from __future__ import annotations

__all__ = ("SharedFrame", "TreeLock", "tree_lock")

import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from threading import Condition, Lock, RLock
from typing import Generic

from typing_extensions import Any, Self

from ._utils import arg_type_error
from .frame import Frame, FrameT


class TreeLock:
    """A re-entrant lock synchronizing every mutation of shared frames with the
    render/clear phases of render loops.

    A :py:class:`~term_spin.render.Loop` holds the lock from the moment it writes a
    frame until it has written the codes clearing that frame. Hence, a frame tree
    cannot change between being displayed and being cleared; otherwise, a group could
    clear more or fewer lines than it displayed.

    Any thread may hold the lock to make multiple mutations appear at once::

       with tree_lock:
           with first.lock() as line:
               line.text = "done."
           with second.lock() as group:
               group.discard(0)

    NOTE:
        The lock is re-entrant, hence a thread already holding it (directly or via
        :py:meth:`SharedFrame.lock`) may acquire it again, including by locking
        another shared frame.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._n_waiting = 0
        self._waiting_changed = Condition(Lock())

    def __enter__(self) -> Self:
        self.acquire()
        return self

    def __exit__(self, *_: Any) -> None:
        self.release()

    def acquire(self) -> None:
        """Acquires the lock, blocking until it's available."""
        with self._waiting_changed:
            self._n_waiting += 1
        try:
            self._lock.acquire()
        finally:
            with self._waiting_changed:
                self._n_waiting -= 1
                self._waiting_changed.notify_all()

    def release(self) -> None:
        """Releases the lock.

        Raises:
            RuntimeError: The lock is not held by the calling thread.
        """
        self._lock.release()

    def yield_to_waiters(self, timeout: float | None = None) -> None:
        """Lets other threads waiting on the lock take their turn.

        Args:
            timeout: The maximum time to wait, in seconds, for waiting threads to
              acquire the lock. ``None`` implies no limit.

        Raises:
            RuntimeError: The lock is not held by the calling thread.

        The lock, which must be held exactly once by the calling thread, is released
        and re-acquired only after every thread that was waiting on it (or started
        waiting in the meantime) has acquired it, or *timeout* elapses.
        """
        self._lock.release()
        try:
            with self._waiting_changed:
                self._waiting_changed.wait_for(lambda: not self._n_waiting, timeout)
        finally:
            self._lock.acquire()


class _SharedCell(Generic[FrameT]):
    """The state shared by all handles on one frame."""

    def __init__(self, frame: FrameT) -> None:
        self.frame = frame
        self.lock = RLock()
        self.n_handles = 0
        self._count_lock = RLock()

    def add_handle(self) -> None:
        with self._count_lock:
            self.n_handles += 1

    def drop_handle(self) -> None:
        with self._count_lock:
            self.n_handles -= 1


class SharedFrame(Frame, Generic[FrameT]):
    """A reference-counted, lock-protected shared owner of a frame.

    Args:
        frame: The frame to be shared.

    Raises:
        TypeError: *frame* is not a frame.

    Multiple handles (across threads) may own the same frame, see :py:meth:`clone`.
    The contents of the frame should be read and mutated only via :py:meth:`lock`.

    A shared frame is itself a frame. Hence it may be added to a
    :py:class:`~term_spin.frame.Group` or driven by a
    :py:class:`~term_spin.render.Loop`, while other threads hold handles to it.

    All handles on the same frame compare equal. Handles on distinct frames never do,
    even if the frames are equal.

    .. collapse:: Example

       >>> task = Line(dots(), "working...").shared()
       >>> loop = Loop(task)
       >>> loop.spawn_stream(sys.stdout)
       >>> # ... later, possibly in another thread
       >>> with task.lock() as line:
       ...     line.spinner_visible = False
       ...     line.text = "done."
    """

    _cell: _SharedCell[FrameT]

    def __init__(self, frame: FrameT) -> None:
        if not isinstance(frame, Frame):
            raise arg_type_error("frame", frame)
        self._init(_SharedCell(frame))

    def __copy__(self) -> SharedFrame[FrameT]:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SharedFrame):
            return self._cell is other._cell
        return NotImplemented

    def __hash__(self) -> int:
        return id(self._cell)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}: frame={self._cell.frame!r}, "
            f"handle_count={self._cell.n_handles}>"
        )

    # Properties ===============================================================

    @property
    def handle_count(self) -> int:
        """The number of live handles on the frame, including this one"""
        return self._cell.n_handles

    @property
    def line_count(self) -> int:
        with self._cell.lock:
            return self._cell.frame.line_count

    @property
    def render_length(self) -> int | None:
        with self._cell.lock:
            return self._cell.frame.render_length

    @property
    def self_terminating(self) -> bool:  # type: ignore[override]
        return self._cell.frame.self_terminating

    # Public Methods ===========================================================

    def advance(self) -> None:
        with self._cell.lock:
            self._cell.frame.advance()

    def clear(self) -> str:
        with self._cell.lock:
            return self._cell.frame.clear()

    def clone(self) -> SharedFrame[FrameT]:
        """Returns a new handle on the same frame."""
        new = object.__new__(type(self))
        new._init(self._cell)
        return new

    @contextmanager
    def lock(self) -> Iterator[FrameT]:
        """Locks the frame for reading or mutation.

        Returns:
            A context manager which, upon entry, acquires :py:data:`tree_lock` and
            then the frame's own lock, yielding the frame. Both locks are released
            upon exit.

        The frame is guaranteed not to be written or cleared by a render loop within
        the context.

        NOTE:
            Entering the context blocks until both locks are available. A running
            :py:class:`~term_spin.render.Loop` releases :py:data:`tree_lock` once per
            cycle, between clearing and writing the frame tree.

        WARNING:
            A render loop cannot make progress while the frame is locked. Avoid
            lengthy operations within the context.
        """
        with tree_lock, self._cell.lock:
            yield self._cell.frame

    def render(self) -> str:
        with self._cell.lock:
            return self._cell.frame.render()

    def reset(self) -> None:
        with self._cell.lock:
            self._cell.frame.reset()

    def shared(self) -> SharedFrame[FrameT]:
        """Returns a new handle on the same frame, see :py:meth:`clone`."""
        return self.clone()

    # Private Methods ==========================================================

    def _init(self, cell: _SharedCell[FrameT]) -> None:
        self._cell = cell
        cell.add_handle()
        weakref.finalize(self, cell.drop_handle)


#: The lock coupling every :py:meth:`SharedFrame.lock` with the render/clear phases
#: of render loops.
tree_lock = TreeLock()
