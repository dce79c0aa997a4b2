"""
.. Hierarchical composition of frames
"""

from __future__ import annotations

__all__ = ("Group",)

from collections.abc import Callable, Iterable, Iterator

from .._utils import arg_type_error, arg_value_error_range
from ..ctlseqs import cursor_up
from ..exceptions import GroupIndexError
from ._frame import INDENT, Frame


class Group(Frame):
    """An ordered group of frames, each rendered on its own line(s).

    Args:
        frames: The initial children of the group.
        indent: Indentation level. Every line of every child is prefixed with
          ``"  " * indent``.

    Raises:
        TypeError: An argument is of an inappropriate type.
        ValueError: *indent* is negative.

    The group owns its children. A child occupying no line (e.g an empty group)
    receives no indentation and contributes nothing to the output, such that empty
    containers are invisible.

    Groups may be nested, in which case indentation accumulates i.e the lines of a
    nested group are prefixed with the indentation of every enclosing group.

    The lines occupied by a group are all newline-terminated. Hence, after writing
    its output, the cursor is at the start of the line just below it.

    .. collapse:: Example

       >>> from term_spin.frame import Line
       >>> from term_spin.spinner import Empty
       >>> group = Group([Line(Empty(), "a"), Line(Empty(), "b")], indent=1)
       >>> group.render()
       '  a\\n  b\\n'
       >>> group.line_count
       2
       >>> group.discard(0)
       >>> group.render()
       '  b\\n'
    """

    self_terminating = True

    _frames: list[Frame]
    _indent: int

    def __init__(self, frames: Iterable[Frame] = (), indent: int = 0) -> None:
        self._frames = []
        self.indent = indent
        self.extend(frames)

    def __getitem__(self, index: int) -> Frame:
        return self._frames[index]

    def __iter__(self) -> Iterator[Frame]:
        """Returns an iterator over the children of the group.

        The children themselves are yielded, hence they may be mutated in-place.
        The group itself must not be modified during iteration.
        """
        return iter(self._frames)

    def __len__(self) -> int:
        """Returns the number of children in the group."""
        return len(self._frames)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}: len={len(self._frames)}, indent={self._indent}>"
        )

    # Properties ===============================================================

    @property
    def frames(self) -> tuple[Frame, ...]:
        """A snapshot of the children of the group"""
        return tuple(self._frames)

    @property
    def indent(self) -> int:
        """Indentation level

        GET:
            Returns the indentation level.

        SET:
            Sets the indentation level, a non-negative integer.
        """
        return self._indent

    @indent.setter
    def indent(self, level: int) -> None:
        if not isinstance(level, int) or isinstance(level, bool):
            raise arg_type_error("indent", level)
        if level < 0:
            raise arg_value_error_range("indent", level)
        self._indent = level

    @property
    def is_empty(self) -> bool:
        """``True`` if the group has no children. Otherwise, ``False``."""
        return not self._frames

    @property
    def line_count(self) -> int:
        return sum(frame.line_count for frame in self._frames)

    # Public Methods ===========================================================

    def advance(self) -> None:
        for frame in self._frames:
            frame.advance()

    def append(self, frame: Frame) -> None:
        """Adds a child at the end of the group.

        Args:
            frame: The child.

        Raises:
            TypeError: *frame* is not a frame.
        """
        if not isinstance(frame, Frame):
            raise arg_type_error("frame", frame)
        self._frames.append(frame)

    def clear(self) -> str:
        # The last child printed is nearest to the cursor, so it's erased first.
        return "".join(
            f"{cursor_up(0 if frame.self_terminating else frame.line_count)}"
            f"{frame.clear()}"
            for frame in reversed(self._frames)
        )

    def discard(self, index: int) -> None:
        """Removes the child at the given position.

        Args:
            index: The position of the child.

        Does nothing if *index* is not a valid position, since a concurrently mutated
        tree may race with removals from itself. The order of the remaining children
        is not altered.
        """
        if (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._frames)
        ):
            del self._frames[index]

    def extend(self, frames: Iterable[Frame]) -> None:
        """Adds children at the end of the group, in order.

        Args:
            frames: The children.

        Raises:
            TypeError: Any item of *frames* is not a frame, in which case none is
              added.
        """
        frames = tuple(frames)
        for frame in frames:
            if not isinstance(frame, Frame):
                raise arg_type_error("frame", frame)
        self._frames.extend(frames)

    def insert(self, index: int, frame: Frame) -> None:
        """Inserts a child at the given position.

        Args:
            index: The position of the new child, ``0 <= index <= len(group)``.
              If equal to the number of children, *frame* is appended.
            frame: The child.

        Raises:
            TypeError: An argument is of an inappropriate type.
            GroupIndexError: *index* is out of range.

        Unlike :py:meth:`list.insert`, an out-of-range position is never clamped.
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise arg_type_error("index", index)
        if not isinstance(frame, Frame):
            raise arg_type_error("frame", frame)
        if not 0 <= index <= len(self._frames):
            raise GroupIndexError(
                f"Insertion index out of range (got: {index}, len={len(self._frames)})"
            )

        self._frames.insert(index, frame)

    def render(self) -> str:
        indent = INDENT * self._indent
        output = []

        for frame in self._frames:
            n_lines = frame.line_count
            if not n_lines:
                continue
            render = frame.render()
            if frame.self_terminating:
                output.extend(f"{indent}{line}\n" for line in render.split("\n")[:-1])
            else:
                output.append(f"{indent}{render}" + "\n" * n_lines)

        return "".join(output)

    def reset(self) -> None:
        for frame in self._frames:
            frame.reset()

    def retain(self, predicate: Callable[[Frame], bool]) -> None:
        """Keeps only the children for which *predicate* returns ``True``.

        Args:
            predicate: Called with each child, in order.
        """
        self._frames[:] = [frame for frame in self._frames if predicate(frame)]
