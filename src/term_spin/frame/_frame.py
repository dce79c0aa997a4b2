"""
.. Core of the Frame API
"""

from __future__ import annotations

__all__ = ("Frame", "FrameT", "INDENT")

from abc import ABCMeta, abstractmethod

from typing_extensions import ClassVar, TypeVar

import term_spin

#: The indentation string for one level of :py:attr:`Group.indent
#: <term_spin.frame.Group.indent>`.
INDENT = "  "

FrameT = TypeVar("FrameT", bound="Frame")


class Frame(metaclass=ABCMeta):
    """A renderable, advanceable and clearable unit of terminal output.

    ATTENTION:
        This is an abstract base class. Hence, only **concrete** subclasses can be
        instantiated.

    Every frame upholds the following contract:

    * :py:meth:`render` is idempotent and free of side effects; it may be called any
      number of times between two advances.
    * :py:attr:`line_count` always equals the number of terminal lines the output of
      :py:meth:`render` occupies, and :py:meth:`clear` erases exactly that many lines.
    * :py:meth:`clear` assumes the cursor is where writing the output of
      :py:meth:`render` left it and, once written, leaves the cursor where that output
      started.

    NOTE:
        Frames do no I/O. Their outputs are returned as strings for the caller
        (a group or a :py:class:`~term_spin.render.Loop`) to write.
    """

    self_terminating: ClassVar[bool] = False
    """``True`` if the render output already ends every line it occupies with
    a newline.

    Otherwise, a containing :py:class:`~term_spin.frame.Group` terminates the lines
    of the frame.
    """

    def __str__(self) -> str:
        """Returns the output of :py:meth:`render`."""
        return self.render()

    # Properties ===============================================================

    @property
    def line_count(self) -> int:
        """The number of terminal lines occupied by the output of :py:meth:`render`.

        The base implementation returns ``0`` (zero), suitable for inline frames such
        as spinners.
        """
        return 0

    @property
    def render_length(self) -> int | None:
        """The length of the output of :py:meth:`render`, if known in advance.

        Returns:
            ``None`` if unknown (the base implementation).
        """
        return None

    # Public Methods ===========================================================

    @abstractmethod
    def advance(self) -> None:
        """Moves exactly one animation step forward."""
        raise NotImplementedError

    def clear(self) -> str:
        """Returns control sequences that erase the output of :py:meth:`render`.

        The base implementation returns an empty string.
        """
        return ""

    @abstractmethod
    def render(self) -> str:
        """Returns the textual representation of the current animation step.

        The output must not end with a newline unless :py:attr:`self_terminating` is
        ``True``.
        """
        raise NotImplementedError

    def reset(self) -> None:
        """Returns to the exact state produced by construction.

        The base implementation does nothing.
        """

    def shared(self: FrameT) -> term_spin.shared.SharedFrame[FrameT]:
        """Wraps the frame in a new :py:class:`~term_spin.shared.SharedFrame`."""
        from term_spin.shared import SharedFrame

        return SharedFrame(self)
