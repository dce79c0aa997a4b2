"""
.. Spinners

Inline frames cycling through glyphs, meant to be displayed by a
:py:class:`~term_spin.frame.Line`.
"""

from __future__ import annotations

__all__ = (
    "Empty",
    "FixedCycle",
    "IterableCycle",
    "braille",
    "dots",
    "ellipsis",
)

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Union

from typing_extensions import Any

from ._utils import arg_type_error, arg_type_error_msg
from .exceptions import SpinnerError
from .frame import Frame

GlyphSource = Union[Iterable[Any], Callable[[], Iterator[Any]]]


class Empty(Frame):
    """A spinner that displays nothing and never changes.

    Useful for a :py:class:`~term_spin.frame.Line` that should display only text.
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def render_length(self) -> int:
        return 0

    def advance(self) -> None:
        pass

    def render(self) -> str:
        return ""


class FixedCycle(Frame):
    """A spinner cycling through a fixed sequence of glyphs.

    Args:
        glyphs: The glyphs, in order of display. Each glyph is displayed as its
          :py:class:`str` value.

    Raises:
        SpinnerError: *glyphs* is empty.

    Advancing past the last glyph wraps around to the first.
    """

    _glyphs: tuple[str, ...]
    _index: int

    def __init__(self, glyphs: Sequence[Any]) -> None:
        self._glyphs = tuple(map(str, glyphs))
        if not self._glyphs:
            raise SpinnerError("A spinner cannot be created with no glyphs")
        self._index = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._glyphs)!r})"

    @property
    def glyphs(self) -> tuple[str, ...]:
        """The glyphs of the spinner"""
        return self._glyphs

    @property
    def index(self) -> int:
        """The position of the current glyph"""
        return self._index

    def advance(self) -> None:
        self._index = (self._index + 1) % len(self._glyphs)

    def render(self) -> str:
        return self._glyphs[self._index]

    def reset(self) -> None:
        self._index = 0


class IterableCycle(Frame):
    """A spinner cycling through the glyphs produced by a restartable source.

    Args:
        source: Either

          * a re-iterable (e.g a list, tuple or range), which is iterated afresh upon
            every restart, or
          * a callable taking no argument and returning a fresh iterator upon every
            call.

    Raises:
        TypeError: *source* is a one-shot iterator or neither iterable nor callable.

    Each glyph is displayed as its :py:class:`str` value. When the source is
    exhausted, advancing restarts it on the same call, so the animation never stalls.
    A source producing nothing displays nothing.
    """

    _source: GlyphSource
    _iterator: Iterator[Any]
    _glyph: str

    def __init__(self, source: GlyphSource) -> None:
        if isinstance(source, Iterator):
            raise arg_type_error_msg(
                "A one-shot iterator cannot be restarted, pass a re-iterable or "
                "a callable returning an iterator instead",
                source,
            )
        if not isinstance(source, Iterable) and not callable(source):
            raise arg_type_error("source", source)

        self._source = source
        self.reset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    def advance(self) -> None:
        try:
            self._glyph = str(next(self._iterator))
        except StopIteration:
            self.reset()

    def render(self) -> str:
        return self._glyph

    def reset(self) -> None:
        self._iterator = self._restart()
        try:
            self._glyph = str(next(self._iterator))
        except StopIteration:
            self._glyph = ""

    def _restart(self) -> Iterator[Any]:
        source = self._source
        return iter(source) if isinstance(source, Iterable) else iter(source())


def braille() -> FixedCycle:
    """Returns a spinner made of eight-dot braille cells, a dot missing per cell."""
    return FixedCycle(
        (
            "⢿",
            "⣻",
            "⣽",
            "⣾",
            "⣷",
            "⣯",
            "⣟",
            "⡿",
        )
    )


def dots() -> FixedCycle:
    """Returns a spinner made of commonly used braille dots."""
    return FixedCycle(("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"))


def ellipsis() -> FixedCycle:
    """Returns a spinner made of an ellipsis being typed out."""
    return FixedCycle((".  ", ".. ", "..."))
