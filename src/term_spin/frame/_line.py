"""
.. Single-line frames
"""

from __future__ import annotations

__all__ = ("Line",)

from .._utils import arg_type_error, arg_value_error_msg
from ..ctlseqs import CR, ERASE_LINE
from ._frame import Frame


class Line(Frame):
    """A single line made up of a spinner followed by text.

    Args:
        spinner: The spinner displayed at the start of the line. Any inline frame
          (one that does not terminate its own lines, such as those in
          :py:mod:`term_spin.spinner`) is accepted.
        text: The text displayed after the spinner.
        spinner_visible: Whether the spinner is displayed.

    Raises:
        TypeError: An argument is of an inappropriate type.
        ValueError: *spinner* is not an inline frame (e.g it's a group) or *text*
          contains a line break.

    A line always occupies exactly one terminal line, whatever its content.

    The spinner and text are separated by a single space if and only if the text is
    non-empty and the spinner printed something (or its printed length is unknown).

    .. collapse:: Example

       >>> from term_spin.spinner import FixedCycle
       >>> line = Line(FixedCycle(["-", "+"]), "loading...")
       >>> line.render()
       '- loading...'
       >>> line.advance()
       >>> line.render()
       '+ loading...'
       >>> line.spinner_visible = False
       >>> line.text = "done."
       >>> line.render()
       'done.'
    """

    _spinner: Frame
    _spinner_visible: bool
    _text: str

    def __init__(
        self, spinner: Frame, text: str = "", *, spinner_visible: bool = True
    ) -> None:
        if not isinstance(spinner, Frame):
            raise arg_type_error("spinner", spinner)
        if spinner.self_terminating:
            raise arg_value_error_msg(
                "A line's spinner must be an inline frame", spinner
            )

        self._spinner = spinner
        self.text = text
        self.spinner_visible = spinner_visible

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}: spinner={self._spinner!r}, text={self._text!r}, "
            f"spinner_visible={self._spinner_visible}>"
        )

    # Properties ===============================================================

    @property
    def line_count(self) -> int:
        return 1

    @property
    def spinner(self) -> Frame:
        """The spinner of the line"""
        return self._spinner

    @property
    def spinner_visible(self) -> bool:
        """Spinner visibility

        GET:
            Returns ``True`` if the spinner is displayed. Otherwise, ``False``.

        SET:
            Shows (``True``) or hides (``False``) the spinner.

        Hiding the spinner does not stop it from advancing.
        """
        return self._spinner_visible

    @spinner_visible.setter
    def spinner_visible(self, visible: bool) -> None:
        if not isinstance(visible, bool):
            raise arg_type_error("spinner_visible", visible)
        self._spinner_visible = visible

    @property
    def text(self) -> str:
        """The text displayed after the spinner

        GET:
            Returns the text.

        SET:
            Replaces the text, which must not contain a line break (``"\n"`` or
            ``"\r"``).
        """
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        if not isinstance(text, str):
            raise arg_type_error("text", text)
        if "\n" in text or "\r" in text:
            raise arg_value_error_msg(
                "A line's text cannot contain line breaks", text
            )
        self._text = text

    # Public Methods ===========================================================

    def advance(self) -> None:
        self._spinner.advance()

    def clear(self) -> str:
        return f"{CR}{ERASE_LINE}"

    def render(self) -> str:
        if not self._spinner_visible:
            return self._text

        spinner = self._spinner.render()
        if self._text and self._spinner.render_length != 0:
            return f"{spinner} {self._text}"

        return f"{spinner}{self._text}"

    def reset(self) -> None:
        self._spinner.reset()
