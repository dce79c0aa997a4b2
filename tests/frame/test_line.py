import pytest

from term_spin.frame import Frame, Group, Line
from term_spin.shared import SharedFrame
from term_spin.spinner import Empty, FixedCycle, IterableCycle

from ..common import VirtualScreen


def spinner():
    return FixedCycle(["-", "+"])


class TestInit:
    def test_defaults(self):
        line = Line(spinner())
        assert line.text == ""
        assert line.spinner_visible is True

    def test_spinner(self):
        spin = spinner()
        assert Line(spin).spinner is spin

    @pytest.mark.parametrize("spin", ["-", None, ["-"]])
    def test_invalid_spinner(self, spin):
        with pytest.raises(TypeError, match="'spinner'"):
            Line(spin)

    @pytest.mark.parametrize("text", [None, 1, b"text"])
    def test_invalid_text(self, text):
        with pytest.raises(TypeError, match="'text'"):
            Line(spinner(), text)

    @pytest.mark.parametrize("visible", [None, 1, "yes"])
    def test_invalid_spinner_visible(self, visible):
        with pytest.raises(TypeError, match="'spinner_visible'"):
            Line(spinner(), spinner_visible=visible)

    @pytest.mark.parametrize("text", ["a\nb", "a\rb", "\n", "a\r\n"])
    def test_text_with_line_break(self, text):
        with pytest.raises(ValueError, match="line breaks"):
            Line(spinner(), text)

    @pytest.mark.parametrize(
        "spin",
        [
            Group(),
            Group([Line(Empty(), "a"), Line(Empty(), "b")]),
            Group([Line(Empty(), "a")]).shared(),
        ],
    )
    def test_non_inline_spinner(self, spin):
        with pytest.raises(ValueError, match="inline frame"):
            Line(spin, "text")

    def test_inline_spinners(self):
        for spin in (Empty(), spinner(), spinner().shared(), Line(Empty(), "x")):
            assert Line(spin).line_count == 1

    def test_spinner_visible_is_keyword_only(self):
        with pytest.raises(TypeError):
            Line(spinner(), "text", False)


class TestProperties:
    def test_text(self):
        line = Line(spinner(), "a")
        line.text = "b"
        assert line.text == "b"
        assert line.render() == "- b"
        with pytest.raises(TypeError):
            line.text = 1

    @pytest.mark.parametrize("text", ["a\nb", "a\rb", "b\n"])
    def test_text_with_line_break(self, text):
        line = Line(spinner(), "a")
        with pytest.raises(ValueError, match="line breaks"):
            line.text = text
        assert line.text == "a"
        assert line.render().count("\n") == 0

    def test_spinner_visible(self):
        line = Line(spinner(), "a")
        line.spinner_visible = False
        assert line.spinner_visible is False
        assert line.render() == "a"
        with pytest.raises(TypeError):
            line.spinner_visible = 0

    def test_line_count(self):
        assert Line(spinner()).line_count == 1
        assert Line(Empty()).line_count == 1
        assert Line(spinner(), "a", spinner_visible=False).line_count == 1

    def test_not_self_terminating(self):
        assert Line(spinner()).self_terminating is False


class TestRender:
    @pytest.mark.parametrize(
        "spin,text,visible,output",
        [
            (spinner(), "working", True, "- working"),
            (spinner(), "", True, "-"),
            (spinner(), "working", False, "working"),
            (spinner(), "", False, ""),
            (Empty(), "working", True, "working"),
            (Empty(), "", True, ""),
            (IterableCycle(["ab"]), "working", True, "ab working"),
        ],
    )
    def test_content(self, spin, text, visible, output):
        line = Line(spin, text, spinner_visible=visible)
        assert line.render() == output
        assert str(line) == output

    def test_idempotent(self):
        line = Line(spinner(), "a")
        assert line.render() == line.render() == "- a"

    def test_no_newline(self):
        assert "\n" not in Line(spinner(), "a").render()


class TestAnimation:
    def test_advance(self):
        line = Line(spinner(), "a")
        line.advance()
        assert line.render() == "+ a"
        line.advance()
        assert line.render() == "- a"

    def test_hidden_spinner_still_advances(self):
        line = Line(spinner(), "a", spinner_visible=False)
        line.advance()
        line.spinner_visible = True
        assert line.render() == "+ a"

    def test_reset(self):
        line = Line(spinner(), "a")
        line.advance()
        line.reset()
        assert line.render() == "- a"
        assert line.spinner.index == 0


class TestClear:
    def test_sequence(self):
        assert Line(spinner(), "a").clear() == "\r\x1b[2K"

    def test_screen(self):
        line = Line(spinner(), "working")
        screen = VirtualScreen()
        screen.write(line.render())
        assert screen.lines == ["- working"]
        screen.write(line.clear())
        assert screen.lines == []
        assert screen.cursor == (0, 0)

    def test_longer_then_shorter_text(self):
        line = Line(spinner(), "a long line of text")
        screen = VirtualScreen()
        screen.write(line.render())
        screen.write(line.clear())
        line.text = "short"
        screen.write(line.render())
        assert screen.lines == ["- short"]


def test_shared():
    line = Line(spinner(), "a")
    shared = line.shared()
    assert isinstance(shared, SharedFrame)
    assert isinstance(shared, Frame)
    with shared.lock() as frame:
        assert frame is line
