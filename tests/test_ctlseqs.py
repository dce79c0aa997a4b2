import pytest

from term_spin import ctlseqs
from term_spin.ctlseqs import cursor_up, erase_line


class TestCursorUp:
    def test_default(self):
        assert cursor_up() == "\x1b[1A"

    @pytest.mark.parametrize("n", [1, 2, 10, 100])
    def test_positive(self, n):
        assert cursor_up(n) == f"\x1b[{n}A"

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_non_positive(self, n):
        assert cursor_up(n) == ""


def test_erase_line():
    assert erase_line() == "\x1b[2K" == ctlseqs.ERASE_LINE


class TestDefinitions:
    @pytest.mark.parametrize(
        "name,value",
        [
            ("CR", "\r"),
            ("CSI", "\x1b["),
            ("ERASE_LINE", "\x1b[2K"),
            ("SHOW_CURSOR", "\x1b[?25h"),
            ("HIDE_CURSOR", "\x1b[?25l"),
        ],
    )
    def test_str(self, name, value):
        assert getattr(ctlseqs, name) == value

    @pytest.mark.parametrize("name", ["CR", "CSI", "CURSOR_UP", "ERASE_LINE"])
    def test_bytes(self, name):
        assert getattr(ctlseqs, f"{name}_b") == getattr(ctlseqs, name).encode()

    def test_all(self):
        for name in ("CSI", "CSI_b", "ERASE_LINE", "cursor_up", "erase_line"):
            assert name in ctlseqs.__all__
        assert "_START" not in ctlseqs.__all__
        assert not hasattr(ctlseqs, "_START")
