import pytest

from term_spin import cli, exit_codes
from term_spin.__main__ import main as entry_point
from term_spin.exit_codes import FAILURE, INTERRUPTED, INVALID_ARG, SUCCESS

from .common import VirtualScreen

FAST = ["--interval", "0.001", "--pace", "0.01"]


class TestExitCodes:
    def test_codes(self):
        assert (SUCCESS, FAILURE, INVALID_ARG, INTERRUPTED) == (0, 1, 2, 3)
        assert exit_codes.codes[INVALID_ARG] == "INVALID_ARG"


class TestDemos:
    def test_groups(self):
        screen = VirtualScreen()
        assert cli.main(["groups", *FAST], screen) == SUCCESS
        # The output is cleared at the end
        assert screen.lines == []
        assert screen.cursor == (0, 0)
        assert any("✓ subtask 4 complete." in output for output in screen.writes)
        assert any("x fatal error." in output for output in screen.writes)

    def test_fire_and_forget(self):
        screen = VirtualScreen()
        assert cli.main(["fire-and-forget", *FAST], screen) == SUCCESS
        assert len(screen.lines) == 1
        assert screen.lines[0].endswith(" done.")
        assert screen.cursor == (1, 0)

    def test_stop_and_start(self):
        screen = VirtualScreen()
        assert cli.main(["stop-and-start", *FAST], screen) == SUCCESS
        assert len(screen.lines) == 1
        assert screen.lines[0].endswith(" waiting again ...")
        assert any(output.endswith(" stopped.") for output in screen.writes)


class TestArguments:
    @pytest.mark.parametrize(
        "args",
        [
            ["groups", "--interval", "0"],
            ["groups", "--interval", "-1"],
            ["groups", "--pace", "-1"],
            ["groups", "--interval", "nan"],
            ["groups", "--interval", "inf"],
            ["groups", "--pace", "inf"],
        ],
    )
    def test_invalid_values(self, args, capsys):
        assert cli.main(args, VirtualScreen()) == INVALID_ARG
        assert "error: Invalid" in capsys.readouterr().err

    def test_unknown_demo(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["unknown"], VirtualScreen())
        assert exc_info.value.code == INVALID_ARG

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == SUCCESS
        assert capsys.readouterr().out.strip() == cli.__version__


class TestEntryPoint:
    def test_success(self, monkeypatch):
        monkeypatch.setattr(cli, "main", lambda: SUCCESS)
        assert entry_point() == SUCCESS

    def test_interrupted(self, monkeypatch):
        def interrupt():
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "main", interrupt)
        assert entry_point() == INTERRUPTED

    def test_failure(self, monkeypatch):
        def fail():
            raise RuntimeError("failed")

        monkeypatch.setattr(cli, "main", fail)
        assert entry_point() == FAILURE
