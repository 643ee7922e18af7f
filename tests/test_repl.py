"""Tests for the REPL (Read-Eval-Print Loop).

The REPL is the interactive terminal interface.  Since it involves I/O,
we test its helpers directly and drive ``run()`` with patched input.
"""

from unittest.mock import patch

import pytest

from disk_sim.repl import build_prompt, complete_command, format_banner, run
from disk_sim.shell import Shell


class TestREPLHelpers:
    """Verify REPL helper functions."""

    def test_banner(self) -> None:
        """The banner names the simulator and the algorithms."""
        banner = format_banner()
        assert "Disk Scheduling Simulator" in banner
        assert "C-LOOK" in banner

    def test_prompt_shows_algorithm(self) -> None:
        """The prompt reflects the selected algorithm."""
        shell = Shell()
        assert build_prompt(shell) == "disk[FCFS] $ "
        shell.execute("algo look")
        assert build_prompt(shell) == "disk[LOOK] $ "

    def test_complete_command(self) -> None:
        """Completion walks the matching command names in order."""
        shell = Shell()
        assert complete_command(shell, "ru", 0) == "run"
        assert complete_command(shell, "ru", 1) is None
        assert [complete_command(shell, "co", i) for i in range(3)] == [
            "compare",
            "config",
            None,
        ]


class TestREPLLoop:
    """Verify the loop with scripted input."""

    def test_runs_commands_until_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Commands are executed and printed until exit."""
        with patch("builtins.input", side_effect=["sample", "run", "exit"]):
            run()
        out = capsys.readouterr().out
        assert "FCFS: total=644.0, avg=80.50, served=8" in out

    def test_ctrl_d_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """EOF ends the loop gracefully."""
        with patch("builtins.input", side_effect=EOFError):
            run()
        assert "Disk Scheduling Simulator" in capsys.readouterr().out

    def test_ctrl_c_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """KeyboardInterrupt ends the loop gracefully."""
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            run()
        assert "Interrupted." in capsys.readouterr().out
