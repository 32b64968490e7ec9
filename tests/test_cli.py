"""Tests for vlog.cli — argument parsing and the vlog command."""

import subprocess
import sys

import pytest

import vlog
from vlog.cli import _build_parser, main


class TestParser:
    """Argument parsing."""

    def test_defaults(self):
        args = _build_parser().parse_args(["hello"])
        assert args.v == 0
        assert args.level == 0
        assert args.prefix == ""
        assert args.flags == "std"
        assert args.stdout is False
        assert args.fatal is False
        assert args.message == ["hello"]

    def test_v_flag_from_shared_parser(self):
        args = _build_parser().parse_args(["-v", "2", "hello"])
        assert args.v == 2
        assert vlog.get_log_level() == 2

    def test_list_flags_switch(self):
        args = _build_parser().parse_args(["--list-flags"])
        assert args.list_flags is True
        assert args.flags == "std"

    def test_flags_always_takes_a_value(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _build_parser().parse_args(["--flags"])
        assert exc_info.value.code == 2

    def test_negative_level_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _build_parser().parse_args(["--level", "-3", "x"])
        assert exc_info.value.code == 2


class TestMainEntryPoint:
    """The main() function with various argv inputs."""

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "vlog" in capsys.readouterr().out

    def test_help_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "log level for V logs" in capsys.readouterr().out

    def test_no_message_shows_help(self, capsys):
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_list_flags(self, capsys):
        assert main(["--list-flags"]) == 0
        out = capsys.readouterr().out
        assert "Available log flags:" in out
        assert "shortfile" in out

    def test_level_zero_written(self, capsys):
        assert main(["--flags", "none", "hello", "world"]) == 0
        assert capsys.readouterr().err == "hello world\n"

    def test_gated_message_dropped(self, capsys):
        assert main(["--flags", "none", "--level", "3", "noisy"]) == 0
        assert capsys.readouterr().err == ""

    def test_gated_message_written_with_v(self, capsys):
        assert main(["-v", "3", "--flags", "none", "--level", "3", "detail"]) == 0
        assert capsys.readouterr().err == "detail\n"

    def test_prefix_and_stdout(self, capsys):
        assert main(["--flags", "none", "--prefix", "job: ", "--stdout", "done"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "job: done\n"
        assert captured.err == ""

    def test_header_flags(self, capsys, fixed_clock):
        assert main(["--flags", "date,utc", "dated"]) == 0
        assert capsys.readouterr().err == "2026/10/18 dated\n"

    def test_bad_flag_spec(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--flags", "bogus", "x"])
        assert exc_info.value.code == 2
        assert "unknown log flag" in capsys.readouterr().err

    def test_fatal_exit_code(self, capsys):
        assert main(["--flags", "none", "--fatal", "--level", "9", "cannot", "continue"]) == 1
        assert capsys.readouterr().err == "cannot continue\n"


@pytest.mark.slow
class TestEntryPoints:
    """The installed CLI via subprocess."""

    def test_module_run(self):
        result = subprocess.run(
            [sys.executable, "-m", "vlog.cli", "--flags", "none", "hi"],
            capture_output=True, text=True, timeout=10,
        )
        assert result.returncode == 0
        assert result.stderr == "hi\n"

    def test_module_fatal(self):
        result = subprocess.run(
            [sys.executable, "-m", "vlog.cli", "--flags", "none", "--fatal", "bye"],
            capture_output=True, text=True, timeout=10,
        )
        assert result.returncode == 1
        assert result.stderr == "bye\n"
