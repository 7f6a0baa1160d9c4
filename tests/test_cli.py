"""Tests for the command-line entry point (projc.cli).

Covers:
- Exit codes for valid and invalid invocations
- Nothing written when arguments are rejected
- --quiet, --max-path, --version and environment overrides
- ``python -m projc``
"""

from __future__ import annotations

import runpy
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from projc import __version__
from projc.cli import build_parser, main


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _isolated_env(clean_env):
    """Every CLI test starts from default configuration."""
    return clean_env


class TestExitCodes:
    def test_no_arguments_scaffolds_cwd(self, tmp_project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_project_dir)
        assert main([]) == 0
        assert (tmp_project_dir / "lib" / "demo.h").is_file()
        assert (tmp_project_dir / "Makefile").is_file()

    def test_one_argument(self, tmp_project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_project_dir.parent)
        assert main(["demo"]) == 0
        assert (tmp_project_dir / "src" / "demo_app.c").is_file()

    def test_two_arguments_fail_and_write_nothing(self, tmp_path: Path, monkeypatch, capsys):
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        monkeypatch.chdir(tmp_path)

        assert main(["a", "b"]) == 1

        assert sorted(p.name for p in tmp_path.rglob("*")) == ["a", "b"]
        err = capsys.readouterr().err
        assert "usage: projc" in err
        assert "at most one path" in err

    def test_missing_path(self, tmp_path: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main(["nope"]) == 1
        assert "Cannot resolve path 'nope'" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []

    def test_unknown_option(self, capsys):
        assert main(["--bogus"]) == 1
        assert "usage: projc" in capsys.readouterr().err

    def test_name_with_separator_rejected(self, tmp_path: Path, monkeypatch, capsys):
        (tmp_path / "foo" / "bar").mkdir(parents=True)
        monkeypatch.chdir(tmp_path)

        assert main(["foo/bar"]) == 1

        assert "path separator" in capsys.readouterr().err
        assert list((tmp_path / "foo" / "bar").iterdir()) == []

    def test_partial_failure_still_exits_zero(self, tmp_project_dir: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_project_dir.parent)
        limit = len(str(tmp_project_dir))

        assert main(["demo", "--max-path", str(limit)]) == 0

        assert list(tmp_project_dir.iterdir()) == []
        assert "could not be created" in capsys.readouterr().err

    def test_invalid_env_config(self, tmp_project_dir: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_project_dir)
        monkeypatch.setenv("PROJC_MAX_PATH", "lots")
        assert main([]) == 1
        assert "invalid configuration" in capsys.readouterr().err

    def test_zero_max_path_rejected(self, tmp_project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_project_dir)
        assert main(["--max-path", "0"]) == 1


class TestOptions:
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "Makefile.win" in capsys.readouterr().out

    def test_quiet(self, tmp_project_dir: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_project_dir)
        assert main(["--quiet"]) == 0
        out = capsys.readouterr().out
        assert "Creating" not in out
        assert "Scaffold: demo" in out

    def test_quiet_from_env(self, tmp_project_dir: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_project_dir)
        monkeypatch.setenv("PROJC_QUIET", "1")
        assert main([]) == 0
        assert "Creating" not in capsys.readouterr().out

    def test_no_summary_from_env(self, tmp_project_dir: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_project_dir)
        monkeypatch.setenv("PROJC_NO_SUMMARY", "1")
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Scaffold: demo" not in out
        assert "Directory lib created." in out

    def test_flag_overrides_env(self, tmp_project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_project_dir)
        monkeypatch.setenv("PROJC_MAX_PATH", "1")
        assert main(["--max-path", "4096"]) == 0
        assert (tmp_project_dir / "Makefile").is_file()

    def test_parser_accepts_many_paths_for_later_validation(self):
        args = build_parser().parse_args(["a", "b"])
        assert args.paths == ["a", "b"]


class TestModuleEntryPoint:
    def test_python_m_projc(self, tmp_project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_project_dir)
        with patch.object(sys, "argv", ["projc"]):
            with pytest.raises(SystemExit) as exc_info:
                runpy.run_module("projc", run_name="__main__")
        assert exc_info.value.code == 0
        assert (tmp_project_dir / "Makefile.win").is_file()
