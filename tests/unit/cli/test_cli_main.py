#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Unit tests for the mdlatex command-line entry point."""

import io
import logging
from pathlib import Path

import pytest

from mdlatex import __version__
from mdlatex.cli import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, create_parser, main

EXPECTED_FRAGMENT = "\\section{Intro}\n\nfirst\nsecond\n"


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """Write a small Markdown document to disk."""
    path = tmp_path / "doc.md"
    path.write_text("# Intro\n\nfirst\nsecond\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo the handler changes main() makes to the package logger."""
    package_logger = logging.getLogger("mdlatex")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.mark.cli
@pytest.mark.unit
class TestCreateParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Test stdin input and all switches off."""
        args = create_parser().parse_args([])

        assert args.input == "-"
        assert args.out is None
        assert args.hard_wrap is False
        assert args.heading_anchors is False
        assert args.nesting_level == 0
        assert args.parse_tables is True
        assert args.smart_quotes is False
        assert args.log_level == "WARNING"

    def test_switches(self) -> None:
        """Test renderer and parser switches."""
        args = create_parser().parse_args(
            ["doc.md", "--hard-wrap", "--heading-anchors", "--nesting-level", "2", "--no-tables", "--smart-quotes"]
        )

        assert args.input == "doc.md"
        assert args.hard_wrap is True
        assert args.heading_anchors is True
        assert args.nesting_level == 2
        assert args.parse_tables is False
        assert args.smart_quotes is True

    def test_excluded_field_has_no_flag(self) -> None:
        """Test hidden options are not exposed."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--fail-on-resource-errors"])


@pytest.mark.cli
@pytest.mark.unit
class TestMain:
    """Tests for running the command."""

    def test_file_to_stdout(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test converting a file prints the fragment."""
        assert main([str(markdown_file)]) == EXIT_SUCCESS

        assert capsys.readouterr().out == EXPECTED_FRAGMENT

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Test reading Markdown from standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("*hi*"))

        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "\\emph{hi}\n"

    def test_flags_applied(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test renderer flags reach the renderer."""
        assert main([str(markdown_file), "--hard-wrap", "--heading-anchors"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == "\\section{Intro}\\label{Intro}\n\nfirst\\\\\nsecond\n"

    def test_output_file(self, markdown_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test writing the fragment to a file."""
        out = tmp_path / "doc.tex"

        assert main([str(markdown_file), "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == EXPECTED_FRAGMENT
        assert capsys.readouterr().out == ""

    def test_output_write_failure(
        self, markdown_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test an unwritable destination is an error."""
        out = tmp_path / "missing" / "doc.tex"

        assert main([str(markdown_file), "-o", str(out)]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a missing input file is an error."""
        assert main([str(tmp_path / "nope.md")]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_negative_nesting_level(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test invalid option values are usage errors."""
        assert main([str(markdown_file), "--nesting-level=-1"]) == EXIT_USAGE_ERROR
        assert "nesting_level" in capsys.readouterr().err

    def test_trace_logs_to_stderr(self, markdown_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test trace output goes to stderr and leaves stdout clean."""
        assert main([str(markdown_file), "--trace"]) == EXIT_SUCCESS

        captured = capsys.readouterr()
        assert captured.out == EXPECTED_FRAGMENT
        assert "mdlatex.cli:" in captured.err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --version prints the package version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
