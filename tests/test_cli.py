"""
Tests for the command-line entry point.
"""

import io
import logging

import pytest

import main as cli
from core.config import RunConfig


def output(console) -> str:
    return console.file.getvalue()


# ---------------------------------------------------------------------------
# Argument parsing / configuration
# ---------------------------------------------------------------------------

def test_parse_args_defaults():
    args = cli.parse_args(["pairs", "abc"])
    assert args.exercise == "pairs"
    assert args.texts == ["abc"]
    assert args.filler == "_"
    assert args.log_level == "WARNING"


def test_build_config_collects_flags():
    args = cli.parse_args(["pairs", "abc", "de", "--filler", "*", "--log-level", "DEBUG"])
    assert cli.build_config(args) == RunConfig(
        exercise="pairs", texts=["abc", "de"], filler="*", log_level="DEBUG"
    )


def test_unknown_exercise_rejected_by_parser():
    with pytest.raises(SystemExit) as exc_info:
        cli.parse_args(["anagram", "abc"])
    assert exc_info.value.code == 2


def test_text_is_required():
    with pytest.raises(SystemExit):
        cli.parse_args(["palindrome"])


def test_dash_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("racecar\nhello world\n"))
    config = cli.build_config(cli.parse_args(["palindrome", "x", "-"]))
    assert config.texts == ["x", "racecar", "hello world"]


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------

def test_palindrome_run(console, display):
    code = cli.main(["palindrome", "A man, a plan, a canal: Panama", "hello"], display=display)
    text = output(console)
    assert code == 0
    assert "Palindrome Checker" in text
    assert "not a palindrome" in text
    assert "Processed 2 input(s)" in text


def test_pairs_run(console, display):
    code = cli.main(["pairs", "123"], display=display)
    text = output(console)
    assert code == 0
    assert "Pair Splitter" in text
    assert "12 | 3_" in text


def test_pairs_custom_filler(console, display):
    assert cli.main(["pairs", "abc", "--filler", "#"], display=display) == 0
    assert "ab | c#" in output(console)


def test_empty_text_has_no_pairs(console, display):
    assert cli.main(["pairs", ""], display=display) == 0
    assert "(no pairs)" in output(console)


def test_invalid_filler_reports_error(console, display):
    code = cli.main(["pairs", "abc", "--filler", "ab"], display=display)
    text = output(console)
    assert code == 1
    assert "Error:" in text
    assert "filler must be a single character" in text


def test_invalid_filler_rejected_before_header(console, display):
    code = cli.main(["pairs", "abc", "--filler", ""], display=display)
    text = output(console)
    assert code == 1
    assert "filler must be a single character" in text
    assert "Pair Splitter" not in text


def test_invalid_filler_rejected_for_palindrome(console, display):
    assert cli.main(["palindrome", "x", "--filler", "ab"], display=display) == 1
    assert "filler must be a single character" in output(console)


def test_invalid_filler_rejected_with_empty_stdin(monkeypatch, console, display):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["pairs", "-", "--filler", "ab"], display=display) == 1
    assert "Error:" in output(console)


def test_build_config_rejects_invalid_filler():
    args = cli.parse_args(["pairs", "abc", "--filler", "ab"])
    with pytest.raises(ValueError, match="filler"):
        cli.build_config(args)


def test_log_level_applied(display):
    cli.main(["palindrome", "abba", "--log-level", "DEBUG"], display=display)
    assert logging.getLogger().level == logging.DEBUG
