"""Tests for the command-line entry point."""

import pytest
from loguru import logger

from syncup import cli


@pytest.fixture
def run(tmp_path, monkeypatch, plain_console):
    """Run `syncup <argv>` against a catalog in tmp_path and return the exit code."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SYNCUP_CSV_PATH", raising=False)
    monkeypatch.delenv("SYNCUP_LOG_LEVEL", raising=False)
    csv_path = tmp_path / "songs.csv"

    def _run(*argv):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--config", str(tmp_path / "config.toml"), "--csv", str(csv_path), *argv])
        return excinfo.value.code

    yield _run
    logger.remove()


class TestMain:
    def test_list_seeds_catalog(self, run, tmp_path, capsys):
        assert run("list") == 0
        assert (tmp_path / "songs.csv").exists()
        assert "Bohemian Rhapsody" in capsys.readouterr().out

    def test_add_then_find(self, run, capsys):
        assert run("add", "Love Story", "Taylor Swift", "Pop", "2008") == 0
        assert run("find", "love story") == 0
        assert "Taylor Swift" in capsys.readouterr().out

    def test_failure_exit_code(self, run):
        assert run("find", "Not A Song") == 1
        assert run("remove", "Not A Song") == 1

    def test_fuzzy_and_similar(self, run, capsys):
        assert run("fuzzy", "blinding lihgts the weeknd synthwave", "2") == 0
        assert "Blinding Lights" in capsys.readouterr().out
        assert run("similar", "Bohemian Rhapsody", "2") == 0

    def test_bad_numeric_arguments_fail(self, run, capsys):
        assert run("fuzzy", "lover", "abc") == 1
        assert run("fuzzy", "shape of you ed sheeran pop", "-2") == 1
        assert run("similar", "Shape of You", "-1") == 1
        assert run("similar", "Shape of You", "many") == 1
        out = capsys.readouterr().out
        assert "max_distance must be a whole number" in out
        assert "limit must not be negative" in out
        assert "No song titled" not in out

    def test_title_ending_in_number(self, run, capsys):
        assert run("add", "Blink 182", "Someone", "Pop") == 0
        assert run("similar", "Blink 182") == 0
        assert "No song titled" not in capsys.readouterr().out

    def test_log_file_written(self, run, tmp_path):
        run("stats")
        assert (tmp_path / "data" / "syncup" / "syncup.log").exists()


class TestParser:
    def test_optional_positionals_omitted(self):
        args = cli.build_parser().parse_args(["add", "T", "A", "G"])
        assert cli._command_args(args) == ["T", "A", "G"]

    def test_no_command_means_shell(self):
        assert cli.build_parser().parse_args([]).command is None
