"""Tests for the ``alias-miner`` command line."""

import pytest

from alias_miner.workflow.cli import build_parser, main

HISTORY = """\
: 1556993411:0;cargo fmt
: 1556991281:0;cargo build --release
cargo build --release
git status
"""


@pytest.fixture
def history_file(tmp_path):
    path = tmp_path / ".histfile"
    path.write_text(HISTORY, encoding="utf-8")
    return path


def test_parser_arguments(history_file):
    args = build_parser().parse_args(["suggest", str(history_file), "3", "--strategy", "uses"])

    assert args.history_file == history_file
    assert args.count == 3
    assert args.strategy == "uses"
    assert args.config is None


def test_suggest_prints_table(history_file, capsys):
    assert main(["suggest", str(history_file), "2", "--strategy", "uses"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Command")
    assert lines[2].startswith("cargo ")
    assert len(lines) == 4


def test_suggest_with_config_file(history_file, tmp_path, capsys):
    config = tmp_path / "suggest.yaml"
    config.write_text("count: 1\nstrategy: heuristic\n", encoding="utf-8")

    assert main(["suggest", str(history_file), "1", "--config", str(config)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[2].startswith("cargo build --release")


def test_missing_history_file_fails(tmp_path):
    assert main(["suggest", str(tmp_path / "missing"), "2"]) == 1


def test_negative_count_fails(history_file):
    assert main(["suggest", str(history_file), "-1"]) == 1


def test_bad_config_fails(history_file, tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("similarity_threshold: 4\n", encoding="utf-8")

    assert main(["suggest", str(history_file), "2", "--config", str(config)]) == 1
