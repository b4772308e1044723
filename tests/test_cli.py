"""Tests for the knight-travails command."""

import json

from click.testing import CliRunner

from knight_travails.cli import main


def test_text_output():
    runner = CliRunner()
    result = runner.invoke(main, ["a1", "h8"])

    assert result.exit_code == 0, f"CLI failed with output:\n{result.output}"
    assert "6 moves" in result.output
    assert "a1 -> c2 -> e3 -> g4 -> e5 -> g6 -> h8" in result.output


def test_coordinate_pairs():
    runner = CliRunner()
    result = runner.invoke(main, ["0,0", "1,2", "--format", "uci"])

    assert result.exit_code == 0, f"CLI failed with output:\n{result.output}"
    assert result.output.strip() == "a1b3"


def test_json_output():
    runner = CliRunner()
    result = runner.invoke(main, ["a1", "h1", "--format", "json"])

    assert result.exit_code == 0, f"CLI failed with output:\n{result.output}"
    data = json.loads(result.output)
    assert data["num_moves"] == 5
    assert data["uci_moves"][0] == "a1c2"


def test_same_square():
    runner = CliRunner()
    result = runner.invoke(main, ["e4", "e4", "--format", "uci"])

    assert result.exit_code == 0
    assert result.output.strip() == ""


def test_off_board_square_has_no_path():
    runner = CliRunner()
    result = runner.invoke(main, ["--", "0,0", "8,0"])

    assert result.exit_code == 1
    assert "No path" in result.output
    assert result.output.count("No path") == 1


def test_negative_coordinates():
    runner = CliRunner()
    result = runner.invoke(main, ["--", "-1,0", "d4"])

    assert result.exit_code == 1
    assert "No path" in result.output


def test_invalid_notation_is_usage_error():
    runner = CliRunner()
    result = runner.invoke(main, ["z9", "a1"])

    assert result.exit_code == 2
    assert "Invalid square" in result.output


def test_invalid_pair_is_usage_error():
    runner = CliRunner()
    result = runner.invoke(main, ["1,x", "a1"])

    assert result.exit_code == 2
