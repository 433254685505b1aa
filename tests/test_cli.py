import io
import sys

import pytest

from sudokuenum.io.cli import main


def test_empty_grid_with_limit(capsys):
    assert main(["--limit", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("┌──┬──┐\n│..│..│\n")
    assert "Solution #1\n" in out
    assert "Solution #2\n" in out
    assert "Solution #3" not in out


def test_puzzle_file_options_and_count(puzzle_dir, capsys):
    assert main([str(puzzle_dir / "puzzle1.yaml"), "--count"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "2"


def test_count_every_solution(capsys):
    assert main(["--count"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "288"


def test_step_waits_for_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x"))
    assert main(["--step", "--limit", "5"]) == 0
    out = capsys.readouterr().out
    assert "Solution #1" in out
    assert "Solution #2" not in out


def test_unsolvable_puzzle(tmp_path, capsys):
    path = tmp_path / "dead.yaml"
    path.write_text('grid: ["12..", "...4", "..3.", "...."]\n', encoding="utf-8")
    assert main([str(path)]) == 1
    assert "No solution." in capsys.readouterr().out


def test_invalid_puzzle(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("block_side: 7\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "unsupported block side 7" in capsys.readouterr().err
    assert main([str(tmp_path / "missing.yaml")]) == 2


def test_malformed_yaml_is_reported(tmp_path, capsys):
    path = tmp_path / "broken.yaml"
    path.write_text("grid: [\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "not valid YAML" in capsys.readouterr().err


def test_wrongly_typed_fields_are_reported(tmp_path, capsys):
    path = tmp_path / "typed.yaml"
    path.write_text("block_side: [2]\n", encoding="utf-8")
    assert main([str(path)]) == 2
    path.write_text("options: [1, 2]\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert capsys.readouterr().err.count("error:") == 2


def test_zero_limit_is_not_a_failure(capsys):
    assert main(["--limit", "0"]) == 0
    out = capsys.readouterr().out
    assert "Solution #1" not in out
    assert "No solution." not in out


def test_negative_limit_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--limit", "-1"])
    assert exc.value.code == 2
    assert "must not be negative" in capsys.readouterr().err


def test_step_stops_quietly_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--step"]) == 0
    assert "No solution." not in capsys.readouterr().out
