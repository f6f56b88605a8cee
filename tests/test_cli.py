import io
import sys

import pytest

from algodrills.cli import main
from algodrills.grid_paths import max_two_paths
from algodrills.problems import (
    a_plus_b,
    all_subarray_sum,
    banner,
    horse_paths,
    top_carpet,
)


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_banner_command(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["banner"], "")
    assert status == 0
    assert out == banner()


def test_a_plus_b_command(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["a-plus-b"], "20\n22\n")
    assert status == 0
    assert out == f"{a_plus_b(20, 22)}\n"


def test_horse_command(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["horse"], "6 6 3 3\n")
    assert status == 0
    assert out == f"{horse_paths(6, 6, 3, 3)}\n"


def test_carpet_command(monkeypatch, capsys):
    text = "3\n1 0 2 3\n0 2 3 3\n2 1 3 3\n2 2\n"
    status, out, _ = _run(monkeypatch, capsys, ["carpet"], text)
    assert status == 0
    expected = top_carpet([(1, 0, 2, 3), (0, 2, 3, 3), (2, 1, 3, 3)], 2, 2)
    assert out == f"{expected}\n"


def test_carpet_command_uncovered(monkeypatch, capsys):
    text = "1\n0 0 1 1\n5 5\n"
    status, out, _ = _run(monkeypatch, capsys, ["carpet"], text)
    assert status == 0
    assert out == "-1\n"


def test_grid_command(monkeypatch, capsys):
    text = "3\n1 3 5\n3 1 7\n2 2 4\n0 0 0\n"
    status, out, _ = _run(monkeypatch, capsys, ["grid"], text)
    assert status == 0
    grid = [[0, 0, 5], [0, 4, 0], [7, 0, 0]]
    assert out == f"{max_two_paths(grid)}\n"


def test_grid_command_cell_out_of_range(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["grid"], "2\n3 1 5\n0 0 0\n")
    assert status == 1
    assert out == ""
    assert "outside" in err


def test_subarray_command(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["subarray"], "4\n3 -1 4 1\n")
    assert status == 0
    assert out == f"{all_subarray_sum([3, -1, 4, 1])}\n"


def test_truncated_input_reports_error(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["horse"], "1 2\n")
    assert status == 1
    assert out == ""
    assert "ended" in err


def test_non_integer_input_reports_error(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["a-plus-b"], "1 x\n")
    assert status == 1
    assert "'x'" in err


def test_unknown_command_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["nope"])
    assert info.value.code == 2