import io

import pytest

from waterjug.cli import main, run
from waterjug.full_graph import solve_full_graph


def test_run_full_graph_prints_solution(capsys):
    path = run(5, 3, 4, 1, False)
    out = capsys.readouterr().out
    assert path == solve_full_graph(5, 3, 4)
    assert out.startswith(f"Number of operations: {len(path) - 1}\nOperations:\n1. ")
    assert "Function took" not in out


def test_both_ways_print_the_same(capsys):
    run(7, 4, 6, 1, False)
    first = capsys.readouterr().out
    run(7, 4, 6, 2, False)
    second = capsys.readouterr().out
    assert first == second


def test_run_timed_reports_microseconds(capsys):
    run(5, 3, 4, 2, True)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].startswith("Function took ")
    assert lines[-1].endswith(" microseconds.")


def test_run_no_solution(capsys):
    assert run(4, 2, 3, 1, False) is None
    assert capsys.readouterr().out == "No solution.\n"


def test_run_rejects_unknown_way():
    with pytest.raises(ValueError):
        run(5, 3, 4, 3, False)


def test_main_with_arguments(capsys):
    assert main(["5", "3", "4", "1", "0"]) == 0
    out = capsys.readouterr().out
    assert "You selected: L = 5, S = 3, W = 4, Way = 1, Time = no" in out
    assert "Number of operations: " in out


def test_main_prompts_for_missing_values(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3\n4\n2\n1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter L (capacity of large jug): " in out
    assert "You selected: L = 5, S = 3, W = 4, Way = 2, Time = yes" in out
    assert " microseconds." in out


@pytest.mark.parametrize(
    "argv",
    [["3", "5", "1", "1", "0"], ["5", "3", "6", "1", "0"], ["5", "5", "2", "1", "0"]],
)
def test_main_rejects_invalid_jugs(capsys, argv):
    assert main(argv) == 1
    assert "Invalid input." in capsys.readouterr().err


def test_main_rejects_invalid_way(capsys):
    assert main(["5", "3", "4", "3", "0"]) == 1
    assert "Invalid way choice. Must be 1 or 2." in capsys.readouterr().err


def test_main_rejects_invalid_time_choice(capsys):
    assert main(["5", "3", "4", "1", "2"]) == 1
    assert "Must be 0 or 1." in capsys.readouterr().err


def test_main_rejects_non_numeric_prompt(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "Invalid input." in capsys.readouterr().err