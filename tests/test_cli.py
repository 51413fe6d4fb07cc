import random

import pytest

from pushswap.cli import main, solve
from pushswap.stack import Board


def _replay(values, moves):
    board = Board(values)
    for move in moves:
        getattr(board, move)()
    return board


def test_solve_sorted_input_needs_no_moves():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []
    assert solve([42]) == []


def test_solve_two_values():
    assert solve([2, 1]) == ["sa"]


@pytest.mark.parametrize("size", [3, 4, 5, 6, 10, 60, 100])
def test_solve_moves_replay_to_sorted(size):
    values = random.Random(size + 3).sample(range(-2**31, 2**31 - 1), size)
    moves = solve(values)
    board = _replay(values, moves)
    assert board.a.values() == sorted(values)
    assert len(board.b) == 0


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_rejects_non_numbers(capsys):
    assert main(["1", "two", "3"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_rejects_duplicates(capsys):
    assert main(["4", "1", "+4"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_prints_moves(capsys):
    args = ["2", "1", "3", "6", "5", "8"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    values = [int(a) for a in args]
    assert lines == solve(values)
    assert _replay(values, lines).a.values() == sorted(values)


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["-3", "0", "12"]) == 0
    assert capsys.readouterr().out == ""