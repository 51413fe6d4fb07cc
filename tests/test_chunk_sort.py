import random

import pytest

from pushswap.chunk_sort import chunk_size, push_all_chunks_to_b
from pushswap.stack import Board


@pytest.mark.parametrize(
    "total, expected",
    [
        (1, 3),
        (10, 3),
        (11, 5),
        (50, 5),
        (51, 40),
        (100, 40),
        (101, 50),
        (500, 50),
        (501, 60),
    ],
)
def test_chunk_size_thresholds(total, expected):
    assert chunk_size(total) == expected


@pytest.mark.parametrize("size", [6, 10, 20, 100, 150])
def test_push_all_chunks_moves_everything_to_b(size):
    values = random.Random(size).sample(range(-5000, 5000), size)
    board = Board(values)
    push_all_chunks_to_b(board)
    assert len(board.a) == 0
    assert sorted(board.b.values()) == sorted(values)
    assert board.moves.count("pb") == size
    assert set(board.moves) <= {"pb", "ra", "rb"}


def test_push_all_chunks_keeps_indices():
    values = [8, 3, 5, 1, 9, 2, 7]
    board = Board(values)
    before = {node.value: node.index for node in board.a}
    push_all_chunks_to_b(board)
    after = {node.value: node.index for node in board.b}
    assert after == before


def test_push_all_chunks_on_empty_board():
    board = Board([])
    push_all_chunks_to_b(board)
    assert board.moves == []
    assert len(board.b) == 0