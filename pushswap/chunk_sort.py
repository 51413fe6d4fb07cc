"""Moving the elements of a to b, one range of indices at a time."""

from __future__ import annotations

from .stack import Board, Node


def chunk_size(total: int) -> int:
    """How many consecutive indices form one chunk for a stack of this size."""
    if total <= 10:
        return 3
    if total <= 50:
        return 5
    if total <= 100:
        return 40
    if total <= 500:
        return 50
    return 60


def _in_chunk(node: Node, low: int, high: int) -> bool:
    return low <= node.index <= high


def _rotate_to_chunk_element(board: Board, low: int, high: int) -> None:
    rotations = 0
    while board.a.top is not None and rotations < len(board.a):
        if _in_chunk(board.a.top, low, high):
            break
        board.ra()
        rotations += 1


def _push_chunk(board: Board, low: int, high: int) -> None:
    total = sum(1 for node in board.a if _in_chunk(node, low, high))
    pushed = 0
    while pushed < total and len(board.a) > 0:
        if _in_chunk(board.a.top, low, high):
            board.pb()
            if len(board.b) > 1 and board.b.top.index < low + 3:
                board.rb()
            pushed += 1
        else:
            _rotate_to_chunk_element(board, low, high)


def push_all_chunks_to_b(board: Board) -> None:
    """Push every element of a onto b, lowest chunk of indices first."""
    total = len(board.a)
    size = chunk_size(total)
    for low in range(0, total, size):
        high = min(low + size - 1, total - 1)
        _push_chunk(board, low, high)