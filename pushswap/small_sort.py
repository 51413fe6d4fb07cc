"""Sorting of stacks holding at most five elements."""

from __future__ import annotations

from itertools import islice
from typing import Callable

from .stack import Board

_Move = Callable[[Board], None]

_THREE_MOVES: dict[tuple[int, int, int], tuple[_Move, ...]] = {
    (0, 2, 1): (Board.rra, Board.sa),
    (1, 0, 2): (Board.sa,),
    (1, 2, 0): (Board.rra,),
    (2, 0, 1): (Board.ra,),
    (2, 1, 0): (Board.sa, Board.rra),
}


def sort_three(board: Board, offset: int = 0) -> None:
    """Sort the three top nodes of a, whose indices run from offset to offset + 2."""
    top_three = tuple(node.index - offset for node in islice(board.a, 3))
    if len(top_three) < 3:
        raise ValueError("stack a holds fewer than three elements")
    for move in _THREE_MOVES.get(top_three, ()):
        move(board)


def _push_index_to_b(board: Board, target: int) -> None:
    """Bring the node with the given index to the top of a the short way, then push it."""
    position = next(
        (pos for pos, node in enumerate(board.a) if node.index == target), None
    )
    if position is None:
        raise ValueError(f"no element with index {target} in stack a")
    rotate = board.ra if position <= len(board.a) // 2 else board.rra
    while board.a.top.index != target:
        rotate()
    board.pb()


def sort_four(board: Board) -> None:
    """Sort a stack a of four elements."""
    _push_index_to_b(board, 0)
    sort_three(board, 1)
    board.pa()


def sort_five(board: Board) -> None:
    """Sort a stack a of five elements."""
    _push_index_to_b(board, 0)
    _push_index_to_b(board, 1)
    sort_three(board, 2)
    board.pa()
    board.pa()


def small_sort(board: Board) -> None:
    """Sort a stack a of two to five elements; other sizes are left alone."""
    size = len(board.a)
    if size == 2:
        first, second = islice(board.a, 2)
        if first.index > second.index:
            board.sa()
    elif size == 3:
        sort_three(board, 0)
    elif size == 4:
        sort_four(board)
    elif size == 5:
        sort_five(board)