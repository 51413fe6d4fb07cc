"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .chunk_sort import push_all_chunks_to_b
from .greedy import greedy_sort_back_to_a
from .parsing import InputError, is_valid_input, parse_values
from .small_sort import small_sort
from .stack import Board


def solve(values: Iterable[int]) -> list[str]:
    """The list of moves that sorts the values, first value on top of a."""
    board = Board(values)
    if board.a.is_sorted():
        return []
    if len(board.a) <= 5:
        small_sort(board)
    else:
        push_all_chunks_to_b(board)
        greedy_sort_back_to_a(board)
    return board.moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if not is_valid_input(args):
        print("Error")
        return 1
    try:
        values = parse_values(args)
    except InputError:
        print("Error")
        return 1
    for move in solve(values):
        print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())