"""Moving elements from b back to a, cheapest first."""

from __future__ import annotations

from typing import Callable, Optional

from .stack import Board, Node, Stack

INT_MAX = 2**31 - 1
_ABSENT_COST = 1000


def rotation_cost(stack: Stack, node: Node) -> int:
    """Fewest rotations, either way, that bring the node to the top."""
    position = stack.position(node)
    if position is None:
        return _ABSENT_COST
    size = len(stack)
    return position if position <= size // 2 else size - position


def _position_after_max(stack: Stack) -> int:
    largest = max(stack.values())
    position = next(pos for pos, node in enumerate(stack) if node.value == largest)
    return (position + 1) % len(stack)


def target_position_in_a(stack: Stack, node: Node) -> int:
    """Where in a the node belongs: at the smallest larger value, else after the maximum."""
    if stack.top is None:
        return 0
    target = 0
    smallest_bigger = INT_MAX
    for position, current in enumerate(stack):
        if node.value < current.value < smallest_bigger:
            smallest_bigger = current.value
            target = position
    if smallest_bigger == INT_MAX:
        return _position_after_max(stack)
    return target


def cheapest_in_b(stack: Stack) -> Optional[Node]:
    """The node of b whose rotation cost plus index is smallest, or None if b is empty."""
    if stack.top is None:
        return None
    cheapest = stack.top
    min_cost = _ABSENT_COST
    for node in stack:
        cost = rotation_cost(stack, node) + node.index
        if cost < min_cost:
            min_cost = cost
            cheapest = node
    return cheapest


def _rotate_to(
    position: int,
    size: int,
    forward: Callable[[], None],
    backward: Callable[[], None],
) -> None:
    if position <= size // 2:
        for _ in range(position):
            forward()
    else:
        for _ in range(size - position):
            backward()


def greedy_sort_back_to_a(board: Board) -> None:
    """Empty b into a in sorted order, then rotate a until its minimum is on top."""
    while len(board.b) > 0:
        cheapest = cheapest_in_b(board.b)
        if cheapest is None:
            break
        pos_in_b = board.b.position(cheapest)
        pos_in_a = target_position_in_a(board.a, cheapest)
        _rotate_to(pos_in_b, len(board.b), board.rb, board.rrb)
        _rotate_to(pos_in_a, len(board.a), board.ra, board.rra)
        board.pa()
    # The top is always at position 0, so the forward rotation is always chosen.
    while not board.a.is_sorted():
        board.ra()