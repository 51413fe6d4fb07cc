import random

import pytest

from pushswap.chunk_sort import push_all_chunks_to_b
from pushswap.greedy import (
    cheapest_in_b,
    greedy_sort_back_to_a,
    rotation_cost,
    target_position_in_a,
)
from pushswap.stack import Board, Node, Stack, assign_indices


def _indexed(values):
    stack = Stack(values)
    assign_indices(stack)
    return stack


def test_rotation_cost_of_top_is_zero():
    stack = _indexed([4, 2, 7, 1, 9])
    assert rotation_cost(stack, stack.top) == 0


def test_rotation_cost_is_symmetric_around_the_middle():
    stack = _indexed([4, 2, 7, 1, 9, 3])
    nodes = list(stack)
    for pos in range(1, len(nodes)):
        assert rotation_cost(stack, nodes[pos]) == rotation_cost(
            stack, nodes[len(nodes) - pos]
        )
    assert rotation_cost(stack, nodes[-1]) == 1


def test_rotation_cost_of_absent_node():
    stack = _indexed([1, 2, 3])
    assert rotation_cost(stack, Node(2)) == 1000


def test_target_position_is_smallest_larger_value():
    stack = _indexed([10, 30, 20])
    assert target_position_in_a(stack, Node(15)) == stack.values().index(20)
    assert target_position_in_a(stack, Node(5)) == stack.values().index(10)


def test_target_position_after_maximum():
    stack = _indexed([10, 30, 20])
    expected = (stack.values().index(30) + 1) % len(stack)
    assert target_position_in_a(stack, Node(35)) == expected


def test_target_position_in_empty_stack():
    assert target_position_in_a(Stack(), Node(3)) == 0


def test_cheapest_in_empty_stack():
    assert cheapest_in_b(Stack()) is None


def test_cheapest_minimises_cost_plus_index():
    stack = _indexed([50, 10, 40, 20, 30])
    cheapest = cheapest_in_b(stack)
    best = min(rotation_cost(stack, n) + n.index for n in stack)
    assert rotation_cost(stack, cheapest) + cheapest.index == best
    assert stack.position(cheapest) is not None


@pytest.mark.parametrize("size", [6, 12, 40, 100])
def test_chunks_then_greedy_sorts(size):
    values = random.Random(size * 7).sample(range(-10000, 10000), size)
    board = Board(values)
    push_all_chunks_to_b(board)
    greedy_sort_back_to_a(board)
    assert board.a.values() == sorted(values)
    assert len(board.b) == 0
    assert board.moves.count("pa") == size


def test_greedy_from_plain_pushes():
    values = [3, -1, 8, 0, 5, 2, 7]
    board = Board(values)
    for _ in values:
        board.pb()
    greedy_sort_back_to_a(board)
    assert board.a.values() == sorted(values)
    assert len(board.b) == 0
    assert set(board.moves) <= {"pb", "pa", "ra", "rb", "rra", "rrb"}