"""Stacks of numbered nodes and the eleven push_swap moves."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = -1


class Stack:
    """A stack of nodes, iterated from the top down."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(v) for v in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def top(self) -> Optional[Node]:
        """The node on top, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def push(self, node: Node) -> None:
        """Put a node on top of the stack."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the node on top."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def position(self, node: Node) -> Optional[int]:
        """Distance of this very node from the top, or None if absent."""
        for pos, current in enumerate(self._nodes):
            if current is node:
                return pos
        return None

    def is_sorted(self) -> bool:
        """True when indices never decrease from the top down."""
        following = islice(self._nodes, 1, None)
        return all(a.index <= b.index for a, b in zip(self._nodes, following))

    def values(self) -> list[int]:
        """The values from the top down."""
        return [node.value for node in self._nodes]

    def indices(self) -> list[int]:
        """The indices from the top down."""
        return [node.index for node in self._nodes]

    def _swap(self) -> bool:
        if len(self._nodes) < 2:
            return False
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return True

    def _rotate(self) -> bool:
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(-1)
        return True

    def _reverse_rotate(self) -> bool:
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(1)
        return True


def assign_indices(stack: Stack) -> None:
    """Give every node the number of values in the stack smaller than its own."""
    values = stack.values()
    for node in stack:
        node.index = sum(1 for v in values if v < node.value)


class Board:
    """Stacks a and b together with the list of moves played on them."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.moves: list[str] = []
        assign_indices(self.a)

    def _record(self, move: str) -> None:
        self.moves.append(move)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if self.a._swap():
            self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if self.b._swap():
            self._record("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.a._swap()
        self.b._swap()
        self._record("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.push(self.b.pop())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.push(self.a.pop())
        self._record("pb")

    def ra(self) -> None:
        """Rotate a: the top goes to the bottom."""
        if self.a._rotate():
            self._record("ra")

    def rb(self) -> None:
        """Rotate b: the top goes to the bottom."""
        if self.b._rotate():
            self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self.a._rotate()
        self.b._rotate()
        self._record("rr")

    def rra(self) -> None:
        """Reverse-rotate a: the bottom comes to the top."""
        if self.a._reverse_rotate():
            self._record("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: the bottom comes to the top."""
        if self.b._reverse_rotate():
            self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.a._reverse_rotate()
        self.b._reverse_rotate()
        self._record("rrr")