"""The two stacks and the eleven push_swap operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Node:
    """One number on a stack, with the bookkeeping used while sorting."""

    number: int
    index: int = -1
    pos: int = 0
    target: int = 0
    cost_a: int = 0
    cost_b: int = 0


def _swap(stack: deque[Node]) -> None:
    if len(stack) < 2:
        return
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)


def _push(src: deque[Node], dst: deque[Node]) -> None:
    if src:
        dst.appendleft(src.popleft())


def _rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.append(stack.popleft())


def _reverse_rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.appendleft(stack.pop())


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every operation performed is appended to ``operations`` by name.
    """

    a: deque[Node] = field(default_factory=deque)
    b: deque[Node] = field(default_factory=deque)
    operations: list[str] = field(default_factory=list)

    @classmethod
    def from_numbers(cls, numbers: Iterable[int]) -> Stacks:
        """Build stacks with ``numbers`` on ``a`` (first number on top)."""
        return cls(a=deque(Node(number) for number in numbers))

    def numbers_a(self) -> list[int]:
        """Numbers on stack ``a`` from top to bottom."""
        return [node.number for node in self.a]

    def numbers_b(self) -> list[int]:
        """Numbers on stack ``b`` from top to bottom."""
        return [node.number for node in self.b]

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        _swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self._record("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record("rrr")

    def apply(self, operation: str) -> None:
        """Perform the operation called ``operation``."""
        if operation not in _OPERATIONS:
            raise ValueError(f"unknown operation: {operation!r}")
        getattr(self, operation)()


_OPERATIONS = frozenset(
    {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
)