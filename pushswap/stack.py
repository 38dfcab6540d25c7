"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """One number on a stack together with the sorter's bookkeeping."""

    num: int
    index: int = -1
    current: int = 0
    target: int = 0
    exit: int = 0
    cost: int = 0


def swap(stack: list[Node]) -> bool:
    """Exchange the two top elements; False if there are fewer than two."""
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def push(dst: list[Node], src: list[Node]) -> bool:
    """Move the top of src onto dst; False if src is empty."""
    if not src:
        return False
    dst.insert(0, src.pop(0))
    return True


def rotate(stack: list[Node]) -> bool:
    """Move the top element to the bottom; False if the stack is empty."""
    if not stack:
        return False
    stack.append(stack.pop(0))
    return True


def reverse_rotate(stack: list[Node]) -> bool:
    """Move the bottom element to the top; False if the stack is empty."""
    if not stack:
        return False
    stack.insert(0, stack.pop())
    return True


class Stacks:
    """Stacks a and b (top first) that record every operation performed."""

    def __init__(
        self,
        a: Iterable[Node] | None = None,
        b: Iterable[Node] | None = None,
        emit: Callable[[str], object] | None = None,
    ) -> None:
        self.a: list[Node] = list(a) if a is not None else []
        self.b: list[Node] = list(b) if b is not None else []
        self.emit = emit
        self.moves: list[str] = []

    def _record(self, name: str) -> None:
        self.moves.append(name)
        if self.emit is not None:
            self.emit(name)

    def sa(self) -> None:
        if self.a and swap(self.a):
            self._record("sa")

    def sb(self) -> None:
        if self.b and swap(self.b):
            self._record("sb")

    def ss(self) -> None:
        if self.a and self.b and swap(self.a) and swap(self.b):
            self._record("ss")

    def pa(self) -> None:
        if self.b and push(self.a, self.b):
            self._record("pa")

    def pb(self) -> None:
        if self.a and push(self.b, self.a):
            self._record("pb")

    def ra(self) -> None:
        if self.a and rotate(self.a):
            self._record("ra")

    def rb(self) -> None:
        if self.b and rotate(self.b):
            self._record("rb")

    def rr(self) -> None:
        if self.a and self.b and rotate(self.a) and rotate(self.b):
            self._record("rr")

    def rra(self) -> None:
        if self.a and reverse_rotate(self.a):
            self._record("rra")

    def rrb(self) -> None:
        if self.b and reverse_rotate(self.b):
            self._record("rrb")

    def rrr(self) -> None:
        if self.a and self.b and reverse_rotate(self.a) and reverse_rotate(self.b):
            self._record("rrr")

    def numbers(self, which: str) -> list[int]:
        """Return the numbers of stack "a" or "b", top first."""
        stacks = {"a": self.a, "b": self.b}
        if which not in stacks:
            raise ValueError(f"unknown stack: {which!r}")
        return [node.num for node in stacks[which]]


def build_stacks(numbers: Iterable[int], sorted_values: Sequence[int]) -> Stacks:
    """Put the numbers on stack a, each tagged with its rank in sorted_values."""
    positions: dict[int, int] = {}
    for position, value in enumerate(sorted_values):
        positions.setdefault(value, position)
    return Stacks(a=[Node(num, positions.get(num, -1)) for num in numbers])