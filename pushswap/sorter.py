"""Sorting stack a with the fewest operations the cost heuristic finds."""

from __future__ import annotations

from collections.abc import Iterable

from .args import sort_values
from .stack import Node, Stacks, build_stacks

INT_MAX = 2**31 - 1


def find_smaller(stack: list[Node]) -> int:
    """Return the smallest number on the stack, or INT_MAX if it is empty."""
    return min((node.num for node in stack), default=INT_MAX)


def calculate_current(stack: list[Node]) -> None:
    """Record in every node its position counted from the top."""
    for position, node in enumerate(stack):
        node.current = position


def calculate_target(stacks: Stacks) -> None:
    """Give each node of b the number in a that it should sit above.

    The target is the smallest number in a that is greater than the node's
    number; when there is none, it is the smallest number in a.
    """
    for node in stacks.b:
        target = INT_MAX
        found = False
        for candidate in stacks.a:
            if node.num < candidate.num < target:
                target = candidate.num
                found = True
        node.target = target if found else find_smaller(stacks.a)


def calculate_exit(stacks: Stacks) -> None:
    """Count the rotations that bring each node to the top of its stack.

    Nodes of b get one more, for the push that moves them onto a.
    """
    for stack, extra in ((stacks.a, 0), (stacks.b, 1)):
        size = len(stack)
        for node in stack:
            if node.current > size // 2:
                node.exit = size - node.current + extra
            else:
                node.exit = node.current + extra


def calculate_cost(stacks: Stacks) -> None:
    """Set the cost of each node of b: its own exit plus its target's."""
    for node in stacks.b:
        for candidate in stacks.a:
            if candidate.num == node.target:
                node.cost = candidate.exit + node.exit


def find_cheaper(stack: list[Node]) -> int:
    """Return the lowest cost on the stack.

    As it walks the stack, every node's cost is replaced by the lowest cost
    seen so far, so the first node holding the result is the cheapest one.
    """
    cheaper = -1
    for node in stack:
        if node.current == 0:
            cheaper = node.cost
        if node.cost < cheaper:
            cheaper = node.cost
        node.cost = cheaper
    return cheaper


def push_to_b(stacks: Stacks, median: int) -> None:
    """Push the top of a onto b, sending numbers above the median to b's bottom."""
    had_nodes = bool(stacks.b)
    stacks.pb()
    if had_nodes and stacks.b[0].num > median:
        stacks.rb()


def make_move_a(stacks: Stacks, target: int) -> None:
    """Rotate a, the shorter way round, until target is on top."""
    position = next(
        (index for index, node in enumerate(stacks.a) if node.num == target), None
    )
    if position is None:
        raise ValueError(f"{target} is not on stack a")
    forward = position <= len(stacks.a) // 2
    while stacks.a[0].num != target:
        if forward:
            stacks.ra()
        else:
            stacks.rra()
        calculate_current(stacks.a)


def make_move_b(stacks: Stacks, cost: int) -> None:
    """Bring the first node of b with the given cost to the top of b."""
    chosen = next((node for node in stacks.b if node.cost == cost), None)
    if chosen is None:
        return
    while chosen.current != 0:
        if chosen.current < len(stacks.b) // 2:
            stacks.rb()
        else:
            stacks.rrb()
        calculate_current(stacks.b)


def move_smaller(stacks: Stacks) -> None:
    """Rotate the sorted cycle on a until its smallest number is on top."""
    smaller = find_smaller(stacks.a)
    previous = stacks.a[0]
    while previous.index != 0:
        previous = stacks.a[0]
        if previous.index > len(stacks.a) // 2:
            stacks.ra()
        else:
            stacks.rra()
        calculate_current(stacks.a)
        if stacks.a[0].num == smaller:
            break


def _top_three(stack: list[Node]) -> tuple[int, int, int]:
    first, second, third = (node.num for node in stack[:3])
    return first, second, third


def sort_three(stacks: Stacks) -> None:
    """Sort the three numbers on top of a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a holds fewer than three numbers")
    first, second, third = _top_three(stacks.a)
    if first < second < third:
        return
    if first < second:
        if first < third:
            stacks.rra()
            stacks.sa()
        else:
            stacks.rra()
    first, second, third = _top_three(stacks.a)
    if first > second:
        if first < third:
            stacks.sa()
        elif second < third:
            stacks.ra()
        else:
            stacks.sa()
            stacks.rra()


def sort_nums(stacks: Stacks, median: int) -> None:
    """Sort more than three numbers by pushing to b and inserting back cheaply."""
    while len(stacks.a) > 3:
        push_to_b(stacks, median)
    sort_three(stacks)
    while stacks.b:
        calculate_current(stacks.a)
        calculate_current(stacks.b)
        calculate_target(stacks)
        calculate_exit(stacks)
        calculate_cost(stacks)
        make_move_b(stacks, find_cheaper(stacks.b))
        make_move_a(stacks, stacks.b[0].target)
        stacks.pa()
    calculate_current(stacks.a)
    move_smaller(stacks)


def sort_stacks(stacks: Stacks, median: int) -> None:
    """Sort stack a, choosing the strategy by its size."""
    size = len(stacks.a)
    if size < 2:
        return
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    else:
        sort_nums(stacks, median)


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the operations that sort the numbers; none if already sorted.

    Raises ArgumentError when a number appears twice.
    """
    numbers = list(numbers)
    ordered = sort_values(numbers)
    if numbers == ordered:
        return []
    stacks = build_stacks(numbers, ordered)
    sort_stacks(stacks, ordered[len(ordered) // 2])
    return stacks.moves