"""The push_swap sorting strategy: small cases and the cheapest-insertion sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Node, Stacks


def is_sorted(nodes: Iterable[Node]) -> bool:
    """True if the numbers run in ascending order from top to bottom."""
    previous: Node | None = None
    for node in nodes:
        if previous is not None and previous.number > node.number:
            return False
        previous = node
    return True


def assign_indices(nodes: Iterable[Node]) -> None:
    """Give every node its rank among the numbers, starting from 0."""
    for rank, node in enumerate(sorted(nodes, key=lambda n: n.number)):
        node.index = rank


def set_positions(nodes: Iterable[Node]) -> None:
    """Record each node's distance from the top of its stack."""
    for position, node in enumerate(nodes):
        node.pos = position


def lowest_index_position(nodes: Sequence[Node]) -> int:
    """Position of the node holding the lowest index."""
    if not nodes:
        raise ValueError("empty stack")
    set_positions(nodes)
    return min(nodes, key=lambda n: n.index).pos


def find_target(nodes: Sequence[Node], index: int) -> int:
    """Position in ``nodes`` where a node with ``index`` belongs.

    That is the position of the node with the smallest index above
    ``index``, or, if there is none, of the node with the smallest index.
    Positions must already be set.
    """
    if not nodes:
        raise ValueError("empty stack")
    larger = [node for node in nodes if node.index > index]
    return min(larger or nodes, key=lambda n: n.index).pos


def assign_targets(stacks: Stacks) -> None:
    """Set, for every node on ``b``, the position on ``a`` it belongs at."""
    if not stacks.a or not stacks.b:
        return
    set_positions(stacks.a)
    set_positions(stacks.b)
    for node in stacks.b:
        node.target = find_target(stacks.a, node.index)


def _rotation_cost(position: int, size: int) -> int:
    if position > size // 2:
        return -(size - position)
    return position


def assign_costs(stacks: Stacks) -> None:
    """Set the rotations of ``a`` and ``b`` each node on ``b`` needs.

    Positive costs are forward rotations, negative ones reverse rotations.
    """
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for node in stacks.b:
        node.cost_b = _rotation_cost(node.pos, size_b)
        node.cost_a = _rotation_cost(node.target, size_a)


def do_move(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    """Rotate both stacks by the given costs, then push from ``b`` to ``a``."""
    if cost_a < 0 and cost_b < 0:
        while cost_a < 0 and cost_b < 0:
            cost_a += 1
            cost_b += 1
            stacks.rrr()
    elif cost_a > 0 and cost_b > 0:
        while cost_a > 0 and cost_b > 0:
            cost_a -= 1
            cost_b -= 1
            stacks.rr()
    while cost_a > 0:
        stacks.ra()
        cost_a -= 1
    while cost_a < 0:
        stacks.rra()
        cost_a += 1
    while cost_b > 0:
        stacks.rb()
        cost_b -= 1
    while cost_b < 0:
        stacks.rrb()
        cost_b += 1
    stacks.pa()


def cheapest_move(stacks: Stacks) -> None:
    """Move the node on ``b`` that costs the fewest rotations onto ``a``."""
    if not stacks.b:
        return
    best = min(stacks.b, key=lambda n: abs(n.cost_a) + abs(n.cost_b))
    do_move(stacks, best.cost_a, best.cost_b)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three nodes by index."""
    highest = max(node.index for node in stacks.a)
    if stacks.a[0].index == highest:
        stacks.ra()
    elif stacks.a[1].index == highest:
        stacks.rra()
    if stacks.a[0].index > stacks.a[1].index:
        stacks.sa()


def push_init(stacks: Stacks) -> None:
    """Push all but three nodes to ``b``, lower half first on large stacks."""
    size = len(stacks.a)
    pushes = 0
    seen = 0
    while size > 6 and seen < size and pushes < size // 2:
        if stacks.a[0].index <= size // 2:
            stacks.pb()
            pushes += 1
        else:
            stacks.ra()
        seen += 1
    while size - pushes > 3:
        stacks.pb()
        pushes += 1


def rotate_to_lowest(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until its lowest index is on top."""
    size = len(stacks.a)
    lowest = lowest_index_position(stacks.a)
    if lowest > size // 2:
        for _ in range(size - lowest):
            stacks.rra()
    else:
        for _ in range(lowest):
            stacks.ra()


def sort_large(stacks: Stacks) -> None:
    """Sort a stack ``a`` of more than three nodes."""
    push_init(stacks)
    sort_three(stacks)
    while stacks.b:
        assign_targets(stacks)
        assign_costs(stacks)
        cheapest_move(stacks)
    if not is_sorted(stacks.a):
        rotate_to_lowest(stacks)


def push_swap(numbers: Iterable[int]) -> list[str]:
    """Return the operations that sort ``numbers`` (first number on top)."""
    stacks = Stacks.from_numbers(numbers)
    assign_indices(stacks.a)
    size = len(stacks.a)
    if size >= 2 and not is_sorted(stacks.a):
        if size == 2:
            stacks.sa()
        elif size == 3:
            sort_three(stacks)
        else:
            sort_large(stacks)
    return list(stacks.operations)