from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.sorting import (
    assign_costs,
    assign_indices,
    assign_targets,
    cheapest_move,
    do_move,
    find_target,
    is_sorted,
    lowest_index_position,
    push_init,
    push_swap,
    rotate_to_lowest,
    set_positions,
    sort_large,
    sort_three,
)
from pushswap.stacks import Node, Stacks

distinct_ints = st.lists(
    st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, max_size=60
)


def _replay(numbers, operations):
    stacks = Stacks.from_numbers(numbers)
    for op in operations:
        stacks.apply(op)
    return stacks


def _indexed(numbers):
    stacks = Stacks.from_numbers(numbers)
    assign_indices(stacks.a)
    return stacks


def _nodes(numbers):
    return [Node(n) for n in numbers]


def test_is_sorted():
    assert is_sorted(_nodes([1, 2, 3]))
    assert not is_sorted(_nodes([1, 3, 2]))
    assert is_sorted([])


def test_assign_indices_are_ranks():
    nodes = _nodes([30, -5, 10, 7])
    assign_indices(nodes)
    ordered = sorted(nodes, key=lambda n: n.number)
    assert [n.index for n in ordered] == list(range(len(nodes)))


def test_set_positions():
    nodes = _nodes([9, 8, 7])
    set_positions(nodes)
    assert [n.pos for n in nodes] == [0, 1, 2]


def test_lowest_index_position():
    nodes = _nodes([5, 1, 9])
    assign_indices(nodes)
    assert lowest_index_position(nodes) == 1


def test_lowest_index_position_empty():
    with pytest.raises(ValueError):
        lowest_index_position([])


@given(distinct_ints.filter(lambda xs: len(xs) >= 1), st.integers(-1, 70))
def test_find_target_invariant(numbers, index):
    nodes = _nodes(numbers)
    assign_indices(nodes)
    set_positions(nodes)
    chosen = nodes[find_target(nodes, index)]
    larger = [n.index for n in nodes if n.index > index]
    if larger:
        assert chosen.index == min(larger)
    else:
        assert chosen.index == min(n.index for n in nodes)


def test_assign_targets_noop_when_b_empty():
    stacks = _indexed([3, 1, 2])
    assign_targets(stacks)
    assert all(n.target == 0 for n in stacks.a)
    assert stacks.operations == []


@given(distinct_ints.filter(lambda xs: len(xs) >= 4))
def test_costs_bring_node_to_top(numbers):
    stacks = _indexed(numbers)
    push_init(stacks)
    assign_targets(stacks)
    assign_costs(stacks)
    for node in stacks.b:
        assert abs(node.cost_b) <= len(stacks.b) // 2 + 1
        b = deque(stacks.b)
        b.rotate(-node.cost_b)
        assert b[0] is node
        a = deque(stacks.a)
        a.rotate(-node.cost_a)
        assert a[0].pos == node.target


def test_do_move_combines_rotations():
    stacks = _indexed([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.pb()
    stacks.operations.clear()
    do_move(stacks, 1, 2)
    assert stacks.operations == ["rr", "rb", "pa"]
    assert len(stacks.b) == 2


def test_do_move_reverse_both():
    stacks = _indexed([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.pb()
    stacks.operations.clear()
    do_move(stacks, -2, -1)
    assert stacks.operations == ["rrr", "rra", "pa"]


def test_cheapest_move_empty_b():
    stacks = _indexed([2, 1, 3])
    cheapest_move(stacks)
    assert stacks.operations == []


@given(distinct_ints.filter(lambda xs: len(xs) >= 4))
def test_cheapest_move_pushes_one(numbers):
    stacks = _indexed(numbers)
    push_init(stacks)
    before = len(stacks.b)
    assign_targets(stacks)
    assign_costs(stacks)
    cheapest_move(stacks)
    assert len(stacks.b) == before - 1
    assert stacks.operations[-1] == "pa"


@pytest.mark.parametrize(
    "numbers", [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]]
)
def test_sort_three(numbers):
    stacks = _indexed(numbers)
    sort_three(stacks)
    assert stacks.numbers_a() == sorted(numbers)
    assert len(stacks.operations) <= 2


@given(distinct_ints)
def test_push_init_leaves_three(numbers):
    stacks = _indexed(numbers)
    push_init(stacks)
    assert len(stacks.a) == min(3, len(numbers))
    assert set(stacks.operations) <= {"pb", "ra"}
    assert sorted(stacks.numbers_a() + stacks.numbers_b()) == sorted(numbers)


@given(distinct_ints.filter(lambda xs: len(xs) >= 1), st.integers(0, 59))
def test_rotate_to_lowest(numbers, shift):
    ordered = sorted(numbers)
    k = shift % len(ordered)
    stacks = _indexed(ordered[k:] + ordered[:k])
    rotate_to_lowest(stacks)
    assert stacks.numbers_a() == ordered
    assert len(set(stacks.operations)) <= 1
    assert len(stacks.operations) <= len(ordered) // 2 + 1


@given(distinct_ints.filter(lambda xs: len(xs) >= 4))
def test_sort_large(numbers):
    stacks = _indexed(numbers)
    sort_large(stacks)
    assert stacks.numbers_a() == sorted(numbers)
    assert not stacks.b


@given(distinct_ints)
def test_push_swap_sorts(numbers):
    result = _replay(numbers, push_swap(numbers))
    assert result.numbers_a() == sorted(numbers)
    assert result.numbers_b() == []


@given(distinct_ints)
def test_push_swap_sorted_input_needs_nothing(numbers):
    assert push_swap(sorted(numbers)) == []


def test_push_swap_two():
    assert push_swap([2, 1]) == ["sa"]