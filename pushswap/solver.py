"""Sorting strategy that turns a list of numbers into puzzle operations."""

from __future__ import annotations

from typing import Deque, Iterable, List, Tuple

from pushswap.stacks import Operation, Stacks, is_sorted


def _above_median(stack: Deque[int], value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _bring_to_top(
    stacks: Stacks,
    stack: Deque[int],
    value: int,
    forward: Operation,
    backward: Operation,
) -> None:
    """Rotate ``stack`` until ``value`` is on top, in the shorter direction."""
    operation = forward if _above_median(stack, value) else backward
    while stack[0] != value:
        stacks.apply(operation)


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` of three numbers with at most two operations."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.apply(Operation.RA)
    elif a[1] == biggest:
        stacks.apply(Operation.RRA)
    if a[0] > a[1]:
        stacks.apply(Operation.SA)


def _find_above(stack: Deque[int], target: int) -> int:
    """First value below ``target``, the bottom one excluded; else the top."""
    items = list(stack)
    for value in items[:-1]:
        if value < target:
            return value
    return items[0]


def _check_before_push(stacks: Stacks, target: int) -> None:
    a = stacks.a
    remaining = sum(1 for value in a if value < target)
    length = len(a)
    while length > 3 and remaining > 0 and not is_sorted(a):
        _bring_to_top(stacks, a, _find_above(a, target), Operation.RA, Operation.RRA)
        if a[0] < target:
            stacks.apply(Operation.PB)
            length -= 1
            remaining -= 1
        else:
            stacks.apply(Operation.RA)


def _move_b(stacks: Stacks) -> None:
    a = stacks.a
    size = len(a)
    while size > 3 and not is_sorted(a):
        size = len(a)
        low, high = min(a), max(a)
        _check_before_push(stacks, low + (high - low) // 2)


def _target_for(a: Deque[int], value: int) -> int:
    """The smallest number of ``a`` above ``value``, or the smallest overall."""
    larger = [candidate for candidate in a if candidate > value]
    return min(larger) if larger else min(a)


def _distance(stack: Deque[int], value: int) -> int:
    index = stack.index(value)
    return index if index <= len(stack) // 2 else len(stack) - index


def _cheapest(stacks: Stacks) -> Tuple[int, int]:
    """The first value of ``b`` whose move to ``a`` costs least, and its target."""
    a, b = stacks.a, stacks.b

    def cost(value: int) -> int:
        return _distance(b, value) + _distance(a, _target_for(a, value))

    cheap = min(b, key=cost)
    return cheap, _target_for(a, cheap)


def _move_nodes(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    cheap, target = _cheapest(stacks)
    cheap_up = _above_median(b, cheap)
    target_up = _above_median(a, target)
    if cheap_up and target_up:
        while a[0] != target and b[0] != cheap:
            stacks.apply(Operation.RR)
    elif not cheap_up and not target_up:
        while a[0] != target and b[0] != cheap:
            stacks.apply(Operation.RRR)
    _bring_to_top(stacks, b, cheap, Operation.RB, Operation.RRB)
    _bring_to_top(stacks, a, target, Operation.RA, Operation.RRA)
    stacks.apply(Operation.PA)


def _sort_all(stacks: Stacks) -> None:
    a = stacks.a
    size = len(a)
    if size > 3 and not is_sorted(a):
        stacks.apply(Operation.PB)
    size -= 1
    if size > 3 and not is_sorted(a):
        stacks.apply(Operation.PB)
    size -= 1
    if size > 3 and not is_sorted(a):
        _move_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _move_nodes(stacks)


def _push_swap(stacks: Stacks) -> None:
    a = stacks.a
    if len(a) == 2:
        stacks.apply(Operation.SA)
    elif len(a) == 3:
        sort_three(stacks)
    else:
        _sort_all(stacks)
    _bring_to_top(stacks, a, min(a), Operation.RA, Operation.RRA)


def solve(numbers: Iterable[int]) -> List[Operation]:
    """Return the operations that sort ``numbers`` onto stack ``a``.

    Raises ValueError when the numbers are not distinct.
    """
    values = list(numbers)
    if len(set(values)) != len(values):
        raise ValueError("numbers must be distinct")
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.apply(Operation.SA)
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            _push_swap(stacks)
    return list(stacks.history)