"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterable, List, Sequence, Union

from pushswap.parsing import InputError


class Operation(Enum):
    """A puzzle operation, valued by its command name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` never decrease; an empty sequence is sorted."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def parse_operation(text: str) -> Operation:
    """Read a command such as ``"ra"`` or ``"ra\\n"``.

    Raises InputError for anything that is not one of the operations.
    """
    name = text[:-1] if text.endswith("\n") else text
    try:
        return Operation(name)
    except ValueError:
        raise InputError(f"unknown operation: {text!r}") from None


def _swap(stack: Deque[int]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(dest: Deque[int], src: Deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: Deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every applied operation is kept in ``history`` in the order applied.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(numbers)
        self.b: Deque[int] = deque()
        self.history: List[Operation] = []

    def apply(self, operation: Union[Operation, str]) -> None:
        """Perform one operation, given as an Operation or its name."""
        if not isinstance(operation, Operation):
            operation = parse_operation(operation)
        a, b = self.a, self.b
        if operation is Operation.SA:
            _swap(a)
        elif operation is Operation.SB:
            _swap(b)
        elif operation is Operation.SS:
            _swap(a)
            _swap(b)
        elif operation is Operation.PA:
            _push(a, b)
        elif operation is Operation.PB:
            _push(b, a)
        elif operation is Operation.RA:
            _rotate(a)
        elif operation is Operation.RB:
            _rotate(b)
        elif operation is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif operation is Operation.RRA:
            _reverse_rotate(a)
        elif operation is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.history.append(operation)

    def apply_all(self, operations: Sequence[Union[Operation, str]]) -> None:
        """Perform several operations in order."""
        for operation in operations:
            self.apply(operation)

    def is_solved(self) -> bool:
        """True when ``a`` is sorted and ``b`` is empty."""
        return is_sorted(self.a) and not self.b

    def render(self) -> str:
        """Show both stacks side by side, a tab between the columns."""
        lines = ["A ----- B\n"]
        a_items, b_items = list(self.a), list(self.b)
        for row in range(max(len(a_items), len(b_items))):
            left = f"{a_items[row]}\t" if row < len(a_items) else "\t"
            right = f"{b_items[row]}\n" if row < len(b_items) else "\n"
            lines.append(left + right)
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"