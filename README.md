# pushswap

A solver and a checker for the push_swap sorting puzzle.

Two stacks, **a** and **b**, are given. Stack **a** starts with a list of
distinct integers; **b** starts empty. The goal is to leave **a** sorted in
ascending order (smallest on top) and **b** empty, using only these
operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both down by one (bottom goes to top) |

## Installation

```
pip install .
```

## Solving

`push_swap` takes the numbers either as separate arguments or as one
space-separated argument, and prints one operation per line:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Input that is already sorted produces no operations.

Errors:

- Non-integers, values outside the 32-bit signed range and duplicates print
  `Error` on standard error and exit with status 1.
- A single argument that is empty or holds only spaces prints `Error` on
  standard output and exits with status 1.
- With no arguments nothing is printed and the exit status is 1.

## Checking

`checker` takes the same arguments, reads operations from standard input, one
per line, applies them, and prints `OK` (in green) if **a** ends up sorted
with **b** empty, `KO` (in red) otherwise. A line that is not exactly an
operation name followed by a newline prints `Error` on standard output and is
skipped; checking goes on with the next line.

```
push_swap 3 2 1 | checker 3 2 1
```

Argument errors are reported as for `push_swap`.

## Library use

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks, parse_operation

numbers = [3, 2, 1]
operations = solve(numbers)

stacks = Stacks(numbers)
for op in operations:
    stacks.apply(op)
assert stacks.is_solved()
print(stacks.render())
```

- `pushswap.solver.solve(numbers)` returns a list of `Operation` values that
  sort the numbers; it raises `ValueError` when the numbers are not distinct.
  `pushswap.solver.sort_three(stacks)` sorts a three-element stack **a** in
  place.
- `pushswap.stacks.Stacks` holds the deques `a` and `b` and a `history` of
  applied operations. `apply` takes an `Operation` or its name, `apply_all`
  takes several, `is_solved` reports whether **a** is sorted and **b** empty,
  and `render` shows both stacks side by side.
- `pushswap.stacks.parse_operation` reads a name such as `"ra"` or `"ra\n"`;
  `pushswap.stacks.is_sorted` checks a sequence is non-decreasing.
- `pushswap.parsing.parse_arguments` turns command-line style arguments into
  a list of integers and raises `pushswap.parsing.InputError` on bad input.
- `pushswap.cli.run_checker(numbers, commands, out)` applies command lines to
  the numbers, writes `OK` or `KO` to `out` and returns whether the result is
  solved.

The package also carries small helper modules with C library semantics:
`chars` (character classes and case conversion), `text` and `bounded`
(string conversion, search, splitting and size-bounded copying), `memory`
(byte buffer operations), `linkedlist` (a singly linked list) and `output`
(`printf`-style formatting with the `c s d i u x X p %` conversions and
plain writers).

## Running the tests

```
pip install .[test]
pytest
```