"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO

from pushswap.parsing import InputError, parse_arguments, split_arguments
from pushswap.solver import solve
from pushswap.stacks import Operation, Stacks

GREEN = "\033[0;32m"
RED = "\033[0;31m"
RESET = "\033[0m"


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its newline if it had one."""
    yield from iter(stream.readline, "")


def _command(line: str) -> Optional[Operation]:
    """The operation a line names; it must be exactly the name and a newline."""
    if not line.endswith("\n"):
        return None
    try:
        return Operation(line[:-1])
    except ValueError:
        return None


def run_checker(
    numbers: Iterable[int],
    commands: Iterable[str],
    out: Optional[TextIO] = None,
) -> bool:
    """Apply command lines to the numbers and report OK or KO.

    Each command is a line including its newline. An unknown command
    writes ``Error`` and is skipped. Returns True when the stacks end up
    solved.
    """
    stream = sys.stdout if out is None else out
    stacks = Stacks(numbers)
    for line in commands:
        operation = _command(line)
        if operation is None:
            stream.write("Error\n")
        else:
            stacks.apply(operation)
    solved = stacks.is_solved()
    if solved:
        stream.write(f"{GREEN}OK\n{RESET}")
    else:
        stream.write(f"{RED}KO\n{RESET}")
    return solved


def _load_numbers(argv: Sequence[str]) -> Optional[List[int]]:
    """Parse arguments, reporting errors the way the commands do."""
    if not argv:
        return None
    try:
        tokens = split_arguments(argv)
    except InputError:
        sys.stdout.write("Error\n")
        return None
    try:
        return parse_arguments(tokens)
    except InputError:
        sys.stderr.write("Error\n")
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    numbers = _load_numbers(args)
    if numbers is None:
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in solve(numbers)))
    return 0


def checker_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and check they sort the arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    numbers = _load_numbers(args)
    if numbers is None:
        return 1
    run_checker(numbers, read_lines(sys.stdin), sys.stdout)
    return 0