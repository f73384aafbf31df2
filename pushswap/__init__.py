"""Solver and checker for the push_swap two-stack sorting puzzle."""

__version__ = "0.1.0"

__all__ = [
    "bounded",
    "chars",
    "cli",
    "linkedlist",
    "memory",
    "output",
    "parsing",
    "solver",
    "stacks",
    "text",
]