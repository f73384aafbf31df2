"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of a linked list."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the beginning and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Insert ``content`` at the end and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, passing each content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on every content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``f(content)`` for every content.

        If ``f`` raises, the contents already produced are handed to
        ``delete`` before the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result