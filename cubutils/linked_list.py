"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Release = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list; iteration yields the stored values in order."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert a value at the front and give its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append a value at the end and give its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, release: Release = None) -> None:
        """Remove every element, passing each value to ``release`` first if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every value in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> LinkedList:
        """A new list of ``func(value)`` for every value.

        If ``func`` raises, the values already produced are passed to
        ``release`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(release)
            raise
        return result