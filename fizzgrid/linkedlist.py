"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func`` applied to each content, in order."""
        if func is None:
            raise TypeError("a mapping function is required")
        return LinkedList(func(content) for content in self)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first if given."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None