"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class Node:
    """One link of the list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with the head as its front."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Put content at the front; returns its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def push_back(self, content: Any) -> Node:
        """Put content at the back; returns its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Any:
        """The content of the last node."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node, passing its content to delete if given; returns the content."""
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to delete in order if given."""
        nodes = list(self._nodes())
        self.head = None
        self._tail = None
        for node in nodes:
            node.next = None
            if delete is not None:
                delete(node.content)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on each content from front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of func applied to each content.

        If func fails, the contents made so far are passed to delete and the
        error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result