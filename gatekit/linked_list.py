"""Doubly linked list with explicit node handles.

Nodes are owned by at most one list at a time, so a node can be removed
or used as a merge boundary in constant time once it is known.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListNode:
    """A value together with its links inside a :class:`LinkedList`."""

    __slots__ = ("value", "next", "prev", "_owner")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: ListNode | None = None
        self.prev: ListNode | None = None
        self._owner: LinkedList | None = None

    def _detach(self) -> None:
        self.next = None
        self.prev = None
        self._owner = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """A doubly linked list that tracks its head, tail and length."""

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._count = 0

    def _claim(self, node: Any) -> ListNode:
        if not isinstance(node, ListNode):
            node = ListNode(node)
        if node._owner is not None:
            raise ValueError(f"{node!r} already belongs to a list")
        node._owner = self
        return node

    def add_head(self, node: Any) -> ListNode:
        """Insert ``node`` (or a value, wrapped in a node) at the front."""
        node = self._claim(node)
        node.prev = None
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._count += 1
        return node

    def add_tail(self, node: Any) -> ListNode:
        """Insert ``node`` (or a value, wrapped in a node) at the back."""
        node = self._claim(node)
        node.next = None
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1
        return node

    def remove(self, node: ListNode) -> None:
        """Unlink ``node`` from this list."""
        if not self._count or not isinstance(node, ListNode) or node._owner is not self:
            raise ValueError(f"{node!r} is not in this list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node._detach()
        self._count -= 1

    def first(self) -> ListNode | None:
        return self._head

    def last(self) -> ListNode | None:
        return self._tail

    def __len__(self) -> int:
        return self._count

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            previous = node.prev
            yield node.value
            node = previous

    def nth(self, index: int) -> ListNode:
        """Return the node at 1-based ``index``, walking from the nearer end."""
        if index < 1 or index > self._count:
            raise IndexError(f"index {index} outside 1..{self._count}")
        if index <= self._count // 2:
            node = self._head
            for _ in range(index - 1):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._count - index):
                node = node.prev
        return node

    def clear(self) -> None:
        """Remove every node."""
        for node in list(self.nodes()):
            node._detach()
        self._head = None
        self._tail = None
        self._count = 0

    def merge(self, other: LinkedList) -> None:
        """Move all nodes of ``other`` onto the end of this list."""
        if other is self:
            raise ValueError("cannot merge a list into itself")
        if other._head is None:
            return
        for node in other.nodes():
            node._owner = self
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
            other._head.prev = self._tail
        self._tail = other._tail
        self._count += other._count
        other._head = None
        other._tail = None
        other._count = 0

    def merge_range(self, start: ListNode, end: ListNode, other: LinkedList) -> None:
        """Append the run ``start``..``end`` of ``other`` and drop the rest of it.

        ``other`` is left empty; nodes outside the run are discarded.
        """
        if other is self:
            raise ValueError("cannot merge a list into itself")
        for node in (start, end):
            if not isinstance(node, ListNode) or node._owner is not other:
                raise ValueError(f"{node!r} is not in the list being merged")
        run = 0
        node: ListNode | None = start
        while node is not None:
            run += 1
            if node is end:
                break
            node = node.next
        else:
            raise ValueError("end node does not follow start node")

        for dropped in list(other.nodes()):
            if dropped is start:
                break
            dropped._detach()
        dropped = end.next
        while dropped is not None:
            following = dropped.next
            dropped._detach()
            dropped = following

        start.prev = None
        end.next = None
        other._head = start
        other._tail = end
        other._count = run
        self.merge(other)