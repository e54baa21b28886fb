"""A circular doubly-linked list with consistency checking.

Nodes are placed in a list explicitly, so one node can be moved between
lists or unlinked from whatever list holds it without knowing which list
that is. Every list has a sentinel head; a list is empty when the head
points back at itself.
"""

from __future__ import annotations

from typing import Any, Iterator

__all__ = ["ListCorruptError", "ListNode", "LinkedList", "check_node"]


class ListCorruptError(Exception):
    """Raised when the forward and backward links of a list disagree."""


class ListNode:
    """An entry of a linked list carrying an arbitrary value."""

    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: ListNode | None = None
        self.prev: ListNode | None = None

    @property
    def linked(self) -> bool:
        """Whether the node is currently in a list."""
        return self.next is not None

    def unlink(self) -> None:
        """Remove the node from the list that holds it."""
        if self.next is None or self.prev is None:
            raise ValueError("node is not in a list")
        self.next.prev = self.prev
        self.prev.next = self.next
        self.next = self.prev = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _corrupt(abortstr: str | None, head: ListNode, node: ListNode, count: int) -> None:
    if abortstr:
        raise ListCorruptError(
            f"{abortstr}: prev corrupt in node {node!r} ({count}) of {head!r}"
        )
    return None


def check_node(node: ListNode, abortstr: str | None = None) -> ListNode | None:
    """Check the list holding ``node`` for consistency.

    Returns the node when every backward link matches the forward links.
    Otherwise returns None, or raises ListCorruptError when ``abortstr`` is
    given, naming it in the message.
    """
    if node.next is None:
        raise ValueError("node is not in a list")
    count = 0
    p = node
    n = node.next
    while n is not node:
        count += 1
        if n is None or n.prev is not p:
            return _corrupt(abortstr, node, n, count)
        p, n = n, n.next
    if node.prev is not p:
        return _corrupt(abortstr, node, node, 0)
    return node


class LinkedList:
    """A circular doubly-linked list of ListNode entries."""

    def __init__(self) -> None:
        self._head = ListNode()
        self._init_head()

    def _init_head(self) -> None:
        self._head.next = self._head
        self._head.prev = self._head

    @staticmethod
    def _as_node(node: ListNode | Any) -> ListNode:
        if not isinstance(node, ListNode):
            node = ListNode(node)
        if node.linked:
            raise ValueError(f"{node!r} is already in a list")
        return node

    def add(self, node: ListNode | Any) -> ListNode:
        """Insert an entry at the start of the list and return its node."""
        node = self._as_node(node)
        head = self._head
        node.next = head.next
        node.prev = head
        head.next.prev = node
        head.next = node
        return node

    def add_tail(self, node: ListNode | Any) -> ListNode:
        """Insert an entry at the end of the list and return its node."""
        node = self._as_node(node)
        head = self._head
        node.next = head
        node.prev = head.prev
        head.prev.next = node
        head.prev = node
        return node

    def is_empty(self) -> bool:
        """Whether the list has no entries."""
        return self._head.next is self._head

    def _contains(self, node: ListNode) -> bool:
        i = self._head.next
        while i is not self._head:
            if i is node:
                return True
            i = i.next
        return False

    def remove(self, node: ListNode) -> None:
        """Remove a node that is known to be in this list."""
        if self.is_empty():
            raise ValueError("cannot remove from an empty list")
        if node is self._head or not self._contains(node):
            raise ValueError(f"{node!r} is not in this list")
        node.unlink()

    def top(self) -> ListNode | None:
        """Return the first node, or None if the list is empty."""
        return None if self.is_empty() else self._head.next

    def tail(self) -> ListNode | None:
        """Return the last node, or None if the list is empty."""
        return None if self.is_empty() else self._head.prev

    def pop(self) -> ListNode | None:
        """Remove and return the first node, or None if the list is empty."""
        if self.is_empty():
            return None
        node = self._head.next
        node.unlink()
        return node

    def _neighbour(self, node: ListNode | None) -> ListNode | None:
        if node is None:
            raise ValueError("node is not in a list")
        return None if node is self._head else node

    def next(self, node: ListNode) -> ListNode | None:
        """Return the node after ``node``, or None if it is the last."""
        return self._neighbour(node.next)

    def prev(self, node: ListNode) -> ListNode | None:
        """Return the node before ``node``, or None if it is the first."""
        return self._neighbour(node.prev)

    def append_list(self, other: LinkedList) -> None:
        """Move every entry of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot append a list to itself")
        if other.is_empty():
            return
        first, last = other._head.next, other._head.prev
        to_tail = self._head.prev
        to_tail.next = first
        first.prev = to_tail
        last.next = self._head
        self._head.prev = last
        other._init_head()

    def prepend_list(self, other: LinkedList) -> None:
        """Move every entry of ``other`` to the start of this list."""
        if other is self:
            raise ValueError("cannot prepend a list to itself")
        if other.is_empty():
            return
        first, last = other._head.next, other._head.prev
        to_head = self._head.next
        self._head.next = first
        first.prev = self._head
        last.next = to_head
        to_head.prev = last
        other._init_head()

    def check(self, abortstr: str | None = None) -> LinkedList | None:
        """Return this list if its links are consistent, None otherwise.

        With ``abortstr`` given, an inconsistent list raises ListCorruptError.
        """
        if check_node(self._head, abortstr) is None:
            return None
        return self

    def __iter__(self) -> Iterator[Any]:
        # The next node is fetched before yielding, so the current entry may
        # be removed during iteration.
        node = self._head.next
        while node is not self._head:
            following = node.next
            yield node.value
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._head.prev
        while node is not self._head:
            preceding = node.prev
            yield node.value
            node = preceding

    def __len__(self) -> int:
        count = 0
        node = self._head.next
        while node is not self._head:
            count += 1
            node = node.next
        return count

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"