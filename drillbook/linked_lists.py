"""Singly, doubly and circular linked lists with positional edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain."""

    value: int
    next: Node | None = None


@dataclass(eq=False)
class _DoubleNode:
    value: int
    prev: _DoubleNode | None = None
    next: _DoubleNode | None = None


def reverse_in_groups(head: Node | None, k: int) -> Node | None:
    """Reverse a chain k nodes at a time; a short final group is reversed too.

    Returns the new head.
    """
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Node | None = None
    previous_group_tail: Node | None = None
    current = head
    while current is not None:
        group_tail = current
        reversed_head: Node | None = None
        count = 0
        while current is not None and count < k:
            following = current.next
            current.next = reversed_head
            reversed_head = current
            current = following
            count += 1
        if previous_group_tail is None:
            new_head = reversed_head
        else:
            previous_group_tail.next = reversed_head
        previous_group_tail = group_tail
    return new_head


class SinglyLinkedList:
    """A singly linked list with 1-based positional insertion and deletion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Add value before the first node."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add value after the last node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> Node:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at(self, position: int, value: int) -> None:
        """Insert value so that it ends up at the 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            before = self._node_at(position - 1)
            before.next = Node(value, before.next)
            self._size += 1

    def delete_at(self, position: int) -> int:
        """Remove the node at the 1-based position and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            assert self.head is not None
            node = self.head
            self.head = node.next
            if self.head is None:
                self._tail = None
        else:
            before = self._node_at(position - 1)
            node = before.next
            assert node is not None
            before.next = node.next
            if node is self._tail:
                self._tail = before
        node.next = None
        self._size -= 1
        return node.value

    def reverse_in_groups(self, k: int) -> None:
        """Reverse the list in place, k nodes at a time."""
        self.head = reverse_in_groups(self.head, k)
        node = self.head
        while node is not None and node.next is not None:
            node = node.next
        self._tail = node

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Add value before the first node."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add value after the last node."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _DoubleNode:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at(self, position: int, value: int) -> None:
        """Insert value so that it ends up at the 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            before = self._node_at(position - 1)
            after = before.next
            assert after is not None
            node = _DoubleNode(value, prev=before, next=after)
            before.next = node
            after.prev = node
            self._size += 1

    def delete_at(self, position: int) -> int:
        """Remove the node at the 1-based position and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class CircularLinkedList:
    """A circular singly linked list addressed through its tail node."""

    def __init__(self) -> None:
        self._tail: Node | None = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        if self._tail is None:
            return
        node = self._tail
        while True:
            yield node
            assert node.next is not None
            node = node.next
            if node is self._tail:
                return

    def insert_after(self, element: int, value: int) -> None:
        """Insert value after the first node holding element, searching from the tail.

        In an empty list the value becomes the only node whatever element is.
        """
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            anchor = next((n for n in self._nodes() if n.value == element), None)
            if anchor is None:
                raise ValueError(f"{element} is not in the list")
            node.next = anchor.next
            anchor.next = node
        self._size += 1

    def delete(self, value: int) -> None:
        """Remove the first node holding value, searching from the node after the tail."""
        if self._tail is None:
            raise ValueError("list is empty")
        previous = self._tail
        current = self._tail.next
        assert current is not None
        for _ in range(self._size):
            if current.value == value:
                break
            previous, current = current, current.next
            assert current is not None
        else:
            raise ValueError(f"{value} is not in the list")
        if current is previous:
            self._tail = None
        else:
            previous.next = current.next
            if current is self._tail:
                self._tail = previous
        current.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size