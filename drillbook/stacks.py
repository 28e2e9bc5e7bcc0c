"""A fixed-capacity stack and small stack-based algorithms."""

from __future__ import annotations


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack that holds at most capacity values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put value on top; raises StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raises StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def push_at_bottom(stack: list[int], value: int) -> list[int]:
    """Place value beneath every item of a list used as a stack (top at the end).

    The list is changed in place and also returned.
    """
    stack.insert(0, value)
    return stack


_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_brackets(text: str) -> bool:
    """Tell whether every bracket in text closes in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so other characters make the text invalid.
    """
    pending: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            pending.append(ch)
        elif not pending or _PAIRS.get(ch) != pending[-1]:
            return False
        else:
            pending.pop()
    return not pending