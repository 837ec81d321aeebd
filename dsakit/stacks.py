"""Linked-list stack and queue, and stack reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Link:
    value: int
    next: Optional[_Link] = None


class LinkedStack:
    """A stack kept as a singly linked list; the head is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value; raises ``IndexError`` when empty."""
        if self._top is None:
            raise IndexError("stack underflow")
        link = self._top
        self._top = link.next
        self._size -= 1
        return link.value

    def peek(self) -> int:
        """Return the top value; raises ``IndexError`` when empty."""
        if self._top is None:
            raise IndexError("peek at an empty stack")
        return self._top.value

    def is_empty(self) -> bool:
        """Return whether the stack holds no values."""
        return self._top is None

    def display(self) -> str:
        """Return the values from top to bottom joined by ``' -> '``.

        Raises ``IndexError`` when the stack is empty.
        """
        if self._top is None:
            raise IndexError("stack underflow")
        return " -> ".join(str(value) for value in self)

    def __iter__(self) -> Iterator[int]:
        link = self._top
        while link is not None:
            yield link.value
            link = link.next

    def __len__(self) -> int:
        return self._size


class LinkedQueue:
    """A FIFO queue kept as a singly linked list with front and rear links."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._front: Optional[_Link] = None
        self._rear: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear."""
        link = _Link(value)
        if self._rear is None:
            self._front = self._rear = link
        else:
            self._rear.next = link
            self._rear = link
        self._size += 1

    def dequeue(self) -> Optional[int]:
        """Remove and return the front value, or ``None`` if the queue is empty."""
        if self._front is None:
            return None
        link = self._front
        self._front = link.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return link.value

    def front(self) -> Optional[int]:
        """Return the front value, or ``None`` if the queue is empty."""
        return None if self._front is None else self._front.value

    def rear(self) -> Optional[int]:
        """Return the rear value, or ``None`` if the queue is empty."""
        return None if self._rear is None else self._rear.value

    def __iter__(self) -> Iterator[int]:
        link = self._front
        while link is not None:
            yield link.value
            link = link.next

    def __len__(self) -> int:
        return self._size


def insert_at_bottom(stack: MutableSequence[int], value: int) -> None:
    """Place ``value`` under every item of ``stack`` (whose top is its end)."""
    stack.insert(0, value)


def reverse_stack(stack: MutableSequence[int]) -> None:
    """Reverse ``stack`` in place using only pops and bottom insertions."""
    held = []
    while stack:
        held.append(stack.pop())
    for value in reversed(held):
        insert_at_bottom(stack, value)