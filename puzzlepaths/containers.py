"""A first-in first-out queue and a last-in first-out stack."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from .linkedlist import DoublyLinkedList

T = TypeVar("T")


class Queue(Generic[T]):
    """Elements leave in the order they arrived.

    Passing another queue copies it, keeping its order.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        if isinstance(items, Queue):
            items = items._items
        self._items: DoublyLinkedList[T] = DoublyLinkedList(items)

    def enqueue(self, elem: T) -> None:
        """Add an element at the back."""
        self._items.insert_at_rear(elem)

    def dequeue(self) -> T:
        """Remove and return the element at the front."""
        return self._items.remove_from_front()

    def front(self) -> T:
        """Return the element at the front without removing it."""
        return self._items.first()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Report whether the queue holds no elements."""
        return self._items.is_empty()


class Stack(Generic[T]):
    """Elements leave in the reverse of the order they arrived.

    Items given to the constructor are pushed in order, so the last one ends
    on top; passing another stack copies it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        if isinstance(items, Stack):
            items = items._items
        self._items: DoublyLinkedList[T] = DoublyLinkedList(items)

    def push(self, elem: T) -> None:
        """Put an element on top."""
        self._items.insert_at_rear(elem)

    def pop(self) -> T:
        """Remove and return the element on top."""
        return self._items.remove_from_rear()

    def top(self) -> T:
        """Return the element on top without removing it."""
        return self._items.last()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Report whether the stack holds no elements."""
        return self._items.is_empty()