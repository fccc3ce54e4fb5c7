"""A doubly linked list with an internal cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

OUT_OF_BOUNDS = "Out of Bounds Exception"


class DoublyLinkedListError(IndexError):
    """Raised when a list operation has no element to work on."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class _Node(Generic[T]):
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: _Node[T] | None = None
        self.prev: _Node[T] | None = None


class DoublyLinkedList(Generic[T]):
    """A sequence of nodes linked both ways, with a movable cursor.

    ``first``, ``last``, ``next``, ``previous`` and ``find`` move the cursor;
    ``remove_current`` removes the element under it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._current: _Node[T] | None = None
        self._size = 0
        for item in items:
            self.insert_at_rear(item)

    def insert_at_front(self, elem: T) -> None:
        """Add an element before the first one."""
        node = _Node(elem)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def insert_at_rear(self, elem: T) -> None:
        """Add an element after the last one."""
        node = _Node(elem)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def remove_from_front(self) -> T:
        """Remove and return the first element."""
        node = self._head
        if node is None:
            raise DoublyLinkedListError("remove from empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        if self._current is node:
            self._current = None
        self._size -= 1
        return node.data

    def remove_from_rear(self) -> T:
        """Remove and return the last element."""
        node = self._tail
        if node is None:
            raise DoublyLinkedListError("remove from empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        if self._current is node:
            self._current = None
        self._size -= 1
        return node.data

    def remove_current(self) -> T:
        """Remove and return the element under the cursor.

        The cursor moves to the following element when the first one is
        removed, and to the preceding element otherwise.
        """
        node = self._current
        if node is None:
            raise DoublyLinkedListError("no current element")
        if node is self._head:
            self._current = node.next
            return self.remove_from_front()
        if node is self._tail:
            self._current = node.prev
            return self.remove_from_rear()
        self._current = node.prev
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def remove(self, elem: T) -> bool:
        """Remove every occurrence of an element; report whether any was."""
        removed = False
        self._current = self._head
        while self._current is not None:
            if self._current.data == elem:
                self.remove_current()
                removed = True
            else:
                self._current = self._current.next
        return removed

    def first(self) -> T:
        """Move the cursor to the first element and return it."""
        if self._head is None:
            raise DoublyLinkedListError("list is empty")
        self._current = self._head
        return self._head.data

    def last(self) -> T:
        """Move the cursor to the last element and return it."""
        if self._tail is None:
            raise DoublyLinkedListError("list is empty")
        self._current = self._tail
        return self._tail.data

    def next(self) -> T:
        """Advance the cursor one element and return the new element."""
        if self._current is None or self._current.next is None:
            raise DoublyLinkedListError("no next element")
        self._current = self._current.next
        return self._current.data

    def previous(self) -> T:
        """Move the cursor back one element and return the new element."""
        if self._current is None or self._current.prev is None:
            raise DoublyLinkedListError("no previous element")
        self._current = self._current.prev
        return self._current.data

    def find(self, elem: T) -> bool:
        """Report whether an element is present, leaving the cursor on it."""
        self._current = self._head
        while self._current is not None:
            if self._current.data == elem:
                return True
            self._current = self._current.next
        return False

    def at(self, pos: int) -> T:
        """Return the element at a zero-based position."""
        if pos < 0 or pos >= self._size:
            raise DoublyLinkedListError(OUT_OF_BOUNDS)
        node = self._head
        for _ in range(pos):
            assert node is not None
            node = node.next
        assert node is not None
        return node.data

    def __getitem__(self, pos: int) -> T:
        return self.at(pos)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def is_empty(self) -> bool:
        """Report whether the list holds no elements."""
        return self._size == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"