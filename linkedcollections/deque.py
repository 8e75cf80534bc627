"""A double-ended queue built on doubly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    item: T
    next: Optional["_Node[T]"] = None
    prev: Optional["_Node[T]"] = None


class LinkedDeque(Generic[T]):
    """A double-ended queue; removing or reading from an empty one raises IndexError."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._front: Optional[_Node[T]] = None
        self._back: Optional[_Node[T]] = None
        self._size = 0
        for item in iterable:
            self.push_back(item)

    def push_front(self, item: T) -> None:
        """Add an item at the front."""
        node = _Node(item)
        if self._front is None:
            self._front = self._back = node
        else:
            node.next = self._front
            self._front.prev = node
            self._front = node
        self._size += 1

    def push_back(self, item: T) -> None:
        """Add an item at the back."""
        node = _Node(item)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            node.prev = self._back
            self._back = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the front item."""
        node = self._front
        if node is None:
            raise IndexError("deque is empty")
        self._front = node.next
        if self._front is None:
            self._back = None
        else:
            self._front.prev = None
        self._size -= 1
        return node.item

    def pop_back(self) -> T:
        """Remove and return the back item."""
        node = self._back
        if node is None:
            raise IndexError("deque is empty")
        self._back = node.prev
        if self._back is None:
            self._front = None
        else:
            self._back.next = None
        self._size -= 1
        return node.item

    def front(self) -> T:
        """Return the front item without removing it."""
        if self._front is None:
            raise IndexError("deque is empty")
        return self._front.item

    def back(self) -> T:
        """Return the back item without removing it."""
        if self._back is None:
            raise IndexError("deque is empty")
        return self._back.item

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.item
            node = node.next

    def __str__(self) -> str:
        return "Deque: " + " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"