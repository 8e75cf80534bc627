"""A doubly linked list with in-place bubble sorting."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    item: T
    next: Optional["_Node[T]"] = None
    prev: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A doubly linked list of items."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in iterable:
            self.append(item)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, item: T) -> None:
        """Add an item at the end."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    def insert_sorted(self, item: T) -> None:
        """Add an item at the end, then sort the whole list."""
        self.append(item)
        self.sort()

    def sort(self) -> None:
        """Sort the items in place, ascending, with a stable bubble sort."""
        if self._head is None:
            return
        swapped = True
        while swapped:
            swapped = False
            for node in self._nodes():
                following = node.next
                if following is None:
                    break
                if node.item > following.item:  # type: ignore[operator]
                    node.item, following.item = following.item, node.item
                    swapped = True

    def remove(self, item: Any) -> bool:
        """Remove the first item equal to ``item``; return whether one was found."""
        found = next((node for node in self._nodes() if node.item == item), None)
        if found is None:
            return False
        if found.prev is None:
            self._head = found.next
        else:
            found.prev.next = found.next
        if found.next is None:
            self._tail = found.prev
        else:
            found.next.prev = found.prev
        found.next = found.prev = None
        self._size -= 1
        return True

    def __getitem__(self, index: int) -> T:
        position = operator.index(index)
        if position >= 0:
            for count, node in enumerate(self._nodes()):
                if count == position:
                    return node.item
        raise IndexError("item not found in list")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.item for node in self._nodes())

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"