"""A singly linked list with head, tail and positional insertion."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["LinkedList"]

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("item", "next")

    def __init__(self, item: T, next_node: Optional[_Node[T]] = None) -> None:
        self.item = item
        self.next = next_node


class LinkedList(Generic[T]):
    """Singly linked list; new items go to the head unless placed otherwise."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            for item in reversed(list(items)):
                self.push(item)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _unlink(self, prev: Optional[_Node[T]], node: _Node[T]) -> T:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1
        return node.item

    def push(self, item: T) -> None:
        """Insert *item* at the head."""
        self._head = _Node(item, self._head)
        self._size += 1

    def find(self, predicate: Callable[[T], Any]) -> Optional[T]:
        """Return the first item for which *predicate* is true, or None."""
        for item in self:
            if predicate(item):
                return item
        return None

    def find_pop(self, predicate: Callable[[T], Any]) -> Optional[T]:
        """Remove and return the first item matching *predicate*, or None."""
        prev: Optional[_Node[T]] = None
        for node in self._nodes():
            if predicate(node.item):
                return self._unlink(prev, node)
            prev = node
        return None

    def _locate(self, index: int) -> tuple[Optional[_Node[T]], _Node[T]]:
        if index < 0:
            raise IndexError(f"negative index {index}")
        prev: Optional[_Node[T]] = None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return prev, node
            prev = node
        raise IndexError(f"index {index} out of range for length {self._size}")

    def get(self, index: int) -> T:
        """Return the item at *index*; raise IndexError when out of range."""
        return self._locate(index)[1].item

    def pop(self, index: int) -> T:
        """Remove and return the item at *index*; raise IndexError when out of range."""
        prev, node = self._locate(index)
        return self._unlink(prev, node)

    def front_of(self, item: Optional[T] = None) -> Optional[T]:
        """Return the item just before *item* (the same object), or the last item when *item* is None."""
        node = self._head
        if node is None:
            return None
        if item is None:
            while node.next is not None:
                node = node.next
            return node.item
        while node.next is not None and node.next.item is not item:
            node = node.next
        return node.item if node.next is not None else None

    def append(self, item: T) -> None:
        """Insert *item* at the tail."""
        new = _Node(item)
        if self._head is None:
            self._head = new
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = new
        self._size += 1

    def insert(self, index: int, item: T) -> None:
        """Insert *item* at *index*; an index past the end appends at the tail."""
        if index < 0:
            raise ValueError(f"negative index {index}")
        if self._head is None or index == 0:
            self.push(item)
            return
        node = self._head
        while node.next is not None and index > 1:
            index -= 1
            node = node.next
        node.next = _Node(item, node.next)
        self._size += 1

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.item

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"