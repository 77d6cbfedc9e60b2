"""An unbalanced binary search tree keyed by a user-supplied key function."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

__all__ = ["SearchTree"]

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("item", "key", "left", "right")

    def __init__(self, item: T, key: Any) -> None:
        self.item = item
        self.key = key
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


class SearchTree(Generic[T]):
    """Binary search tree holding items with unique keys."""

    def __init__(self, key: Callable[[T], Any] | None = None) -> None:
        self._key = key
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def _key_of(self, item: T) -> Any:
        return item if self._key is None else self._key(item)

    def _find(self, key: Any) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        parent = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        return node, parent

    def add(self, item: T) -> bool:
        """Insert *item*; return False and leave the tree alone if its key exists."""
        key = self._key_of(item)
        if self._root is None:
            self._root = _Node(item, key)
            self._size = 1
            return True
        node = self._root
        while True:
            if key == node.key:
                return False
            if key < node.key:
                if node.left is None:
                    node.left = _Node(item, key)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(item, key)
                    break
                node = node.right
        self._size += 1
        return True

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the item stored under *key*, or *default*."""
        node, _ = self._find(key)
        return default if node is None else node.item

    def remove(self, key: Any) -> bool:
        """Remove the item stored under *key*; return whether one was removed."""
        node, parent = self._find(key)
        if node is None:
            return False
        if node.left is None or node.right is None:
            replacement = node.left if node.left is not None else node.right
        else:
            succ_parent, replacement = node, node.right
            while replacement.left is not None:
                succ_parent, replacement = replacement, replacement.left
            if succ_parent is not node:
                succ_parent.left = replacement.right
                replacement.right = node.right
            replacement.left = node.left
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._size = 0

    def __contains__(self, key: Any) -> bool:
        return self._find(key)[0] is not None

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def __len__(self) -> int:
        return self._size