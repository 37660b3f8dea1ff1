"""A self-balancing binary search tree mapping string keys to string values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    key: str
    value: str
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_left(node: _Node) -> _Node:
    root = node.right
    assert root is not None
    node.right = root.left
    root.left = node
    _update(node)
    _update(root)
    return root


def _rotate_right(node: _Node) -> _Node:
    root = node.left
    assert root is not None
    node.left = root.right
    root.right = node
    _update(node)
    _update(root)
    return root


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: str, value: str) -> _Node:
    if node is None:
        return _Node(key, value)
    if key < node.key:
        node.left = _insert(node.left, key, value)
    elif key > node.key:
        node.right = _insert(node.right, key, value)
    else:
        node.value = value
        return node
    return _rebalance(node)


def _delete(node: _Node | None, key: str) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    else:
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            if child is None:
                return None
            node = child
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right = _delete(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """An ordered dictionary of strings kept as an AVL tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if key not in self:
            self._size += 1
        self._root = _insert(self._root, key, value)

    def search(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.value
        return None

    def delete(self, key: str) -> None:
        """Remove ``key`` and its value; a missing key is ignored."""
        if key in self:
            self._size -= 1
            self._root = _delete(self._root, key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when it is empty."""
        return _height(self._root)