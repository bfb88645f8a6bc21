"""Binary tree traversals, a binary search tree and a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BinaryNode:
    """A node of a binary tree."""

    value: Any
    left: BinaryNode | None = None
    right: BinaryNode | None = None


def _inorder(node: BinaryNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: BinaryNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: BinaryNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(node: BinaryNode | None) -> list[Any]:
    """Values in left, node, right order."""
    return list(_inorder(node))


def preorder(node: BinaryNode | None) -> list[Any]:
    """Values in node, left, right order."""
    return list(_preorder(node))


def postorder(node: BinaryNode | None) -> list[Any]:
    """Values in left, right, node order."""
    return list(_postorder(node))


def _leftmost(node: BinaryNode) -> BinaryNode:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: BinaryNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        new = BinaryNode(value)
        self._size += 1
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if node.value > value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        node = self.root
        while node is not None:
            if node.value == key:
                return True
            node = node.right if node.value < key else node.left
        return False

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; tell whether one was found."""
        self.root, removed = self._delete(self.root, key)
        if removed:
            self._size -= 1
        return removed

    @classmethod
    def _delete(cls, node: BinaryNode | None, key: Any) -> tuple[BinaryNode | None, bool]:
        if node is None:
            return None, False
        if node.value < key:
            node.right, removed = cls._delete(node.right, key)
            return node, removed
        if node.value > key:
            node.left, removed = cls._delete(node.left, key)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right, _ = cls._delete(node.right, successor.value)
        return node, True

    def inorder(self) -> list[Any]:
        """Stored values in ascending order."""
        return inorder(self.root)

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class _AVLNode(BinaryNode):
    height: int = 1


def _height(node: BinaryNode | None) -> int:
    return node.height if isinstance(node, _AVLNode) else 0


def _balance(node: _AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: _AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    assert isinstance(x, _AVLNode)
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    assert isinstance(y, _AVLNode)
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _AVLNode) -> _AVLNode:
    _update(node)
    bf = _balance(node)
    if bf > 1:
        if _balance(node.left) < 0:  # type: ignore[arg-type]
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if bf < -1:
        if _balance(node.right) > 0:  # type: ignore[arg-type]
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


class AVLTree:
    """Height-balanced binary search tree holding distinct keys."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: _AVLNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> bool:
        """Add ``key``; tell whether it was new."""
        self.root, added = self._insert(self.root, key)
        if added:
            self._size += 1
        return added

    @classmethod
    def _insert(cls, node: _AVLNode | None, key: Any) -> tuple[_AVLNode, bool]:
        if node is None:
            return _AVLNode(key), True
        if key < node.value:
            node.left, added = cls._insert(node.left, key)  # type: ignore[arg-type]
        elif key > node.value:
            node.right, added = cls._insert(node.right, key)  # type: ignore[arg-type]
        else:
            return node, False
        _update(node)
        bf = _balance(node)
        if bf > 1 and key < node.left.value:  # type: ignore[union-attr]
            return _rotate_right(node), added
        if bf < -1 and key > node.right.value:  # type: ignore[union-attr]
            return _rotate_left(node), added
        if bf > 1 and key > node.left.value:  # type: ignore[union-attr]
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
            return _rotate_right(node), added
        if bf < -1 and key < node.right.value:  # type: ignore[union-attr]
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
            return _rotate_left(node), added
        return node, added

    def delete(self, key: Any) -> bool:
        """Remove ``key``; tell whether it was present."""
        self.root, removed = self._delete(self.root, key)
        if removed:
            self._size -= 1
        return removed

    @classmethod
    def _delete(cls, node: _AVLNode | None, key: Any) -> tuple[_AVLNode | None, bool]:
        if node is None:
            return None, False
        if node.value > key:
            node.left, removed = cls._delete(node.left, key)  # type: ignore[arg-type]
        elif node.value < key:
            node.right, removed = cls._delete(node.right, key)  # type: ignore[arg-type]
        else:
            removed = True
            if node.left is None:
                return node.right, True  # type: ignore[return-value]
            if node.right is None:
                return node.left, True  # type: ignore[return-value]
            successor = _leftmost(node.right)
            node.value = successor.value
            node.right, _ = cls._delete(node.right, successor.value)  # type: ignore[arg-type]
        return _rebalance(node), removed

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def inorder(self) -> list[Any]:
        return inorder(self.root)

    @property
    def height(self) -> int:
        return _height(self.root)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.value:
                return True
            node = node.left if key < node.value else node.right  # type: ignore[operator,assignment]
        return False

    def __len__(self) -> int:
        return self._size