"""Red-black tree of unique, ordered keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A tree node holding one key."""

    key: Any
    color: Color = Color.BLACK
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)
    parent: RBNode | None = field(default=None, repr=False)


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


def _is_black(node: RBNode | None) -> bool:
    return node is None or node.color is Color.BLACK


class RedBlackTree:
    """A self-balancing binary search tree that rejects duplicate keys."""

    def __init__(self) -> None:
        self._root: RBNode | None = None
        self._count = 0

    @property
    def root(self) -> RBNode | None:
        return self._root

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    # ------------------------------------------------------------ lookup

    def _find(self, key: Any) -> RBNode | None:
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def search(self, key: Any) -> bool:
        """Return True if ``key`` is stored in the tree."""
        return self._find(key) is not None

    def __contains__(self, key: object) -> bool:
        try:
            return self.search(key)
        except TypeError:
            return False

    def minimum(self) -> Any:
        """Return the smallest key; raise ValueError if the tree is empty."""
        node = self._root
        if node is None:
            raise ValueError("minimum of an empty tree")
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """Return the largest key; raise ValueError if the tree is empty."""
        node = self._root
        if node is None:
            raise ValueError("maximum of an empty tree")
        while node.right is not None:
            node = node.right
        return node.key

    # --------------------------------------------------------- traversal

    def preorder(self) -> list[Any]:
        result: list[Any] = []

        def walk(node: RBNode | None) -> None:
            if node is not None:
                result.append(node.key)
                walk(node.left)
                walk(node.right)

        walk(self._root)
        return result

    def inorder(self) -> list[Any]:
        result: list[Any] = []

        def walk(node: RBNode | None) -> None:
            if node is not None:
                walk(node.left)
                result.append(node.key)
                walk(node.right)

        walk(self._root)
        return result

    def postorder(self) -> list[Any]:
        result: list[Any] = []

        def walk(node: RBNode | None) -> None:
            if node is not None:
                walk(node.left)
                walk(node.right)
                result.append(node.key)

        walk(self._root)
        return result

    def describe(self) -> str:
        """Return one line per node giving its colour and place under its parent."""
        lines: list[str] = []

        def walk(node: RBNode | None, parent_key: Any, direction: int) -> None:
            if node is None:
                return
            if direction == 0:
                lines.append(f"{node.key:2}(B) is root\n")
            else:
                color = "R" if _is_red(node) else "B"
                side = "right" if direction == 1 else "left"
                lines.append(f"{node.key:2}({color}) is {parent_key:2}'s {side:>6} child\n")
            walk(node.left, node.key, -1)
            walk(node.right, node.key, 1)

        if self._root is not None:
            walk(self._root, self._root.key, 0)
        return "".join(lines)

    # --------------------------------------------------------- rotations

    def _left_rotate(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x.parent.left is x:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, y: RBNode) -> None:
        x = y.left
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    # --------------------------------------------------------- insertion

    def insert(self, key: Any) -> RBNode:
        """Insert ``key``; raise ValueError if it is already present."""
        if self._find(key) is not None:
            raise ValueError(f"key {key!r} already in tree")
        node = RBNode(key)
        parent: RBNode | None = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if key < current.key else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        node.color = Color.RED
        self._insert_fixup(node)
        self._count += 1
        return node

    def _insert_fixup(self, node: RBNode) -> None:
        while (parent := node.parent) is not None and _is_red(parent):
            gparent = parent.parent
            if parent is gparent.left:
                uncle = gparent.right
                if _is_red(uncle):
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    continue
                if parent.right is node:
                    self._left_rotate(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._right_rotate(gparent)
            else:
                uncle = gparent.left
                if _is_red(uncle):
                    uncle.color = Color.BLACK
                    parent.color = Color.BLACK
                    gparent.color = Color.RED
                    node = gparent
                    continue
                if parent.left is node:
                    self._right_rotate(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                gparent.color = Color.RED
                self._left_rotate(gparent)
        self._root.color = Color.BLACK

    # ---------------------------------------------------------- deletion

    def delete(self, key: Any) -> bool:
        """Remove ``key`` if present; return whether anything was removed."""
        node = self._find(key)
        if node is None:
            return False
        self._delete_node(node)
        self._count -= 1
        return True

    def _delete_node(self, node: RBNode) -> None:
        if node.left is not None and node.right is not None:
            replace = node.right
            while replace.left is not None:
                replace = replace.left
            if node.parent is not None:
                if node.parent.left is node:
                    node.parent.left = replace
                else:
                    node.parent.right = replace
            else:
                self._root = replace
            child = replace.right
            parent = replace.parent
            color = replace.color
            if parent is node:
                parent = replace
            else:
                if child is not None:
                    child.parent = parent
                parent.left = child
                replace.right = node.right
                node.right.parent = replace
            replace.parent = node.parent
            replace.color = node.color
            replace.left = node.left
            node.left.parent = replace
            if color is Color.BLACK:
                self._delete_fixup(child, parent)
            return

        child = node.left if node.left is not None else node.right
        parent = node.parent
        color = node.color
        if child is not None:
            child.parent = parent
        if parent is not None:
            if parent.left is node:
                parent.left = child
            else:
                parent.right = child
        else:
            self._root = child
        if color is Color.BLACK:
            self._delete_fixup(child, parent)

    def _delete_fixup(self, node: RBNode | None, parent: RBNode | None) -> None:
        while _is_black(node) and node is not self._root:
            if parent.left is node:
                other = parent.right
                if _is_red(other):
                    other.color = Color.BLACK
                    parent.color = Color.RED
                    self._left_rotate(parent)
                    other = parent.right
                if _is_black(other.left) and _is_black(other.right):
                    other.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(other.right):
                        other.left.color = Color.BLACK
                        other.color = Color.RED
                        self._right_rotate(other)
                        other = parent.right
                    other.color = parent.color
                    parent.color = Color.BLACK
                    other.right.color = Color.BLACK
                    self._left_rotate(parent)
                    node = self._root
                    break
            else:
                other = parent.left
                if _is_red(other):
                    other.color = Color.BLACK
                    parent.color = Color.RED
                    self._right_rotate(parent)
                    other = parent.left
                if _is_black(other.left) and _is_black(other.right):
                    other.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(other.left):
                        other.right.color = Color.BLACK
                        other.color = Color.RED
                        self._left_rotate(other)
                        other = parent.left
                    other.color = parent.color
                    parent.color = Color.BLACK
                    other.left.color = Color.BLACK
                    self._right_rotate(parent)
                    node = self._root
                    break
        if node is not None:
            node.color = Color.BLACK