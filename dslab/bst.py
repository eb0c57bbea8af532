"""A binary search tree of integers, with an interactive menu."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from .graphs import _ask, _menu, _run, _show


@dataclass
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _inorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _insert(node: Optional[_Node], value: int) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    return node


def _delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.value:
        node.left = _delete(node.left, key)
    elif key > node.value:
        node.right = _delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


class BinarySearchTree:
    """An unbalanced binary search tree that ignores duplicate values."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: int) -> None:
        """Add ``value`` unless it is already present."""
        self._root = _insert(self._root, value)

    def __contains__(self, key: int) -> bool:
        node = self._root
        while node is not None and node.value != key:
            node = node.left if key < node.value else node.right
        return node is not None

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not in the tree.

        A node with two children takes the value of its in-order successor.
        """
        if key not in self:
            return False
        self._root = _delete(self._root, key)
        return True

    def inorder(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        return _inorder(self._root)

    def preorder(self) -> Iterator[int]:
        """Yield each node before its left and then its right subtree."""
        return _preorder(self._root)

    def postorder(self) -> Iterator[int]:
        """Yield each node after its left and then its right subtree."""
        return _postorder(self._root)


def _session(tokens: Iterator[int]) -> None:
    tree = BinarySearchTree()

    def find() -> None:
        key = _ask(tokens, "Enter element to find: ")
        print("Element found" if key in tree else "Element not found")

    _menu(tokens, "Binary Search Tree", {
        "Insert": lambda: tree.insert(_ask(tokens, "Enter element: ")),
        "Find": find,
        "Delete": lambda: tree.delete(_ask(tokens, "Enter element to delete: ")),
        "Inorder": lambda: print(_show(tree.inorder())),
        "Preorder": lambda: print(_show(tree.preorder())),
        "Postorder": lambda: print(_show(tree.postorder())),
        "Exit": None,
    })


def main(argv: Sequence[str] | None = None) -> int:
    """Run the binary search tree menu on standard input."""
    return _run(argv, "Interactive binary search tree.", _session, eof_status=0)