"""A binary tree filled in level order, with an interactive menu."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Optional

from .bst import _inorder, _Node, _postorder, _preorder
from .graphs import _ask, _menu, _run, _show


class BinaryTree:
    """A binary tree whose new nodes take the first free place in level order."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def _level_order(self) -> Iterator[tuple[_Node, Optional[_Node]]]:
        """Yield (node, parent) pairs in breadth-first order."""
        queue: deque[tuple[_Node, Optional[_Node]]] = deque()
        if self._root is not None:
            queue.append((self._root, None))
        while queue:
            node, parent = queue.popleft()
            yield node, parent
            queue.extend((child, node) for child in (node.left, node.right) if child is not None)

    def insert(self, value: int) -> None:
        """Place ``value`` in the first free child slot in level order."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        for node, _ in self._level_order():
            if node.left is None:
                node.left = new
                return
            if node.right is None:
                node.right = new
                return

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it is not in the tree.

        The last node in level order holding ``key`` takes the value of the
        deepest, rightmost node, which is then removed.
        """
        order = list(self._level_order())
        matches = [node for node, _ in order if node.value == key]
        if not matches:
            return False
        deepest, parent = order[-1]
        matches[-1].value = deepest.value
        if parent is None:
            self._root = None
        elif parent.left is deepest:
            parent.left = None
        else:
            parent.right = None
        return True

    def inorder(self) -> Iterator[int]:
        """Yield the left subtree, then the node, then the right subtree."""
        return _inorder(self._root)

    def preorder(self) -> Iterator[int]:
        """Yield each node before its left and then its right subtree."""
        return _preorder(self._root)

    def postorder(self) -> Iterator[int]:
        """Yield each node after its left and then its right subtree."""
        return _postorder(self._root)


def _session(tokens: Iterator[int]) -> None:
    tree = BinaryTree()

    def delete() -> None:
        key = _ask(tokens, "Enter element to delete: ")
        if tree._root is None:
            print("Tree empty")
        else:
            print("Node deleted" if tree.delete(key) else "Element not found")

    _menu(tokens, "Binary Tree", {
        "Insert": lambda: tree.insert(_ask(tokens, "Enter element to insert: ")),
        "Inorder": lambda: print(_show(tree.inorder())),
        "Preorder": lambda: print(_show(tree.preorder())),
        "Postorder": lambda: print(_show(tree.postorder())),
        "Delete": delete,
        "Exit": None,
    })


def main(argv: Sequence[str] | None = None) -> int:
    """Run the binary tree menu on standard input."""
    return _run(argv, "Interactive binary tree.", _session, eof_status=0)