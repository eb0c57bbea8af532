"""A doubly linked list of integers, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(eq=False)
class _Node:
    value: int
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A list that can grow and shrink at both ends."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def push_front(self, value: int) -> None:
        """Insert ``value`` at the beginning."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Insert ``value`` at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first value."""
        node = self._head
        if node is None:
            raise IndexError("pop from empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def pop_back(self) -> int:
        """Remove and return the last value."""
        node = self._tail
        if node is None:
            raise IndexError("pop from empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class _BadInput(Exception):
    pass


def _read_ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise _BadInput(f"not a number: {token!r}") from None


def _ask(tokens: Iterator[int], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return next(tokens)


_MENU = """
--- Doubly Linked List ---
1. Insert at beginning
2. Insert at end
3. Delete from beginning
4. Delete from end
5. Traversal from beginning
6. Traversal from end
7. Display from both sides
8. Count
9. Exit"""


def _show(label: str, values: Iterator[int], items: DoublyLinkedList) -> None:
    if len(items):
        print(f"{label}: " + " ".join(map(str, values)))
    else:
        print("List is empty")


def _session(tokens: Iterator[int]) -> None:
    items = DoublyLinkedList()
    while True:
        print(_MENU)
        match _ask(tokens, "Enter choice: "):
            case 1:
                items.push_front(_ask(tokens, "Enter element: "))
            case 2:
                items.push_back(_ask(tokens, "Enter element: "))
            case 3:
                if len(items):
                    items.pop_front()
                    print("Deleted from beginning")
                else:
                    print("List is empty")
            case 4:
                if not len(items):
                    print("List is empty")
                else:
                    was_single = len(items) == 1
                    items.pop_back()
                    if not was_single:
                        print("Deleted from end")
            case 5:
                _show("Forward traversal", iter(items), items)
            case 6:
                _show("Reverse traversal", reversed(items), items)
            case 7:
                _show("Forward traversal", iter(items), items)
                _show("Reverse traversal", reversed(items), items)
            case 8:
                print(f"Number of elements = {len(items)}")
            case 9:
                return
            case _:
                print("Invalid choice")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the doubly linked list menu on standard input."""
    argparse.ArgumentParser(description="Interactive doubly linked list.").parse_args(argv)
    try:
        _session(_read_ints(sys.stdin))
    except StopIteration:
        return 0
    except _BadInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0