"""A singly linked list that grows at its head, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list with insertion and removal at the head."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        """Insert ``value`` at the beginning."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

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
--- Singly Linked List ---
1. Insert
2. Delete
3. Traverse
4. Count
5. Exit"""


def _session(tokens: Iterator[int]) -> None:
    items = LinkedList()
    while True:
        print(_MENU)
        match _ask(tokens, "Enter choice: "):
            case 1:
                items.push(_ask(tokens, "Enter element: "))
            case 2:
                try:
                    items.pop()
                except IndexError:
                    print("List is empty")
                else:
                    print("Deleted successfully")
            case 3:
                if len(items):
                    print("List elements: " + "".join(f"{v} -> " for v in items) + "NULL")
                else:
                    print("List is empty")
            case 4:
                print(f"Number of elements = {len(items)}")
            case 5:
                return
            case _:
                print("Invalid choice")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the singly linked list menu on standard input."""
    argparse.ArgumentParser(description="Interactive singly linked list.").parse_args(argv)
    try:
        _session(_read_ints(sys.stdin))
    except StopIteration:
        return 0
    except _BadInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0