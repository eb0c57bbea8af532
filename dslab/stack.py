"""A last-in first-out stack of integers, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


class Stack:
    """A last-in first-out stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


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
--- Stack using Linked List ---
1. Push
2. Pop
3. Traverse
4. Count
5. Exit"""


def _session(tokens: Iterator[int]) -> None:
    stack = Stack()
    while True:
        print(_MENU)
        match _ask(tokens, "Enter choice: "):
            case 1:
                stack.push(_ask(tokens, "Enter element: "))
                print("Pushed successfully")
            case 2:
                try:
                    stack.pop()
                except IndexError:
                    print("Stack is empty")
                else:
                    print("Popped successfully")
            case 3:
                if len(stack):
                    print("Stack elements: " + " ".join(map(str, stack)))
                else:
                    print("Stack is empty")
            case 4:
                print(f"Number of elements = {len(stack)}")
            case 5:
                return
            case _:
                print("Invalid choice")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the stack menu on standard input."""
    argparse.ArgumentParser(description="Interactive stack.").parse_args(argv)
    try:
        _session(_read_ints(sys.stdin))
    except StopIteration:
        return 0
    except _BadInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0