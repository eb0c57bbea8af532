"""A bounded first-in first-out queue, with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from typing import TextIO

DEFAULT_CAPACITY = 5


class QueueFullError(OverflowError):
    """Raised when adding to a queue that is at capacity."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[int] = deque()

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self.full:
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

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
--- Circular Queue ---
1. Insert
2. Delete
3. Display
4. Count
5. Exit"""


def _session(tokens: Iterator[int]) -> None:
    queue = CircularQueue()
    while True:
        print(_MENU)
        match _ask(tokens, "Enter choice: "):
            case 1:
                if queue.full:
                    print("Queue is full")
                else:
                    queue.enqueue(_ask(tokens, "Enter element: "))
            case 2:
                try:
                    print(f"Deleted element: {queue.dequeue()}")
                except QueueEmptyError:
                    print("Queue is empty")
            case 3:
                if len(queue):
                    print("Queue elements: " + " ".join(map(str, queue)))
                else:
                    print("Queue is empty")
            case 4:
                print(f"Count = {len(queue)}")
            case 5:
                return
            case _:
                print("Invalid choice")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the circular queue menu on standard input."""
    argparse.ArgumentParser(description="Interactive circular queue.").parse_args(argv)
    try:
        _session(_read_ints(sys.stdin))
    except StopIteration:
        return 0
    except _BadInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0