"""A disjoint-set forest over the elements 1..n, with an interactive menu."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .graphs import _ask, _menu, _run


class DisjointSet:
    """Sets of the elements 1..size, each starting on its own.

    Union links the second representative under the first; find follows
    parent links without compressing them.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = {element: element for element in range(1, size + 1)}

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if x not in self._parent:
            raise ValueError(f"element {x} is not in 1..{len(self._parent)}")
        while self._parent[x] != x:
            x = self._parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already merged."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return False
        self._parent[y] = x
        return True

    def parents(self) -> dict[int, int]:
        """Return a mapping from each element to its parent."""
        return dict(self._parent)


def _session(tokens: Iterator[int]) -> None:
    sets = DisjointSet(_ask(tokens, "Enter number of elements: "))

    def find() -> None:
        print(f"Set representative: {sets.find(_ask(tokens, 'Enter element: '))}")

    def union() -> None:
        a = _ask(tokens, "Enter two elements: ")
        print("Union done" if sets.union(a, next(tokens)) else "Already in same set")

    def display() -> None:
        print("Element : Parent")
        for element, parent in sets.parents().items():
            print(f"{element} : {parent}")

    _menu(tokens, "Disjoint Set",
          {"Find": find, "Union": union, "Display": display, "Exit": None},
          errors=(ValueError,))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the disjoint-set menu on standard input."""
    return _run(argv, "Interactive disjoint sets.", _session, eof_status=0)