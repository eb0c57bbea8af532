"""Graph traversals and minimum spanning trees over adjacency matrices.

Vertices are numbered from 1: row ``i - 1`` of a matrix describes vertex ``i``.
In a cost matrix 0 means "no edge"; weights of ``NO_EDGE`` or more are never
chosen. The console helpers shared by the package's commands live here too.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, TextIO

NO_EDGE = 999

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """An edge chosen for a spanning tree."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a minimum spanning tree, in the order they were chosen."""

    edges: tuple[Edge, ...]
    cost: int


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def _check_start(adjacency: Matrix, start: int) -> None:
    n = _size(adjacency)
    if not 1 <= start <= n:
        raise ValueError(f"vertex {start} is not in 1..{n}")


def _neighbours(adjacency: Matrix, vertex: int) -> list[int]:
    return [w for w, flag in enumerate(adjacency[vertex - 1], start=1) if flag == 1]


def bfs(adjacency: Matrix, start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order.

    Only entries equal to 1 count as edges.
    """
    _check_start(adjacency, start)
    order = [start]
    seen = {start}
    queue = deque(order)
    while queue:
        for w in _neighbours(adjacency, queue.popleft()):
            if w not in seen:
                seen.add(w)
                order.append(w)
                queue.append(w)
    return order


def dfs(adjacency: Matrix, start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order.

    Neighbours are explored in ascending order; only entries equal to 1 count.
    """
    _check_start(adjacency, start)
    order: list[int] = []
    seen: set[int] = set()

    def visit(vertex: int) -> None:
        seen.add(vertex)
        order.append(vertex)
        for w in _neighbours(adjacency, vertex):
            if w not in seen:
                visit(w)

    visit(start)
    return order


def _weights(cost: Matrix) -> tuple[list[list[int]], int]:
    n = _size(cost)
    return [[NO_EDGE if w == 0 else w for w in row] for row in cost], n


def _cheapest(weights: list[list[int]],
              usable: Callable[[int, int], bool]) -> tuple[int, int, int]:
    """Return (weight, i, j) of the cheapest usable edge, first in row-major order."""
    best = min(
        (
            (w, i, j)
            for i, row in enumerate(weights, start=1)
            for j, w in enumerate(row, start=1)
            if w < NO_EDGE and usable(i, j)
        ),
        default=None,
    )
    if best is None:
        raise ValueError("graph is not connected")
    return best


def _tree(edges: list[Edge]) -> SpanningTree:
    return SpanningTree(tuple(edges), sum(edge.weight for edge in edges))


def kruskal(cost: Matrix) -> SpanningTree:
    """Build a minimum spanning tree by repeatedly taking the cheapest edge.

    Raises ValueError if the graph is not connected.
    """
    weights, n = _weights(cost)
    parent: dict[int, int] = {}

    def root(vertex: int) -> int:
        while vertex in parent:
            vertex = parent[vertex]
        return vertex

    edges: list[Edge] = []
    while len(edges) < n - 1:
        w, a, b = _cheapest(weights, lambda i, j: True)
        ra, rb = root(a), root(b)
        if ra != rb:
            parent[rb] = ra
            edges.append(Edge(a, b, w))
        weights[a - 1][b - 1] = weights[b - 1][a - 1] = NO_EDGE
    return _tree(edges)


def prim(cost: Matrix) -> SpanningTree:
    """Build a minimum spanning tree by growing it outward from vertex 1.

    Raises ValueError if the graph is not connected.
    """
    weights, n = _weights(cost)
    visited = {1}
    edges: list[Edge] = []
    while len(edges) < n - 1:
        w, u, v = _cheapest(weights, lambda i, j: i in visited and j not in visited)
        edges.append(Edge(u, v, w))
        visited.add(v)
    return _tree(edges)


class _BadInput(Exception):
    """Standard input held something other than an integer."""


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


def _show(values: Iterable[int]) -> str:
    return " ".join(map(str, values))


def _menu(tokens: Iterator[int], title: str,
          actions: Mapping[str, Optional[Callable[[], object]]],
          errors: tuple[type[Exception], ...] = ()) -> None:
    """Offer ``actions`` as a numbered menu until an entry without action is chosen."""
    labels = list(actions)
    text = "\n".join([f"\n--- {title} ---",
                      *(f"{number}. {label}" for number, label in enumerate(labels, start=1))])
    while True:
        print(text)
        choice = _ask(tokens, "Enter choice: ")
        if not 1 <= choice <= len(labels):
            print("Invalid choice")
            continue
        action = actions[labels[choice - 1]]
        if action is None:
            return
        try:
            action()
        except errors as exc:
            print(f"Error: {exc}")


def _run(argv: Sequence[str] | None, description: str,
         session: Callable[[Iterator[int]], None], *, eof_status: int = 1) -> int:
    argparse.ArgumentParser(description=description).parse_args(argv)
    try:
        session(_read_ints(sys.stdin))
    except StopIteration:
        if eof_status:
            print("error: unexpected end of input", file=sys.stderr)
        return eof_status
    except (_BadInput, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _read_matrix(tokens: Iterator[int], heading: str) -> list[list[int]]:
    n = _ask(tokens, "Enter number of vertices: ")
    print(heading)
    return [[next(tokens) for _ in range(n)] for _ in range(n)]


def _traversal_session(name: str, traverse: Callable[[Matrix, int], list[int]]):
    def session(tokens: Iterator[int]) -> None:
        adjacency = _read_matrix(tokens, "Enter adjacency matrix:")
        start = _ask(tokens, "Enter starting vertex: ")
        print(f"{name} traversal: {_show(traverse(adjacency, start))}")

    return session


def _spanning_session(build: Callable[[Matrix], SpanningTree]):
    def session(tokens: Iterator[int]) -> None:
        tree = build(_read_matrix(tokens, "Enter cost adjacency matrix (0 for no edge):"))
        print("\nEdges in Minimum Spanning Tree:")
        for edge in tree.edges:
            print(f"{edge.u} - {edge.v} : {edge.weight}")
        print(f"Minimum cost = {tree.cost}")

    return session


def bfs_main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its breadth-first traversal."""
    return _run(argv, "Breadth-first traversal of a graph.", _traversal_session("BFS", bfs))


def dfs_main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its depth-first traversal."""
    return _run(argv, "Depth-first traversal of a graph.", _traversal_session("DFS", dfs))


def kruskal_main(argv: Sequence[str] | None = None) -> int:
    """Read a cost matrix and print a minimum spanning tree found by Kruskal's method."""
    return _run(argv, "Minimum spanning tree by Kruskal's algorithm.", _spanning_session(kruskal))


def prim_main(argv: Sequence[str] | None = None) -> int:
    """Read a cost matrix and print a minimum spanning tree found by Prim's method."""
    return _run(argv, "Minimum spanning tree by Prim's algorithm.", _spanning_session(prim))