"""Set operations on sets written as bit strings over a common universe."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .graphs import _ask, _run, _show


def _pairs(a: Sequence[int], b: Sequence[int]) -> Iterator[tuple[int, int]]:
    if len(a) != len(b):
        raise ValueError("bit strings must have the same length")
    return zip(a, b)


def bit_union(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the elementwise OR of two bit strings."""
    return [x | y for x, y in _pairs(a, b)]


def bit_intersection(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the elementwise AND of two bit strings."""
    return [x & y for x, y in _pairs(a, b)]


def bit_difference(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return A - B: bits set in ``a`` and clear in ``b``."""
    return [x & ~y for x, y in _pairs(a, b)]


def _session(tokens: Iterator[int]) -> None:
    n = _ask(tokens, "Enter number of elements in universal set: ")
    print("Enter bit string for Set A:")
    a = [next(tokens) for _ in range(n)]
    print("Enter bit string for Set B:")
    b = [next(tokens) for _ in range(n)]
    print()
    for label, bits in (
        ("Set A", a),
        ("Set B", b),
        ("Union", bit_union(a, b)),
        ("Intersection", bit_intersection(a, b)),
        ("Difference (A - B)", bit_difference(a, b)),
    ):
        print(f"{label}: {_show(bits)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Read two bit strings from standard input and print their set operations."""
    return _run(argv, "Set operations on bit strings.", _session)