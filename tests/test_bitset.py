import io
from itertools import product

import pytest

from dslab.bitset import bit_difference, bit_intersection, bit_union, main

ALL_FOUR = [list(bits) for bits in product((0, 1), repeat=4)]


def test_union_example():
    assert bit_union([1, 0, 1, 0], [0, 0, 1, 1]) == [1, 0, 1, 1]


def test_intersection_example():
    assert bit_intersection([1, 0, 1, 0], [0, 0, 1, 1]) == [0, 0, 1, 0]


def test_difference_example():
    assert bit_difference([1, 0, 1, 0], [0, 0, 1, 1]) == [1, 0, 0, 0]


@pytest.mark.parametrize("a", ALL_FOUR)
def test_operations_with_self(a):
    assert bit_union(a, a) == a
    assert bit_intersection(a, a) == a
    assert bit_difference(a, a) == [0, 0, 0, 0]


@pytest.mark.parametrize("a", ALL_FOUR)
@pytest.mark.parametrize("b", ALL_FOUR[::3])
def test_difference_and_intersection_rebuild_a(a, b):
    assert bit_union(bit_difference(a, b), bit_intersection(a, b)) == a
    assert bit_intersection(bit_difference(a, b), b) == [0, 0, 0, 0]


@pytest.mark.parametrize("a", ALL_FOUR[::2])
@pytest.mark.parametrize("b", ALL_FOUR[1::2])
def test_commutative(a, b):
    assert bit_union(a, b) == bit_union(b, a)
    assert bit_intersection(a, b) == bit_intersection(b, a)


def test_results_stay_bits():
    for a in ALL_FOUR:
        for op in (bit_union, bit_intersection, bit_difference):
            assert set(op(a, [1, 0, 1, 0])) <= {0, 1}


def test_empty_strings():
    assert bit_union([], []) == []


@pytest.mark.parametrize("op", [bit_union, bit_intersection, bit_difference])
def test_length_mismatch_rejected(op):
    with pytest.raises(ValueError):
        op([1, 0], [1])


def test_main_prints_all_results(monkeypatch, capsys):
    a, b = [1, 1, 0, 0], [0, 1, 0, 1]
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 1 0 0\n0 1 0 1\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Set A: 1 1 0 0" in lines
    assert "Union: " + " ".join(map(str, bit_union(a, b))) in lines
    assert "Intersection: " + " ".join(map(str, bit_intersection(a, b))) in lines
    assert "Difference (A - B): " + " ".join(map(str, bit_difference(a, b))) in lines


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 0 1\n0\n"))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err