import io

import pytest

from dslab.doubly_linked_list import DoublyLinkedList, main


def test_push_back_keeps_order():
    values = [3, 1, 4, 1, 5]
    items = DoublyLinkedList()
    for value in values:
        items.push_back(value)
    assert list(items) == values
    assert list(reversed(items)) == values[::-1]
    assert len(items) == len(values)


def test_push_front_reverses_order():
    values = [2, 7, 1]
    items = DoublyLinkedList()
    for value in values:
        items.push_front(value)
    assert list(items) == values[::-1]


def test_pop_both_ends():
    items = DoublyLinkedList()
    for value in (1, 2, 3):
        items.push_back(value)
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]
    assert list(reversed(items)) == [2]


def test_pop_last_element_empties_both_directions():
    items = DoublyLinkedList()
    items.push_front(9)
    assert items.pop_back() == 9
    assert list(items) == []
    assert list(reversed(items)) == []
    items.push_back(6)
    assert list(items) == [6]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(DoublyLinkedList(), method)()


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 3 2 7 1 1 7 8 9"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Forward traversal: 1 3 7" in out
    assert "Reverse traversal: 7 3 1" in out
    assert "Number of elements = 3" in out


def test_main_deletions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 2 2 3 4 5 9"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Deleted from beginning" in out
    assert "Deleted from end" not in out
    assert "List is empty" in out