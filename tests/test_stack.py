import io

import pytest

from dslab.stack import Stack, main


def test_last_in_first_out():
    values = [1, 2, 3, 4]
    stack = Stack()
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_len_tracks_pushes_and_pops():
    stack = Stack()
    stack.push(7)
    stack.push(8)
    stack.pop()
    assert len(stack) == 1
    assert list(stack) == [7]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 10 1 20 3 4 2 3 5"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Pushed successfully") == 2
    assert "Stack elements: 20 10" in out
    assert "Number of elements = 2" in out
    assert "Popped successfully" in out
    assert "Stack elements: 10" in out


def test_main_empty_stack(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3 5"))
    assert main([]) == 0
    assert capsys.readouterr().out.count("Stack is empty") == 2


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 abc"))
    assert main([]) == 1
    assert "not a number" in capsys.readouterr().err