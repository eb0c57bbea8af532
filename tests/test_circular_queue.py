import io

import pytest

from dslab.circular_queue import (
    CircularQueue,
    QueueEmptyError,
    QueueFullError,
    main,
)


def test_first_in_first_out():
    values = [4, 8, 15]
    queue = CircularQueue()
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert [queue.dequeue() for _ in values] == values
    assert len(queue) == 0


def test_full_queue_raises():
    queue = CircularQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_empty_queue_raises():
    with pytest.raises(QueueEmptyError):
        CircularQueue().dequeue()


def test_default_capacity_is_five():
    queue = CircularQueue()
    for value in range(5):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(5)


def test_wraps_around_after_removals():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(4)
    queue.enqueue(5)
    assert list(queue) == [3, 4, 5]
    assert len(queue) == queue.capacity


@pytest.mark.parametrize("capacity", [0, -1])
def test_bad_capacity(capacity):
    with pytest.raises(ValueError):
        CircularQueue(capacity)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 10 1 20 3 4 2 2 2 3 5"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Queue elements: 10 20" in out
    assert "Count = 2" in out
    assert "Deleted element: 10" in out
    assert "Deleted element: 20" in out
    assert "Queue is empty" in out


def test_main_reports_full_without_reading_element(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 1 2 1 3 1 4 1 5 1 5"))
    assert main([]) == 0
    assert "Queue is full" in capsys.readouterr().out