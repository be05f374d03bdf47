import pytest

from dsakit.array_queue import ArrayQueue, main


def test_fifo_order():
    queue = ArrayQueue()
    for data in "ABCDE":
        queue.enqueue(data)
    assert queue.peek() == "A"
    assert [queue.dequeue() for _ in range(5)] == list("ABCDE")
    assert len(queue) == 0


def test_peek_does_not_remove():
    queue = ArrayQueue()
    queue.enqueue("x")
    assert queue.peek() == "x"
    assert len(queue) == 1


def test_empty_operations_raise():
    queue = ArrayQueue()
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_grows_past_initial_length():
    queue = ArrayQueue()
    values = list(range(12))
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert len(queue) == len(values)


def test_iteration_after_partial_dequeue():
    queue = ArrayQueue()
    for value in [1, 2, 3, 4]:
        queue.enqueue(value)
    queue.dequeue()
    queue.dequeue()
    assert list(queue) == [3, 4]
    assert len(queue) == 2


def test_reuse_after_emptying():
    queue = ArrayQueue()
    queue.enqueue("a")
    queue.dequeue()
    queue.enqueue("b")
    queue.enqueue("c")
    assert queue.peek() == "b"
    assert list(queue) == ["b", "c"]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "", "Queue contents:", "A", "B", "C", "D", "E",
        "", "peek: A",
        "", "Queue contents:", "D", "E",
        "", "Queue contents:", "The queue is empty.",
    ]