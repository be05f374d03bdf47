import pytest

from dsakit.linked_queue import LinkedQueue


def test_fifo_order_round_trip():
    queue = LinkedQueue()
    for value in (1, 3, 4, 5):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(4)] == [1, 3, 4, 5]
    assert len(queue) == 0


def test_initial_items_and_iteration():
    queue = LinkedQueue([7, 8, 9])
    assert list(queue) == [7, 8, 9]
    assert len(queue) == 3


def test_peek_does_not_remove():
    queue = LinkedQueue([3, 4, 5])
    assert queue.peek() == 3
    assert queue.peek() == 3
    assert len(queue) == 3


def test_dequeue_after_single_element_empties():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert queue.peek() == 3
    assert list(queue) == [3]


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        LinkedQueue().dequeue()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        LinkedQueue().peek()


def test_iteration_is_snapshot():
    queue = LinkedQueue([1, 2])
    seen = []
    for value in queue:
        seen.append(value)
        queue.enqueue(value)
    assert seen == [1, 2]
    assert list(queue) == [1, 2, 1, 2]