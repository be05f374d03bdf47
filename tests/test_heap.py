import pytest

from dsakit.heap import MinHeap, main

KEYS = [33, 22, 44, 11, 55]


def test_pops_come_out_sorted():
    heap = MinHeap()
    values = [7, 3, 9, 1, 4, 4, 8, 2]
    for value in values:
        heap.push(value)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values)
    assert len(heap) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


def test_len_tracks_pushes_and_pops():
    heap = MinHeap()
    for key in KEYS:
        heap.push(key)
    assert len(heap) == len(KEYS)
    heap.pop()
    assert len(heap) == len(KEYS) - 1


def test_array_layout_after_inserts():
    heap = MinHeap()
    for key in KEYS:
        heap.push(key)
    assert heap.slots(10) == [0, 11, 22, 44, 33, 55, 0, 0, 0, 0]


def test_array_layout_after_pop():
    heap = MinHeap()
    for key in KEYS:
        heap.push(key)
    assert heap.pop() == min(KEYS)
    assert heap.slots(10) == [0, 22, 33, 44, 55, 0, 0, 0, 0, 0]


def test_slot_zero_unused():
    heap = MinHeap()
    heap.push(5)
    assert heap.slots(2) == [0, 5]


def test_overflow_when_full():
    heap = MinHeap(3)
    heap.push(1)
    heap.push(2)
    with pytest.raises(OverflowError):
        heap.push(3)


def test_main_prints_popped_root(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[1] == str(min(KEYS))
    assert sorted(int(v) for v in lines[2].split() if v != "0") == sorted(KEYS)[1:]