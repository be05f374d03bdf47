import pytest

from dsakit.deque import Deque, main


def test_push_front_reverses_order():
    dq = Deque()
    for data in "CBA":
        dq.push_front(data)
    assert list(dq) == ["A", "B", "C"]


def test_push_back_keeps_order():
    dq = Deque()
    for data in "EFG":
        dq.push_back(data)
    assert list(dq) == ["E", "F", "G"]
    assert len(dq) == 3


def test_construct_from_items():
    dq = Deque([1, 2, 3])
    assert list(dq) == [1, 2, 3]


def test_pop_both_ends():
    dq = Deque([1, 2, 3, 4])
    assert dq.pop_front() == 1
    assert dq.pop_back() == 4
    assert list(dq) == [2, 3]
    assert len(dq) == 2


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(Deque(), method)()


def test_last():
    dq = Deque()
    assert dq.last() is None
    dq.push_back("x")
    dq.push_back("y")
    assert dq.last() == "y"


def test_clear():
    dq = Deque("abc")
    dq.clear()
    assert list(dq) == []
    assert len(dq) == 0
    dq.push_front("z")
    assert list(dq) == ["z"]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "", "Nodes:", "A", "B", "C",
        "", "Nodes:", "A", "B", "C", "E", "F", "G",
        "", "Nodes:", "F", "G",
        "", "Nodes:",
    ]