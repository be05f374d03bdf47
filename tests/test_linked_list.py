import pytest

from dsakit.linked_list import LinkedList


def test_construct_from_items():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None


def test_append_and_last():
    lst = LinkedList()
    lst.append("a")
    node = lst.append("b")
    assert lst.last() is node
    assert list(lst) == ["a", "b"]


def test_prepend():
    lst = LinkedList([1, 2])
    node = lst.prepend(0)
    assert lst.head is node
    assert list(lst) == [0, 1, 2]


def test_push_after():
    lst = LinkedList([1, 3])
    lst.push_after(lst.head, 2)
    assert list(lst) == [1, 2, 3]


def test_pop_after_returns_unlinked_node():
    lst = LinkedList([1, 2, 3])
    removed = lst.pop_after(lst.head)
    assert removed.content == 2
    assert removed.next is None
    assert list(lst) == [1, 3]


def test_pop_after_last_returns_none():
    lst = LinkedList([1, 2])
    assert lst.pop_after(lst.last()) is None
    assert list(lst) == [1, 2]


def test_delete_after():
    lst = LinkedList(["x", "y", "z"])
    lst.delete_after(lst.head)
    assert list(lst) == ["x", "z"]


def test_delete_after_last_raises():
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.delete_after(lst.head)


def test_clear():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert list(lst) == []
    assert len(lst) == 0


def test_for_each_visits_in_order():
    lst = LinkedList(["a", "b", "c"])
    seen = []
    lst.for_each(seen.append)
    assert seen == list(lst)


def test_nodes_yield_contents():
    lst = LinkedList([5, 6])
    assert [node.content for node in lst.nodes()] == [5, 6]