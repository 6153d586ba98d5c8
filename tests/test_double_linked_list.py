import pytest
from hypothesis import given
from hypothesis import strategies as st

from ordlists.double_linked_list import DoubleLinkedList


@pytest.fixture
def three():
    lst = DoubleLinkedList()
    for position in (1, 2, 3):
        lst.insert(position, position)
    return lst


def test_worked_example(three):
    assert str(three) == "1 2 3"
    three.insert(2, 4)
    assert str(three) == "1 4 2 3"
    assert three.delete(2) == 4
    assert str(three) == "1 2 3"


def test_reversed(three):
    assert list(reversed(three)) == [3, 2, 1]
    assert list(reversed(DoubleLinkedList())) == []


@pytest.mark.parametrize("call", [
    lambda lst: lst.insert(0, 9),
    lambda lst: lst.insert(-1, 9),
    lambda lst: lst.insert(5, 9),
    lambda lst: lst.delete(0),
    lambda lst: lst.delete(4),
])
def test_out_of_range(three, call):
    with pytest.raises(IndexError):
        call(three)
    assert list(three) == [1, 2, 3]


def test_delete_last_keeps_links(three):
    assert three.delete(3) == 3
    assert list(reversed(three)) == [2, 1]


@given(st.lists(st.integers()), st.lists(st.integers(0, 20)))
def test_links_stay_consistent(values, deletions):
    lst = DoubleLinkedList()
    model = []
    for value in values:
        lst.insert(len(model) // 2 + 1, value)
        model.insert(len(model) // 2, value)
    for raw in deletions:
        if not model:
            break
        position = raw % len(model) + 1
        assert lst.delete(position) == model.pop(position - 1)
    assert list(lst) == model
    assert list(reversed(lst)) == model[::-1]