import pytest
from hypothesis import given
from hypothesis import strategies as st

from ordlists.static_seq_list import MAX_SIZE, StaticSeqList


def _filled(values):
    seq = StaticSeqList()
    for position, value in enumerate(values, start=1):
        seq.insert(position, value)
    return seq


def test_worked_example():
    seq = _filled([1, 2, 3, 4, 5])
    assert str(seq) == "1 2 3 4 5"
    assert seq.delete(1) == 1
    assert str(seq) == "2 3 4 5"
    assert seq.locate(3) == 2
    assert seq.get(1) == 2


def test_insert_in_middle():
    seq = _filled([1, 2, 3])
    seq.insert(2, 9)
    assert list(seq) == [1, 9, 2, 3]
    assert len(seq) == 4


def test_insert_into_full_list():
    seq = _filled(range(MAX_SIZE))
    with pytest.raises(OverflowError):
        seq.insert(1, -1)
    assert len(seq) == MAX_SIZE


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.insert(0, 7),
        lambda s: s.insert(-1, 7),
        lambda s: s.insert(5, 7),
        lambda s: s.delete(0),
        lambda s: s.delete(4),
        lambda s: s.get(0),
        lambda s: s.get(4),
    ],
)
def test_positions_out_of_range(operation):
    seq = _filled([1, 2, 3])
    with pytest.raises(IndexError):
        operation(seq)
    assert list(seq) == [1, 2, 3]


@pytest.mark.parametrize(("values", "target", "expected"), [
    ([1, 2, 3], 42, 0),
    ([5, 6, 5], 5, 1),
    ([5, 6, 5], 6, 2),
])
def test_locate(values, target, expected):
    assert _filled(values).locate(target) == expected


def test_empty_str():
    assert str(StaticSeqList()) == ""


@given(st.lists(st.integers(), max_size=MAX_SIZE), st.data())
def test_insert_and_delete_follow_list(values, data):
    seq = StaticSeqList()
    model = []
    for value in values:
        position = data.draw(st.integers(1, len(model) + 1))
        seq.insert(position, value)
        model.insert(position - 1, value)
    assert list(seq) == model
    for remaining in range(len(values), 0, -1):
        position = data.draw(st.integers(1, remaining))
        assert seq.delete(position) == model.pop(position - 1)
        assert list(seq) == model
    assert len(seq) == 0


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_get_and_locate_agree(values):
    seq = _filled(values)
    assert [seq.get(p) for p in range(1, len(values) + 1)] == values
    assert all(seq.get(seq.locate(v)) == v for v in values)