import pytest
from hypothesis import given
from hypothesis import strategies as st

from linkedcollections.linked_list import LinkedList
from linkedcollections.records import Pessoa


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst[0]


def test_append_keeps_order():
    lst = LinkedList()
    for value in (3, 1, 2):
        lst.append(value)
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3


def test_getitem():
    lst = LinkedList(["a", "b", "c"])
    assert lst[0] == "a"
    assert lst[2] == "c"
    with pytest.raises(IndexError):
        lst[3]
    with pytest.raises(IndexError):
        lst[-1]


def test_insert_sorted():
    lst = LinkedList()
    for value in (5, 2, 8, 1):
        lst.insert_sorted(value)
    assert list(lst) == [1, 2, 5, 8]


def test_remove_head_middle_tail():
    lst = LinkedList([1, 2, 3, 4])
    assert lst.remove(1) is True
    assert list(lst) == [2, 3, 4]
    assert lst.remove(3) is True
    assert list(lst) == [2, 4]
    assert lst.remove(4) is True
    assert list(lst) == [2]
    assert lst.remove(2) is True
    assert list(lst) == []
    assert len(lst) == 0


def test_remove_missing_leaves_list_unchanged():
    lst = LinkedList([1, 2])
    assert lst.remove(9) is False
    assert list(lst) == [1, 2]


def test_remove_first_occurrence_only():
    lst = LinkedList([1, 2, 1])
    lst.remove(1)
    assert list(lst) == [2, 1]


def test_append_after_removing_everything():
    lst = LinkedList([1])
    lst.remove(1)
    lst.append(7)
    assert list(lst) == [7]
    assert lst[0] == 7


def test_str_joins_items():
    assert str(LinkedList([1, 2, 3])) == "1, 2, 3"


def test_sort_pessoas_by_name():
    lst = LinkedList([Pessoa("Carla", 30, "F"), Pessoa("Ana", 20, "F"), Pessoa("Bruno", 25, "M")])
    lst.sort()
    assert [p.name for p in lst] == ["Ana", "Bruno", "Carla"]
    lst.remove(Pessoa("Bruno"))
    assert [p.name for p in lst] == ["Ana", "Carla"]


@given(st.lists(st.integers()))
def test_sort_matches_sorted(values):
    lst = LinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)
    assert len(lst) == len(values)


@given(st.lists(st.integers(min_value=0, max_value=5)), st.integers(min_value=0, max_value=5))
def test_remove_matches_python_list(values, target):
    lst = LinkedList(values)
    expected = list(values)
    removed = lst.remove(target)
    assert removed == (target in expected)
    if removed:
        expected.remove(target)
    assert list(lst) == expected
    assert len(lst) == len(expected)
    assert [lst[i] for i in range(len(lst))] == expected