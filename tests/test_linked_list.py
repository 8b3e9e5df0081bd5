import pytest

from gatekit.linked_list import LinkedList, ListNode


def _build_head_first(values):
    lst = LinkedList()
    for value in values:
        lst.add_head(ListNode(value))
    return lst


def _node_with(lst, value):
    return next(node for node in lst.nodes() if node.value == value)


def test_add_head_reverses_insertion_order():
    lst = _build_head_first(range(10))
    assert len(lst) == 10
    assert lst.first().value == 9
    assert list(lst) == list(range(9, -1, -1))


def test_add_tail_keeps_insertion_order():
    lst = LinkedList()
    for value in "abc":
        lst.add_tail(value)
    assert list(lst) == ["a", "b", "c"]
    assert list(reversed(lst)) == ["c", "b", "a"]
    assert lst.last().value == "c"


def test_remove_head_then_walk():
    lst = _build_head_first(range(10))
    lst.remove(_node_with(lst, 9))
    assert list(lst) == list(range(8, -1, -1))
    assert len(lst) == 9
    assert lst.last().value == 0
    assert lst.first().prev is None


def test_remove_middle_and_tail_and_only():
    lst = LinkedList()
    nodes = [lst.add_tail(v) for v in range(4)]
    lst.remove(nodes[2])
    assert list(lst) == [0, 1, 3]
    lst.remove(nodes[3])
    assert lst.last() is nodes[1]
    assert nodes[1].next is None
    lst.remove(nodes[0])
    lst.remove(nodes[1])
    assert len(lst) == 0
    assert lst.first() is None and lst.last() is None


def test_remove_foreign_node_raises():
    lst = _build_head_first(range(3))
    with pytest.raises(ValueError):
        lst.remove(ListNode(1))
    with pytest.raises(ValueError):
        LinkedList().remove(ListNode(1))


def test_node_cannot_join_two_lists():
    node = ListNode("x")
    LinkedList().add_tail(node)
    with pytest.raises(ValueError):
        LinkedList().add_head(node)


def test_nth_from_both_ends():
    lst = _build_head_first(range(10))
    lst.remove(_node_with(lst, 9))
    values = list(lst)
    for index in range(1, len(lst) + 1):
        assert lst.nth(index).value == values[index - 1]


@pytest.mark.parametrize("index", [0, -1, 4])
def test_nth_out_of_range(index):
    lst = _build_head_first(range(3))
    with pytest.raises(IndexError):
        lst.nth(index)


def test_clear_detaches_nodes():
    lst = LinkedList()
    node = lst.add_tail(1)
    lst.add_tail(2)
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    other = LinkedList()
    other.add_tail(node)
    assert list(other) == [1]


def test_merge_moves_everything():
    first = _build_head_first(range(3))
    second = _build_head_first(range(10, 13))
    first.merge(second)
    assert list(first) == [2, 1, 0, 12, 11, 10]
    assert len(first) == 6
    assert len(second) == 0
    assert list(reversed(first)) == [10, 11, 12, 0, 1, 2]


def test_merge_into_empty():
    empty = LinkedList()
    other = _build_head_first(range(2))
    empty.merge(other)
    assert list(empty) == [1, 0]
    assert empty.first().prev is None


def test_merge_range_like_source_demo():
    lst = _build_head_first(range(10))
    lst.remove(_node_with(lst, 9))
    list2 = _build_head_first(range(17, 28))
    start = _node_with(list2, 26)
    end = _node_with(list2, 21)
    lst.merge_range(start, end, list2)
    expected = list(range(8, -1, -1)) + list(range(26, 20, -1))
    assert list(lst) == expected
    assert list(reversed(lst)) == expected[::-1]
    assert len(lst) == len(expected)
    assert len(list2) == 0


def test_merge_range_rejects_reversed_bounds():
    lst = LinkedList()
    other = _build_head_first(range(5))
    with pytest.raises(ValueError):
        lst.merge_range(_node_with(other, 1), _node_with(other, 3), other)
    assert list(other) == [4, 3, 2, 1, 0]


def test_merge_range_rejects_foreign_nodes():
    lst = _build_head_first(range(2))
    other = _build_head_first(range(3))
    with pytest.raises(ValueError):
        lst.merge_range(lst.first(), other.last(), other)