import pytest

from drillbook.linked_lists import (
    CircularLinkedList,
    DoublyLinkedList,
    Node,
    SinglyLinkedList,
    reverse_in_groups,
)


def _chain(values):
    head = None
    for value in reversed(values):
        head = Node(value, head)
    return head


def _values(head):
    result = []
    while head is not None:
        result.append(head.value)
        head = head.next
    return result


def test_reverse_in_groups_source_example():
    head = reverse_in_groups(_chain([1, 2, 3, 4, 5, 6, 7, 8]), 3)
    assert _values(head) == [3, 2, 1, 6, 5, 4, 8, 7]


def test_reverse_in_groups_k_one_is_identity():
    values = [4, 9, 1, 7]
    assert _values(reverse_in_groups(_chain(values), 1)) == values


@pytest.mark.parametrize("k", [5, 6, 20])
def test_reverse_in_groups_large_k_reverses_all(k):
    values = [1, 2, 3, 4, 5]
    assert _values(reverse_in_groups(_chain(values), k)) == values[::-1]


def test_reverse_in_groups_empty_and_bad_k():
    assert reverse_in_groups(None, 3) is None
    with pytest.raises(ValueError):
        reverse_in_groups(_chain([1, 2]), 0)


def test_singly_push_front_and_back():
    sll = SinglyLinkedList([10])
    sll.push_front(50)
    sll.push_back(80)
    assert list(sll)[0] == 50
    assert list(sll)[-1] == 80
    assert len(sll) == 3


def test_singly_insert_at_positions():
    sll = SinglyLinkedList([1, 2, 3])
    sll.insert_at(1, 76)
    assert list(sll)[0] == 76
    sll.insert_at(3, 55)
    assert list(sll)[2] == 55
    sll.insert_at(len(sll) + 1, 99)
    assert list(sll)[-1] == 99
    assert len(sll) == 6


def test_singly_insert_out_of_range():
    sll = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        sll.insert_at(0, 5)
    with pytest.raises(IndexError):
        sll.insert_at(4, 5)


@pytest.mark.parametrize("position", [1, 2, 4])
def test_singly_delete_at(position):
    sll = SinglyLinkedList([76, 50, 10, 80])
    before = list(sll)
    removed = sll.delete_at(position)
    assert removed == before[position - 1]
    assert list(sll) == before[: position - 1] + before[position:]
    assert len(sll) == len(before) - 1


def test_singly_delete_last_then_append_keeps_tail():
    sll = SinglyLinkedList([1, 2, 3])
    sll.delete_at(3)
    sll.push_back(9)
    assert list(sll) == [1, 2, 9]


def test_singly_delete_out_of_range():
    sll = SinglyLinkedList()
    with pytest.raises(IndexError):
        sll.delete_at(1)


def test_singly_reverse_in_groups_updates_tail():
    sll = SinglyLinkedList([1, 2, 3, 4])
    sll.reverse_in_groups(4)
    assert list(sll) == [4, 3, 2, 1]
    sll.push_back(5)
    assert list(sll) == [4, 3, 2, 1, 5]
    assert len(sll) == 5


def test_doubly_push_and_reverse_iteration():
    dll = DoublyLinkedList([10])
    dll.push_front(11)
    dll.push_back(32)
    assert list(dll)[0] == 11
    assert list(dll)[-1] == 32
    assert list(reversed(dll)) == list(dll)[::-1]
    assert len(dll) == 3


def test_doubly_push_front_on_empty():
    dll = DoublyLinkedList()
    dll.push_front(4)
    assert list(dll) == [4]
    assert list(reversed(dll)) == [4]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_doubly_insert_at(position):
    dll = DoublyLinkedList([11, 10, 32])
    dll.insert_at(position, 32)
    assert list(dll)[position - 1] == 32
    assert len(dll) == 4
    assert list(reversed(dll)) == list(dll)[::-1]


@pytest.mark.parametrize("position", [1, 2, 3])
def test_doubly_delete_at(position):
    dll = DoublyLinkedList([11, 10, 32])
    before = list(dll)
    removed = dll.delete_at(position)
    assert removed == before[position - 1]
    assert list(dll) == before[: position - 1] + before[position:]
    assert list(reversed(dll)) == list(dll)[::-1]


def test_doubly_errors():
    dll = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        dll.delete_at(2)
    with pytest.raises(IndexError):
        dll.insert_at(3, 1)


def test_circular_source_example():
    cll = CircularLinkedList()
    cll.insert_after(5, 3)
    cll.insert_after(3, 5)
    cll.insert_after(3, 7)
    assert list(cll) == [3, 7, 5]
    cll.delete(7)
    assert list(cll) == [3, 5]
    assert len(cll) == 2


def test_circular_delete_tail_and_only_node():
    cll = CircularLinkedList()
    cll.insert_after(0, 1)
    cll.insert_after(1, 2)
    cll.delete(1)
    assert list(cll) == [2]
    cll.delete(2)
    assert list(cll) == []
    assert len(cll) == 0


def test_circular_errors():
    cll = CircularLinkedList()
    with pytest.raises(ValueError):
        cll.delete(1)
    cll.insert_after(0, 1)
    with pytest.raises(ValueError):
        cll.insert_after(42, 2)
    with pytest.raises(ValueError):
        cll.delete(42)
    assert list(cll) == [1]