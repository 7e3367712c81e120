import pytest

from dsakit.doubly import DoublyLinkedList


def _consistent(dll):
    forward = list(dll)
    return forward[::-1] == list(reversed(dll)) and len(forward) == len(dll)


def test_iteration_both_directions():
    items = [10, 20, 30, 40]
    dll = DoublyLinkedList(items)
    assert list(dll) == items
    assert list(reversed(dll)) == items[::-1]
    assert len(dll) == len(items)


def test_empty():
    dll = DoublyLinkedList()
    assert list(dll) == []
    assert list(reversed(dll)) == []
    assert dll.format() == "NULL"


def test_push_front_source_example():
    dll = DoublyLinkedList()
    for value in (12, 16, 20):
        dll.push_front(value)
    assert list(dll) == [20, 16, 12]
    assert _consistent(dll)


def test_append_after_push_front():
    dll = DoublyLinkedList()
    for value in (12, 16, 20):
        dll.push_front(value)
    dll.append(10)
    assert list(dll) == [20, 16, 12, 10]
    assert _consistent(dll)


def test_insert_at_source_example():
    dll = DoublyLinkedList()
    dll.insert_at(0, 1)
    dll.insert_at(1, 2)
    dll.insert_at(2, 3)
    assert list(dll) == [1, 2, 3]
    dll.insert_at(1, 4)
    assert list(dll) == [1, 4, 2, 3]
    assert _consistent(dll)


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_at_out_of_bounds(position):
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.insert_at(position, 9)
    assert list(dll) == [1, 2, 3]


def test_delete_at_source_example():
    dll = DoublyLinkedList([10, 20, 30, 40])
    assert dll.delete_at(3) == 30
    assert list(dll) == [10, 20, 40]
    assert _consistent(dll)


def test_delete_first_updates_head():
    dll = DoublyLinkedList([1, 2, 3, 4])
    assert dll.delete_at(1) == 1
    assert list(dll) == [2, 3, 4]
    assert _consistent(dll)


def test_delete_last_updates_tail():
    dll = DoublyLinkedList([1, 2, 3, 4])
    assert dll.delete_at(4) == 4
    assert list(reversed(dll)) == [3, 2, 1]


@pytest.mark.parametrize("n", [0, -2, 5])
def test_delete_at_out_of_bounds(n):
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2, 3, 4]).delete_at(n)


def test_pop_back_source_example():
    dll = DoublyLinkedList([10, 20, 30, 40])
    assert dll.pop_back() == 40
    assert dll.format() == "10 -> 20 -> 30 -> NULL"
    assert _consistent(dll)


def test_pop_back_until_empty():
    items = [1, 2, 3]
    dll = DoublyLinkedList(items)
    popped = [dll.pop_back() for _ in items]
    assert popped == items[::-1]
    assert len(dll) == 0
    with pytest.raises(IndexError):
        dll.pop_back()


def test_reuse_after_emptying():
    dll = DoublyLinkedList([5])
    dll.pop_back()
    dll.append(6)
    dll.push_front(4)
    assert list(dll) == [4, 6]
    assert _consistent(dll)