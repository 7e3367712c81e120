import pytest

from dsakit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

INPUTS = [
    [12, 45, 57, 87, 34, 22, 3],
    [12, 34, 67, 23, 45, 1],
    [38, 27, 43, 3, 9, 82, 10],
    [3, 5, 2, 13, 12],
    [12, 54, 65, 7, 23, 9],
    [],
    [42],
    [5, 5, 5, 5],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [2, -1, 0, -7, 2, 3, -1],
    ["pear", "apple", "fig", "banana"],
    list(range(300, 0, -1)),
]


@pytest.mark.parametrize("data", INPUTS)
def test_sorts_match_builtin_and_leave_input(data):
    original = list(data)
    expected = sorted(data)
    results = [
        bubble_sort(data),
        insertion_sort(data),
        merge_sort(data),
        quick_sort(data),
        selection_sort(data),
    ]
    assert results == [expected] * 5
    assert data == original


def test_accepts_any_iterable():
    results = [
        bubble_sort(iter((3, 1, 2))),
        insertion_sort(iter((3, 1, 2))),
        merge_sort(iter((3, 1, 2))),
        quick_sort(iter((3, 1, 2))),
        selection_sort(iter((3, 1, 2))),
    ]
    assert results == [[1, 2, 3]] * 5


class _Item:
    def __init__(self, key, tag):
        self.key, self.tag = key, tag

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key

    def __le__(self, other):
        return self.key <= other.key


def test_stable_sorts_keep_equal_order():
    items = [_Item(2, "a"), _Item(1, "b"), _Item(2, "c"), _Item(1, "d")]
    results = [bubble_sort(items), insertion_sort(items), merge_sort(items)]
    assert [[item.tag for item in result] for result in results] == [
        ["b", "d", "a", "c"]
    ] * 3