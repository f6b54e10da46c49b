import pytest

from codekata.linked_list import from_list, to_list
from codekata.list_reordering import middle_node, odd_even_list, rotate_right


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4, 5], [3, 4, 5]),
        ([1, 2, 3, 4, 5, 6], [4, 5, 6]),
        ([], []),
        ([7], [7]),
    ],
)
def test_middle_node(values, expected):
    assert to_list(middle_node(from_list(values))) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4, 5], [1, 3, 5, 2, 4]),
        ([2, 1, 3, 5, 6, 4, 7], [2, 3, 6, 7, 1, 5, 4]),
        ([], []),
        ([1], [1]),
        ([1, 2], [1, 2]),
    ],
)
def test_odd_even_list(values, expected):
    assert to_list(odd_even_list(from_list(values))) == expected


@pytest.mark.parametrize(
    "values, k, expected",
    [
        ([1, 2, 3, 4, 5], 2, [4, 5, 1, 2, 3]),
        ([1, 2, 3, 4, 5], 0, [1, 2, 3, 4, 5]),
        ([], 2, []),
        ([], 0, []),
        ([0, 1, 2], 4, [2, 0, 1]),
        ([1, 2, 3], 3, [1, 2, 3]),
        ([1], 5, [1]),
    ],
)
def test_rotate_right(values, k, expected):
    assert to_list(rotate_right(from_list(values), k)) == expected


def test_rotate_right_negative_k():
    with pytest.raises(ValueError):
        rotate_right(from_list([1, 2]), -1)