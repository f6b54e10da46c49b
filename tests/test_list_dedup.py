import pytest

from codekata.linked_list import from_list, to_list
from codekata.list_dedup import delete_all_duplicates, delete_duplicates


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 1, 2], [1, 2]),
        ([1, 1, 2, 3, 3], [1, 2, 3]),
        ([], []),
        ([1, 2], [1, 2]),
    ],
)
def test_delete_duplicates(values, expected):
    assert to_list(delete_duplicates(from_list(values))) == expected


def test_delete_duplicates_long_run_has_no_adjacent_equals():
    result = to_list(delete_duplicates(from_list([1, 1, 1, 2, 2, 2, 2])))
    assert result == [1, 2]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 3, 4, 4, 5], [1, 2, 5]),
        ([1, 1, 1, 2, 3], [2, 3]),
        ([], []),
        ([1, 1], []),
        ([1, 2, 2], [1]),
    ],
)
def test_delete_all_duplicates(values, expected):
    assert to_list(delete_all_duplicates(from_list(values))) == expected