from codekata.linked_list import ListNode, from_list, to_list


def test_round_trip_empty():
    assert to_list(from_list([])) == []


def test_round_trip_values():
    assert to_list(from_list([1, 2, 3])) == [1, 2, 3]


def test_from_list_empty_is_none():
    assert from_list([]) is None


def test_repeated_values():
    assert to_list(from_list([1] * 5)) == [1, 1, 1, 1, 1]


def test_single_value():
    head = from_list([1])
    assert head == ListNode(1)
    assert to_list(head) == [1]


def test_structure_links_in_order():
    head = from_list([1, 2, 3, 4])
    assert head.val == 1
    assert head.next.val == 2
    assert head.next.next.next.val == 4
    assert head.next.next.next.next is None


def test_iteration_yields_values():
    assert list(from_list([5, 6])) == [5, 6]