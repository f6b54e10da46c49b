"""Reversing linked lists."""

from __future__ import annotations

from codekata.linked_list import ListNode


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place, iteratively."""
    reversed_head: ListNode | None = None
    while head is not None:
        head.next, reversed_head, head = reversed_head, head, head.next
    return reversed_head


def reverse_list_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place, recursively."""

    def _recur(current: ListNode | None, previous: ListNode) -> ListNode:
        if current is None:
            return previous
        following = current.next
        current.next = previous
        return _recur(following, current)

    if head is None:
        return None
    rest = head.next
    head.next = None
    return _recur(rest, head)


def reverse_print(head: ListNode | None) -> list[int]:
    """Return the list's values from tail to head."""
    values = [] if head is None else list(head)
    values.reverse()
    return values