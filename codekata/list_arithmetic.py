"""Adding numbers whose digits are stored in linked lists."""

from __future__ import annotations

from codekata.linked_list import ListNode, to_list


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored least significant digit first."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = (1, total - 10) if total >= 10 else (0, total)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def add_two_numbers_forward(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored most significant digit first."""
    digits1, digits2 = to_list(l1), to_list(l2)
    result: ListNode | None = None
    carry = 0
    while digits1 or digits2 or carry:
        total = carry
        if digits1:
            total += digits1.pop()
        if digits2:
            total += digits2.pop()
        carry, digit = (1, total - 10) if total >= 10 else (0, total)
        result = ListNode(digit, result)
    return result