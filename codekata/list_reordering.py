"""Reordering the nodes of linked lists."""

from __future__ import annotations

from codekata.linked_list import ListNode


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middle nodes, the second one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group the odd-positioned nodes before the even-positioned ones, in place."""
    if head is None:
        return None
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by ``k`` places.

    Raises ``ValueError`` when ``k`` is negative.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or k == 0:
        return head

    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1

    step = k % length
    if step == 0:
        return head

    new_tail = head
    for _ in range(length - step - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head