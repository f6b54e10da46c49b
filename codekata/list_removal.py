"""Removing nodes from linked lists."""

from __future__ import annotations

from codekata.linked_list import ListNode


def delete_node(head: ListNode | None, val: int) -> ListNode | None:
    """Remove the first node whose value equals ``val``."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
            break
        node = node.next
    return dummy.next


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node whose value equals ``val``."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the ``n``-th node counted from the end; ``n <= 0`` leaves the list as is.

    Raises ``ValueError`` when ``n`` exceeds the list length.
    """
    if n <= 0:
        return head

    dummy = ListNode(0, head)
    fast: ListNode | None = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError(f"list is shorter than {n} nodes")
        fast = fast.next

    slow = dummy
    while fast is not None:
        slow = slow.next
        fast = fast.next

    slow.next = slow.next.next
    return dummy.next