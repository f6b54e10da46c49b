"""Removing duplicates from sorted linked lists."""

from __future__ import annotations

from codekata.linked_list import ListNode


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Keep one node of every run of equal values in a sorted list."""
    node = head
    while node is not None:
        while node.next is not None and node.next.val == node.val:
            node.next = node.next.next
        node = node.next
    return head


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0, head)
    prev = dummy
    node = head
    while node is not None:
        if node.next is not None and node.next.val == node.val:
            value = node.val
            while node is not None and node.val == value:
                node = node.next
            prev.next = node
        else:
            prev = node
            node = node.next
    return dummy.next