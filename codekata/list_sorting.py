"""Merging and sorting linked lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from itertools import count

from codekata.linked_list import ListNode


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge sorted linked lists into one sorted list, reusing their nodes."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)

    dummy = ListNode(0)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
        tail.next = node
        tail = node
    tail.next = None
    return dummy.next


def _split(head: ListNode | None, size: int) -> tuple[ListNode | None, ListNode | None]:
    """Cut off the first ``size`` nodes; return them and the remainder."""
    if head is None:
        return None, None
    node = head
    for _ in range(size - 1):
        if node.next is None:
            break
        node = node.next
    rest = node.next
    node.next = None
    return head, rest


def _merge(first: ListNode | None, second: ListNode | None) -> tuple[ListNode, ListNode]:
    """Merge two sorted lists; return the merged head and its last node."""
    dummy = ListNode(0)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    while tail.next is not None:
        tail = tail.next
    return dummy.next, tail


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a linked list with a bottom-up merge sort, relinking its nodes."""
    if head is None or head.next is None:
        return head

    length = sum(1 for _ in head)
    size = 1
    while size < length:
        dummy = ListNode(0)
        tail = dummy
        rest = head
        while rest is not None:
            first, rest = _split(rest, size)
            second, rest = _split(rest, size)
            tail.next, tail = _merge(first, second)
        head = dummy.next
        size *= 2
    return head