"""Singly linked list node and conversions to and from Python lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list of integers."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for val in reversed(list(values)):
        head = ListNode(val, head)
    return head


def to_list(head: ListNode | None) -> list[int]:
    """Collect the values of a linked list into a Python list."""
    return [] if head is None else list(head)