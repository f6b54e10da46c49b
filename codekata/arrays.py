"""Searching and scanning integer arrays."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import groupby


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Indices of two distinct elements summing to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for i, n in enumerate(nums):
        j = seen.get(target - n)
        if j is not None:
            return [j, i]
        seen[n] = i
    return []


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    low = bisect_left(nums, target)
    if low == len(nums) or nums[low] != target:
        return [-1, -1]
    return [low, bisect_right(nums, target) - 1]


def first_missing_positive(nums: Iterable[int]) -> int:
    """The smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    return next(i for i in range(1, len(present) + 2) if i not in present)


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run without a zero."""
    return max(
        (sum(1 for _ in run) for nonzero, run in groupby(nums, key=lambda x: x != 0) if nonzero),
        default=0,
    )