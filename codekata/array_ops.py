"""In-place array edits, grid paths, sliding windows and pair counting."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import groupby, islice


def remove_duplicates(nums: list[int]) -> int:
    """Keep at most two of each run of equal values in ``nums``, in place.

    Returns the new length.
    """
    kept: list[int] = []
    for _, run in groupby(nums):
        kept.extend(islice(run, 2))
    nums[:] = kept
    return len(nums)


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``m`` values of ``nums1`` and sorted ``nums2`` into ``nums1``.

    ``nums1`` must have room for exactly ``m + n`` values.
    """
    if len(nums1) != m + n:
        raise ValueError("nums1 must have length m + n")
    if len(nums2) != n:
        raise ValueError("nums2 must have length n")
    nums1[:] = list(heapq.merge(nums1[:m], nums2))


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top left to bottom right moving right or down."""
    if not 1 <= len(grid) <= 200:
        raise ValueError("grid must have between 1 and 200 rows")
    if not 1 <= len(grid[0]) <= 200:
        raise ValueError("grid must have between 1 and 200 columns")

    above: list[int] | None = None
    for row in grid:
        sums: list[int] = []
        for i, v in enumerate(row):
            if not 0 <= v <= 100:
                raise ValueError("grid values must be between 0 and 100")
            candidates = []
            if sums:
                candidates.append(sums[-1])
            if above is not None:
                candidates.append(above[i])
            sums.append(min(candidates, default=0) + v)
        above = sums
    return above[-1]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """The maximum of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and len(nums)")
    window: deque[tuple[int, int]] = deque()
    maxima: list[int] = []
    for i, v in enumerate(nums):
        while window and window[0][0] <= i - k:
            window.popleft()
        while window and window[-1][1] < v:
            window.pop()
        window.append((i, v))
        if i >= k - 1:
            maxima.append(window[0][1])
    return maxima


def num_identical_pairs(nums: Iterable[int]) -> int:
    """Number of index pairs ``i < j`` with equal values."""
    return sum(c * (c - 1) // 2 for c in Counter(nums).values())