"""Subsets and counting ordered combinations."""

from __future__ import annotations

from collections.abc import Sequence


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, one per bit mask of its positions."""
    return [
        [v for i, v in enumerate(nums) if mask >> i & 1]
        for mask in range(1 << len(nums))
    ]


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct subset of ``nums``, which may hold repeated values."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def _backtrack(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(ordered)):
            if i > start and ordered[i] == ordered[i - 1]:
                continue
            chosen.append(ordered[i])
            _backtrack(i + 1)
            chosen.pop()

    _backtrack(0)
    return result


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Number of ordered sequences of values from ``nums`` summing to ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1]
    for i in range(1, target + 1):
        ways.append(0)
        for n in nums:
            if 0 <= n <= i:
                ways[i] += ways[i - n]
    return ways[target]