"""Bit manipulation problems."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _lowest_bit(value: int) -> int:
    return value & -value


def single_numbers(nums: Sequence[int]) -> list[int]:
    """The two values that occur once while every other value occurs twice.

    Raises ``ValueError`` when ``nums`` has fewer than 2 or more than 10000
    elements, or when no two such distinct values exist.
    """
    if not 2 <= len(nums) <= 10000:
        raise ValueError("nums must have between 2 and 10000 elements")
    combined = reduce(xor, nums, 0)
    if combined == 0:
        raise ValueError("nums holds no two distinct single values")
    helper = _lowest_bit(combined)
    a = reduce(xor, (x for x in nums if x & helper == 0), 0)
    return [a, combined ^ a]


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """The duplicated and the missing number of a damaged set ``1..n``.

    Raises ``ValueError`` when ``nums`` has no such mismatch.
    """
    expected = range(1, len(nums) + 1)
    combined = reduce(xor, nums, reduce(xor, expected, 0))
    if combined == 0:
        raise ValueError("nums has no duplicated and missing number")
    helper = _lowest_bit(combined)
    xor0 = xor1 = 0
    for x in (*expected, *nums):
        if x & helper == 0:
            xor0 ^= x
        else:
            xor1 ^= x
    return [xor0, xor1] if xor0 in nums else [xor1, xor0]


def integer_replacement(n: int) -> int:
    """Fewest halvings or unit steps that take ``n`` to 1."""
    steps = 0
    while n > 1:
        if n % 2 == 0:
            n //= 2
        elif n == 3 or n & 0b11 == 0b01:
            n -= 1
        else:
            n += 1
        steps += 1
    return steps