"""Number sequences: Fibonacci numbers, Pascal's triangle, digits and powers."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import islice

FIB_MODULUS = 1_000_000_007


def _fibonacci(n: int) -> int:
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number, for ``0 <= n <= 30``."""
    if not 0 <= n <= 30:
        raise ValueError("n must be between 0 and 30")
    return _fibonacci(n)


def fib_mod(n: int) -> int:
    """The ``n``-th Fibonacci number modulo 1e9+7, for ``0 <= n <= 100``."""
    if not 0 <= n <= 100:
        raise ValueError("n must be between 0 and 100")
    return _fibonacci(n) % FIB_MODULUS


def pascal_rows() -> Iterator[list[int]]:
    """Yield the rows of Pascal's triangle without end."""
    row = [1]
    while True:
        yield row
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]


def generate(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    return list(islice(pascal_rows(), num_rows))


def get_row(row_index: int) -> list[int]:
    """Row ``row_index`` of Pascal's triangle, counting from 0."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    return next(islice(pascal_rows(), row_index, None))


def find_nth_digit(n: int) -> int:
    """The ``n``-th digit of the sequence 123456789101112..."""
    rest = n
    width = 1
    count = 9
    while rest - count * width > 0:
        rest -= count * width
        width += 1
        count *= 10

    if width == 1:
        return rest

    first = 10 ** (width - 1)
    target = rest // width + first
    offset = rest % width
    if offset == 0:
        return (target - 1) % 10
    return int(str(target)[offset - 1])


def _power(x: float, n: int) -> float:
    result = 1.0
    while n > 0:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    if n >= 0:
        return _power(x, n)
    denominator = _power(x, -n)
    if denominator == 0:
        return math.copysign(math.inf, denominator)
    return 1.0 / denominator