import math

import pytest

from codekata.sequences import (
    fib,
    fib_mod,
    find_nth_digit,
    generate,
    get_row,
    my_pow,
    pascal_rows,
)


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1), (3, 2), (21, 10946), (30, 832040)])
def test_fib(n, expected):
    assert fib(n) == expected


@pytest.mark.parametrize("n", [-1, 31])
def test_fib_out_of_range(n):
    with pytest.raises(ValueError):
        fib(n)


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, 0),
        (1, 1),
        (2, 1),
        (3, 2),
        (21, 10946),
        (44, 701408733),
        (55, 583861472),
        (100, 687995182),
    ],
)
def test_fib_mod(n, expected):
    assert fib_mod(n) == expected


@pytest.mark.parametrize("n", [-1, 101])
def test_fib_mod_out_of_range(n):
    with pytest.raises(ValueError):
        fib_mod(n)


@pytest.mark.parametrize(
    "num_rows, expected",
    [
        (0, []),
        (1, [[1]]),
        (2, [[1], [1, 1]]),
        (5, [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1], [1, 4, 6, 4, 1]]),
    ],
)
def test_generate(num_rows, expected):
    assert generate(num_rows) == expected


def test_generate_negative():
    with pytest.raises(ValueError):
        generate(-1)


def test_pascal_rows():
    rows = pascal_rows()
    assert next(rows) == [1]
    assert next(rows) == [1, 1]
    assert next(rows) == [1, 2, 1]
    assert next(rows) == [1, 3, 3, 1]
    assert next(rows) == [1, 4, 6, 4, 1]


@pytest.mark.parametrize(
    "row_index, expected",
    [(0, [1]), (1, [1, 1]), (2, [1, 2, 1]), (3, [1, 3, 3, 1]), (4, [1, 4, 6, 4, 1])],
)
def test_get_row(row_index, expected):
    assert get_row(row_index) == expected


def test_get_row_negative():
    with pytest.raises(ValueError):
        get_row(-1)


@pytest.mark.parametrize("n, expected", [(3, 3), (11, 0), (9, 9), (10, 1), (12, 1), (13, 1), (15, 2)])
def test_find_nth_digit(n, expected):
    assert find_nth_digit(n) == expected


def test_find_nth_digit_three_digit_numbers():
    # digits 190, 191, 192 belong to the number 100
    assert [find_nth_digit(n) for n in (190, 191, 192, 193)] == [1, 0, 0, 1]


@pytest.mark.parametrize("x, n, expected", [(2.0, 10, 1024.0), (2.0, -2, 0.25), (0.0, 0, 1.0)])
def test_my_pow_exact(x, n, expected):
    assert my_pow(x, n) == expected


def test_my_pow_fraction():
    assert my_pow(2.1, 3) == pytest.approx(9.261)


def test_my_pow_zero_negative_exponent():
    assert my_pow(0.0, -1) == math.inf