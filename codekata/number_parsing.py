"""Recognising decimal numbers and converting strings to 32-bit integers."""

from __future__ import annotations

from enum import Enum, auto

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class _NumberState(Enum):
    START = auto()
    SIGN = auto()
    INTEGER = auto()
    DOT = auto()
    EMPTY_DOT = auto()
    DECIMAL = auto()
    E = auto()
    EXP_SIGN = auto()
    EXPONENT = auto()
    END = auto()


_S = _NumberState

_TRANSITIONS: dict[_NumberState, dict[str, _NumberState]] = {
    _S.START: {" ": _S.START, "sign": _S.SIGN, "digit": _S.INTEGER, ".": _S.EMPTY_DOT},
    _S.SIGN: {"digit": _S.INTEGER, ".": _S.EMPTY_DOT},
    _S.INTEGER: {"digit": _S.INTEGER, ".": _S.DOT, "e": _S.E, " ": _S.END},
    _S.EMPTY_DOT: {"digit": _S.DECIMAL},
    _S.DOT: {"digit": _S.DECIMAL, "e": _S.E, " ": _S.END},
    _S.DECIMAL: {"digit": _S.DECIMAL, "e": _S.E, " ": _S.END},
    _S.E: {"sign": _S.EXP_SIGN, "digit": _S.EXPONENT},
    _S.EXP_SIGN: {"digit": _S.EXPONENT},
    _S.EXPONENT: {"digit": _S.EXPONENT, " ": _S.END},
    _S.END: {" ": _S.END},
}

_INCOMPLETE = {_S.START, _S.SIGN, _S.E, _S.EXP_SIGN, _S.EMPTY_DOT}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _char_class(c: str) -> str:
    if _is_digit(c):
        return "digit"
    if c in "+-":
        return "sign"
    return c


def is_number(s: str) -> bool:
    """Whether ``s`` is a decimal number, optionally padded with spaces."""
    state = _S.START
    for c in s:
        following = _TRANSITIONS[state].get(_char_class(c))
        if following is None:
            return False
        state = following
    return state not in _INCOMPLETE


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit range; 0 if none."""
    sign: int | None = None
    number: int | None = None
    for c in s:
        if number is not None:
            if not _is_digit(c):
                return number
            digit = int(c)
            if number >= 0:
                number = number * 10 + digit
                if number > INT_MAX:
                    return INT_MAX
            else:
                number = number * 10 - digit
                if number < INT_MIN:
                    return INT_MIN
        elif sign is not None:
            if c == "0":
                continue
            if "1" <= c <= "9":
                number = sign * int(c)
            else:
                return 0
        elif c == " ":
            continue
        elif c == "+":
            sign = 1
        elif c == "-":
            sign = -1
        elif _is_digit(c):
            number = int(c)
        else:
            return 0
    return 0 if number is None else number