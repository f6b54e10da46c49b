"""Problems on strings of parentheses."""

from __future__ import annotations

from collections.abc import Iterable

_SWAP = {"(": ")", ")": "("}


def _longest(chars: Iterable[str]) -> int:
    longest = left = right = 0
    for c in chars:
        if c == "(":
            left += 1
        elif left == right + 1:
            longest = max(longest, left * 2)
            right += 1
        elif left > right:
            right += 1
        else:
            left = right = 0
    return longest


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring of ``s``."""
    invalid = set(s) - set(_SWAP)
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(sorted(invalid))!r}")
    from_left = _longest(s)
    from_right = _longest(_SWAP[c] for c in reversed(s))
    return max(from_left, from_right)


def generate_parenthesis(n: int) -> list[str]:
    """All well-formed strings of ``n`` pairs of parentheses."""
    result: list[str] = []
    chars: list[str] = []

    def _dfs(left: int, right: int) -> None:
        if len(chars) == n * 2:
            result.append("".join(chars))
            return
        if left < n:
            chars.append("(")
            _dfs(left + 1, right)
            chars.pop()
        if right < left:
            chars.append(")")
            _dfs(left, right + 1)
            chars.pop()

    _dfs(0, 0)
    return result