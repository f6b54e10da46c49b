"""String decoding, version comparison and subsequence matching."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import zip_longest


def _repeat_count(number: str) -> int:
    return int(number) if number else 1


def _decode(chars: Iterator[str]) -> str:
    """Decode up to the matching ``]`` or the end of ``chars``."""
    number = ""
    parts: list[str] = []
    for c in chars:
        if c == "[":
            inner = _decode(chars)
            parts.append(inner * _repeat_count(number))
            number = ""
        elif c == "]":
            break
        elif "0" <= c <= "9":
            number += c
        else:
            parts.append(c)
    return "".join(parts) * _repeat_count(number)


def decode_string(s: str) -> str:
    """Expand every ``k[text]`` in ``s`` into ``text`` repeated ``k`` times."""
    return _decode(iter(s))


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings; return 1, -1 or 0.

    Missing revisions count as 0 and leading zeros are ignored.
    """
    revisions1 = (int(part) for part in version1.split("."))
    revisions2 = (int(part) for part in version2.split("."))
    for n1, n2 in zip_longest(revisions1, revisions2, fillvalue=0):
        if n1 > n2:
            return 1
        if n1 < n2:
            return -1
    return 0


def is_subsequence(s: str, t: str) -> bool:
    """Whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(c in remaining for c in s)


class Matching:
    """Answers many subsequence queries against one fixed lowercase target."""

    def __init__(self, target: str) -> None:
        table: list[dict[str, int]] = []
        following: dict[str, int] = {}
        for i in reversed(range(len(target))):
            c = target[i]
            if "a" <= c <= "z":
                following = {**following, c: i}
            table.append(following)
        table.reverse()
        self._next = table

    def is_match(self, s: str) -> bool:
        """Whether ``s`` is a subsequence of the target.

        Raises ``ValueError`` for characters other than lowercase letters.
        """
        if len(s) > len(self._next):
            return False
        position = 0
        for c in s:
            if not "a" <= c <= "z":
                raise ValueError(f"not a lowercase letter: {c!r}")
            if position >= len(self._next):
                return False
            found = self._next[position].get(c)
            if found is None:
                return False
            position = found + 1
        return True