"""Checking integer sequences for UTF-8 well-formedness."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice


def _continuation_count(lead: int) -> int | None:
    """Number of continuation bytes a lead byte announces, or ``None`` if invalid."""
    if lead & 0b1111_1000 == 0b1111_1000:
        return None
    if lead & 0b1111_0000 == 0b1111_0000:
        return 3
    if lead & 0b1110_0000 == 0b1110_0000:
        return 2
    if lead & 0b1100_0000 == 0b1100_0000:
        return 1
    if lead & 0b1000_0000 == 0:
        return 0
    return None


def valid_utf8(data: Iterable[int]) -> bool:
    """Whether the low bytes of ``data`` form a valid UTF-8 sequence."""
    octets = (n & 0xFF for n in data)
    for lead in octets:
        needed = _continuation_count(lead)
        if needed is None:
            return False
        following = list(islice(octets, needed))
        if len(following) < needed or not all(b & 0b1000_0000 for b in following):
            return False
    return True