"""A key counter whose operations all run in constant time."""

from __future__ import annotations


class _Bucket:
    """A node of the count-ordered bucket list: all keys sharing one count."""

    __slots__ = ("count", "keys", "prev", "next")

    def __init__(self, count: int) -> None:
        self.count = count
        self.keys: set[str] = set()
        self.prev: _Bucket | None = None
        self.next: _Bucket | None = None


class AllOne:
    """Counts keys and reports one key of maximal and one of minimal count.

    Buckets of equal count form a doubly linked list ordered by count, so
    incrementing, decrementing and both queries take constant time.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._buckets: dict[int, _Bucket] = {}
        self._head = _Bucket(0)
        self._tail = _Bucket(0)
        self._head.next = self._tail
        self._tail.prev = self._head

    def inc(self, key: str) -> None:
        """Insert ``key`` with count 1, or add one to its count."""
        count = self._counts.get(key, 0)
        current = self._buckets.get(count) if count else None
        new_count = count + 1
        target = self._buckets.get(new_count)
        if target is None:
            target = self._insert_after(current or self._head, new_count)
        target.keys.add(key)
        self._counts[key] = new_count
        if current is not None:
            self._discard(current, key)

    def dec(self, key: str) -> None:
        """Subtract one from the count of ``key``; drop it when it reaches 0.

        A key that is not present is ignored.
        """
        count = self._counts.get(key)
        if count is None:
            return
        current = self._buckets[count]
        if count == 1:
            del self._counts[key]
        else:
            new_count = count - 1
            target = self._buckets.get(new_count)
            if target is None:
                target = self._insert_after(current.prev, new_count)
            target.keys.add(key)
            self._counts[key] = new_count
        self._discard(current, key)

    def get_max_key(self) -> str:
        """One of the keys with the largest count, or ``""`` when empty."""
        bucket = self._tail.prev
        return "" if bucket is self._head else next(iter(bucket.keys))

    def get_min_key(self) -> str:
        """One of the keys with the smallest count, or ``""`` when empty."""
        bucket = self._head.next
        return "" if bucket is self._tail else next(iter(bucket.keys))

    def _insert_after(self, anchor: _Bucket, count: int) -> _Bucket:
        bucket = _Bucket(count)
        bucket.prev = anchor
        bucket.next = anchor.next
        anchor.next.prev = bucket
        anchor.next = bucket
        self._buckets[count] = bucket
        return bucket

    def _discard(self, bucket: _Bucket, key: str) -> None:
        bucket.keys.discard(key)
        if not bucket.keys:
            bucket.prev.next = bucket.next
            bucket.next.prev = bucket.prev
            del self._buckets[bucket.count]