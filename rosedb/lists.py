"""In-memory lists keyed by name."""

from __future__ import annotations

from collections import deque
from enum import IntEnum


class InsertOption(IntEnum):
    """Where ``List.linsert`` places the new value relative to the pivot."""

    BEFORE = 0
    AFTER = 1


class List:
    """A collection of lists of byte-string values."""

    def __init__(self) -> None:
        self._record: dict[str, deque[bytes]] = {}

    def _valid_index(self, key: str, index: int) -> int | None:
        items = self._record.get(key)
        if not items:
            return None
        length = len(items)
        if index < 0:
            index += length
        if 0 <= index < length:
            return index
        return None

    @staticmethod
    def _handle_index(length: int, start: int, end: int) -> tuple[int, int]:
        if start < 0:
            start += length
        if end < 0:
            end += length
        if start < 0:
            start = 0
        if end >= length:
            end = length - 1
        return start, end

    def _push(self, front: bool, key: str, values: tuple[bytes, ...]) -> int:
        items = self._record.setdefault(key, deque())
        if front:
            items.extendleft(values)
        else:
            items.extend(values)
        return len(items)

    def _pop(self, front: bool, key: str) -> bytes | None:
        items = self._record.get(key)
        if not items:
            return None
        return items.popleft() if front else items.pop()

    def lpush(self, key: str, *args: bytes) -> int:
        """Insert values at the head one by one; return the new length."""
        return self._push(True, key, args)

    def lpop(self, key: str) -> bytes | None:
        """Remove and return the first value, or None if the list is empty."""
        return self._pop(True, key)

    def rpush(self, key: str, *args: bytes) -> int:
        """Insert values at the tail one by one; return the new length."""
        return self._push(False, key, args)

    def rpop(self, key: str) -> bytes | None:
        """Remove and return the last value, or None if the list is empty."""
        return self._pop(False, key)

    def lindex(self, key: str, index: int) -> bytes | None:
        """The value at ``index`` (negative counts from the tail), or None."""
        position = self._valid_index(key, index)
        if position is None:
            return None
        return self._record[key][position]

    def lrem(self, key: str, value: bytes, count: int) -> int:
        """Remove values equal to ``value``; return how many were removed.

        A positive ``count`` removes that many from the head, a negative one
        that many from the tail, and zero removes them all.
        """
        items = self._record.get(key)
        if items is None:
            return 0
        limit = abs(count) if count else None
        ordered = reversed(items) if count < 0 else items
        kept: list[bytes] = []
        removed = 0
        for item in ordered:
            if item == value and (limit is None or removed < limit):
                removed += 1
                continue
            kept.append(item)
        if count < 0:
            kept.reverse()
        self._record[key] = deque(kept)
        return removed

    def linsert(self, key: str, option: InsertOption, pivot: bytes, value: bytes) -> int:
        """Insert ``value`` before or after the first ``pivot``.

        Return the new length, or -1 when the pivot is not found.
        """
        items = self._record.get(key)
        if items is None:
            return -1
        try:
            position = items.index(pivot)
        except ValueError:
            return -1
        if option == InsertOption.BEFORE:
            items.insert(position, value)
        elif option == InsertOption.AFTER:
            items.insert(position + 1, value)
        return len(items)

    def lset(self, key: str, index: int, value: bytes) -> bool:
        """Replace the value at ``index``; return whether the index was valid."""
        position = self._valid_index(key, index)
        if position is None:
            return False
        self._record[key][position] = value
        return True

    def lrange(self, key: str, start: int, end: int) -> list[bytes]:
        """Values between ``start`` and ``end`` inclusive."""
        items = self._record.get(key)
        if not items:
            return []
        length = len(items)
        start, end = self._handle_index(length, start, end)
        if start > end or start >= length:
            return []
        return list(items)[start:end + 1]

    def ltrim(self, key: str, start: int, end: int) -> bool:
        """Keep only the values between ``start`` and ``end`` inclusive.

        Return False when the list is missing or the range covers it whole.
        """
        items = self._record.get(key)
        if not items:
            return False
        length = len(items)
        start, end = self._handle_index(length, start, end)
        if start <= 0 and end >= length - 1:
            return False
        if start > end or start >= length:
            del self._record[key]
            return True
        self._record[key] = deque(list(items)[start:end + 1])
        return True

    def llen(self, key: str) -> int:
        """The number of values in the list at ``key``."""
        return len(self._record.get(key, ()))