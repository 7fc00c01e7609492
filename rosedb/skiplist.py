"""Ordered skip list keyed by bytes."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterator
from typing import Any

MAX_LEVEL = 18
PROBABILITY = 1 / math.e


class Element:
    """A key and its value stored in the skip list."""

    __slots__ = ("key", "value", "_next")

    def __init__(self, key: bytes, value: Any, level: int) -> None:
        self.key = key
        self.value = value
        self._next: list[Element | None] = [None] * level

    def next(self) -> Element | None:
        """The following element in key order, or None at the end."""
        return self._next[0]

    def __repr__(self) -> str:
        return f"Element(key={self.key!r}, value={self.value!r})"


class SkipList:
    """Skip list mapping unique byte keys to values, kept in key order."""

    def __init__(self) -> None:
        self._head = Element(b"", None, MAX_LEVEL)
        self._len = 0
        self._rand = random.Random()
        self._prob_table = [PROBABILITY ** i for i in range(MAX_LEVEL)]

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Element]:
        node = self.front()
        while node is not None:
            yield node
            node = node.next()

    def front(self) -> Element | None:
        """The element with the smallest key, or None when empty."""
        return self._head._next[0]

    def _back_nodes(self, key: bytes) -> list[Element]:
        prev = self._head
        prevs: list[Element] = [self._head] * MAX_LEVEL
        for level in reversed(range(MAX_LEVEL)):
            nxt = prev._next[level]
            while nxt is not None and key > nxt.key:
                prev = nxt
                nxt = nxt._next[level]
            prevs[level] = prev
        return prevs

    def _first_not_less(self, key: bytes) -> Element | None:
        return self._back_nodes(key)[0]._next[0]

    def _random_level(self) -> int:
        r = self._rand.random()
        level = 1
        while level < MAX_LEVEL and r < self._prob_table[level]:
            level += 1
        return level

    def put(self, key: bytes, value: Any) -> Element:
        """Store ``value`` under ``key``, replacing any existing value."""
        key = bytes(key)
        prevs = self._back_nodes(key)
        element = prevs[0]._next[0]
        if element is not None and element.key == key:
            element.value = value
            return element

        element = Element(key, value, self._random_level())
        for level in range(len(element._next)):
            element._next[level] = prevs[level]._next[level]
            prevs[level]._next[level] = element
        self._len += 1
        return element

    def get(self, key: bytes) -> Element | None:
        """The element stored under ``key``, or None."""
        key = bytes(key)
        element = self._first_not_less(key)
        if element is not None and element.key == key:
            return element
        return None

    def exist(self, key: bytes) -> bool:
        """Whether ``key`` is stored."""
        return self.get(key) is not None

    def remove(self, key: bytes) -> Element | None:
        """Remove ``key`` and return its element, or None if absent."""
        key = bytes(key)
        prevs = self._back_nodes(key)
        element = prevs[0]._next[0]
        if element is None or element.key != key:
            return None
        for level, nxt in enumerate(element._next):
            prevs[level]._next[level] = nxt
        self._len -= 1
        return element

    def foreach(self, fun: Callable[[Element], bool]) -> None:
        """Call ``fun`` on each element in order until it returns False."""
        for element in self:
            if not fun(element):
                break

    def find_prefix(self, prefix: bytes) -> Element | None:
        """The first element whose key is not less than ``prefix``.

        When every key is smaller, the front element is returned.
        """
        element = self._first_not_less(bytes(prefix))
        if element is None:
            element = self.front()
        return element