"""In-memory sorted sets keyed by name."""

from __future__ import annotations

import random

MAX_LEVEL = 32
PROBABILITY = 0.25

# Score reported for a member or rank that does not exist.
NOT_FOUND_SCORE = float(-(2**63))


class _Node:
    __slots__ = ("member", "score", "backward", "forward", "span")

    def __init__(self, score: float, member: str, level: int) -> None:
        self.member = member
        self.score = score
        self.backward: _Node | None = None
        self.forward: list[_Node | None] = [None] * level
        self.span: list[int] = [0] * level


def _random_level() -> int:
    level = 1
    while level < MAX_LEVEL and random.random() < PROBABILITY:
        level += 1
    return level


def _before(node: _Node, score: float, member: str) -> bool:
    return node.score < score or (node.score == score and node.member < member)


class _SkipList:
    """Skip list ordered by score, then member, with spans for ranking."""

    def __init__(self) -> None:
        self.head = _Node(0.0, "", MAX_LEVEL)
        self.tail: _Node | None = None
        self.length = 0
        self.level = 1

    def first(self) -> _Node | None:
        return self.head.forward[0]

    def insert(self, score: float, member: str) -> _Node:
        update: list[_Node] = [self.head] * MAX_LEVEL
        rank = [0] * MAX_LEVEL
        p = self.head
        for i in reversed(range(self.level)):
            rank[i] = 0 if i == self.level - 1 else rank[i + 1]
            nxt = p.forward[i]
            while nxt is not None and _before(nxt, score, member):
                rank[i] += p.span[i]
                p = nxt
                nxt = p.forward[i]
            update[i] = p

        level = _random_level()
        if level > self.level:
            for i in range(self.level, level):
                rank[i] = 0
                update[i] = self.head
                self.head.span[i] = self.length
            self.level = level

        node = _Node(score, member, level)
        for i in range(level):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
            node.span[i] = update[i].span[i] - (rank[0] - rank[i])
            update[i].span[i] = rank[0] - rank[i] + 1

        for i in range(level, self.level):
            update[i].span[i] += 1

        node.backward = None if update[0] is self.head else update[0]
        if node.forward[0] is not None:
            node.forward[0].backward = node
        else:
            self.tail = node

        self.length += 1
        return node

    def _delete_node(self, node: _Node, update: list[_Node]) -> None:
        for i in range(self.level):
            if update[i].forward[i] is node:
                update[i].span[i] += node.span[i] - 1
                update[i].forward[i] = node.forward[i]
            else:
                update[i].span[i] -= 1

        if node.forward[0] is not None:
            node.forward[0].backward = node.backward
        else:
            self.tail = node.backward

        while self.level > 1 and self.head.forward[self.level - 1] is None:
            self.level -= 1

        self.length -= 1

    def delete(self, score: float, member: str) -> None:
        update: list[_Node] = [self.head] * MAX_LEVEL
        p = self.head
        for i in reversed(range(self.level)):
            nxt = p.forward[i]
            while nxt is not None and _before(nxt, score, member):
                p = nxt
                nxt = p.forward[i]
            update[i] = p

        node = p.forward[0]
        if node is not None and node.score == score and node.member == member:
            self._delete_node(node, update)

    def get_rank(self, score: float, member: str) -> int:
        """1-based rank of the member, or 0 when it is absent."""
        rank = 0
        p = self.head
        for i in reversed(range(self.level)):
            nxt = p.forward[i]
            while nxt is not None and (
                nxt.score < score or (nxt.score == score and nxt.member <= member)
            ):
                rank += p.span[i]
                p = nxt
                nxt = p.forward[i]
            if p is not self.head and p.member == member:
                return rank
        return 0

    def element_by_rank(self, rank: int) -> _Node | None:
        traversed = 0
        p = self.head
        for i in reversed(range(self.level)):
            nxt = p.forward[i]
            while nxt is not None and traversed + p.span[i] <= rank:
                traversed += p.span[i]
                p = nxt
                nxt = p.forward[i]
            if traversed == rank:
                return p
        return None


class _SortedSetNode:
    __slots__ = ("dict", "skl")

    def __init__(self) -> None:
        self.dict: dict[str, _Node] = {}
        self.skl = _SkipList()


class SortedSet:
    """A collection of sorted sets mapping members to scores."""

    def __init__(self) -> None:
        self._record: dict[str, _SortedSetNode] = {}

    def zadd(self, key: str, score: float, member: str) -> None:
        """Add ``member`` with ``score``, or update its score."""
        item = self._record.setdefault(key, _SortedSetNode())
        existing = item.dict.get(member)
        node = None
        if existing is not None:
            if score != existing.score:
                item.skl.delete(existing.score, member)
                node = item.skl.insert(score, member)
        else:
            node = item.skl.insert(score, member)
        if node is not None:
            item.dict[member] = node

    def zscore(self, key: str, member: str) -> float:
        """The score of ``member``, or ``NOT_FOUND_SCORE`` when absent."""
        item = self._record.get(key)
        if item is None or member not in item.dict:
            return NOT_FOUND_SCORE
        return item.dict[member].score

    def zcard(self, key: str) -> int:
        """The number of members of the sorted set at ``key``."""
        item = self._record.get(key)
        return 0 if item is None else len(item.dict)

    def zrank(self, key: str, member: str) -> int:
        """0-based rank by ascending score, or -1 when absent."""
        item = self._record.get(key)
        if item is None or member not in item.dict:
            return -1
        node = item.dict[member]
        return item.skl.get_rank(node.score, member) - 1

    def zrevrank(self, key: str, member: str) -> int:
        """0-based rank by descending score, or -1 when absent."""
        item = self._record.get(key)
        if item is None or member not in item.dict:
            return -1
        node = item.dict[member]
        return item.skl.length - item.skl.get_rank(node.score, member)

    def zincrby(self, key: str, increment: float, member: str) -> float:
        """Add ``increment`` to the member's score (0 if absent); return it."""
        item = self._record.get(key)
        if item is not None and member in item.dict:
            increment += item.dict[member].score
        self.zadd(key, increment, member)
        return increment

    def zrange(self, key: str, start: int, stop: int) -> list:
        """Members and scores alternating, ascending, from ``start`` to ``stop``."""
        if key not in self._record:
            return []
        return self._find_range(key, start, stop, False)

    def zrevrange(self, key: str, start: int, stop: int) -> list:
        """Members and scores alternating, descending, from ``start`` to ``stop``."""
        if key not in self._record:
            return []
        return self._find_range(key, start, stop, True)

    def zrem(self, key: str, member: str) -> bool:
        """Remove ``member``; return whether it was present."""
        item = self._record.get(key)
        if item is None or member not in item.dict:
            return False
        node = item.dict.pop(member)
        item.skl.delete(node.score, member)
        return True

    def zgetbyrank(self, key: str, rank: int) -> list:
        """``[member, score]`` at ``rank`` counted from the lowest score."""
        if key not in self._record:
            return []
        return list(self._get_by_rank(key, rank, False))

    def zrevgetbyrank(self, key: str, rank: int) -> list:
        """``[member, score]`` at ``rank`` counted from the highest score."""
        if key not in self._record:
            return []
        return list(self._get_by_rank(key, rank, True))

    def zscorerange(self, key: str, min_score: float, max_score: float) -> list:
        """Members and scores alternating, ascending, with scores in range."""
        item = self._record.get(key)
        if item is None or min_score > max_score or item.skl.length == 0:
            return []
        skl = item.skl
        p = skl.head
        for i in reversed(range(skl.level)):
            nxt = p.forward[i]
            while nxt is not None and nxt.score < min_score:
                p = nxt
                nxt = p.forward[i]

        result: list = []
        node = p.forward[0]
        while node is not None and node.score <= max_score:
            result.extend((node.member, node.score))
            node = node.forward[0]
        return result

    def zrevscorerange(self, key: str, max_score: float, min_score: float) -> list:
        """Members and scores alternating, descending, with scores in range."""
        item = self._record.get(key)
        if item is None or max_score < min_score or item.skl.length == 0:
            return []
        skl = item.skl
        p = skl.head
        for i in reversed(range(skl.level)):
            nxt = p.forward[i]
            while nxt is not None and nxt.score <= max_score:
                p = nxt
                nxt = p.forward[i]

        result: list = []
        node: _Node | None = None if p is skl.head else p
        while node is not None and node.score >= min_score:
            result.extend((node.member, node.score))
            node = node.backward
        return result

    def _get_by_rank(self, key: str, rank: int, reverse: bool) -> tuple[str, float]:
        item = self._record[key]
        skl = item.skl
        if rank < 0 or rank > skl.length:
            return "", NOT_FOUND_SCORE
        rank = skl.length - rank if reverse else rank + 1
        found = skl.element_by_rank(rank)
        if found is None:
            return "", NOT_FOUND_SCORE
        node = item.dict.get(found.member)
        if node is None:
            return "", NOT_FOUND_SCORE
        return node.member, node.score

    def _find_range(self, key: str, start: int, stop: int, reverse: bool) -> list:
        skl = self._record[key].skl
        length = skl.length
        if start < 0:
            start = max(start + length, 0)
        if stop < 0:
            stop += length
        if start > stop or start >= length:
            return []
        stop = min(stop, length - 1)
        span = stop - start + 1

        if reverse:
            node = skl.element_by_rank(length - start) if start > 0 else skl.tail
        else:
            node = skl.element_by_rank(start + 1) if start > 0 else skl.first()

        result: list = []
        for _ in range(span):
            if node is None:
                break
            result.extend((node.member, node.score))
            node = node.backward if reverse else node.forward[0]
        return result