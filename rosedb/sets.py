"""In-memory sets keyed by name."""

from __future__ import annotations

import random


class Set:
    """A collection of sets of byte-string members."""

    def __init__(self) -> None:
        self._record: dict[str, set[bytes]] = {}

    def sadd(self, key: str, member: bytes) -> int:
        """Add ``member``; return the set's size afterwards."""
        members = self._record.setdefault(key, set())
        members.add(bytes(member))
        return len(members)

    def spop(self, key: str, count: int) -> list[bytes]:
        """Remove and return up to ``count`` arbitrary members."""
        members = self._record.get(key)
        if members is None or count <= 0:
            return []
        return [members.pop() for _ in range(min(count, len(members)))]

    def sismember(self, key: str, member: bytes) -> bool:
        """Whether ``member`` belongs to the set at ``key``."""
        return bytes(member) in self._record.get(key, ())

    def srandmember(self, key: str, count: int) -> list[bytes]:
        """Random members without removing them.

        A positive ``count`` gives up to that many distinct members; a
        negative one gives exactly ``-count`` members, possibly repeated.
        """
        members = self._record.get(key)
        if members is None or count == 0:
            return []
        if count > 0:
            return random.sample(sorted(members), min(count, len(members)))
        if not members:
            return [None] * -count
        pool = list(members)
        return [random.choice(pool) for _ in range(-count)]

    def srem(self, key: str, member: bytes) -> bool:
        """Remove ``member``; return whether it was present."""
        members = self._record.get(key)
        member = bytes(member)
        if members is None or member not in members:
            return False
        members.remove(member)
        return True

    def smove(self, src: str, dst: str, member: bytes) -> bool:
        """Move ``member`` from ``src`` to ``dst``; False if ``src`` is absent."""
        source = self._record.get(src)
        if source is None:
            return False
        member = bytes(member)
        target = self._record.setdefault(dst, set())
        source.discard(member)
        target.add(member)
        return True

    def scard(self, key: str) -> int:
        """The number of members of the set at ``key``."""
        return len(self._record.get(key, ()))

    def smembers(self, key: str) -> list[bytes]:
        """All members of the set at ``key``."""
        return list(self._record.get(key, ()))

    def sunion(self, *args: str) -> list[bytes]:
        """Members of the union of the given sets."""
        union: set[bytes] = set()
        for key in args:
            union.update(self._record.get(key, ()))
        return list(union)

    def sdiff(self, *args: str) -> list[bytes]:
        """Members of the first set that are in none of the others.

        Fewer than two keys, or a missing first set, gives an empty list.
        """
        if len(args) < 2 or args[0] not in self._record:
            return []
        first, *rest = args
        return [
            member
            for member in self._record[first]
            if not any(self.sismember(other, member) for other in rest)
        ]