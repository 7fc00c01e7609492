"""In-memory hash tables keyed by name."""

from __future__ import annotations


class Hash:
    """A collection of hash tables, each mapping field names to values."""

    def __init__(self) -> None:
        self._record: dict[str, dict[str, bytes]] = {}

    def hset(self, key: str, field: str, value: bytes) -> int:
        """Set ``field`` to ``value``; return the number of fields afterwards."""
        table = self._record.setdefault(key, {})
        table[field] = value
        return len(table)

    def hsetnx(self, key: str, field: str, value: bytes) -> bool:
        """Set ``field`` only if it is not set yet; return whether it was."""
        table = self._record.setdefault(key, {})
        if field in table:
            return False
        table[field] = value
        return True

    def hget(self, key: str, field: str) -> bytes | None:
        """The value of ``field``, or None."""
        return self._record.get(key, {}).get(field)

    def hgetall(self, key: str) -> list:
        """Fields and values alternating: field, value, field, value, ..."""
        result: list = []
        for field, value in self._record.get(key, {}).items():
            result.extend((field, value))
        return result

    def hdel(self, key: str, field: str) -> bool:
        """Remove ``field``; return whether it existed."""
        table = self._record.get(key)
        if table is None or field not in table:
            return False
        del table[field]
        return True

    def hexists(self, key: str, field: str) -> bool:
        """Whether ``field`` exists in the hash at ``key``."""
        return field in self._record.get(key, {})

    def hlen(self, key: str) -> int:
        """The number of fields in the hash at ``key``."""
        return len(self._record.get(key, {}))

    def hkeys(self, key: str) -> list[str]:
        """All field names of the hash at ``key``."""
        return list(self._record.get(key, {}))

    def hvalues(self, key: str) -> list[bytes]:
        """All values of the hash at ``key``."""
        return list(self._record.get(key, {}).values())