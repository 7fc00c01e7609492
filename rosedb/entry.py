"""Encoded record stored in data files."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from enum import IntEnum

# crc32, key size, value size, extra size (uint32 each), type, mark (uint16 each)
HEADER = struct.Struct(">IIIIHH")
HEADER_SIZE = HEADER.size


class StorageError(Exception):
    """Base error of the storage layer."""


class InvalidEntryError(StorageError):
    """The entry is empty or malformed."""


class InvalidCrcError(StorageError):
    """The stored checksum does not match the value."""


class DataType(IntEnum):
    """Data structure type of a stored value."""

    STRING = 0
    LIST = 1
    HASH = 2
    SET = 3
    ZSET = 4


@dataclass
class Entry:
    """One record: a key, a value, optional extra info, a type and a mark."""

    key: bytes
    value: bytes = b""
    extra: bytes = b""
    data_type: int = DataType.STRING
    mark: int = 0

    @property
    def crc32(self) -> int:
        return zlib.crc32(self.value)

    def size(self) -> int:
        """Size of the encoded entry in bytes."""
        return HEADER_SIZE + len(self.key) + len(self.value) + len(self.extra)

    def encode(self) -> bytes:
        """Encode the entry into bytes."""
        if not self.key:
            raise InvalidEntryError("entry key is empty")
        header = HEADER.pack(
            self.crc32,
            len(self.key),
            len(self.value),
            len(self.extra),
            self.data_type,
            self.mark,
        )
        return header + self.key + self.value + self.extra


def decode(buf: bytes) -> Entry:
    """Decode an entry from ``buf`` and check its checksum."""
    if len(buf) < HEADER_SIZE:
        raise InvalidEntryError("buffer shorter than entry header")
    crc, key_size, value_size, extra_size, data_type, mark = HEADER.unpack_from(buf)
    key_end = HEADER_SIZE + key_size
    value_end = key_end + value_size
    extra_end = value_end + extra_size
    if len(buf) < extra_end:
        raise InvalidEntryError("buffer shorter than entry payload")
    value = bytes(buf[key_end:value_end])
    if zlib.crc32(value) != crc:
        raise InvalidCrcError("entry checksum mismatch")
    return Entry(
        key=bytes(buf[HEADER_SIZE:key_end]),
        value=value,
        extra=bytes(buf[value_end:extra_end]),
        data_type=data_type,
        mark=mark,
    )