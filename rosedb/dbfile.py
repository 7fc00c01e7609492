"""Data files holding encoded entries."""

from __future__ import annotations

import mmap
import os
from enum import IntEnum
from pathlib import Path

from .entry import HEADER, HEADER_SIZE, Entry, StorageError, decode

FILE_PERM = 0o644
DB_FILE_FORMAT_NAME = "{:09d}.data"


class EmptyEntryError(StorageError):
    """The entry or its key is empty."""


class FileRWMethod(IntEnum):
    """How a data file is read and written."""

    FILE_IO = 0
    MMAP = 1


class DBFile:
    """A data file read and written at byte offsets."""

    def __init__(self, path, file_id: int, method: FileRWMethod, block_size: int) -> None:
        self.id = file_id
        self.path = str(path)
        self.offset = 0
        self.method = FileRWMethod(method)
        self.name = os.path.join(self.path, DB_FILE_FORMAT_NAME.format(file_id))
        fd = os.open(self.name, os.O_CREAT | os.O_RDWR, FILE_PERM)
        self.file = os.fdopen(fd, "r+b")
        self.mmap: mmap.mmap | None = None
        if self.method is FileRWMethod.MMAP:
            try:
                self.file.truncate(block_size)
                self.mmap = mmap.mmap(self.file.fileno(), 0)
            except OSError:
                self.file.close()
                raise

    def __enter__(self) -> DBFile:
        return self

    def __exit__(self, *exc) -> None:
        self.close(True)

    def _read_at(self, offset: int, n: int) -> bytes:
        if n == 0:
            return b""
        if self.mmap is not None:
            chunk = self.mmap[offset:offset + n] if offset <= len(self.mmap) else b""
            return chunk.ljust(n, b"\x00")
        self.file.seek(offset)
        data = self.file.read(n)
        if len(data) < n:
            raise EOFError(f"unexpected end of file at offset {offset}")
        return data

    def read(self, offset: int) -> Entry:
        """Read the entry stored at ``offset``; raise EOFError past the end."""
        header = self._read_at(offset, HEADER_SIZE)
        _, key_size, value_size, extra_size, _, _ = HEADER.unpack(header)
        payload = self._read_at(offset + HEADER_SIZE, key_size + value_size + extra_size)
        return decode(header + payload)

    def write(self, entry: Entry | None) -> None:
        """Write ``entry`` at the current offset and advance it."""
        if entry is None or not entry.key:
            raise EmptyEntryError("entry or the key of entry is empty")
        data = entry.encode()
        if self.mmap is not None:
            if self.offset < len(self.mmap):
                end = min(self.offset + len(data), len(self.mmap))
                self.mmap[self.offset:end] = data[: end - self.offset]
        else:
            self.file.seek(self.offset)
            self.file.write(data)
        self.offset += entry.size()

    def sync(self) -> None:
        """Persist written data to stable storage."""
        if self.mmap is not None:
            self.mmap.flush()
        elif not self.file.closed:
            self.file.flush()
            os.fsync(self.file.fileno())

    def close(self, sync: bool) -> None:
        """Close the file, persisting data first when ``sync`` is true."""
        if sync:
            self.sync()
        if self.mmap is not None:
            self.mmap.close()
            self.mmap = None
        self.file.close()


def build(path, method: FileRWMethod, block_size: int) -> tuple[dict[int, DBFile], int]:
    """Open the archived data files in ``path`` and find the active file id."""
    file_ids = []
    for child in Path(path).iterdir():
        if child.name.endswith("data"):
            head = child.name.split(".")[0]
            try:
                file_ids.append(int(head))
            except ValueError:
                file_ids.append(0)
    file_ids.sort()
    if not file_ids:
        return {}, 0
    archived = {fid: DBFile(path, fid, method, block_size) for fid in file_ids[:-1]}
    return archived, file_ids[-1]