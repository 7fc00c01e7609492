"""Persistence of the key expiry dictionary."""

from __future__ import annotations

import logging
import os
import struct

_HEADER = struct.Struct(">IQ")

logger = logging.getLogger(__name__)


def save_expires(expires: dict[str, int], path: str | os.PathLike) -> None:
    """Write every key and its deadline to ``path``."""
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as file:
        for key, deadline in expires.items():
            raw = key.encode()
            file.write(_HEADER.pack(len(raw), deadline) + raw)


def load_expires(path: str | os.PathLike) -> dict[str, int]:
    """Read the expiry dictionary; a missing file gives an empty one."""
    expires: dict[str, int] = {}
    try:
        file = open(path, "rb")
    except OSError:
        return expires
    with file:
        try:
            while True:
                header = file.read(_HEADER.size)
                if len(header) < _HEADER.size:
                    break
                key_size, deadline = _HEADER.unpack(header)
                key = file.read(key_size)
                if len(key) < key_size:
                    break
                expires[key.decode(errors="surrogateescape")] = deadline & 0xFFFFFFFF
        except OSError as err:
            logger.error("load expire err: %s", err)
    return expires