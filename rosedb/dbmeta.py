"""Extra database information persisted between runs."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass


@dataclass
class DBMeta:
    """Database meta information."""

    active_write_off: int = 0

    def store(self, path: str | os.PathLike) -> None:
        """Write the meta information to ``path`` as JSON."""
        data = json.dumps({"active_write_off": self.active_write_off}, separators=(",", ":"))
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as file:
            file.write(data)


def load_meta(path: str | os.PathLike) -> DBMeta:
    """Load meta information; a missing or unreadable file gives defaults."""
    try:
        with open(path, encoding="utf-8") as file:
            data = json.load(file)
    except (OSError, ValueError):
        return DBMeta()
    if not isinstance(data, dict):
        return DBMeta()
    offset = data.get("active_write_off", 0)
    if not isinstance(offset, int) or isinstance(offset, bool):
        return DBMeta()
    return DBMeta(active_write_off=offset)