"""Location of a stored entry inside the data files."""

from __future__ import annotations

from dataclasses import dataclass

from .entry import Entry


@dataclass
class Indexer:
    """Index of one entry: its metadata and where it lives on disk."""

    meta: Entry
    file_id: int = 0
    entry_size: int = 0
    offset: int = 0