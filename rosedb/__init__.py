"""Data files, an expiry table, a skip list and in-memory list, hash, set and sorted-set structures for a key-value store."""

__version__ = "0.1.0"