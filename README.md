# rosedb

The pieces of a small embedded key-value store, in pure Python with no
third-party dependencies.

## Modules

- `rosedb.entry`: the on-disk record format. An `Entry` holds a `key`, a
  `value`, optional `extra` bytes, a `data_type` (see `DataType`: `STRING`,
  `LIST`, `HASH`, `SET`, `ZSET`) and a `mark` naming the operation.
  `Entry.encode()` gives a 20-byte big-endian header (CRC32 of the value;
  key, value and extra sizes; type; mark) followed by key, value and extra.
  An empty key raises `InvalidEntryError`. `decode(buf)` turns such bytes
  back into an `Entry`, raising `InvalidEntryError` for a short buffer and
  `InvalidCrcError` when the checksum does not match. Both derive from
  `StorageError`.
- `rosedb.dbfile`: data files named `000000000.data`, `000000001.data` and
  so on. A `DBFile(path, file_id, method, block_size)` is written with plain
  file I/O or through a memory map (`FileRWMethod.FILE_IO` /
  `FileRWMethod.MMAP`); in map mode the file is first sized to
  `block_size`. `write(entry)` appends at `offset` and advances it (an empty
  entry raises `EmptyEntryError`), `read(offset)` returns the entry stored
  there and raises `EOFError` past the end of a plain file, `sync()` and
  `close(sync)` persist and close. `DBFile` is also a context manager.
  `build(path, method, block_size)` opens every data file in a directory
  except the one with the highest id, and returns them with that id.
- `rosedb.dbmeta`: `DBMeta` records `active_write_off`, the write offset of
  the active file. `DBMeta.store(path)` saves it as JSON and
  `load_meta(path)` reads it back, giving defaults when the file is missing
  or unreadable.
- `rosedb.expires`: `save_expires(expires, path)` writes a mapping of key to
  deadline to a binary file; `load_expires(path)` reads it back, or gives an
  empty mapping when the file is missing.
- `rosedb.indexer`: `Indexer` records an entry together with the file id,
  entry size and offset where it lives.
- `rosedb.skiplist`: `SkipList` is an ordered map keyed by bytes with
  `put`, `get`, `exist`, `remove`, `front`, `foreach`, `find_prefix`,
  `len()` and iteration over its `Element`s in key order.
- `rosedb.hashes`, `rosedb.lists`, `rosedb.sets`, `rosedb.zset`: in-memory
  structures with Redis-style operations: `Hash` (`hset`, `hsetnx`, `hget`,
  `hgetall`, `hdel`, `hexists`, `hlen`, `hkeys`, `hvalues`), `List`
  (`lpush`, `rpush`, `lpop`, `rpop`, `lindex`, `lrem`, `linsert` with
  `InsertOption`, `lset`, `lrange`, `ltrim`, `llen`), `Set` (`sadd`,
  `spop`, `sismember`, `srandmember`, `srem`, `smove`, `scard`, `smembers`,
  `sunion`, `sdiff`) and `SortedSet` (`zadd`, `zscore`, `zcard`, `zrank`,
  `zrevrank`, `zincrby`, `zrange`, `zrevrange`, `zrem`, `zgetbyrank`,
  `zrevgetbyrank`, `zscorerange`, `zrevscorerange`). Range queries on a
  sorted set return members and scores alternating in one list; a missing
  member's score is `rosedb.zset.NOT_FOUND_SCORE`.
- `rosedb.utils`: `exist`, `copy_dir` and `copy_file` for files, and
  `float_to_str` / `str_to_float` for converting floats to and from plain
  decimal strings.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## A short tour

```python
import os

from rosedb.entry import Entry, DataType
from rosedb.dbfile import DBFile, FileRWMethod
from rosedb.zset import SortedSet
from rosedb.lists import List, InsertOption

os.makedirs("/tmp/data", exist_ok=True)
with DBFile("/tmp/data", 0, FileRWMethod.FILE_IO, 8 * 1024 * 1024) as df:
    df.write(Entry(b"key", b"value", b"", DataType.STRING, 0))
    print(df.read(0).value)      # b'value'

z = SortedSet()
z.zadd("langs", 12.1, "PHP")
z.zadd("langs", 34.23, "Java")
z.zadd("langs", 23.5, "Python")
print(z.zrange("langs", 0, -1))  # ['PHP', 12.1, 'Python', 23.5, 'Java', 34.23]

lst = List()
lst.rpush("l", b"a", b"c")
lst.linsert("l", InsertOption.BEFORE, b"c", b"b")
print(lst.lrange("l", 0, -1))    # [b'a', b'b', b'c']
```

## What the package does not do

There is no database object that ties these pieces together. Nothing opens
a directory as a store, writes each list, hash, set or sorted-set operation
to the data files, rebuilds the in-memory structures from those files on
start-up, enforces key expiry, or reclaims space from stale entries. The
in-memory structures keep their contents only for the life of the process;
persisting them is left to the caller, using `DBFile`, `DBMeta` and the
expiry functions.