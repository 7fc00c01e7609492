import pytest

from rosedb.entry import (
    HEADER,
    HEADER_SIZE,
    DataType,
    Entry,
    InvalidCrcError,
    InvalidEntryError,
    StorageError,
    decode,
)


def test_size_with_extra():
    e = Entry(b"test_key", b"test_val", b"extar val", DataType.STRING, 0)
    assert e.size() == 20 + 8 + 8 + 9


def test_size_no_extra():
    e = Entry(b"key001", b"val001", data_type=1, mark=2)
    assert e.size() == 32


def test_encode_layout():
    e = Entry(b"test_key_0001", b"test_value_0001")
    enc = e.encode()
    assert len(enc) == e.size() == 48
    _, ks, vs, es, t, mark = HEADER.unpack_from(enc)
    assert (ks, vs, es, t, mark) == (13, 15, 0, 0, 0)
    assert enc[HEADER_SIZE:] == b"test_key_0001test_value_0001"


def test_encode_empty_value():
    e = Entry(b"test_key_0001")
    enc = e.encode()
    assert len(enc) == 33
    assert HEADER.unpack_from(enc)[0] == 0


def test_encode_empty_key_raises():
    with pytest.raises(InvalidEntryError):
        Entry(b"", b"val_001").encode()


def test_round_trip():
    e = Entry(b"k", b"value", b"extra", DataType.ZSET, 1)
    assert decode(e.encode()) == e


def test_decode_bad_crc():
    enc = bytearray(Entry(b"key", b"value").encode())
    enc[-1] ^= 0xFF
    with pytest.raises(InvalidCrcError):
        decode(bytes(enc))


def test_decode_short_buffer():
    enc = Entry(b"key", b"value").encode()
    with pytest.raises(InvalidEntryError):
        decode(enc[:-2])
    with pytest.raises(StorageError):
        decode(b"\x00" * 5)


@pytest.mark.parametrize(
    "data_type, code",
    [
        (DataType.STRING, 0),
        (DataType.LIST, 1),
        (DataType.HASH, 2),
        (DataType.SET, 3),
        (DataType.ZSET, 4),
    ],
)
def test_data_type_encoded_in_header(data_type, code):
    enc = Entry(b"k", b"v", data_type=data_type).encode()
    assert HEADER.unpack_from(enc)[4] == code