from rosedb.skiplist import SkipList


def _filled(keys, val=b"test_val"):
    skl = SkipList()
    for key in keys:
        skl.put(key, val)
    return skl


def test_new_skiplist_is_empty():
    skl = SkipList()
    assert len(skl) == 0
    assert skl.front() is None
    assert list(skl) == []


def test_exist_on_empty():
    assert SkipList().exist(b"11") is False


def test_example_flow():
    skl = _filled([b"ec", b"dc", b"ac", b"ae", b"fe"])
    assert skl.exist(b"ac") is True

    removed = skl.remove(b"ec")
    assert removed.key == b"ec"
    assert skl.exist(b"ec") is False

    ele = skl.get(b"dc")
    assert ele.key == b"dc"
    assert ele.value == b"test_val"

    pre = skl.find_prefix(b"a")
    assert pre.key == b"ac"


def test_put_keeps_keys_sorted():
    skl = _filled([b"ec", b"dc", b"ac", b"ae"])
    assert [e.key for e in skl] == [b"ac", b"ae", b"dc", b"ec"]
    assert len(skl) == 4


def test_find_prefix_mixed_keys():
    skl = _filled([b"ec", b"dc", b"ac", b"ae", b"bc", b"22"])
    assert skl.find_prefix(b"a").key == b"ac"


def test_get_values_of_any_type():
    skl = SkipList()
    skl.put(b"ec", b"test_val")
    skl.put(b"dc", 123)
    skl.put(b"ac", b"test_val")
    skl.put(b"111", ("mary", 24))
    assert skl.get(b"ec").value == b"test_val"
    assert skl.get(b"dc").value == 123
    assert skl.get(b"111").value == ("mary", 24)
    assert skl.get(b"zz") is None


def test_remove_all():
    skl = SkipList()
    skl.put(b"ec", b"test_val")
    skl.put(b"dc", 123)
    skl.put(b"ac", b"test_val")
    assert skl.remove(b"dc").value == 123
    skl.remove(b"ec")
    skl.remove(b"ac")
    assert len(skl) == 0
    assert skl.front() is None
    assert skl.remove(b"ac") is None


def test_foreach_stops_on_false():
    skl = SkipList()
    skl.put(b"ec", b"test_val1")
    skl.put(b"dc", b"test_val2")
    skl.put(b"ac", b"test_val3")
    skl.put(b"ae", b"test_val4")

    seen = []

    def first_only(e):
        seen.append(e.key)
        return False

    skl.foreach(first_only)
    assert seen == [b"ac"]
    assert skl.front().key == b"ac"
    assert len(skl) == 4

    values = []

    def collect(e):
        values.append(e.value)
        return True

    skl.foreach(collect)
    assert values == [b"test_val3", b"test_val4", b"test_val2", b"test_val1"]
    assert [e.value for e in skl] == values


def test_foreach_can_update_values():
    skl = _filled([b"ec", b"dc", b"ac", b"ae"])

    def update(e):
        e.value = b"test_val_002"
        return True

    skl.foreach(update)
    node = skl.front()
    values = []
    while node is not None:
        values.append(node.value)
        node = node.next()
    assert values == [b"test_val_002"] * 4


def test_put_same_key_replaces_value():
    skl = SkipList()
    skl.put(b"a", b"13")
    skl.put(b"a", b"19")
    assert len(skl) == 1
    assert skl.get(b"a").value == b"19"


def test_prefix_scan():
    skl = SkipList()
    skl.put(b"acccbf", 132)
    skl.put(b"acceew", 44)
    skl.put(b"acadef", 124)
    skl.put(b"accdef", 232)

    assert skl.find_prefix(b"eee").key == b"acadef"
    assert skl.find_prefix(b"acc").key == b"acccbf"
    assert skl.find_prefix(b"accc").key == b"acccbf"


def test_find_prefix_on_empty():
    assert SkipList().find_prefix(b"a") is None


def test_many_keys_stay_ordered():
    skl = SkipList()
    keys = [str(i).encode() for i in range(500)]
    for key in reversed(keys):
        skl.put(key, key)
    assert len(skl) == 500
    assert [e.key for e in skl] == sorted(keys)
    for key in keys[::7]:
        assert skl.get(key).value == key