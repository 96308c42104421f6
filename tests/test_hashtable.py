from collections import Counter
from dataclasses import dataclass

import pytest

from cinedex.hashtable import Hashtable, KeyValue, fnv_hash64, fnv_hash_int64


@dataclass
class Thing:
    number: int
    name: str


def test_create_empty():
    ht = Hashtable(5)
    assert len(ht) == 0
    assert ht.num_buckets == 5
    assert ht.bucket_sizes() == [0, 0, 0, 0, 0]


def test_create_zero_buckets_rejected():
    with pytest.raises(ValueError):
        Hashtable(0)


def test_add_one_remove_one():
    ht = Hashtable(5)
    thing = Thing(5, "first")
    key = fnv_hash_int64(thing.number)
    assert ht.put(key, thing) is None
    assert len(ht) == 1
    junk = ht.remove(key)
    assert junk.value is thing
    assert len(ht) == 0


def test_add_one_elem_two_times():
    ht = Hashtable(5)
    thing1 = Thing(5, "first")
    thing2 = Thing(5, "second")
    key = fnv_hash_int64(500)
    assert ht.put(key, thing1) is None
    assert len(ht) == 1

    old = ht.put(key, thing1)
    assert old == KeyValue(key, thing1)
    assert len(ht) == 1

    old = ht.put(key, thing2)
    assert old.value is thing1
    assert len(ht) == 1
    assert ht.lookup(key).value is thing2


def test_add_one_remove_twice():
    ht = Hashtable(5)
    thing = Thing(5, "first")
    key = fnv_hash_int64(500)
    assert ht.put(key, thing) is None
    assert len(ht) == 1
    junk = ht.remove(key)
    assert junk.value is thing
    assert len(ht) == 0
    with pytest.raises(KeyError):
        ht.remove(key)
    assert len(ht) == 0


def test_add_multiple_items():
    ht = Hashtable(100)
    things = [Thing(5, "first"), Thing(395, "second"), Thing(18439286, "third")]
    for count, thing in enumerate(things, start=1):
        ht.put(fnv_hash_int64(thing.number), thing)
        assert len(ht) == count


def test_lookup():
    ht = Hashtable(100)
    things = [Thing(5, "first"), Thing(381937362, "second"), Thing(9284, "third")]
    for thing in things:
        ht.put(fnv_hash_int64(thing.number), thing)
    assert len(ht) == 3
    found = ht.lookup(fnv_hash_int64(things[1].number))
    assert found.key == fnv_hash_int64(things[1].number)
    assert found.value is things[1]
    assert len(ht) == 3
    with pytest.raises(KeyError):
        ht.lookup(fnv_hash_int64(12345))


def test_two_elems_one_bucket():
    ht = Hashtable(15)
    thing1 = Thing(5, "first")
    thing2 = Thing(381937362, "second")
    ht.put(5, thing1)
    ht.put(20, thing2)
    assert len(ht) == 2
    assert ht.bucket_index(5) == ht.bucket_index(20)
    first = ht.lookup(5)
    assert first.key == 5 and first.value is thing1
    second = ht.lookup(20)
    assert second.key == 20 and second.value is thing2


def test_resize():
    ht = Hashtable(15)
    for i in range(60):
        value = {"num": i}
        assert ht.put(i, value) is None
        assert ht.put(i, value) is not None and ht.lookup(i).value is value

        found = ht.lookup(i)
        assert found.key == i
        assert found.value is value

        with pytest.raises(KeyError):
            ht.lookup(i + 1)
        with pytest.raises(KeyError):
            ht.remove(i + 1)

        removed = ht.remove(i)
        assert removed.key == i
        assert removed.value is value
        assert len(ht) == i
        assert ht.put(i, value) is None
        assert ht.put(i, value).value is value
        assert len(ht) == i + 1
    assert ht.num_buckets == 135
    assert sorted(kv.key for kv in ht) == list(range(60))


def test_iterate_empty():
    ht = Hashtable(5)
    assert list(ht) == []


def test_add_and_iterate():
    ht = Hashtable(5)
    for i in range(10):
        assert ht.put(i, {"num": i}) is None
    assert len(ht) == 10
    counts = Counter(kv.value["num"] for kv in ht)
    assert counts == Counter(range(10))


def test_iterate_with_empty_buckets():
    ht = Hashtable(6)
    for i in range(0, 20, 2):
        assert ht.put(i, {"num": i}) is None
    assert len(ht) == 10
    assert ht.num_buckets == 6
    for index, size in enumerate(ht.bucket_sizes()):
        if index % 2 == 0:
            assert size != 0
        else:
            assert size == 0
    counts = Counter(kv.value["num"] for kv in ht)
    assert counts == Counter(range(0, 20, 2))


def test_contains():
    ht = Hashtable(4)
    ht.put(7, "seven")
    assert 7 in ht
    assert 8 not in ht
    assert "7" not in ht


def test_negative_key_wraps_to_unsigned():
    ht = Hashtable(4)
    ht.put(-1, "max")
    assert ht.lookup((1 << 64) - 1).value == "max"


def test_fnv_hash64_known_values():
    assert fnv_hash64(b"") == 0xCBF29CE484222325
    assert fnv_hash64(b"a") == 0xAF63DC4C8601EC8C
    assert fnv_hash64("a") == fnv_hash64(b"a")


def test_fnv_hash_int64_uses_little_endian_bytes():
    assert fnv_hash_int64(5) == fnv_hash64(bytes([5, 0, 0, 0, 0, 0, 0, 0]))
    assert fnv_hash_int64(0) == fnv_hash64(bytes(8))
    assert fnv_hash_int64(5) != fnv_hash_int64(6)