import random

import pytest

from pqueue.lib.hashtable import ChainedHashMap


class Key:
    """Key with value semantics whose instances are distinct objects."""

    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, Key) and self.name == other.name

    def __hash__(self):
        return hash(self.name)


class Colliding:
    def __init__(self, n):
        self.n = n

    def __eq__(self, other):
        return isinstance(other, Colliding) and self.n == other.n

    def __hash__(self):
        return -7

    def __repr__(self):
        return "C{}".format(self.n)


def test_put_then_get_round_trip():
    hm = ChainedHashMap()
    for i in range(100):
        assert hm.put("k{}".format(i), i) is None
    for i in range(100):
        assert hm.get("k{}".format(i)) == i
    assert hm.getSize() == len(hm) == 100


def test_put_overwrites_and_returns_previous():
    hm = ChainedHashMap()
    hm.put("a", 1)
    assert hm.put("a", 2) == 1
    assert hm.get("a") == 2
    assert hm.getSize() == 1


def test_get_missing_returns_absent():
    hm = ChainedHashMap()
    assert hm.get("nope") is None
    assert hm.get("nope", -1) == -1
    assert not hm.containsKey("nope")
    with pytest.raises(KeyError):
        hm["nope"]


def test_remove_then_get_is_absent():
    hm = ChainedHashMap()
    hm.put("a", 1)
    hm.put("b", 2)

    assert hm.remove("a") == 1
    assert hm.get("a") is None
    assert not hm.containsKey("a")
    assert hm.remove("a") is None
    assert hm.getSize() == 1
    assert hm.get("b") == 2


def test_growth_happens_past_load_factor():
    hm = ChainedHashMap(5)
    for i in range(4):
        hm.put(i, i)
    # 4 / 5 == 0.8 is still allowed
    assert hm.getCapacity() == 5

    hm.put(4, 4)
    assert hm.getCapacity() == 10
    assert dict(hm.items()) == {i: i for i in range(5)}


def test_default_capacity_grows_on_fourteenth_entry():
    hm = ChainedHashMap()
    assert hm.getCapacity() == 17
    for i in range(13):
        hm.put(i, i)
    assert hm.getCapacity() == 17
    hm.put(13, 13)
    assert hm.getCapacity() == 34


def test_growth_preserves_every_pair():
    hm = ChainedHashMap(1)
    expected = {}
    keys = random.Random(3).sample(range(-5000, 5000), 1000)
    for key in keys:
        hm.put(key, str(key))
        expected[key] = str(key)
        assert hm.loadFactor() <= ChainedHashMap.LOAD_FACTOR

    assert dict(hm.items()) == expected
    assert set(hm) == set(expected)
    for key in keys:
        assert hm.get(key) == str(key)


def test_equal_keys_are_the_same_key_everywhere():
    hm = ChainedHashMap()
    hm.put(Key("x"), 1)

    assert hm.get(Key("x")) == 1
    assert hm.containsKey(Key("x"))
    assert Key("x") in hm
    assert hm.put(Key("x"), 2) == 1
    assert hm.getSize() == 1
    assert hm.remove(Key("x")) == 2
    assert hm.getSize() == 0


def test_colliding_keys_share_a_chain():
    hm = ChainedHashMap(4)
    for n in range(3):
        hm.put(Colliding(n), n)

    assert hm.dump().count(">") == 3
    assert hm.remove(Colliding(1)) == 1
    assert hm.get(Colliding(0)) == 0
    assert hm.get(Colliding(2)) == 2
    assert hm.get(Colliding(1)) is None


def test_mapping_dunders():
    hm = ChainedHashMap()
    hm["a"] = 1
    assert hm["a"] == 1
    del hm["a"]
    assert len(hm) == 0
    with pytest.raises(KeyError):
        del hm["a"]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ChainedHashMap(0)
