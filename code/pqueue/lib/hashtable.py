# Hash map that resolves collisions by chaining entries of the same bucket in
# a singly linked list. The bucket list doubles and every entry is rehashed
# once the load factor goes over LOAD_FACTOR.
#
# Keys are always compared with ==, for lookups as well as for insertion, so
# equal keys that are distinct objects map to the same entry.
class ChainedHashMap:
    LOAD_FACTOR = 0.8

    # Node of a bucket chain
    class HashEntry:
        def __init__(self, key, value, next=None):
            self.key = key
            self.value = value
            self.next = next

        # Helpful for debugging, print key and value
        def __repr__(self):
            return "({}, {})".format(self.key, self.value)

    def __init__(self, capacity=17):
        if capacity < 1:
            raise ValueError(
                "capacity must be at least 1, got {}".format(capacity))
        self.buckets = [None] * capacity
        self._size = 0

    def __repr__(self):
        return "<ChainedHashMap({})>".format(
            ", ".join("{!r}: {!r}".format(k, v) for k, v in self.items()))

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.containsKey(key)

    def __iter__(self):
        return self.keys()

    # value = hashMap[key]
    def __getitem__(self, key):
        entry = self.__find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    # hashMap[key] = value
    def __setitem__(self, key, value):
        self.put(key, value)

    # del hashMap[key]
    def __delitem__(self, key):
        if not self.containsKey(key):
            raise KeyError(key)
        self.remove(key)

    def getSize(self):
        return self._size

    def getCapacity(self):
        return len(self.buckets)

    def loadFactor(self):
        return self._size / self.getCapacity()

    @staticmethod
    def __bucketIndex(key, capacity):
        return abs(hash(key)) % capacity

    # Walk the chain of key's bucket and return the entry holding key
    def __find(self, key):
        entry = self.buckets[self.__bucketIndex(key, self.getCapacity())]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    # Average O(1), worst case O(size) when every key collides
    def get(self, key, default=None):
        entry = self.__find(key)
        if entry is None:
            return default
        return entry.value

    def containsKey(self, key):
        return self.__find(key) is not None

    # Insert or overwrite the mapping for key, returning the previous value
    # NOTE: returns None both for a new key and for a key mapped to None
    def put(self, key, value):
        index = self.__bucketIndex(key, self.getCapacity())
        entry = self.buckets[index]
        if entry is None:
            self.buckets[index] = self.HashEntry(key, value)
        else:
            while True:
                if entry.key == key:
                    previous = entry.value
                    entry.value = value
                    return previous
                if entry.next is None:
                    break
                entry = entry.next
            entry.next = self.HashEntry(key, value)

        self._size += 1
        self.__growIfNeeded()
        return None

    # Detach the entry for key from its chain and return its value
    def remove(self, key):
        index = self.__bucketIndex(key, self.getCapacity())
        prev = None
        entry = self.buckets[index]
        while entry is not None:
            if entry.key == key:
                if prev is None:
                    self.buckets[index] = entry.next
                else:
                    prev.next = entry.next
                self._size -= 1
                return entry.value
            prev = entry
            entry = entry.next
        return None

    def keys(self):
        for key, _ in self.items():
            yield key

    # NOTE: order follows buckets and changes after every rehash
    def items(self):
        for entry in self.buckets:
            while entry is not None:
                yield entry.key, entry.value
                entry = entry.next

    # Once the load factor passes LOAD_FACTOR, allocate twice the buckets and
    # rehash every entry into fresh nodes, keeping chain order.
    def __growIfNeeded(self):
        if self.loadFactor() <= self.LOAD_FACTOR:
            return

        capacity = 2 * self.getCapacity()
        buckets = [None] * capacity
        tails = [None] * capacity
        for key, value in self.items():
            index = self.__bucketIndex(key, capacity)
            entry = self.HashEntry(key, value)
            if tails[index] is None:
                buckets[index] = entry
            else:
                tails[index].next = entry
            tails[index] = entry
        self.buckets = buckets

    # Debug view of the table, one line per bucket with its chain
    def dump(self):
        lines = ["Table size: {} capacity: {}".format(self._size,
                                                      self.getCapacity())]
        for i, entry in enumerate(self.buckets):
            chain = []
            while entry is not None:
                chain.append(">{!r}--".format(entry))
                entry = entry.next
            lines.append("{}: --{}|".format(i, "".join(chain)))
        return "\n".join(lines)


# Some quick test code to make sure this works
if __name__ == '__main__':
    import random

    for _ in range(100):
        hm = ChainedHashMap(1)
        expected = {}

        keys = random.sample(range(-10000, 10000), 500)
        for key in keys:
            assert hm.put(key, key * 2) is None
            expected[key] = key * 2
            assert hm.loadFactor() <= ChainedHashMap.LOAD_FACTOR

        assert dict(hm.items()) == expected

        for key in random.sample(keys, 250):
            assert hm.remove(key) == expected.pop(key)
            assert hm.get(key) is None

        assert dict(hm.items()) == expected
        assert len(hm) == len(expected)

    # equal but distinct keys are the same key
    hm = ChainedHashMap()
    hm.put((1, "a"), 1)
    assert hm.containsKey(tuple([1, "a"]))
    assert hm.remove(tuple([1, "a"])) == 1
    assert len(hm) == 0
