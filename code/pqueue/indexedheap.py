from .lib.dynarray import DynamicArray
from .lib.hashtable import ChainedHashMap
from .lib.exceptions import (DuplicateValueError, EmptyContainerError,
                             MissingValueError)


# Min-heap of distinct values ordered by priority. Besides the heap buffer a
# map from every value to its current index in the buffer is kept, so that
# membership is O(1) and the priority of any value can be changed in
# O(log n).
#
# The buffer is a complete binary tree: the children of index i are at
# 2i+1 and 2i+2 and its parent is at (i-1)//2. Every structural change moves
# entries through swap(), which updates the map at the same time.
class IndexedMinHeap:
    # Entry that holds the value and its current priority
    # NOTE: the value is never reassigned, only the priority changes
    class Entry:
        def __init__(self, value, priority):
            self.value = value
            self.priority = priority

        # Helpful for debugging, print value and priority
        def __repr__(self):
            return "(v={}, p={})".format(self.value, self.priority)

    def __init__(self, capacity=10):
        self.c = DynamicArray(capacity)
        self.map = ChainedHashMap()

    # Helpful for debugging, print out the heap buffer
    def __repr__(self):
        return "<IndexedMinHeap({})>".format(list(self.c))

    def __len__(self):
        return self.c.size()

    def __contains__(self, value):
        return self.contains(value)

    def size(self):
        return self.c.size()

    def contains(self, value):
        return self.map.containsKey(value)

    # Insert value with the given priority
    # NOTE: values are unique, priorities may repeat
    def add(self, value, priority):
        if self.map.containsKey(value):
            raise DuplicateValueError(value)

        self.c.append(self.Entry(value, priority))
        last = self.c.size() - 1
        self.map.put(value, last)
        self.bubbleUp(last)

    # Gets the value with the lowest priority
    # NOTE: does *NOT* remove it from the heap
    def peek(self):
        if self.c.size() == 0:
            raise EmptyContainerError("peek at empty heap")
        return self.c.get(0).value

    def peekPriority(self):
        if self.c.size() == 0:
            raise EmptyContainerError("peek at empty heap")
        return self.c.get(0).priority

    def priority(self, value):
        index = self.map.get(value)
        if index is None:
            raise MissingValueError(value)
        return self.c.get(index).priority

    # Removes and returns the value with the lowest priority
    def poll(self):
        if self.c.size() == 0:
            raise EmptyContainerError("poll from empty heap")

        root = self.c.get(0)
        self.map.remove(root.value)

        if self.c.size() > 1:
            last = self.c.pop()
            self.c.put(0, last)
            self.map.put(last.value, 0)
            self.bubbleDown(0)
        else:
            self.c.resize(0)
        return root.value

    # Change the priority of a value already in the heap. Only one of the two
    # bubbles can move anything, depending on which way the priority went.
    def changePriority(self, value, priority):
        index = self.map.get(value)
        if index is None:
            raise MissingValueError(value)

        self.c.get(index).priority = priority
        index = self.bubbleUp(index)
        self.bubbleDown(index)

    # swap where two entries are in the heap, keeping the map in sync
    def swap(self, h, k):
        entryH = self.c.get(h)
        entryK = self.c.get(k)

        self.c.put(h, entryK)
        self.map.put(entryK.value, h)

        self.c.put(k, entryH)
        self.map.put(entryH.value, k)

    @staticmethod
    def parent(k):
        return (k - 1) // 2

    def __lessThan(self, h, k):
        return self.c.get(h).priority < self.c.get(k).priority

    # Move the entry at k toward the root while it is strictly smaller than
    # its parent. Returns the index where the entry ends up.
    def bubbleUp(self, k):
        while k > 0 and self.__lessThan(k, self.parent(k)):
            parent = self.parent(k)
            self.swap(k, parent)
            k = parent
        return k

    # Move the entry at k toward the leaves while it is strictly greater than
    # its smaller child. Returns the index where the entry ends up.
    def bubbleDown(self, k):
        while 2 * k + 1 < self.c.size():
            child = self.smallerChild(k)
            if not self.__lessThan(child, k):
                break
            self.swap(k, child)
            k = child
        return k

    # Index of the child of k with the smaller priority
    # NOTE: on equal priorities the right child wins
    # NOTE: k must have at least one child
    def smallerChild(self, k):
        left = 2 * k + 1
        right = left + 1
        assert left < self.c.size()

        if right >= self.c.size():
            return left
        if self.__lessThan(left, right):
            return left
        return right

    def getCap(self):
        return self.c.getCap()

    def loadFactor(self):
        return self.map.loadFactor()

    # Debug view of the buffer and the index map
    def dump(self):
        return "{}\n{}".format(self.c.dump(), self.map.dump())


# Some quick test code to make sure this works
if __name__ == '__main__':
    import heapq
    import random

    for _ in range(100):
        ih = IndexedMinHeap()
        hq = []

        ordered_l = [i + 1 for i in range(500)]
        shuffled_l = ordered_l[:]
        random.shuffle(shuffled_l)

        for e in shuffled_l:
            ih.add(str(e), e)
            heapq.heappush(hq, e)

        # Test how random priority changes affect min order
        for e in random.sample(shuffled_l, len(shuffled_l) // 4):
            p = random.randint(-1000, 1000)
            ih.changePriority(str(e), p)
            hq.remove(e)
            heapq.heapify(hq)
            heapq.heappush(hq, p)

        while hq:
            assert ih.peekPriority() == heapq.heappop(hq)
            ih.poll()
        assert ih.size() == 0
