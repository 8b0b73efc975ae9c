from .exceptions import EmptyContainerError, OutOfRangeError


# Array that keeps a fixed-size backing list and doubles it when it runs out
# of room. Only the prefix [0, size) holds valid elements.
class DynamicArray:
    def __init__(self, capacity=8):
        if capacity < 1:
            raise ValueError(
                "capacity must be at least 1, got {}".format(capacity))
        self.a = [None] * capacity
        self._size = 0

    # Helpful for debugging, print the valid elements only
    def __repr__(self):
        return "<DynamicArray({})>".format(list(self))

    def __len__(self):
        return self._size

    def __iter__(self):
        for i in range(self._size):
            yield self.a[i]

    # value = dynamicArray[i]
    def __getitem__(self, i):
        return self.get(i)

    # dynamicArray[i] = value
    def __setitem__(self, i, value):
        self.put(i, value)

    def size(self):
        return self._size

    def getCap(self):
        return len(self.a)

    # Double the backing list (as many times as needed) until newSize fits.
    # NOTE: does *NOT* change the logical size
    def __growIfNeeded(self, newSize):
        cap = self.getCap()
        if newSize <= cap:
            return
        while cap < newSize:
            cap *= 2
        grown = [None] * cap
        grown[:self._size] = self.a[:self._size]
        self.a = grown

    def __checkIndex(self, i):
        if i < 0 or i >= self._size:
            raise OutOfRangeError(i, self._size)

    def get(self, i):
        self.__checkIndex(i)
        return self.a[i]

    def put(self, i, value):
        self.__checkIndex(i)
        self.a[i] = value

    def append(self, value):
        self.__growIfNeeded(self._size + 1)
        self.a[self._size] = value
        self._size += 1

    # Removes and returns the last element
    # NOTE: capacity never shrinks
    def pop(self):
        if self._size == 0:
            raise EmptyContainerError("pop from empty DynamicArray")
        self._size -= 1
        value = self.a[self._size]
        self.a[self._size] = None
        return value

    # Set the logical size directly. Slots exposed by growing the size are
    # left as they are and must be put() before they are read.
    def resize(self, newSize):
        if newSize < 0:
            raise ValueError("size cannot be negative, got {}".format(newSize))
        self.__growIfNeeded(newSize)
        self._size = newSize

    # Debug view of the whole backing list, including the invalid tail
    def dump(self):
        return "size: {} capacity: {} {}".format(self._size, self.getCap(),
                                                 self.a)


# Some quick test code to make sure this works
if __name__ == '__main__':
    arr = DynamicArray(2)

    for i in range(100):
        arr.append(i)
    assert len(arr) == 100
    assert arr.getCap() == 128
    assert list(arr) == list(range(100))

    for i in reversed(range(100)):
        assert arr.pop() == i
    assert arr.getCap() == 128

    try:
        arr.pop()
        assert False
    except EmptyContainerError:
        pass

    arr.resize(3)
    arr[2] = 'c'
    assert arr.get(2) == 'c'
