import pytest

from pqueue.lib.dynarray import DynamicArray
from pqueue.lib.exceptions import EmptyContainerError, OutOfRangeError


def test_append_doubles_capacity_without_reordering():
    arr = DynamicArray(2)
    caps = []
    for i in range(9):
        arr.append(i)
        caps.append(arr.getCap())

    assert caps == [2, 2, 4, 4, 8, 8, 8, 8, 16]
    assert list(arr) == list(range(9))
    assert arr.size() == len(arr) == 9


def test_default_capacity_is_eight():
    assert DynamicArray().getCap() == 8


def test_pop_returns_last_and_never_shrinks():
    arr = DynamicArray(1)
    for c in "abcde":
        arr.append(c)
    cap = arr.getCap()

    assert arr.pop() == "e"
    assert arr.pop() == "d"
    assert arr.size() == 3
    assert arr.getCap() == cap
    # popped slot is cleared in the backing list
    assert arr.a[3] is None


def test_pop_on_empty_fails():
    arr = DynamicArray()
    with pytest.raises(EmptyContainerError):
        arr.pop()

    arr.append(1)
    arr.pop()
    with pytest.raises(IndexError):
        arr.pop()


@pytest.mark.parametrize("index", [-1, 3, 8])
def test_get_and_put_outside_size_fail(index):
    arr = DynamicArray(8)
    for i in range(3):
        arr.append(i)

    with pytest.raises(OutOfRangeError):
        arr.get(index)
    with pytest.raises(OutOfRangeError):
        arr.put(index, 42)
    assert list(arr) == [0, 1, 2]


def test_put_overwrites_in_place():
    arr = DynamicArray()
    arr.append("x")
    arr.append("y")
    arr.put(0, "z")
    arr[1] = "w"

    assert arr.get(0) == "z"
    assert arr[1] == "w"


def test_resize_grows_by_doubling_and_keeps_stale_slots():
    arr = DynamicArray(8)
    for i in range(4):
        arr.append(i)

    arr.resize(20)
    assert arr.size() == 20
    assert arr.getCap() == 32
    assert arr.get(3) == 3

    arr.resize(1)
    assert arr.size() == 1
    assert arr.getCap() == 32
    # slots beyond the size are allocated but logically invalid
    with pytest.raises(OutOfRangeError):
        arr.get(2)

    arr.resize(0)
    assert len(arr) == 0


def test_resize_rejects_negative_size():
    with pytest.raises(ValueError):
        DynamicArray().resize(-1)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        DynamicArray(0)
