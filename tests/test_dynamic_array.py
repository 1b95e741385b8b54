import random

import pytest

from dsaworkbench.dynamic_array import DynamicArray


def _filled(values):
    arr = DynamicArray()
    for value in values:
        arr.append(value)
    return arr


def test_constructor_fills():
    arr = DynamicArray(4, 7)
    assert list(arr) == [7] * 4
    assert arr.capacity == 4


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_append_matches_list():
    rng = random.Random(3)
    expected = [rng.randint(0, 10**6) for _ in range(rng.randint(100, 500))]
    arr = _filled(expected)
    assert list(arr) == expected
    assert len(arr) == len(expected)
    assert arr.capacity >= len(arr)


def test_pop_back_in_reverse():
    expected = list(range(1, 21))
    arr = _filled(expected)
    while expected:
        assert arr.back() == expected[-1]
        assert arr.pop() == expected.pop()
    assert len(arr) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray().pop()


def test_random_erase_matches_list():
    rng = random.Random(11)
    expected = [rng.randint(0, 10**6) for _ in range(300)]
    arr = _filled(expected)
    for _ in range(120):
        index = rng.randrange(len(expected))
        assert arr[index] == expected[index]
        assert arr.erase(index) == expected.pop(index)
    assert list(arr) == expected


def test_insert_matches_list():
    rng = random.Random(5)
    expected = []
    arr = DynamicArray()
    for value in range(100):
        index = rng.randint(0, len(expected))
        expected.insert(index, value)
        arr.insert(index, value)
    assert list(arr) == expected
    assert arr.capacity >= len(arr)


def test_insert_count():
    arr = _filled([1, 2, 3])
    arr.insert(1, 9, 3)
    assert list(arr) == [1] + [9] * 3 + [2, 3]


def test_insert_out_of_range():
    arr = _filled([1, 2])
    with pytest.raises(IndexError):
        arr.insert(3, 0)


def test_resize_shrinks_and_grows():
    arr = DynamicArray(fill=0)
    for value in range(30):
        arr.append(value)
    arr.resize(15)
    assert list(arr) == list(range(15))
    assert arr.capacity == 15
    arr.resize(20)
    assert list(arr) == list(range(15)) + [0] * 5


def test_reserve_never_shrinks():
    arr = DynamicArray()
    arr.reserve(10)
    assert arr.capacity == 10
    arr.reserve(5)
    assert arr.capacity == 10
    assert len(arr) == 0


def test_clear():
    arr = _filled(range(10))
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity == 0
    arr.append(1)
    assert list(arr) == [1]


def test_setitem_and_at():
    arr = _filled([1, 2, 3])
    arr[1] = 20
    assert arr.at(1) == 20
    with pytest.raises(IndexError):
        arr.at(3)
    with pytest.raises(IndexError):
        arr[5] = 1


@pytest.mark.parametrize("operation", ["front", "back"])
def test_empty_ends_raise(operation):
    with pytest.raises(IndexError):
        getattr(DynamicArray(), operation)()