import pytest

from dsaworkbench.lru import LRUCache


def test_capacity_three_sequence():
    cache = LRUCache(3)
    for key in (1, 2, 3, 4):
        cache.put(key, key)
    assert cache.get(4) == 4
    assert cache.get(3) == 3
    assert cache.get(2) == 2
    assert cache.get(1) is None
    cache.put(5, 5)
    assert cache.get(1) is None
    assert cache.get(2) == 2
    assert cache.get(3) == 3
    assert cache.get(4) is None
    assert cache.get(5) == 5


def test_capacity_two_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) is None
    cache.put(4, 4)
    assert cache.get(1) is None
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_update_existing_key_does_not_evict():
    cache = LRUCache(2)
    cache.put(1, "a")
    cache.put(2, "b")
    cache.put(1, "c")
    assert len(cache) == 2
    assert cache.get(1) == "c"
    assert cache.get(2) == "b"


def test_update_marks_key_recent():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 10)
    cache.put(3, 3)
    assert 2 not in cache
    assert 1 in cache and 3 in cache


def test_items_order_most_recent_first():
    cache = LRUCache(3)
    cache.put("x", 1)
    cache.put("y", 2)
    cache.put("z", 3)
    cache.get("x")
    assert [key for key, _ in cache.items()] == ["x", "z", "y"]


def test_size_never_exceeds_capacity():
    cache = LRUCache(4)
    for key in range(50):
        cache.put(key, key * 2)
        assert len(cache) <= cache.capacity
    assert len(cache) == 4


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)


def test_contains_does_not_change_order():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert 1 in cache
    cache.put(3, 3)
    assert 1 not in cache