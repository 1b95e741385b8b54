import pytest

from dsaworkbench.deques import Deque


def _alternating():
    dq = Deque()
    for i in range(5):
        value = 10 * (i + 1)
        if i % 2:
            dq.push_front(value)
        else:
            dq.push_back(value)
    return dq


def test_new_deque_is_empty():
    dq = Deque()
    assert len(dq) == 0
    assert not dq


def test_alternating_pushes_order():
    dq = _alternating()
    assert list(dq) == [40, 20, 10, 30, 50]
    assert dq.front() == 40
    assert dq.back() == 50


def test_pop_back_until_empty():
    dq = _alternating()
    expected = list(dq)
    popped = []
    while dq:
        assert dq.back() == expected[-1 - len(popped)]
        popped.append(dq.pop_back())
    assert popped == expected[::-1]
    assert len(dq) == 0


def test_pop_front_until_empty():
    dq = _alternating()
    expected = list(dq)
    popped = []
    while dq:
        popped.append(dq.pop_front())
    assert popped == expected


def test_mixed_operations():
    dq = Deque([1, 2, 3])
    dq.push_front(0)
    dq.push_back(4)
    assert dq.pop_front() == 0
    assert dq.pop_back() == 4
    assert list(dq) == [1, 2, 3]


def test_clear():
    dq = Deque([1, 2, 3])
    dq.clear()
    assert len(dq) == 0
    with pytest.raises(IndexError):
        dq.front()


@pytest.mark.parametrize("operation", ["pop_front", "pop_back", "front", "back"])
def test_empty_access_raises(operation):
    with pytest.raises(IndexError):
        getattr(Deque(), operation)()