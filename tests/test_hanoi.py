import pytest

from dsaworkbench.hanoi import Tower, solve_hanoi


@pytest.mark.parametrize("count", [1, 2, 3, 5, 8])
def test_all_disks_end_on_last_tower(count):
    first, middle, last = solve_hanoi(count)
    assert len(first) == 0
    assert len(middle) == 0
    assert last.disks == tuple(range(count - 1, -1, -1))


@pytest.mark.parametrize("count", [0, -2])
def test_no_disks(count):
    towers = solve_hanoi(count)
    assert [len(tower) for tower in towers] == [0, 0, 0]
    assert [tower.index for tower in towers] == [0, 1, 2]


def test_add_rejects_larger_disk():
    tower = Tower(0)
    tower.add(2)
    with pytest.raises(ValueError):
        tower.add(3)
    with pytest.raises(ValueError):
        tower.add(2)
    assert tower.disks == (2,)


def test_move_top_to():
    source, target = Tower(0), Tower(1)
    source.add(5)
    source.add(1)
    source.move_top_to(target)
    assert source.disks == (5,)
    assert target.disks == (1,)


def test_move_from_empty_tower():
    with pytest.raises(IndexError):
        Tower(0).move_top_to(Tower(1))


def test_failed_move_keeps_disk():
    source, target = Tower(0), Tower(1)
    source.add(4)
    target.add(1)
    with pytest.raises(ValueError):
        source.move_top_to(target)
    assert source.disks == (4,)
    assert target.disks == (1,)


def test_move_disks_partial():
    source, destination, buffer = Tower(0), Tower(1), Tower(2)
    for disk in (3, 2, 1, 0):
        source.add(disk)
    source.move_disks(2, destination, buffer)
    assert source.disks == (3, 2)
    assert destination.disks == (1, 0)
    assert buffer.disks == ()