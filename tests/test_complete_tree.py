import pytest

from dsaworkbench.complete_tree import CompleteBinaryTree


def _tree(keys):
    tree = CompleteBinaryTree()
    for key in keys:
        tree.push(key)
    return tree


def test_level_order_fills_left_to_right():
    tree = _tree(range(1, 8))
    assert tree.level_order() == [[1], [2, 3], [4, 5, 6, 7]]


def test_pre_order():
    assert _tree(range(1, 8)).pre_order() == [1, 2, 4, 5, 3, 6, 7]


def test_in_order():
    assert _tree(range(1, 8)).in_order() == [4, 2, 5, 1, 6, 3, 7]


def test_post_order_ends_with_root_and_holds_every_key():
    keys = list(range(1, 11))
    order = _tree(keys).post_order()
    assert order[-1] == keys[0]
    assert sorted(order) == keys


@pytest.mark.parametrize("count", [0, 1, 2, 5, 10, 16])
def test_traversals_cover_all_keys(count):
    keys = list(range(count))
    tree = _tree(keys)
    assert [key for level in tree.level_order() for key in level] == keys
    for order in (tree.pre_order(), tree.in_order(), tree.post_order()):
        assert sorted(order) == keys
    assert len(tree) == count


def test_pop_moves_last_key_to_root():
    tree = _tree(["a", "b", "c", "d"])
    assert tree.pop() == "a"
    assert tree.first() == "d"
    assert len(tree) == 3


def test_pop_single_key_empties_tree():
    tree = _tree([42])
    assert tree.pop() == 42
    assert len(tree) == 0
    with pytest.raises(IndexError):
        tree.first()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CompleteBinaryTree().pop()


def test_clear():
    tree = _tree(range(5))
    tree.clear()
    assert len(tree) == 0
    assert tree.level_order() == []