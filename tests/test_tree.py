import math
import random

import pytest

from avltree import BalancedTree, EmptyTreeError, ascending_keys, random_keys


def height(node):
    if node is None:
        return 0
    return 1 + max(height(node.get_left()), height(node.get_right()))

def check_node(node):
    if node is None:
        return
    assert node.get_height() == height(node)
    assert abs(height(node.get_left()) - height(node.get_right())) <= 1
    check_node(node.get_left())
    check_node(node.get_right())

def check_tree(tree):
    check_node(tree.root())
    keys = tree.in_order()
    assert keys == sorted(set(keys))
    assert len(keys) == len(tree)
    assert tree.is_valid()


@pytest.fixture
def ten():
    tree = BalancedTree()
    for key in range(10):
        tree.insert(key)
    return tree


def test_empty_tree():
    tree = BalancedTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert tree.is_empty()
    assert tree.root() is None
    assert tree.in_order() == []
    assert tree.describe() == []
    assert tree.search_iterative(1) is None
    assert tree.search_recursive(1) is None
    assert tree.is_valid()


def test_find_min_max_on_empty_tree_raises():
    tree = BalancedTree()
    with pytest.raises(EmptyTreeError):
        tree.find_min()
    with pytest.raises(EmptyTreeError):
        tree.find_max()


def test_single_key():
    tree = BalancedTree([42])
    assert tree.height() == 1
    assert tree.find_min() == 42
    assert tree.find_max() == 42
    assert tree.describe() == ["42 is root"]


def test_ascending_insert_scenario(ten):
    assert ten.height() == 4
    assert ten.in_order() == list(range(10))
    assert ten.pre_order() == [3, 1, 0, 2, 7, 5, 4, 6, 8, 9]
    assert ten.post_order() == [0, 2, 1, 4, 6, 5, 9, 8, 7, 3]
    assert ten.root().get_key() == 3
    check_tree(ten)


def test_remove_absent_key_is_noop(ten):
    before = ten.pre_order()
    ten.remove(10)
    assert ten.pre_order() == before
    assert ten.height() == 4
    assert len(ten) == 10


def test_iterative_search_scenario(ten):
    assert ten.search_iterative(10) is None
    node = ten.search_iterative(7)
    assert node is not None
    assert node.get_key() == 7


def test_rr_rotation_on_three_keys():
    tree = BalancedTree()
    tree.insert(1)
    tree.insert(2)
    tree.insert(3)
    assert tree.root().get_key() == 2
    assert tree.height() == 2
    assert tree.pre_order() == [2, 1, 3]


def test_ll_rotation_on_three_keys():
    tree = BalancedTree([3, 2, 1])
    assert tree.pre_order() == [2, 1, 3]
    assert tree.height() == 2


def test_lr_rotation_on_three_keys():
    tree = BalancedTree([3, 1, 2])
    assert tree.pre_order() == [2, 1, 3]
    check_tree(tree)


def test_rl_rotation_on_three_keys():
    tree = BalancedTree([1, 3, 2])
    assert tree.pre_order() == [2, 1, 3]
    check_tree(tree)


def test_duplicate_insert_is_ignored(ten):
    before = ten.pre_order()
    ten.insert(5)
    ten.insert(0)
    assert ten.pre_order() == before
    assert len(ten) == 10


def test_remove_leaf_rebalances():
    tree = BalancedTree([2, 1, 3, 4])
    tree.remove(1)
    # node 2 becomes right-heavy by two; RR rotation lifts 3
    assert tree.pre_order() == [3, 2, 4]
    check_tree(tree)


def test_remove_needs_right_left_rotation():
    tree = BalancedTree([2, 1, 4, 3])
    tree.remove(1)
    assert tree.pre_order() == [3, 2, 4]
    check_tree(tree)


def test_remove_needs_left_right_rotation():
    tree = BalancedTree([3, 1, 4, 2])
    tree.remove(4)
    assert tree.pre_order() == [2, 1, 3]
    check_tree(tree)


def test_remove_two_children_takes_successor_on_tie():
    tree = BalancedTree([2, 1, 3])
    tree.remove(2)
    assert tree.root().get_key() == 3
    assert tree.pre_order() == [3, 1]
    check_tree(tree)


def test_remove_two_children_takes_predecessor_when_left_taller():
    tree = BalancedTree([3, 2, 4, 1])
    tree.remove(3)
    assert tree.root().get_key() == 2
    assert tree.pre_order() == [2, 1, 4]
    check_tree(tree)


def test_remove_root_of_ten(ten):
    ten.remove(3)
    assert 3 not in ten
    assert ten.in_order() == [0, 1, 2, 4, 5, 6, 7, 8, 9]
    check_tree(ten)


def test_insert_search_remove_round_trip():
    tree = BalancedTree(random_keys(50, seed=7))
    tree.insert(-1)
    assert tree.search_recursive(-1) is not None
    assert -1 in tree
    tree.remove(-1)
    assert tree.search_recursive(-1) is None
    assert tree.search_iterative(-1) is None
    assert -1 not in tree


def test_search_strategies_agree():
    keys = random_keys(200, seed=11)
    tree = BalancedTree(keys)
    for probe in range(-5, max(keys) + 5):
        a = tree.search_iterative(probe)
        b = tree.search_recursive(probe)
        assert a is b
        assert tree.search(probe) is a
        assert (a is not None) == (probe in keys)


def test_find_min_max(ten):
    assert ten.find_min() == 0
    assert ten.find_max() == 9
    ten.remove(0)
    ten.remove(9)
    assert ten.find_min() == 1
    assert ten.find_max() == 8


def test_traversal_visitor_receives_keys(ten):
    seen = []
    returned = ten.in_order(seen.append)
    assert seen == returned == list(range(10))

    seen = []
    ten.pre_order(seen.append)
    assert seen[0] == 3

    seen = []
    ten.post_order(seen.append)
    assert seen[-1] == 3


def test_destroy_is_idempotent(ten):
    root = ten.root()
    ten.destroy()
    assert ten.is_empty()
    assert ten.height() == 0
    assert ten.root() is None
    assert root.get_left() is None and root.get_right() is None
    ten.destroy()
    assert ten.is_empty()
    assert ten.in_order() == []


def test_tree_is_reusable_after_destroy(ten):
    ten.destroy()
    ten.insert(5)
    assert ten.in_order() == [5]
    assert ten.height() == 1


def test_describe(ten):
    lines = ten.describe()
    assert lines[0] == "3 is root"
    assert "1 is 3's left child" in lines
    assert "7 is 3's right child" in lines
    assert "9 is 8's right child" in lines
    assert len(lines) == 10


def test_string_keys():
    tree = BalancedTree(["pear", "apple", "fig", "kiwi"])
    assert tree.in_order() == ["apple", "fig", "kiwi", "pear"]
    assert tree.find_min() == "apple"
    check_tree(tree)


@pytest.mark.parametrize("n", [1, 2, 7, 100, 1000])
def test_height_bound_ascending(n):
    tree = BalancedTree(ascending_keys(n))
    assert tree.height() <= 1.44 * math.log2(n + 1)
    check_tree(tree)


def test_random_operations_keep_invariants():
    rng = random.Random(2024)
    for _ in range(50):
        tree = BalancedTree()
        present = set()
        seq = []
        for _ in range(rng.randint(50, 300)):
            x = rng.randint(0, 100)
            if rng.random() < 0.6:
                tree.insert(x)
                present.add(x)
                seq.append(f"insert({x})")
            else:
                tree.remove(x)
                present.discard(x)
                seq.append(f"remove({x})")
            check_tree(tree)
        assert tree.in_order() == sorted(present), seq
        if present:
            assert tree.height() <= 1.44 * math.log2(len(present) + 1)
