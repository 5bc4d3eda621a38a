"""Randomized checks of the tree's invariants against a plain set model.

Each run applies a random sequence of adds and removes to both an
OrderedTree and a Python set, then compares membership, size, ordering and
the structural invariant.
"""

import random

import pytest

from orderedtreelib import OrderedTree
from orderedtreelib.testing import TreeTestHelper


def _random_operations(rng, count, key_range):
    for _ in range(count):
        yield rng.choice(("add", "add", "remove")), rng.randint(-key_range, key_range)


def _check_against_model(tree, model, key_range):
    assert tree.size() == len(model)
    assert tree.empty() == (len(model) == 0)
    assert list(tree) == sorted(model)
    for key in range(-key_range - 1, key_range + 2):
        assert tree.has(key) == (key in model)
    assert TreeTestHelper(tree).is_valid_bst()


@pytest.mark.parametrize("seed", range(10))
def test_add_remove_matches_set_model(seed):
    rng = random.Random(seed)
    tree, model = OrderedTree(), set()

    for operation, key in _random_operations(rng, 200, 50):
        if operation == "add":
            tree.add(key)
            model.add(key)
        else:
            tree.remove(key)
            model.discard(key)

    _check_against_model(tree, model, 50)


@pytest.mark.parametrize("seed", range(5))
def test_in_order_is_strictly_ascending(seed):
    rng = random.Random(seed)
    keys = rng.sample(range(10_000), 300)
    rendered = OrderedTree(keys).get_in_order_traversal()
    values = [int(token) for token in rendered.split()]
    assert values == sorted(keys)
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("seed", range(5))
def test_copy_independence_under_random_mutation(seed):
    rng = random.Random(seed)
    original = OrderedTree(rng.sample(range(200), 60))
    snapshot = (original.size(), original.get_pre_order_traversal(),
                original.get_level_order_traversal())

    duplicate = original.copy()
    for operation, key in _random_operations(rng, 300, 200):
        getattr(duplicate, operation)(key)

    assert (original.size(), original.get_pre_order_traversal(),
            original.get_level_order_traversal()) == snapshot


@pytest.mark.parametrize("seed", range(5))
def test_width_and_height_agree_with_levels(seed):
    rng = random.Random(seed)
    tree = OrderedTree(rng.sample(range(1000), 100))
    helper = TreeTestHelper(tree)
    widths = [len(helper.level_keys(level)) for level in range(tree.get_height())]

    assert tree.get_width() == max(widths)
    assert sum(widths) == tree.size()
    assert helper.level_keys(tree.get_height()) == []


@pytest.mark.slow
def test_large_random_workload():
    rng = random.Random(12345)
    tree, model = OrderedTree(), set()

    for operation, key in _random_operations(rng, 20_000, 2_000):
        if operation == "add":
            tree.add(key)
            model.add(key)
        else:
            tree.remove(key)
            model.discard(key)

    _check_against_model(tree, model, 2_000)
