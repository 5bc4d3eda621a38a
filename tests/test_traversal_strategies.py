"""Unit tests for traversal strategies.

Tests the four traversal orders, both as the legacy space-terminated
strings on OrderedTree and through the traverser classes directly,
including depth limits and the mirrored adapter.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from orderedtreelib import (
    OrderedTree,
    TraversalStrategy,
    BSTAdapter,
    MirroredBSTAdapter,
    create_traverser,
)
from orderedtreelib.core.traverser import (
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    resolve_strategy,
)

EXAMPLE_KEYS = [20, 40, 10, 70, 99, -2, 59, 43]


class TestTraversalStrings(unittest.TestCase):
    """Test the string-rendering traversal methods."""

    def setUp(self):
        self.tree = OrderedTree(EXAMPLE_KEYS)

    def test_pre_order(self):
        self.assertEqual(self.tree.get_pre_order_traversal(), "20 10 -2 40 70 59 43 99 ")

    def test_in_order(self):
        self.assertEqual(self.tree.get_in_order_traversal(), "-2 10 20 40 43 59 70 99 ")

    def test_post_order(self):
        self.assertEqual(self.tree.get_post_order_traversal(), "-2 10 43 59 99 70 40 20 ")

    def test_level_order(self):
        self.assertEqual(self.tree.get_level_order_traversal(), "20 10 40 -2 70 59 99 43 ")

    def test_empty_tree_traversals(self):
        tree = OrderedTree()
        self.assertEqual(tree.get_pre_order_traversal(), "")
        self.assertEqual(tree.get_in_order_traversal(), "")
        self.assertEqual(tree.get_post_order_traversal(), "")
        self.assertEqual(tree.get_level_order_traversal(), "")

    def test_single_node_level_order(self):
        self.assertEqual(OrderedTree([7]).get_level_order_traversal(), "7 ")

    def test_string_tree(self):
        tree = OrderedTree(["gene", "mary", "bea", "uma", "yan", "amy", "ron", "opal"])
        self.assertEqual(tree.get_pre_order_traversal(), "gene bea amy mary uma ron opal yan ")
        self.assertEqual(tree.get_in_order_traversal(), "amy bea gene mary opal ron uma yan ")
        self.assertEqual(tree.get_level_order_traversal(), "gene bea mary amy uma ron yan opal ")


class TestTraverserClasses(unittest.TestCase):
    """Test traversers against raw nodes."""

    def setUp(self):
        self.tree = OrderedTree(EXAMPLE_KEYS)
        self.adapter = BSTAdapter()

    def _keys(self, traverser, **kwargs):
        return [node.key for node, _ in traverser.traverse(self.tree.root, **kwargs)]

    def test_depths_are_relative_to_root(self):
        pairs = [(node.key, depth) for node, depth in
                 LevelOrderTraverser(self.adapter).traverse(self.tree.root)]
        self.assertEqual(pairs, [(20, 0), (10, 1), (40, 1), (-2, 2), (70, 2),
                                 (59, 3), (99, 3), (43, 4)])

    def test_absent_root_yields_nothing(self):
        for traverser_class in (PreOrderTraverser, InOrderTraverser,
                                PostOrderTraverser, LevelOrderTraverser):
            self.assertEqual(list(traverser_class().traverse(None)), [])

    def test_max_depth_limits_exploration(self):
        self.assertEqual(self._keys(PreOrderTraverser(self.adapter), max_depth=1), [20, 10, 40])
        self.assertEqual(self._keys(InOrderTraverser(self.adapter), max_depth=1), [10, 20, 40])
        self.assertEqual(self._keys(PostOrderTraverser(self.adapter), max_depth=1), [10, 40, 20])
        self.assertEqual(self._keys(LevelOrderTraverser(self.adapter), max_depth=1), [20, 10, 40])

    def test_min_depth_skips_shallow_nodes(self):
        self.assertEqual(
            self._keys(InOrderTraverser(self.adapter), min_depth=1),
            [-2, 10, 40, 43, 59, 70, 99],
        )

    def test_single_level_window(self):
        self.assertEqual(
            self._keys(LevelOrderTraverser(self.adapter), min_depth=2, max_depth=2),
            [-2, 70],
        )

    def test_mirrored_adapter_reverses_in_order(self):
        keys = self._keys(InOrderTraverser(MirroredBSTAdapter()))
        self.assertEqual(keys, [99, 70, 59, 43, 40, 20, 10, -2])

    def test_mirrored_level_order_goes_right_to_left(self):
        keys = self._keys(LevelOrderTraverser(MirroredBSTAdapter()))
        self.assertEqual(keys, [20, 40, 10, 70, -2, 99, 59, 43])


class TestTraverserFactory:
    """create_traverser accepts enum members and names."""

    @pytest.mark.parametrize("name, expected", [
        ("pre", PreOrderTraverser),
        ("pre_order", PreOrderTraverser),
        ("IN", InOrderTraverser),
        ("in_order", InOrderTraverser),
        ("post_order", PostOrderTraverser),
        ("level", LevelOrderTraverser),
        ("bfs", LevelOrderTraverser),
        (TraversalStrategy.POST_ORDER, PostOrderTraverser),
    ])
    def test_create_by_name(self, name, expected):
        assert isinstance(create_traverser(name), expected)

    def test_default_adapter(self):
        assert isinstance(create_traverser("in").adapter, BSTAdapter)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            create_traverser("zigzag")

    def test_resolve_enum_value(self):
        assert resolve_strategy("level_order") is TraversalStrategy.LEVEL_ORDER


class TestTreeIteration:

    def test_iter_is_ascending(self):
        tree = OrderedTree(EXAMPLE_KEYS)
        assert list(tree) == sorted(EXAMPLE_KEYS)

    def test_reversed_is_descending(self):
        tree = OrderedTree(EXAMPLE_KEYS)
        assert list(reversed(tree)) == sorted(EXAMPLE_KEYS, reverse=True)

    def test_keys_by_strategy(self):
        tree = OrderedTree(EXAMPLE_KEYS)
        assert tree.keys("pre") == [20, 10, -2, 40, 70, 59, 43, 99]
        assert tree.keys(TraversalStrategy.POST_ORDER) == [-2, 10, 43, 59, 99, 70, 40, 20]


if __name__ == "__main__":
    unittest.main()
