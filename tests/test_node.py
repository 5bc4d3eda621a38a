"""Unit tests for BSTNode and the navigation adapters."""

import unittest

from orderedtreelib import BSTNode, BSTAdapter, MirroredBSTAdapter


class TestBSTNode(unittest.TestCase):

    def setUp(self):
        #     5
        #   3   8
        #        9
        self.root = BSTNode(5, BSTNode(3), BSTNode(8, None, BSTNode(9)))

    def test_find_max_walks_right(self):
        self.assertEqual(self.root.find_max(), 9)
        self.assertEqual(self.root.left.find_max(), 3)

    def test_is_leaf(self):
        self.assertFalse(self.root.is_leaf())
        self.assertTrue(self.root.left.is_leaf())

    def test_child_count(self):
        self.assertEqual(self.root.child_count(), 2)
        self.assertEqual(self.root.right.child_count(), 1)
        self.assertEqual(self.root.left.child_count(), 0)

    def test_metadata(self):
        self.assertEqual(self.root.right.metadata(),
                         {"key": 8, "children": 1, "leaf": False})

    def test_string_forms(self):
        self.assertEqual(str(self.root), "5")
        self.assertEqual(repr(BSTNode("amy")), "BSTNode(key='amy')")


class TestAdapters(unittest.TestCase):

    def setUp(self):
        self.root = BSTNode(5, BSTNode(3), BSTNode(8))

    def test_children_left_then_right(self):
        keys = [child.key for child in BSTAdapter().get_children(self.root)]
        self.assertEqual(keys, [3, 8])

    def test_children_skip_empty_slots(self):
        node = BSTNode(5, None, BSTNode(8))
        self.assertEqual([c.key for c in BSTAdapter().get_children(node)], [8])
        self.assertEqual(list(BSTAdapter().get_children(BSTNode(1))), [])

    def test_mirrored_swaps_slots(self):
        adapter = MirroredBSTAdapter()
        self.assertEqual(adapter.get_left(self.root).key, 8)
        self.assertEqual(adapter.get_right(self.root).key, 3)
        self.assertEqual([c.key for c in adapter.get_children(self.root)], [8, 3])

    def test_is_leaf(self):
        self.assertTrue(BSTAdapter().is_leaf(self.root.left))
        self.assertFalse(MirroredBSTAdapter().is_leaf(self.root))


if __name__ == "__main__":
    unittest.main()
