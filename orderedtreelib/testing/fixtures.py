"""Test fixtures for orderedtreelib consumers.

These fixtures provide controlled access to internal tree state for testing
purposes without making node-level details part of the public API.
"""

from typing import Any, Dict, List, Optional

from ..core.node import BSTNode
from ..tree import OrderedTree


class TreeTestHelper:
    """Public test fixture for tree shape verification.

    Example:
        tree = OrderedTree([20, 10, 40])
        helper = TreeTestHelper(tree)

        assert helper.is_valid_bst()
        assert helper.level_keys(1) == [10, 40]
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree to inspect.

        Args:
            tree: The OrderedTree under test
        """
        self._tree = tree

    @property
    def root_key(self) -> Optional[Any]:
        root = self._tree.root
        return root.key if root is not None else None

    def find_node(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding ``key``, or None."""
        current = self._tree.root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def children_of(self, key: Any) -> Dict[str, Any]:
        """Return the keys of the children of the node holding ``key``.

        Returns:
            Dictionary with 'left' and 'right' keys (None for empty slots)

        Raises:
            KeyError: If ``key`` is not in the tree
        """
        node = self.find_node(key)
        if node is None:
            raise KeyError(key)
        return {
            'left': node.left.key if node.left is not None else None,
            'right': node.right.key if node.right is not None else None,
        }

    def level_keys(self, level: int) -> List[Any]:
        """Return the keys on one level, left to right (root level is 0)."""
        keys: List[Any] = []
        stack = [(self._tree.root, level)] if self._tree.root is not None else []
        while stack:
            node, remaining = stack.pop()
            if remaining == 0:
                keys.append(node.key)
                continue
            # Right is pushed first so the left side pops first
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, remaining - 1))
        return keys

    def all_nodes(self) -> List[BSTNode]:
        """Return every node object, pre-order."""
        nodes: List[BSTNode] = []
        stack = [self._tree.root] if self._tree.root is not None else []
        while stack:
            node = stack.pop()
            nodes.append(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return nodes

    def shares_nodes_with(self, other: OrderedTree) -> bool:
        """Check whether any node object is reachable from both trees."""
        mine = {id(node) for node in self.all_nodes()}
        return any(id(node) in mine for node in TreeTestHelper(other).all_nodes())

    def is_valid_bst(self) -> bool:
        """Check the strict ordering invariant on every node."""
        # Each entry carries the open bounds (low, high) its key must fall within
        stack = [(self._tree.root, None, None, False, False)] if self._tree.root is not None else []
        while stack:
            node, low, high, has_low, has_high = stack.pop()
            if has_low and not low < node.key:
                return False
            if has_high and not node.key < high:
                return False
            if node.left is not None:
                stack.append((node.left, low, node.key, has_low, True))
            if node.right is not None:
                stack.append((node.right, node.key, high, True, has_high))
        return True

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: Number of nodes
            - root: Root key (None if empty)
            - height: Height counted in nodes
            - valid: Whether the ordering invariant holds
        """
        return {
            'size': self._tree.size(),
            'root': self.root_key,
            'height': self._tree.get_height(),
            'valid': self.is_valid_bst(),
        }
