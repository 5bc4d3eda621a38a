"""BSTNode container for orderedtreelib.

The node is intentionally kept simple - it's primarily a data container
holding a key and two child slots. Navigation logic is delegated to the
BSTAdapter and the ordering logic lives in OrderedTree.
"""

from typing import Any, Dict, Generic, Optional, TypeVar

K = TypeVar("K")


class BSTNode(Generic[K]):
    """A single node of a binary search tree.

    A node is exclusively owned by its parent (or by the tree, for the
    root). There is no back-reference to the parent, so a subtree can be
    detached simply by overwriting the slot that holds it.
    """

    __slots__ = ("key", "left", "right")

    def __init__(self, key: K,
                 left: "Optional[BSTNode[K]]" = None,
                 right: "Optional[BSTNode[K]]" = None):
        """Initialize a node.

        Args:
            key: Key stored at this node
            left: Left child (keys strictly less than ``key``)
            right: Right child (keys strictly greater than ``key``)
        """
        self.key = key
        self.left = left
        self.right = right

    def find_max(self) -> K:
        """Return the key of the right-most node in this subtree."""
        current = self
        while current.right is not None:
            current = current.right
        return current.key

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def identifier(self) -> str:
        """Keys are unique within a tree, so the key text identifies the node."""
        return str(self.key)

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Returns:
            Dict with the key, child count and leaf flag
        """
        return {
            "key": self.key,
            "children": self.child_count(),
            "leaf": self.is_leaf(),
        }

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(key={self.key!r})"
