"""BSTAdapter abstraction for orderedtreelib.

The adapter provides the navigation logic for binary nodes, decoupling the
node representation from the traversal mechanism. Traversers only ever ask
the adapter for children, so a subclass can change what "children" means
(for example, to mirror the tree) without touching any traverser.
"""

from typing import Iterator, Optional
from .node import BSTNode


class BSTAdapter:
    """Navigates the child slots of BSTNode instances.

    This separation allows:
    - The same node type to be traversed differently
    - Traversers to stay independent of the binary layout
    """

    def get_left(self, node: BSTNode) -> Optional[BSTNode]:
        """Get the left child of a node.

        Args:
            node: The parent node

        Returns:
            Left child or None if the slot is empty
        """
        return node.left

    def get_right(self, node: BSTNode) -> Optional[BSTNode]:
        """Get the right child of a node.

        Args:
            node: The parent node

        Returns:
            Right child or None if the slot is empty
        """
        return node.right

    def get_children(self, node: BSTNode) -> Iterator[BSTNode]:
        """Get an iterator of present children, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child BSTNode instances

        Example:
            for child in adapter.get_children(parent_node):
                process(child)
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def is_leaf(self, node: BSTNode) -> bool:
        return self.get_left(node) is None and self.get_right(node) is None


class MirroredBSTAdapter(BSTAdapter):
    """Adapter that swaps the child slots.

    Traversing through this adapter visits the tree as if it were
    reflected, so an in-order walk yields keys in descending order.
    """

    def get_left(self, node: BSTNode) -> Optional[BSTNode]:
        return node.right

    def get_right(self, node: BSTNode) -> Optional[BSTNode]:
        return node.left
