"""OrderedTree - an unbalanced binary search tree.

The tree owns a graph of BSTNode objects rooted at a single entry point.
Every operation is a loop over that graph (descents follow child slots,
whole-tree passes keep an explicit stack), so tree height is not bounded
by the interpreter recursion limit:

- add / has / remove run in O(height)
- size, leaf count and the traversals visit every node, O(n)
- width counts every level in one breadth-first pass, O(n)

No balancing is performed, so inserting keys in sorted order produces a
linked-list shaped tree whose height equals its size.
"""

import copy as _copy_module
import logging
from collections import deque
from typing import Any, Deque, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from .config import TraversalConfig, TraversalStrategy
from .core.node import BSTNode
from .core.traverser import resolve_strategy
from .exceptions import EmptyTreeError
from .planning import ExecutionPlan

logger = logging.getLogger(__name__)

K = TypeVar("K")


class OrderedTree(Generic[K]):
    """Binary search tree of unique, totally ordered keys.

    For every node, all keys in its left subtree compare strictly less than
    the node's key and all keys in its right subtree compare strictly
    greater. Duplicate inserts and removals of absent keys are silent no-ops.

    Example:
        tree = OrderedTree([20, 40, 10, 70, 99, -2, 59, 43])
        tree.get_pre_order_traversal()   # "20 10 -2 40 70 59 43 99 "
        tree.remove(70)
        len(tree)                        # 7
    """

    def __init__(self, source: "Union[OrderedTree[K], Iterable[K], None]" = None):
        """Create a tree.

        Args:
            source: Another OrderedTree to deep-copy, or an iterable of keys
                to add in order. None creates an empty tree.
        """
        self._root: Optional[BSTNode[K]] = None
        if isinstance(source, OrderedTree):
            self._root = self._copy(source._root)
        elif source is not None:
            for key in source:
                self.add(key)

    @property
    def root(self) -> Optional[BSTNode[K]]:
        """The live root node (None when empty).

        Exposed for traversal helpers and inspection; rewriting node keys
        through it can break the ordering invariant.
        """
        return self._root

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, key: K) -> None:
        """Insert a key. Does nothing if the key is already present."""
        self._root = self._add(self._root, key)

    def has(self, key: K) -> bool:
        """Check if the given key is present in the tree."""
        return self._has(self._root, key)

    def remove(self, key: K) -> None:
        """Remove a key. Does nothing if the key is absent."""
        self._root = self._remove(self._root, key)

    def clear(self) -> None:
        """Release every node owned by this tree."""
        if self._root is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Clearing tree of %d nodes", self.size())
        self._clear(self._root)
        self._root = None

    def assign(self, other: "OrderedTree[K]") -> "OrderedTree[K]":
        """Replace this tree's contents with a deep copy of ``other``.

        Assigning a tree to itself is a no-op.

        Returns:
            This tree
        """
        if other is not self:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Assigning tree of %d nodes", other.size())
            self.clear()
            self._root = self._copy(other._root)
        return self

    # ------------------------------------------------------------------
    # Structural queries
    # ------------------------------------------------------------------

    def empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        """Return the number of nodes in the tree."""
        return self._size(self._root)

    def get_leaf_count(self) -> int:
        """Return the number of nodes with no children."""
        return self._leaf_count(self._root)

    def get_height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return self._height(self._root)

    def get_width(self) -> int:
        """Return the largest number of nodes found on a single level."""
        max_width = 0
        level: Deque[BSTNode[K]] = deque([self._root]) if self._root is not None else deque()
        while level:
            max_width = max(len(level), max_width)
            # Replace this level with the next one, left to right
            for _ in range(len(level)):
                node = level.popleft()
                for child in (node.left, node.right):
                    if child is not None:
                        level.append(child)
        return max_width

    def min(self) -> K:
        """Return the smallest key.

        Raises:
            EmptyTreeError: If the tree has no keys
        """
        if self._root is None:
            raise EmptyTreeError("min() of an empty tree")
        current = self._root
        while current.left is not None:
            current = current.left
        return current.key

    def max(self) -> K:
        """Return the largest key.

        Raises:
            EmptyTreeError: If the tree has no keys
        """
        if self._root is None:
            raise EmptyTreeError("max() of an empty tree")
        return self._root.find_max()

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def get_pre_order_traversal(self) -> str:
        """Return the keys in pre-order, each followed by a space."""
        return self._render(TraversalStrategy.PRE_ORDER)

    def get_in_order_traversal(self) -> str:
        """Return the keys in ascending order, each followed by a space."""
        return self._render(TraversalStrategy.IN_ORDER)

    def get_post_order_traversal(self) -> str:
        """Return the keys in post-order, each followed by a space."""
        return self._render(TraversalStrategy.POST_ORDER)

    def get_level_order_traversal(self) -> str:
        """Return the keys level by level, left to right, each followed by a space."""
        if self.empty():
            return ""
        return self._render(TraversalStrategy.LEVEL_ORDER)

    def traverse(self, strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                 reverse: bool = False) -> Iterator[K]:
        """Yield keys in the given traversal order.

        Args:
            strategy: TraversalStrategy member or name ("pre", "in", "post", "level")
            reverse: Walk the mirrored tree (right subtree before left)
        """
        config = TraversalConfig(strategy=resolve_strategy(strategy), reverse=reverse)
        for _, key in ExecutionPlan(config).execute(self._root):
            yield key

    def keys(self, strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER) -> List[K]:
        return list(self.traverse(strategy))

    def _render(self, strategy: TraversalStrategy) -> str:
        return ExecutionPlan(TraversalConfig(strategy=strategy)).render(self._root)

    # ------------------------------------------------------------------
    # Copying and Python protocols
    # ------------------------------------------------------------------

    def copy(self) -> "OrderedTree[K]":
        """Return an independent copy with the same shape and keys."""
        return OrderedTree(self)

    def __copy__(self) -> "OrderedTree[K]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "OrderedTree[K]":
        result = self.__class__()
        memo[id(self)] = result
        result._root = self._copy(self._root, lambda key: _copy_module.deepcopy(key, memo))
        return result

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[K]:
        return self.traverse(TraversalStrategy.IN_ORDER)

    def __reversed__(self) -> Iterator[K]:
        return self.traverse(TraversalStrategy.IN_ORDER, reverse=True)

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they have the same shape and the same keys."""
        if not isinstance(other, OrderedTree):
            return NotImplemented
        return self._same_shape(self._root, other._root)

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.keys()!r})"

    # ------------------------------------------------------------------
    # Node-graph helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _add(root: Optional[BSTNode], key: Any) -> BSTNode:
        """Attach ``key`` below ``root`` and return the (possibly new) root."""
        if root is None:
            return BSTNode(key)

        current = root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = BSTNode(key)
                    break
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = BSTNode(key)
                    break
                current = current.right
            else:
                break
        return root

    @staticmethod
    def _has(current: Optional[BSTNode], key: Any) -> bool:
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return True
        return False

    @staticmethod
    def _remove(root: Optional[BSTNode], key: Any) -> Optional[BSTNode]:
        """Remove ``key`` from the subtree and return the subtree's new root."""
        parent = None
        current = root
        while current is not None:
            if key < current.key:
                parent, current = current, current.left
            elif key > current.key:
                parent, current = current, current.right
            else:
                break

        if current is None:
            return root

        if current.left is not None and current.right is not None:
            # Two children: take over the in-order predecessor's key, then
            # splice the predecessor (which has no right child) out of the
            # left subtree.
            pred_parent, pred = current, current.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            current.key = pred.key
            if pred_parent is current:
                current.left = pred.left
            else:
                pred_parent.right = pred.left
            return root

        replacement = current.right if current.left is None else current.left
        if parent is None:
            return replacement
        if parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement
        return root

    @staticmethod
    def _nodes(root: Optional[BSTNode]) -> Iterator[BSTNode]:
        """Yield every node of the subtree, in no particular order."""
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

    @staticmethod
    def _size(root: Optional[BSTNode]) -> int:
        return sum(1 for _ in OrderedTree._nodes(root))

    @staticmethod
    def _leaf_count(root: Optional[BSTNode]) -> int:
        return sum(1 for node in OrderedTree._nodes(root) if node.is_leaf())

    @staticmethod
    def _height(root: Optional[BSTNode]) -> int:
        height = 0
        stack = [(root, 1)] if root is not None else []
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return height

    @staticmethod
    def _copy(root: Optional[BSTNode], copy_key=None) -> Optional[BSTNode]:
        if root is None:
            return None

        def _duplicate(node: BSTNode) -> BSTNode:
            return BSTNode(copy_key(node.key) if copy_key is not None else node.key)

        new_root = _duplicate(root)
        # Pairs of (source node, its already-created duplicate)
        stack = [(root, new_root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = _duplicate(source.left)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = _duplicate(source.right)
                stack.append((source.right, target.right))
        return new_root

    @staticmethod
    def _clear(root: Optional[BSTNode]) -> None:
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is not None:
                    stack.append(child)
            node.left = None
            node.right = None

    @staticmethod
    def _same_shape(a: Optional[BSTNode], b: Optional[BSTNode]) -> bool:
        stack = [(a, b)]
        while stack:
            a, b = stack.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.key != b.key:
                return False
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
        return True
