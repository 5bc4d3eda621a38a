"""Tree traversal strategies for orderedtreelib.

Traversers implement the four classic orders for walking a binary search
tree. They work through a BSTAdapter and yield ``(node, depth)`` tuples,
where the root sits at depth 0. The depth-first orders keep their own
stack, so a degenerate tree of any height can be walked.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union
from .node import BSTNode
from .adapter import BSTAdapter
from ..config import TraversalStrategy


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: Optional[BSTAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: BSTAdapter for navigating the tree (default: BSTAdapter())
        """
        self.adapter = adapter if adapter is not None else BSTAdapter()

    @abstractmethod
    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: node, left subtree, right subtree.

    Visiting a pre-order sequence and re-inserting it into an empty tree
    rebuilds the exact same shape, which makes it the order of choice for
    copying.
    """

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        stack: List[Tuple[BSTNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                # Right is pushed first so the left subtree pops first
                for child in (self.adapter.get_right(node), self.adapter.get_left(node)):
                    if child is not None:
                        stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal: left subtree, node, right subtree.

    On a binary search tree this yields keys in ascending order.
    """

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        stack: List[Tuple[BSTNode, int]] = []
        current, depth = root, 0

        while stack or current is not None:
            # Slide down the left spine, stopping at the depth limit
            while current is not None:
                stack.append((current, depth))
                if self._should_explore(depth, max_depth):
                    current, depth = self.adapter.get_left(current), depth + 1
                else:
                    current = None

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                current, depth = self.adapter.get_right(node), depth + 1


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: left subtree, right subtree, node.

    Every node is visited after its entire subtree, which is the order used
    to release a tree bottom-up.
    """

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        # Entries are (node, depth, children_pushed)
        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, children_pushed = stack.pop()
            if children_pushed or not self._should_explore(depth, max_depth):
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in (self.adapter.get_right(node), self.adapter.get_left(node)):
                if child is not None:
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    A FIFO queue is seeded with the root; each dequeued node is yielded and
    its left child, then its right child, are enqueued when present.
    """

    def traverse(self,
                 root: Optional[BSTNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[BSTNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


_STRATEGY_ALIASES = {
    'pre': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
    'bfs': TraversalStrategy.LEVEL_ORDER,
}

_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


def resolve_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Normalize a strategy name or enum member to a TraversalStrategy.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = str(strategy).lower()
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]
    for member in TraversalStrategy:
        if member.value == strategy_lower:
            return member

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: Optional[BSTAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or name (pre, in, post, level, ...)
        adapter: BSTAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[resolve_strategy(strategy)](adapter)
