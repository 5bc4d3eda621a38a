"""Data collection strategies for orderedtreelib.

DataCollectors define what information to extract from nodes during
traversal. The same traversal can yield bare keys, (key, depth) pairs,
whole nodes, or anything a custom function computes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple
from .node import BSTNode
from .adapter import BSTAdapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: Optional[BSTAdapter] = None):
        """Initialize collector with an adapter.

        Args:
            adapter: BSTAdapter for additional node operations
        """
        self.adapter = adapter if adapter is not None else BSTAdapter()

    @abstractmethod
    def collect(self, node: BSTNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys.

    This is what the string traversals of OrderedTree are built from.
    """

    def collect(self, node: BSTNode, depth: int) -> Any:
        """Return node key."""
        return node.key


class KeyDepthCollector(DataCollector):
    """Collects (key, depth) pairs."""

    def collect(self, node: BSTNode, depth: int) -> Tuple[Any, int]:
        return (node.key, depth)


class NodeCollector(DataCollector):
    """Collects complete node objects.

    The returned nodes are live: mutating them mutates the tree.
    """

    def collect(self, node: BSTNode, depth: int) -> BSTNode:
        """Return the node itself."""
        return node


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information.

    Returns a dict with the key, its depth and number of present children.
    Useful for tree structure analysis.
    """

    def collect(self, node: BSTNode, depth: int) -> Dict[str, Any]:
        """Return node info with child count."""
        child_count = sum(1 for _ in self.adapter.get_children(node))
        return {
            'key': node.key,
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[BSTNode, int], Any],
                 adapter: Optional[BSTAdapter] = None):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
            adapter: BSTAdapter for tree navigation
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: BSTNode, depth: int) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node, depth)
