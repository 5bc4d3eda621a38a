"""High-level API for orderedtreelib.

This module provides simple, functional interfaces for common operations.
These functions wrap the configuration/plan objects for ease of use in
simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .config import DepthConfig, RenderConfig, TraversalConfig, TraversalStrategy
from .core.collector import DataCollector, KeyDepthCollector
from .core.traverser import resolve_strategy
from .planning import ExecutionPlan
from .tree import OrderedTree


def traverse_tree(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    reverse: bool = False,
    collector: Optional[DataCollector] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        strategy: Traversal strategy (pre, in, post, level)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding keys
        reverse: Walk the mirrored tree
        collector: What to yield per node (default: the key)

    Yields:
        Collected data for each visited node, keys by default

    Example:
        >>> tree = build_tree([20, 10, 40])
        >>> list(traverse_tree(tree, "level"))
        [20, 10, 40]
    """
    config = TraversalConfig(
        strategy=resolve_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        reverse=reverse,
    )
    plan = ExecutionPlan(config, collector=collector)
    for _, data in plan.execute(tree.root):
        yield data


def collect_keys(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    **kwargs
) -> List[Any]:
    """Traverse the tree and return the keys as a list."""
    return list(traverse_tree(tree, strategy, **kwargs))


def collect_levels(tree: OrderedTree) -> List[List[Any]]:
    """Group keys by depth, left to right.

    Returns:
        One list of keys per level, root level first
    """
    levels: List[List[Any]] = []
    for key, depth in traverse_tree(tree, TraversalStrategy.LEVEL_ORDER,
                                    collector=KeyDepthCollector()):
        if depth == len(levels):
            levels.append([])
        levels[depth].append(key)
    return levels


def render_traversal(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    separator: str = " ",
    trailing_separator: bool = True,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    reverse: bool = False,
) -> str:
    """Render a traversal as one line of text.

    The defaults give the legacy format, where every key is followed by
    the separator: ``"10 20 40 "``.

    Raises:
        InvalidConfigurationError: If the separator is empty or depths are invalid
    """
    config = TraversalConfig(
        strategy=resolve_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        render=RenderConfig(separator=separator, trailing_separator=trailing_separator),
        reverse=reverse,
    )
    return ExecutionPlan(config).render(tree.root)


def build_tree(keys: Iterable[Any]) -> OrderedTree:
    """Create a tree by adding keys in order."""
    return OrderedTree(keys)


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get structural statistics about a tree.

    Returns:
        Dictionary with size, leaves, height, width, empty flag and the
        number of keys on each level

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['size'], stats['leaves'], stats['width']
        (3, 2, 2)
    """
    levels = collect_levels(tree)
    stats = {
        'size': tree.size(),
        'leaves': tree.get_leaf_count(),
        'height': tree.get_height(),
        'width': tree.get_width(),
        'empty': tree.empty(),
        'level_widths': [len(level) for level in levels],
    }
    stats['internal_nodes'] = stats['size'] - stats['leaves']
    return stats


def find_path(tree: OrderedTree, key: Any) -> Optional[List[Any]]:
    """Return the keys visited while searching for ``key``.

    Returns:
        Keys from the root down to ``key`` inclusive, or None if absent
    """
    path = []
    current = tree.root
    while current is not None:
        path.append(current.key)
        if key < current.key:
            current = current.left
        elif key > current.key:
            current = current.right
        else:
            return path
    return None
