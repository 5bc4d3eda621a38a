"""orderedtreelib - Unbalanced Binary Search Tree Library.

orderedtreelib provides a generic binary search tree of unique, totally
ordered keys, together with a small traversal framework (strategies,
depth limits, collectors, rendering) built around it.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree([20, 40, 10, 70, 99, -2, 59, 43])
    tree.get_in_order_traversal()   # "-2 10 20 40 43 59 70 99 "
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "1.0.0"

from .exceptions import (
    OrderedTreeError,
    EmptyTreeError,
    InvalidConfigurationError,
    InputSourceError,
    KeyParseError,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    RenderConfig,
)
from .core import (
    BSTNode,
    BSTAdapter,
    MirroredBSTAdapter,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    DataCollector,
    KeyCollector,
    KeyDepthCollector,
    NodeCollector,
    ChildCountCollector,
    CustomCollector,
)
from .planning import ExecutionPlan
from .tree import OrderedTree
from .api import (
    traverse_tree,
    collect_keys,
    collect_levels,
    render_traversal,
    build_tree,
    get_tree_stats,
    find_path,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    StopOnErrorPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .loader import (
    load_string_keys,
    load_numeric_keys,
    parse_keys,
    fill_tree,
)

__all__ = [
    "__version__",
    # Tree
    'OrderedTree',
    'BSTNode',
    # Errors
    'OrderedTreeError',
    'EmptyTreeError',
    'InvalidConfigurationError',
    'InputSourceError',
    'KeyParseError',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
    'RenderConfig',
    'ExecutionPlan',
    # Traversal
    'BSTAdapter',
    'MirroredBSTAdapter',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'KeyCollector',
    'KeyDepthCollector',
    'NodeCollector',
    'ChildCountCollector',
    'CustomCollector',
    # API
    'traverse_tree',
    'collect_keys',
    'collect_levels',
    'render_traversal',
    'build_tree',
    'get_tree_stats',
    'find_path',
    # Loading
    'ErrorPolicy',
    'FailFastPolicy',
    'StopOnErrorPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    'load_string_keys',
    'load_numeric_keys',
    'parse_keys',
    'fill_tree',
]
