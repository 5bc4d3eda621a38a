"""Core building blocks: nodes, adapters, traversers and collectors."""

from .node import BSTNode
from .adapter import BSTAdapter, MirroredBSTAdapter
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    resolve_strategy,
)
from .collector import (
    DataCollector,
    KeyCollector,
    KeyDepthCollector,
    NodeCollector,
    ChildCountCollector,
    CustomCollector,
)

__all__ = [
    'BSTNode',
    'BSTAdapter',
    'MirroredBSTAdapter',
    'TreeTraverser',
    'PreOrderTraverser',
    'InOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'resolve_strategy',
    'DataCollector',
    'KeyCollector',
    'KeyDepthCollector',
    'NodeCollector',
    'ChildCountCollector',
    'CustomCollector',
]
