"""Execution planning for orderedtreelib.

The ExecutionPlan validates a TraversalConfig and assembles the traverser,
adapter and collector that carry it out. Validation happens up front, so an
invalid configuration never touches the tree.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple
from .core.node import BSTNode
from .core.adapter import BSTAdapter, MirroredBSTAdapter
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import DataCollector, KeyCollector
from .config import TraversalConfig
from .exceptions import InvalidConfigurationError


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution.
    """

    def __init__(self, config: TraversalConfig,
                 adapter: Optional[BSTAdapter] = None,
                 collector: Optional[DataCollector] = None):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Navigation adapter; chosen from ``config.reverse`` if omitted
            collector: What to extract per node (default: KeyCollector)

        Raises:
            InvalidConfigurationError: If the configuration is inconsistent
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        if adapter is None:
            adapter = MirroredBSTAdapter() if config.reverse else BSTAdapter()
        self.adapter = adapter
        self.traverser = self._select_traverser()
        self.collector = collector if collector is not None else KeyCollector(self.adapter)

        # Track execution state
        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(self.config.strategy, self.adapter)

    def execute(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from (None yields nothing)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.depth.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

    def values(self, root: Optional[BSTNode]) -> List[Any]:
        """Run the plan and return only the collected data, in order."""
        return [data for _, data in self.execute(root)]

    def render(self, root: Optional[BSTNode]) -> str:
        """Run the plan and render the collected data as one line of text."""
        return self.config.render.render(data for _, data in self.execute(root))

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.
        """
        return {
            'strategy': self.config.strategy.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'reverse': self.config.reverse,
            'separator': self.config.render.separator,
            'trailing_separator': self.config.render.trailing_separator,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
