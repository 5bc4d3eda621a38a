"""Configuration system for orderedtreelib.

This module defines how users specify their traversal requirements:
which order to walk the tree in, which depths to report, and how the
visited keys are rendered as text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    PRE_ORDER = "pre_order"         # Node, left, right
    IN_ORDER = "in_order"           # Left, node, right (ascending keys)
    POST_ORDER = "post_order"       # Left, right, node
    LEVEL_ORDER = "level_order"     # Breadth-first, left to right


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth (root = 0)

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True


@dataclass
class RenderConfig:
    """Configuration for turning a key sequence into text.

    The default reproduces the legacy output format: every key is followed
    by a single space, including the last one.
    """

    separator: str = " "
    trailing_separator: bool = True

    def render(self, keys: Iterable[Any]) -> str:
        """Render keys as a single line of text.

        Args:
            keys: Keys in traversal order

        Returns:
            Rendered string ("" when there are no keys)
        """
        if self.trailing_separator:
            return "".join(f"{key}{self.separator}" for key in keys)
        return self.separator.join(str(key) for key in keys)


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal operation.

    Example:
        config = TraversalConfig(
            strategy=TraversalStrategy.LEVEL_ORDER,
            depth=DepthConfig(max_depth=2),
        )
    """

    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    reverse: bool = False   # Walk the mirrored tree (descending in-order)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            elif self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if not self.render.separator:
            errors.append("separator cannot be empty")

        return errors

    @classmethod
    def pre_order(cls, **kwargs) -> 'TraversalConfig':
        """Create config for a pre-order traversal."""
        return cls(strategy=TraversalStrategy.PRE_ORDER, **kwargs)

    @classmethod
    def in_order(cls, **kwargs) -> 'TraversalConfig':
        """Create config for an in-order traversal."""
        return cls(strategy=TraversalStrategy.IN_ORDER, **kwargs)

    @classmethod
    def post_order(cls, **kwargs) -> 'TraversalConfig':
        """Create config for a post-order traversal."""
        return cls(strategy=TraversalStrategy.POST_ORDER, **kwargs)

    @classmethod
    def level_order(cls, **kwargs) -> 'TraversalConfig':
        """Create config for a level-order (breadth-first) traversal."""
        return cls(strategy=TraversalStrategy.LEVEL_ORDER, **kwargs)
