"""Testing utilities for orderedtreelib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
