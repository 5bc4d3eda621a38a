"""Shared fixtures for the orderedtreelib test suite."""

import pytest

from orderedtreelib import OrderedTree

# Insertion order used throughout the suite (and by the demo program)
EXAMPLE_KEYS = [20, 40, 10, 70, 99, -2, 59, 43]
STRING_KEYS = ["gene", "mary", "bea", "uma", "yan", "amy", "ron", "opal"]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large randomized checks (deselect with -m 'not slow')")


@pytest.fixture
def example_tree():
    """Integer tree built from EXAMPLE_KEYS.

    Shape:
        20
        ├── 10
        │   └── -2
        └── 40
            └── 70
                ├── 59
                │   └── 43
                └── 99
    """
    return OrderedTree(EXAMPLE_KEYS)


@pytest.fixture
def string_tree():
    return OrderedTree(STRING_KEYS)


@pytest.fixture
def complete_tree():
    """Perfectly balanced three-level tree of 1..7."""
    return OrderedTree([4, 2, 6, 1, 3, 5, 7])
