#!/usr/bin/env python3
"""
Basic usage example for orderedtreelib.

This example demonstrates:
- Building a tree and querying its shape
- The four traversal orders
- Removing keys and copying trees
- Depth-limited, custom-formatted traversals
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree, get_tree_stats, render_traversal


def main():
    tree = OrderedTree([20, 40, 10, 70, 99, -2, 59, 43])

    print("Traversals")
    print("-" * 50)
    print(f"Pre-order:    {tree.get_pre_order_traversal()}")
    print(f"In-order:     {tree.get_in_order_traversal()}")
    print(f"Post-order:   {tree.get_post_order_traversal()}")
    print(f"Level-order:  {tree.get_level_order_traversal()}")

    print("\nShape")
    print("-" * 50)
    for name, value in get_tree_stats(tree).items():
        print(f"{name:<16}{value}")

    # Copies are independent: removing from one leaves the other alone
    backup = tree.copy()
    tree.remove(70)
    print(f"\nAfter remove(70): {tree.get_pre_order_traversal()}")
    print(f"Backup:           {backup.get_pre_order_traversal()}")

    print("\nTop two levels, comma separated:")
    print(render_traversal(backup, "level", separator=", ", trailing_separator=False, max_depth=1))


if __name__ == "__main__":
    main()
