#!/usr/bin/env python3
"""
Width benchmark for orderedtreelib.

OrderedTree.get_width() counts every level in a single breadth-first pass.
This compares it with the per-level method (recount level k from the root
for every k in 0..height-1, which is O(height * n)) on random and degenerate
trees:
1. Running multiple iterations and taking the median
2. Using gc.collect() before each timed run
3. Checking both methods agree before timing them
"""

import gc
import random
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, List

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree


def _median_time(func: Callable[[], int], iterations: int) -> float:
    times = []
    for _ in range(iterations):
        gc.collect()
        start = time.perf_counter()
        func()
        times.append(time.perf_counter() - start)
    return statistics.median(times)


def _per_level_width(tree: OrderedTree) -> int:
    """Width by counting the nodes ``level`` steps below the root, per level."""
    max_width = 0
    for level in range(tree.get_height()):
        count = 0
        stack = [(tree.root, level)]
        while stack:
            node, remaining = stack.pop()
            if remaining == 0:
                count += 1
                continue
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, remaining - 1))
        max_width = max(count, max_width)
    return max_width


def benchmark(name: str, keys: List[int], iterations: int = 5) -> None:
    tree = OrderedTree(keys)
    single_pass = tree.get_width()
    per_level = _per_level_width(tree)
    assert single_pass == per_level, f"{name}: {single_pass} != {per_level}"

    t_single = _median_time(tree.get_width, iterations)
    t_per_level = _median_time(lambda: _per_level_width(tree), iterations)

    print(f"{name:<28} n={tree.size():<6} height={tree.get_height():<5} width={single_pass:<5}"
          f" single-pass={t_single * 1000:8.2f}ms  per-level={t_per_level * 1000:8.2f}ms")


def main() -> int:
    rng = random.Random(2020)
    print("=" * 100)
    print("WIDTH: single breadth-first pass vs per-level recount")
    print("=" * 100)

    benchmark("random 1,000", rng.sample(range(100_000), 1_000))
    benchmark("random 10,000", rng.sample(range(1_000_000), 10_000))
    # Sorted input degenerates into a chain, the per-level worst case
    benchmark("sorted 2,000 (chain)", list(range(2_000)), iterations=3)
    return 0


if __name__ == "__main__":
    sys.exit(main())
