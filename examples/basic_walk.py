#!/usr/bin/env python3
"""
Basic walking example showing GraphWalk on a directory tree and on an
infinite graph.

This example demonstrates:
- Walking a filesystem directory in pre-order, post-order and breadth-first
- Short-circuiting a walk over an infinite graph
- Detecting a cycle
"""

import sys
from itertools import islice
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphwalk import Walker, detect_cycle_in_graph


def list_directory(path: Path):
    """Children of a directory, or None for files."""
    if not path.is_dir() or path.is_symlink():
        return None
    try:
        return sorted(path.iterdir())
    except PermissionError:
        return None


def collatz(n: int):
    return [n // 2 if n % 2 == 0 else 3 * n + 1]


def main():
    """Demonstrate the three walk orders."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    walker = Walker.in_tree(list_directory)

    print(f"First 10 entries under {root_path} (pre-order):")
    for path in islice(walker.pre_order_from(root_path), 10):
        print(f"  {path}")

    print("\nFirst 10 entries (breadth-first):")
    for path in islice(walker.breadth_first_from(root_path), 10):
        print(f"  {path}")

    # Post-order sees a directory only after all its contents
    sizes = {}
    for path in walker.post_order_from(root_path):
        if path.is_file():
            sizes[path] = path.stat().st_size
        else:
            sizes[path] = sum(sizes.get(child, 0) for child in list_directory(path) or [])
    print(f"\nTotal size: {sizes[root_path] / 1024 / 1024:.1f} MB")

    print("\nFirst 8 even numbers, from an infinite graph:")
    numbers = Walker.in_graph(lambda n: [n + 1])
    print(" ", [n for n in islice(numbers.pre_order_from(0), 16) if n % 2 == 0])

    print("\nCollatz cycle reached from 27:")
    print(" ", " -> ".join(map(str, detect_cycle_in_graph(collatz, 27))))


if __name__ == "__main__":
    main()
