"""Basic usage example for gridpath-lib."""

import operator
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from gridpath import (
    PathFinder,
    build_grid_graph,
    create_strategy,
)


def main():
    print("=" * 60)
    print("gridpath-lib - Basic Usage Example")
    print("=" * 60)

    # 1. Build a 5x5 grid with a wall in the middle column
    print("\n1. Building grid...")
    wall = [(2, y) for y in range(4)]
    graph = build_grid_graph(5, 5, blocked=wall)
    print(f"   Cells: {len(graph)}")

    # 2. Search with each strategy
    closed = {(1, 3)}
    for name in ("bfs", "turn_priority"):
        print(f"\n2. Searching with {name!r}...")
        path = PathFinder.find_path(
            graph,
            (0, 0),
            (4, 0),
            operator.eq,
            lambda cell: cell not in closed,
            strategy=create_strategy(name),
        )
        if path is None:
            print("   No path")
            continue
        print(f"   {path}")
        print(f"   {' -> '.join(str(v) for v in path.values)}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
