"""Helpers for building 4-connected grid graphs."""

from __future__ import annotations

from collections.abc import Iterable

from .graph.orientational import OrientationalGraph
from .graph.types import Direction

Cell = tuple[int, int]


def build_grid_graph(
    width: int,
    height: int,
    *,
    blocked: Iterable[Cell] = (),
    bidirectional: bool = True,
) -> OrientationalGraph:
    """Build an OrientationalGraph over ``(x, y)`` cells.

    RIGHT moves to ``x + 1`` and TOP to ``y + 1``. Blocked cells are left
    out of the graph entirely, so no edge touches them. With
    *bidirectional* each link is mirrored (LEFT and BOTTOM slots filled).

    Raises:
        ValueError: If *width* or *height* is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")

    walls = set(blocked)
    graph = OrientationalGraph()

    for y in range(height):
        for x in range(width):
            cell = (x, y)
            if cell in walls:
                continue
            graph.get_or_create_node(cell)

            right = (x + 1, y)
            if x + 1 < width and right not in walls:
                graph.add_directed_edge(cell, right, Direction.RIGHT, bidirectional)

            top = (x, y + 1)
            if y + 1 < height and top not in walls:
                graph.add_directed_edge(cell, top, Direction.TOP, bidirectional)

    return graph


__all__ = ["Cell", "build_grid_graph"]
