"""Pytest configuration and fixtures for gridpath-lib tests."""

import pytest

from gridpath import Direction, OrientationalGraph, build_grid_graph


@pytest.fixture
def grid3():
    """Fully connected 3x3 grid with no obstacles."""
    return build_grid_graph(3, 3)


@pytest.fixture
def straight_line():
    """A --RIGHT--> B --RIGHT--> C, mirrored."""
    graph = OrientationalGraph()
    graph.add_directed_edge("A", "B", Direction.RIGHT)
    graph.add_directed_edge("B", "C", Direction.RIGHT)
    return graph


@pytest.fixture
def bent_line():
    """A --RIGHT--> B --TOP--> C, mirrored."""
    graph = OrientationalGraph()
    graph.add_directed_edge("A", "B", Direction.RIGHT)
    graph.add_directed_edge("B", "C", Direction.TOP)
    return graph


@pytest.fixture
def two_routes():
    """Short route with one turn vs. longer straight route, one-way edges.

    Graph structure:
        S --TOP--> A --RIGHT--> B --RIGHT--> G            (3 hops, 1 turn)
        S --RIGHT--> X1 --RIGHT--> X2 --RIGHT--> X3 --RIGHT--> G  (4 hops, 0 turns)
    """
    graph = OrientationalGraph()
    graph.add_directed_edge("S", "A", Direction.TOP, bidirectional=False)
    graph.add_directed_edge("S", "X1", Direction.RIGHT, bidirectional=False)
    graph.add_directed_edge("A", "B", Direction.RIGHT, bidirectional=False)
    graph.add_directed_edge("B", "G", Direction.RIGHT, bidirectional=False)
    graph.add_directed_edge("X1", "X2", Direction.RIGHT, bidirectional=False)
    graph.add_directed_edge("X2", "X3", Direction.RIGHT, bidirectional=False)
    graph.add_directed_edge("X3", "G", Direction.RIGHT, bidirectional=False)
    return graph
