"""Custom exceptions for gridpath-lib."""


class GridPathError(Exception):
    """Base exception for graph and path-finding operations."""


class NodeNotFoundError(GridPathError, KeyError):
    """Raised when a node handle does not belong to the graph."""


class UnsupportedNodeOperationError(GridPathError):
    """Raised when a directed operation is applied to an undirected node."""
