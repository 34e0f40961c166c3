"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, OutOfRangeVertex
"""

from graph.graph import Graph, OutOfRangeVertex, DEFAULT_EDGES

__all__ = [
    "Graph",
    "OutOfRangeVertex",
    "DEFAULT_EDGES",
]
