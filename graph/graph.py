"""
graph.py — Fixed Undirected Graph
==================================
Single source of truth for the topology.  The DFS engine and the
renderer both talk to this object.

Responsibilities:
  1. Build the adjacency structure once from an edge list
  2. Adjacency queries                      (neighbours_of, degree, edges)
  3. Vertex validation                      (is_valid_vertex / OutOfRangeVertex)
  4. Serialisation for the wire payload     (to_dict)

Design decisions:
  - Vertices are the integers 0..N-1, so there is no Node object; the
    id *is* the vertex.
  - Every adjacency list is sorted ascending and de-duplicated after all
    edges are in.  Traversal order therefore never depends on the order
    edges were listed in.
  - Lists are stored as tuples and nothing exposes a mutator, so one
    instance can be shared by every request.
"""

from typing import Dict, Iterable, List, Set, Tuple


# Figure 1.1: the nine-vertex demo graph
DEFAULT_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1), (0, 7),
    (1, 2), (1, 7),
    (2, 3), (2, 8), (2, 5),
    (3, 4), (3, 5),
    (4, 5),
    (5, 6),
    (6, 7), (6, 8),
    (7, 8),
)
DEFAULT_VERTEX_COUNT = 9


class OutOfRangeVertex(IndexError):
    """A vertex id fell outside 0..N-1."""

    def __init__(self, vertex, vertex_count: int):
        self.vertex       = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"vertex {vertex!r} out of range 0..{vertex_count - 1}"
        )


class Graph:
    """
    Attributes:
        vertex_count : N, number of vertices (ids 0..N-1)
        _adj         : {vertex: (neighbour, …)} ascending, no duplicates
    """

    def __init__(self, vertex_count: int, edges: Iterable[Tuple[int, int]] = ()):
        if vertex_count < 1:
            raise ValueError(f"vertex_count must be >= 1, got {vertex_count}")
        self.vertex_count: int = vertex_count

        scratch: Dict[int, Set[int]] = {v: set() for v in range(vertex_count)}
        for u, v in edges:
            self.check_vertex(u)
            self.check_vertex(v)
            scratch[u].add(v)
            scratch[v].add(u)

        self._adj: Dict[int, Tuple[int, ...]] = {
            v: tuple(sorted(nbrs)) for v, nbrs in scratch.items()
        }

    @classmethod
    def default(cls) -> "Graph":
        return cls(DEFAULT_VERTEX_COUNT, DEFAULT_EDGES)

    # ==================================================================
    # VALIDATION
    # ==================================================================
    def is_valid_vertex(self, v) -> bool:
        # bool is an int subclass but never a vertex id
        if isinstance(v, bool) or not isinstance(v, int):
            return False
        return 0 <= v < self.vertex_count

    def check_vertex(self, v) -> int:
        """Return `v` unchanged, or raise OutOfRangeVertex."""
        if not self.is_valid_vertex(v):
            raise OutOfRangeVertex(v, self.vertex_count)
        return v

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours_of(self, v: int) -> Tuple[int, ...]:
        """Neighbours of `v` in canonical (ascending) order."""
        return self._adj[self.check_vertex(v)]

    def degree(self, v: int) -> int:
        return len(self.neighbours_of(v))

    def vertex_ids(self) -> List[int]:
        return list(range(self.vertex_count))

    def edges(self) -> List[Tuple[int, int]]:
        """Every undirected edge once, as (low, high), ascending."""
        return [
            (u, v)
            for u in range(self.vertex_count)
            for v in self._adj[u]
            if u <= v
        ]

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, List[int]]:
        """The `"adj"` object of the wire payload."""
        return {str(v): list(nbrs) for v, nbrs in self._adj.items()}

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, edges={len(self.edges())})"
