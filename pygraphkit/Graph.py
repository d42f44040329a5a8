"""
Graph module
============

A thin weighted adjacency-list graph over dense integer vertices ``0 .. n-1``.

:class:`Graph` is the input contract shared by
:class:`~pygraphkit.LowestCommonAncestor` and :func:`~pygraphkit.dijkstra`.
Neighbors are enumerated in insertion order so that every algorithm that walks
the graph produces reproducible output. Graphs are meant to be fully built
before they are handed to an algorithm; nothing is recomputed if they are
mutated afterwards.
"""

import logging
import math
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np
from scipy.sparse import csr_matrix

Edge = Tuple[int, int, float]


class Graph:
    """Weighted directed or undirected graph stored as adjacency lists."""

    def __init__(self, n: int, directed: bool = False):
        """Create a graph with ``n`` vertices and no edges.

        Parameters
        ----------
        n : int
            Number of vertices. Must be non-negative.
        directed : bool, default False
            If False, every edge is stored in the adjacency list of both
            endpoints.

        """
        if n < 0:
            raise ValueError("number of vertices must be ≥ 0")
        self.directed = directed
        self._adj: List[List[Tuple[int, float]]] = [[] for _ in range(n)]
        self._edges: List[Edge] = []

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Union[Tuple[int, int], Tuple[int, int, float]]],
        directed: bool = False,
    ) -> "Graph":
        """Build a graph from an iterable of ``(u, v)`` or ``(u, v, weight)``
        tuples. Unweighted edges get weight 1.

        Parameters
        ----------
        n : int
            Number of vertices.
        edges : Iterable
            The edges to add, in order.
        directed : bool, default False
            Whether the graph is directed.

        Returns
        -------
        Graph
            The populated graph.

        """
        graph = cls(n, directed=directed)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    @property
    def n(self) -> int:
        """Number of vertices."""
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        """Number of edges added (an undirected edge counts once)."""
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._adj)

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < len(self._adj):
            raise IndexError(f"vertex {u} out of range [0, {len(self._adj)})")

    def add_edge(self, u: int, v: int, weight: float = 1.0) -> None:
        """Add a weighted edge from ``u`` to ``v``.

        Parameters
        ----------
        u : int
            Source vertex (either endpoint for undirected graphs).
        v : int
            Target vertex.
        weight : float, default 1.0
            Edge weight. NaN is rejected; negative weights are stored but are
            refused by shortest-path routines.

        """
        self._check_vertex(u)
        self._check_vertex(v)
        if np.isnan(weight):
            raise ValueError("edge weight must not be NaN")
        if u == v:
            logging.warning("Self loop added at vertex %d.", u)

        self._adj[u].append((v, weight))
        if not self.directed and u != v:
            self._adj[v].append((u, weight))
        self._edges.append((u, v, weight))

    def neighbors(self, u: int) -> Sequence[Tuple[int, float]]:
        """Return the ``(neighbor, weight)`` pairs of ``u`` in insertion order.

        Parameters
        ----------
        u : int
            The vertex to inspect.

        Returns
        -------
        Sequence[Tuple[int, float]]
            A snapshot of the adjacency list.

        """
        self._check_vertex(u)
        return tuple(self._adj[u])

    def degree(self, u: int) -> int:
        """Number of adjacency entries of ``u`` (out-degree when directed)."""
        self._check_vertex(u)
        return len(self._adj[u])

    def edges(self) -> Iterator[Edge]:
        """Iterate over ``(u, v, weight)`` in insertion order. Undirected edges
        are yielded once, as they were added."""
        return iter(self._edges)

    def min_weight(self) -> float:
        """Smallest edge weight, or ``inf`` for a graph without edges."""
        return min((w for _, _, w in self._edges), default=math.inf)

    def to_csr(self) -> csr_matrix:
        """Convert the graph to a SciPy CSR adjacency matrix.

        Parallel edges keep their minimum weight, and undirected graphs are
        stored symmetrically. Zero-weight edges are kept as explicit zeros,
        which ``scipy.sparse.csgraph`` treats as edges.

        Returns
        -------
        scipy.sparse.csr_matrix
            An ``(n, n)`` matrix of edge weights.

        """
        n = len(self._adj)
        best = {}
        for u, row in enumerate(self._adj):
            for v, w in row:
                if (u, v) not in best or w < best[(u, v)]:
                    best[(u, v)] = w
        if not best:
            return csr_matrix((n, n), dtype=float)
        rows, cols = zip(*best.keys())
        data = np.fromiter(best.values(), dtype=float, count=len(best))
        return csr_matrix((data, (rows, cols)), shape=(n, n))

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, edges={self.num_edges}, {kind})"
